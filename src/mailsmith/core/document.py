# =============================================================================
# Document Model
# =============================================================================
# Represents a newsletter template as produced by the editor:
#
#   {
#     "name": "Spring Sale",
#     "elements": [ {...}, {...} ],          # ordered element tree
#     "settings": { "backgroundColor": ... } # page-level settings
#   }
#
# Elements stay plain mappings: their "styles" maps are open-ended and are
# passed through to the markup untouched. The renderer only ever reads a
# Document; it never mutates one.
# =============================================================================

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


DEFAULT_TEMPLATE_NAME = "Email Template"


@dataclass(frozen=True)
class Settings:
    """
    Page-level settings of a template, after defaults are applied.

    Attributes:
        background_color: Color behind the content column.
        content_width: Maximum width of the content column (CSS length).
        font_family: Font stack applied to the body.
        padding: Padding of the white content cell (CSS length).
    """
    background_color: str = "#f4f4f4"
    content_width: str = "600px"
    font_family: str = "Arial, Helvetica, sans-serif"
    padding: str = "20px"

    # camelCase key used by the editor -> attribute name
    KEYS = {
        "backgroundColor": "background_color",
        "contentWidth": "content_width",
        "fontFamily": "font_family",
        "padding": "padding",
    }

    @classmethod
    def resolve(
        cls,
        raw: Mapping[str, Any] | None,
        defaults: "Settings | None" = None,
    ) -> "Settings":
        """
        Resolve raw editor settings against a set of defaults.

        Absent or empty values fall back to the default for that key.

        Args:
            raw: Settings map as stored with the template (camelCase keys).
            defaults: Defaults to fall back on. Uses DEFAULT_SETTINGS if None.

        Returns:
            Fully populated Settings.
        """
        defaults = defaults or DEFAULT_SETTINGS
        if not isinstance(raw, Mapping):
            return defaults

        values = {}
        for key, attr in cls.KEYS.items():
            value = raw.get(key)
            values[attr] = str(value) if value not in (None, "") else getattr(defaults, attr)
        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        """Convert back to the editor's camelCase shape."""
        return {key: getattr(self, attr) for key, attr in self.KEYS.items()}


DEFAULT_SETTINGS = Settings()


@dataclass
class Document:
    """
    A template ready to be rendered.

    Attributes:
        name: Template name, used as the HTML <title>.
        elements: Ordered top-level elements (plain mappings).
        settings: Raw settings map, resolved against defaults at render time.

    Usage:
        >>> doc = Document.from_dict({"name": "T", "elements": [{"type": "text"}]})
        >>> doc.name
        'T'
    """
    name: str = DEFAULT_TEMPLATE_NAME
    elements: list[Any] = field(default_factory=list)
    settings: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Document":
        """
        Build a Document from the editor's JSON shape.

        Accepts either "settings" or the editor export key "globalSettings".

        Raises:
            DocumentError: If data is not a mapping or "elements" is not a list.
        """
        if not isinstance(data, Mapping):
            raise DocumentError("Template data must be an object")

        elements = data.get("elements")
        if elements is None:
            elements = []
        if not isinstance(elements, Sequence) or isinstance(elements, (str, bytes)):
            raise DocumentError("Template elements must be a list")

        settings = data.get("settings")
        if settings is None:
            settings = data.get("globalSettings")

        return cls(
            name=str(data.get("name") or DEFAULT_TEMPLATE_NAME),
            elements=list(elements),
            settings=dict(settings) if isinstance(settings, Mapping) else {},
        )

    @classmethod
    def load(cls, path: Path) -> "Document":
        """
        Load a template from a JSON file.

        Raises:
            DocumentError: If the file can't be read or isn't a valid template.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise DocumentError(f"Cannot read template {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise DocumentError(f"Invalid template JSON in {path}: {e}") from e

        return cls.from_dict(data)

    def resolved_settings(self, defaults: Settings | None = None) -> Settings:
        """Returns this document's settings with defaults applied."""
        return Settings.resolve(self.settings, defaults)

    def to_dict(self) -> dict[str, Any]:
        """Convert back to the editor's JSON shape."""
        return {
            "name": self.name,
            "elements": list(self.elements),
            "settings": dict(self.settings),
        }


# =============================================================================
# Exceptions
# =============================================================================

class DocumentError(Exception):
    """Raised when template data doesn't have the shape of a Document."""
    pass
