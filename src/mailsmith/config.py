# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating Mailsmith configuration.
#
# XDG Base Directory Compliance (https://specifications.freedesktop.org/basedir-spec/):
#   - Config:  $XDG_CONFIG_HOME/mailsmith/  (default: ~/.config/mailsmith/)
#
# Files:
#   - config.toml: House defaults for rendering and previews
#
# Example config.toml:
#
#   [rendering]
#   background_color = "#eeeeee"
#   content_width = "640px"
#   max_depth = 32
#
#   [rendering.social_icons]
#   facebook = "https://cdn.example.com/icons/facebook.png"
#
#   [preview]
#   display_links = true
# =============================================================================

import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)

from mailsmith.core.document import DEFAULT_SETTINGS, Settings
from mailsmith.rendering import defaults


# =============================================================================
# XDG Directory Management
# =============================================================================

# Application identifier used in all XDG paths
APP_NAME = "mailsmith"


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for Mailsmith.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/mailsmith/
    This is where user configuration files live (config.toml).
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class RenderingConfig:
    """
    Configuration for the HTML rendering engine.

    The first four settings are fallbacks: a template's own settings always
    win over them.

    Attributes:
        background_color: Default color behind the content column.
        content_width: Default maximum width of the content column.
        font_family: Default body font stack.
        padding: Default padding of the content cell.
        max_depth: Elements nested deeper than this are skipped.
        social_icons: Icon URL per social platform, for links without an icon.
    """
    background_color: str = DEFAULT_SETTINGS.background_color
    content_width: str = DEFAULT_SETTINGS.content_width
    font_family: str = DEFAULT_SETTINGS.font_family
    padding: str = DEFAULT_SETTINGS.padding
    max_depth: int = defaults.MAX_DEPTH
    social_icons: dict[str, str] = field(default_factory=dict)

    def default_settings(self) -> Settings:
        """Returns the configured page defaults as Settings."""
        return Settings(
            background_color=self.background_color,
            content_width=self.content_width,
            font_family=self.font_family,
            padding=self.padding,
        )


@dataclass
class PreviewConfig:
    """
    Configuration for the terminal preview.

    Attributes:
        display_links: Show link targets after link text.
        display_images: Show image alt text placeholders.
    """
    display_links: bool = True
    display_images: bool = True


@dataclass
class Config:
    """
    Main configuration container for Mailsmith.

    Attributes:
        rendering: HTML rendering configuration.
        preview: Terminal preview configuration.

    Usage:
        >>> config = Config.load()
        >>> config.rendering.content_width
        '600px'
    """
    rendering: RenderingConfig = field(default_factory=RenderingConfig)
    preview: PreviewConfig = field(default_factory=PreviewConfig)

    # -------------------------------------------------------------------------
    # File Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from a config file.

        If the config file doesn't exist, returns default configuration.

        Args:
            path: Config file to read. Defaults to the XDG location.

        Returns:
            Loaded Config object.

        Raises:
            ConfigError: If the config file exists but is invalid.
        """
        config_path = path or cls.config_file_path()

        if not config_path.exists():
            # No config file yet - return defaults
            return cls()

        # Load and parse the TOML file
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file: {e}") from e

        return cls._from_dict(data)

    def save(self, path: Path | None = None) -> None:
        """
        Save configuration to a config file.

        Creates the config directory if it doesn't exist.

        Args:
            path: Config file to write. Defaults to the XDG location.
        """
        config_path = path or self.config_file_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "wb") as f:
            tomli_w.dump(self._to_dict(), f)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create a Config object from a dictionary (parsed TOML).

        Raises:
            ConfigError: If a value has the wrong type.
        """
        config = cls()

        # Rendering settings
        rendering = data.get("rendering", {})
        if not isinstance(rendering, dict):
            raise ConfigError("[rendering] must be a table")

        max_depth = rendering.get("max_depth", defaults.MAX_DEPTH)
        if not isinstance(max_depth, int) or isinstance(max_depth, bool) or max_depth < 0:
            raise ConfigError(f"rendering.max_depth must be a non-negative integer, got {max_depth!r}")

        social_icons = rendering.get("social_icons", {})
        if not isinstance(social_icons, dict):
            raise ConfigError("rendering.social_icons must be a table of platform = URL")

        config.rendering = RenderingConfig(
            background_color=str(rendering.get("background_color", DEFAULT_SETTINGS.background_color)),
            content_width=str(rendering.get("content_width", DEFAULT_SETTINGS.content_width)),
            font_family=str(rendering.get("font_family", DEFAULT_SETTINGS.font_family)),
            padding=str(rendering.get("padding", DEFAULT_SETTINGS.padding)),
            max_depth=max_depth,
            social_icons={str(k): str(v) for k, v in social_icons.items()},
        )

        # Preview settings
        preview = data.get("preview", {})
        if not isinstance(preview, dict):
            raise ConfigError("[preview] must be a table")

        config.preview = PreviewConfig(
            display_links=preview.get("display_links", True),
            display_images=preview.get("display_images", True),
        )

        return config

    def _to_dict(self) -> dict[str, Any]:
        """
        Convert Config to a dictionary for TOML serialization.
        """
        data: dict[str, Any] = {}

        # Rendering settings
        data["rendering"] = {
            "background_color": self.rendering.background_color,
            "content_width": self.rendering.content_width,
            "font_family": self.rendering.font_family,
            "padding": self.rendering.padding,
            "max_depth": self.rendering.max_depth,
            "social_icons": dict(self.rendering.social_icons),
        }

        # Preview settings
        data["preview"] = {
            "display_links": self.preview.display_links,
            "display_images": self.preview.display_images,
        }

        return data


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(Exception):
    """Raised when there's an error loading or parsing configuration."""
    pass


# =============================================================================
# Utility Functions
# =============================================================================

def print_paths() -> None:
    """
    Print configuration paths for debugging.
    Useful for users wondering where their config is stored.
    """
    print(f"Config:       {get_xdg_config_home()}")
    print(f"Config file:  {Config.config_file_path()}")
