# =============================================================================
# Style Serialization
# =============================================================================
# Turns an element's style map into an inline `style="..."` attribute value.
#
# Mail clients strip <style> blocks unpredictably, so every visual property
# has to travel inline on the element itself. The editor stores styles with
# JavaScript-style camelCase keys:
#
#   {"backgroundColor": "#fff", "fontSize": "16px"}
#     -> "background-color:#fff;font-size:16px"
#
# Values are opaque: they're passed through as-is, never validated or
# escaped. A stricter serializer can be swapped in through the
# StyleSerializer protocol without touching the renderers.
# =============================================================================

import re
from collections.abc import Mapping
from typing import Any, Protocol


_UPPERCASE = re.compile(r"([A-Z])")


def css_property(key: str) -> str:
    """
    Convert a camelCase style key to its kebab-case CSS property.

    Every uppercase letter becomes "-" + lowercase, so React-style vendor
    keys map to prefixed properties:

        >>> css_property("backgroundColor")
        'background-color'
        >>> css_property("WebkitTextSizeAdjust")
        '-webkit-text-size-adjust'
    """
    return _UPPERCASE.sub(r"-\1", key).lower()


def serialize_styles(styles: Any) -> str:
    """
    Serialize a style map to an inline CSS string.

    Keys keep the map's own order; pairs are joined with ";" and there is
    no trailing separator.

    Args:
        styles: Style map. Anything that isn't a mapping yields "".

    Returns:
        CSS declarations, e.g. "background-color:#fff;margin:0".
    """
    if not isinstance(styles, Mapping) or not styles:
        return ""
    return ";".join(f"{css_property(str(key))}:{value}" for key, value in styles.items())


class StyleSerializer(Protocol):
    """Anything that can turn a style map into an inline style string."""

    def serialize(self, styles: Any) -> str:
        ...


class InlineStyleSerializer:
    """Default serializer: camelCase -> kebab-case, values untouched."""

    def serialize(self, styles: Any) -> str:
        return serialize_styles(styles)
