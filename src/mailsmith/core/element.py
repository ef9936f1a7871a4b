# =============================================================================
# Element Kinds
# =============================================================================
# Template elements arrive from the editor as plain JSON objects with a
# free-form "type" string. Editors (and hand-written templates) use many
# spellings for the same thing: "img" vs "image", "cta" vs "button",
# "section" vs "container"...
#
# This module turns those spellings into a small closed set of canonical
# kinds ONCE, at the boundary, so renderers never compare type strings.
#
# It also holds the tiny field-lookup helpers every renderer shares:
#   - first_value(): first non-empty value across alias keys (src/url/...)
#   - child_list():  first child list present across alias keys
# =============================================================================

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any


class ElementKind(Enum):
    """
    Canonical element tags after alias resolution.

    UNKNOWN is not an error: an unknown element that carries children is
    rendered as a generic container, one without children renders to nothing.
    """
    TEXT = "text"           # text, heading, paragraph, title
    IMAGE = "image"
    BUTTON = "button"
    DIVIDER = "divider"
    SPACER = "spacer"
    SOCIAL = "social"
    CONTAINER = "container"
    COLUMNS = "columns"
    UNKNOWN = "unknown"


# Lower-cased type string -> canonical kind
TYPE_ALIASES: dict[str, ElementKind] = {
    "text": ElementKind.TEXT,
    "heading": ElementKind.TEXT,
    "paragraph": ElementKind.TEXT,
    "title": ElementKind.TEXT,
    "image": ElementKind.IMAGE,
    "img": ElementKind.IMAGE,
    "button": ElementKind.BUTTON,
    "cta": ElementKind.BUTTON,
    "divider": ElementKind.DIVIDER,
    "hr": ElementKind.DIVIDER,
    "separator": ElementKind.DIVIDER,
    "spacer": ElementKind.SPACER,
    "space": ElementKind.SPACER,
    "social": ElementKind.SOCIAL,
    "socialicons": ElementKind.SOCIAL,
    "social-icons": ElementKind.SOCIAL,
    "container": ElementKind.CONTAINER,
    "section": ElementKind.CONTAINER,
    "box": ElementKind.CONTAINER,
    "columns": ElementKind.COLUMNS,
    "column": ElementKind.COLUMNS,
    "grid": ElementKind.COLUMNS,
}

# Keys under which an element may carry its children
CHILD_KEYS = ("children", "elements")


def element_type(element: Any) -> str | None:
    """
    Returns the lower-cased type string of an element.

    Returns None when the element is not a mapping or has no (or an
    empty) "type" field. That is a per-node fault, not a document fault.
    """
    if not isinstance(element, Mapping):
        return None
    raw = element.get("type")
    if raw is None or raw == "":
        return None
    return str(raw).lower()


def resolve_kind(type_name: str | None) -> ElementKind:
    """
    Map a type string to its canonical kind.

    Example:
        >>> resolve_kind("IMG")
        <ElementKind.IMAGE: 'image'>
        >>> resolve_kind("mystery")
        <ElementKind.UNKNOWN: 'unknown'>
    """
    if not type_name:
        return ElementKind.UNKNOWN
    return TYPE_ALIASES.get(type_name.lower(), ElementKind.UNKNOWN)


def first_value(element: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first non-empty value found under any of `keys`."""
    for key in keys:
        value = element.get(key)
        if value is None or value is False or value == "" or value == 0:
            continue
        return value
    return default


def child_list(element: Mapping[str, Any], *keys: str) -> list[Any] | None:
    """
    Return the first child list present under any of `keys`.

    An empty list still counts as present, so `{"children": []}` is a
    container with no children rather than a childless leaf. Returns None
    when none of the keys are set. Strings are never treated as lists.
    """
    for key in keys or CHILD_KEYS:
        value = element.get(key)
        if value is None:
            continue
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            return list(value)
        return []
    return None
