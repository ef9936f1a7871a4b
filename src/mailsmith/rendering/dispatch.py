# =============================================================================
# Element Dispatch
# =============================================================================
# The single entry point for rendering one element of any kind:
#
#   1. Reject nodes that aren't typed mappings (logged, rendered as "")
#   2. Lower-case the type and resolve aliases to a canonical ElementKind
#   3. Call the renderer registered for that kind
#   4. Unknown kinds: render as a generic container if they have children,
#      otherwise render nothing
#
# render() never raises for a bad node. One malformed element costs only
# its own markup; the rest of the document renders normally.
# =============================================================================

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from mailsmith.core.element import CHILD_KEYS, ElementKind, child_list, element_type, resolve_kind
from mailsmith.rendering import defaults
from mailsmith.rendering.elements import (
    render_button,
    render_divider,
    render_image,
    render_social,
    render_spacer,
    render_text,
)
from mailsmith.rendering.layout import render_columns, render_container
from mailsmith.rendering.styles import InlineStyleSerializer, StyleSerializer

logger = logging.getLogger(__name__)

# (element, renderer, depth) -> HTML fragment
RenderFunc = Callable[[Mapping[str, Any], "ElementRenderer", int], str]

RENDERERS: dict[ElementKind, RenderFunc] = {
    ElementKind.TEXT: render_text,
    ElementKind.IMAGE: render_image,
    ElementKind.BUTTON: render_button,
    ElementKind.DIVIDER: render_divider,
    ElementKind.SPACER: render_spacer,
    ElementKind.SOCIAL: render_social,
    ElementKind.CONTAINER: render_container,
    ElementKind.COLUMNS: render_columns,
}


class ElementRenderer:
    """
    Renders template elements to email-safe HTML fragments.

    Holds everything the per-kind renderers share: the style serializer,
    the nesting limit and the platform -> icon table for social links.
    It keeps no per-render state, so one instance can render any number of
    documents.

    Usage:
        >>> renderer = ElementRenderer()
        >>> renderer.render({"type": "heading", "content": "Hi"})
        '<p style="">Hi</p>'

    Attributes:
        serializer: Turns style maps into inline CSS.
        max_depth: Elements nested deeper than this render to "".
        social_icons: Icon URLs keyed by lower-cased platform name.
    """

    def __init__(
        self,
        serializer: StyleSerializer | None = None,
        *,
        max_depth: int = defaults.MAX_DEPTH,
        social_icons: Mapping[str, str] | None = None,
    ) -> None:
        self.serializer = serializer or InlineStyleSerializer()
        self.max_depth = max_depth
        self.social_icons = {k.lower(): v for k, v in (social_icons or {}).items()}

    def render(self, element: Any, depth: int = 0) -> str:
        """
        Render one element (and its subtree).

        Args:
            element: Element mapping. Anything without a "type" renders to "".
            depth: Nesting level of the element, 0 for top-level elements.

        Returns:
            HTML fragment, possibly empty.
        """
        type_name = element_type(element)
        if type_name is None:
            logger.warning(f"Element missing or has no type: {element!r}")
            return ""

        if depth > self.max_depth:
            logger.warning(
                f"Skipping '{type_name}' element nested {depth} levels deep "
                f"(limit is {self.max_depth})"
            )
            return ""

        kind = resolve_kind(type_name)
        render_func = RENDERERS.get(kind)
        if render_func is not None:
            return render_func(element, self, depth)

        # Unknown type: keep its children rather than dropping the subtree
        logger.warning(f"Unknown element type: {element.get('type')}")
        if child_list(element, *CHILD_KEYS) is not None:
            return render_container(element, self, depth)
        return ""

    def render_children(self, children: Iterable[Any], depth: int) -> str:
        """Render children in order and concatenate the results."""
        return "".join(self.render(child, depth) for child in children)

    def styles(self, styles: Any) -> str:
        """Serialize a style map with the configured serializer."""
        return self.serializer.serialize(styles)

    def social_icon(self, platform: Any) -> str:
        """Look up the icon URL for a social platform, "" if unknown."""
        if not platform:
            return ""
        return self.social_icons.get(str(platform).lower(), "")


def render_element(element: Any) -> str:
    """Render one element with a default ElementRenderer."""
    return ElementRenderer().render(element)
