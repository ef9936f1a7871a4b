# =============================================================================
# Leaf Element Renderers
# =============================================================================
# One function per canonical leaf kind. Each takes the raw element mapping,
# the dispatching ElementRenderer (for style serialization and lookup
# tables) and the current depth, and returns an HTML fragment.
#
# Email HTML rules followed here:
#   - Inline styles only (no classes, no <style> references)
#   - Buttons and icon rows are tables; a bare styled <a> collapses
#     differently in every client
#   - Spacers pin height, line-height AND font-size, otherwise clients
#     enforce their own minimum line height
#
# Field values are interpolated verbatim. Content may legitimately carry
# HTML snippets from the editor.
# =============================================================================

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from mailsmith.core.element import child_list, first_value
from mailsmith.rendering import defaults

if TYPE_CHECKING:
    from mailsmith.rendering.dispatch import ElementRenderer

logger = logging.getLogger(__name__)


def render_text(element: Mapping[str, Any], renderer: "ElementRenderer", depth: int = 0) -> str:
    """Render text, heading, paragraph and title elements as `<tag>content</tag>`."""
    styles = renderer.styles(element.get("styles"))
    tag = first_value(element, "tag", default=defaults.TEXT_TAG)
    content = first_value(element, "content", "text", default="")

    return f'<{tag} style="{styles}">{content}</{tag}>'


def render_image(element: Mapping[str, Any], renderer: "ElementRenderer", depth: int = 0) -> str:
    """
    Render an image element as a self-closing <img>.

    width/height attributes are only emitted when the element sets them.
    """
    styles = renderer.styles(element.get("styles"))
    src = first_value(element, "src", "url", "imageUrl", default="")
    alt = first_value(element, "alt", "altText", default=defaults.IMAGE_ALT)

    attributes = [f'src="{src}"', f'alt="{alt}"']
    width = first_value(element, "width")
    if width is not None:
        attributes.append(f'width="{width}"')
    height = first_value(element, "height")
    if height is not None:
        attributes.append(f'height="{height}"')
    attributes.append(f'style="{styles}"')

    return f"<img {' '.join(attributes)} />"


def render_button(element: Mapping[str, Any], renderer: "ElementRenderer", depth: int = 0) -> str:
    """
    Render a call-to-action button.

    The element's styles go on the <td>; the anchor inside is forced to
    block display so the whole cell is clickable.
    """
    styles = renderer.styles(element.get("styles"))
    href = first_value(element, "href", "url", "link", default=defaults.BUTTON_HREF)
    label = first_value(element, "text", "content", default=defaults.BUTTON_LABEL)

    return (
        '<table role="presentation" cellspacing="0" cellpadding="0" border="0">'
        "<tr>"
        f'<td style="{styles}">'
        f'<a href="{href}" style="color: inherit; text-decoration: none; display: block;">{label}</a>'
        "</td>"
        "</tr>"
        "</table>"
    )


def render_divider(element: Mapping[str, Any], renderer: "ElementRenderer", depth: int = 0) -> str:
    """Render a horizontal rule, with a light grey top border by default."""
    styles = element.get("styles") or defaults.DIVIDER_STYLES
    return f'<hr style="{renderer.styles(styles)}" />'


def render_spacer(element: Mapping[str, Any], renderer: "ElementRenderer", depth: int = 0) -> str:
    """Render fixed vertical whitespace."""
    height = _pixels(first_value(element, "height", "size", default=defaults.SPACER_HEIGHT))
    return f'<div style="height: {height}px; line-height: {height}px; font-size: 0;">&nbsp;</div>'


def render_social(element: Mapping[str, Any], renderer: "ElementRenderer", depth: int = 0) -> str:
    """
    Render a row of social icons, one table cell per link.

    An element without links renders to nothing. Links without an icon
    fall back to the renderer's platform -> icon table.
    """
    links = child_list(element, "links", "socialLinks") or []
    if not links:
        return ""

    icon_size = _pixels(first_value(element, "iconSize", default=defaults.SOCIAL_ICON_SIZE))
    spacing = _pixels(first_value(element, "spacing", default=defaults.SOCIAL_SPACING))

    cells = []
    for link in links:
        if not isinstance(link, Mapping):
            logger.debug(f"Skipping malformed social link: {link!r}")
            continue

        platform = first_value(link, "platform", "name", default="")
        icon = first_value(link, "icon", "iconUrl") or renderer.social_icon(platform)
        href = first_value(link, "url", default=defaults.SOCIAL_HREF)
        cells.append(
            f'<td style="padding: 0 {spacing}px;">'
            f'<a href="{href}" style="text-decoration: none;">'
            f'<img src="{icon}" alt="{platform}" width="{icon_size}" height="{icon_size}" '
            'style="display: block; border: 0;" />'
            "</a>"
            "</td>"
        )

    if not cells:
        return ""

    return (
        '<table role="presentation" cellspacing="0" cellpadding="0" border="0" style="margin: 0 auto;">'
        f"<tr>{''.join(cells)}</tr>"
        "</table>"
    )


def _pixels(value: Any) -> str:
    """Normalize a pixel size that may already carry a "px" suffix."""
    text = str(value).strip()
    if text.lower().endswith("px"):
        text = text[:-2].strip()
    return text
