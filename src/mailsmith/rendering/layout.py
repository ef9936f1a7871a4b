# =============================================================================
# Layout Renderers
# =============================================================================
# Containers and columns are the two elements that hold other elements.
# Both are table-based: CSS flow/flex layout is unreliable across mail
# clients, while nested tables render the same almost everywhere.
#
#   container:  one full-width table, one cell, children stacked inside
#   columns:    one full-width table, one row, one cell per column
#
# Children are rendered through the dispatcher so aliasing, fallbacks and
# the depth limit apply at every level of the tree.
# =============================================================================

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from mailsmith.core.element import CHILD_KEYS, child_list, element_type

if TYPE_CHECKING:
    from mailsmith.rendering.dispatch import ElementRenderer

logger = logging.getLogger(__name__)

_TABLE_OPEN = '<table role="presentation" width="100%" cellspacing="0" cellpadding="0" border="0">'


def render_container(element: Mapping[str, Any], renderer: "ElementRenderer", depth: int = 0) -> str:
    """
    Wrap an element's children in a single styled table cell.

    Also used for unknown element types that carry children.
    """
    styles = renderer.styles(element.get("styles"))
    children = child_list(element, *CHILD_KEYS) or []
    body = renderer.render_children(children, depth + 1)

    return f'{_TABLE_OPEN}<tr><td style="{styles}">{body}</td></tr></table>'


def render_columns(element: Mapping[str, Any], renderer: "ElementRenderer", depth: int = 0) -> str:
    """
    Lay columns out side by side, each taking an equal share of the width.

    Each column may carry its own styles and children. A column that has
    no children but is itself a typed element is rendered as the content of
    its own cell. An element with no columns at all is treated as having a
    single empty column.
    """
    columns = child_list(element, "columns", "children") or []

    count = len(columns)
    if count == 0:
        logger.debug("Columns element has no columns, rendering one empty cell")
    width = column_width(count)

    cells = []
    for column in columns:
        column_styles = ""
        content = ""
        if isinstance(column, Mapping):
            children = child_list(column, *CHILD_KEYS)
            if children is not None:
                column_styles = renderer.styles(column.get("styles"))
                content = renderer.render_children(children, depth + 1)
            elif element_type(column) is not None:
                content = renderer.render(column, depth + 1)
            else:
                column_styles = renderer.styles(column.get("styles"))
        cells.append(f'<td width="{width}" valign="top" style="{column_styles}">{content}</td>')

    if not cells:
        cells.append(f'<td width="{width}" valign="top" style=""></td>')

    return f"{_TABLE_OPEN}<tr>{''.join(cells)}</tr></table>"


def column_width(count: int) -> str:
    """
    Percentage width of one column out of `count`.

    Zero columns is clamped to one. Widths are rounded to two decimals.

        >>> column_width(2)
        '50%'
        >>> column_width(3)
        '33.33%'
    """
    share = round(100 / max(count, 1), 2)
    return f"{share:g}%"
