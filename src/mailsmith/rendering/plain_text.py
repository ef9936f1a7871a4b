# =============================================================================
# Plain-Text Extraction
# =============================================================================
# Builds the text/plain alternative for a template by walking the element
# tree directly (it never looks at the rendered HTML):
#
#   - text/heading/paragraph: their content
#   - button: "text - href"
#   - anything else with children/elements: the children's text, in place
#   - everything else: nothing
#
# Only the literal type names count here; the HTML aliases (title, cta, ...)
# are not consulted. Non-empty fragments are separated by a blank line.
# This is a readable fallback, not a faithful conversion of the HTML.
# =============================================================================

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from mailsmith.core.document import Document
from mailsmith.core.element import CHILD_KEYS, child_list, element_type, first_value
from mailsmith.rendering import defaults
from mailsmith.rendering.results import TextResult

logger = logging.getLogger(__name__)

SEPARATOR = "\n\n"

TEXT_TYPES = frozenset({"text", "heading", "paragraph"})


def generate_plain_text(
    document: Document | Mapping[str, Any] | None,
    max_depth: int = defaults.MAX_DEPTH,
) -> TextResult:
    """
    Extract the plain-text version of a template.

    Args:
        document: The template, as a Document or in its JSON shape.
        max_depth: Elements nested deeper than this contribute nothing.

    Returns:
        TextResult with the text, or the failure message and error.
    """
    try:
        if document is None:
            raise ValueError("Template data is required")
        if not isinstance(document, Document):
            document = Document.from_dict(document)

        return TextResult(text=extract_text(document.elements, max_depth=max_depth))

    except Exception as e:
        logger.error(f"Error generating plain text: {e}", exc_info=True)
        return TextResult(
            message=str(e) or "Failed to generate plain text",
            error=e,
        )


def extract_text(elements: Iterable[Any], depth: int = 0, max_depth: int = defaults.MAX_DEPTH) -> str:
    """Join the text of a list of elements with blank lines."""
    if depth > max_depth:
        logger.warning(f"Skipping text nested {depth} levels deep (limit is {max_depth})")
        return ""

    fragments = (_element_text(element, depth, max_depth) for element in elements)
    return SEPARATOR.join(text for text in fragments if text.strip())


def _element_text(element: Any, depth: int, max_depth: int) -> str:
    """Text contributed by one element (and its subtree)."""
    if not isinstance(element, Mapping):
        return ""

    type_name = element_type(element)

    if type_name in TEXT_TYPES:
        return str(first_value(element, "content", "text", default=""))

    if type_name == "button":
        label = first_value(element, "text", default="")
        href = first_value(element, "href", default="")
        return f"{label} - {href}"

    children = child_list(element, *CHILD_KEYS)
    if children is not None:
        return extract_text(children, depth + 1, max_depth)

    return ""
