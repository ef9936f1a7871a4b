# =============================================================================
# Rendering Module
# =============================================================================
# The heart of Mailsmith: templates in, email-safe HTML and plain text out.
#
# Email clients are hostile territory: no reliable <style> support, no flex
# or grid, and Outlook renders with Word. So the output uses:
#   - Table-based layout instead of CSS flow
#   - Inline styles on every element
#   - Outlook conditional comments for engine-specific fixes
#
# The rendering pipeline:
#   1. Validate the template shape
#   2. Dispatch each element (depth-first) to its kind's renderer
#   3. Assemble the fragments into the full HTML shell
#   4. Separately, walk the tree for the plain-text alternative
# =============================================================================

from mailsmith.rendering.assembler import generate_email_html
from mailsmith.rendering.dispatch import ElementRenderer, render_element
from mailsmith.rendering.engine import RenderEngine, RenderResult
from mailsmith.rendering.plain_text import generate_plain_text
from mailsmith.rendering.results import HtmlResult, TextResult, ValidationResult
from mailsmith.rendering.styles import InlineStyleSerializer, StyleSerializer, serialize_styles
from mailsmith.rendering.validation import validate_document

__all__ = [
    "RenderEngine",
    "RenderResult",
    "ElementRenderer",
    "render_element",
    "generate_email_html",
    "generate_plain_text",
    "validate_document",
    "serialize_styles",
    "StyleSerializer",
    "InlineStyleSerializer",
    "HtmlResult",
    "TextResult",
    "ValidationResult",
]
