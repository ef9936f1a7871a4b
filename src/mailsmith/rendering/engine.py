# =============================================================================
# Rendering Engine
# =============================================================================
# Coordinates the rendering pipeline for one template.
#
# This is the main entry point for the rendering module. It:
#   - Validates the template shape before doing any work
#   - Renders the HTML document (element dispatch + document assembly)
#   - Extracts the plain-text alternative (independent tree walk)
#   - Produces a terminal preview of the rendered HTML
#
# The engine is synchronous and holds no per-render state: rendering the
# same template twice gives byte-identical output, and one engine can be
# shared across threads.
# =============================================================================

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mailsmith.core.document import Document
from mailsmith.rendering.assembler import generate_email_html
from mailsmith.rendering.dispatch import ElementRenderer
from mailsmith.rendering.plain_text import generate_plain_text
from mailsmith.rendering.preview import PreviewOptions, PreviewRenderer
from mailsmith.rendering.results import HtmlResult, TextResult, ValidationResult
from mailsmith.rendering.styles import StyleSerializer
from mailsmith.rendering.validation import validate_document

if TYPE_CHECKING:
    from mailsmith.config import PreviewConfig, RenderingConfig

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """
    Result of rendering a template end to end.

    This contains everything needed to build the outgoing email.

    Attributes:
        html: The complete HTML document.
        text: The plain-text alternative.
        message: Failure message if rendering failed.
        error: The validation message or exception that caused the failure.
    """
    html: str = ""
    text: str = ""
    message: str | None = None
    error: BaseException | str | None = None

    @property
    def success(self) -> bool:
        """Returns True if rendering succeeded."""
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        if self.success:
            return {"success": True, "html": self.html, "text": self.text}
        return {"success": False, "message": self.message, "error": self.error}


class RenderEngine:
    """
    Main rendering engine for newsletter templates.

    Usage:
        >>> engine = RenderEngine(config.rendering)
        >>> result = engine.render(template)
        >>> if result.success:
        ...     send(result.html, result.text)

    Attributes:
        config: Rendering configuration.
        renderer: Element renderer shared by every render call.
    """

    def __init__(
        self,
        config: "RenderingConfig | None" = None,
        *,
        serializer: StyleSerializer | None = None,
        preview: "PreviewConfig | None" = None,
    ) -> None:
        """
        Initialize the rendering engine.

        Args:
            config: Rendering configuration. Defaults if not provided.
            serializer: Style serializer override (e.g. a validating one).
            preview: Terminal preview configuration.
        """
        if config is None:
            from mailsmith.config import RenderingConfig
            config = RenderingConfig()

        self.config = config
        self.renderer = ElementRenderer(
            serializer,
            max_depth=config.max_depth,
            social_icons=config.social_icons,
        )

        options = PreviewOptions()
        if preview is not None:
            options = PreviewOptions(
                display_links=preview.display_links,
                display_images=preview.display_images,
            )
        self._previewer = PreviewRenderer(options)

    def validate(self, document: Any) -> ValidationResult:
        """Check that a template has something to render."""
        return validate_document(document)

    def render_html(self, document: Document | Mapping[str, Any] | None) -> HtmlResult:
        """Render the HTML document for a template."""
        return generate_email_html(document, self.renderer, self.config.default_settings())

    def render_text(self, document: Document | Mapping[str, Any] | None) -> TextResult:
        """Extract the plain-text alternative for a template."""
        return generate_plain_text(document, max_depth=self.config.max_depth)

    def render(self, document: Document | Mapping[str, Any] | None) -> RenderResult:
        """
        Validate a template and render both of its bodies.

        Stops at the first failing step; the result then carries that
        step's message and error.

        Args:
            document: The template, as a Document or in its JSON shape.

        Returns:
            RenderResult with HTML and text, or the failure.
        """
        validation = self.validate(document)
        if not validation.valid:
            logger.info(f"Template rejected: {validation.error}")
            return RenderResult(message=validation.error, error=validation.error)

        html_result = self.render_html(document)
        if not html_result.success:
            return RenderResult(message=html_result.message, error=html_result.error)

        text_result = self.render_text(document)
        if not text_result.success:
            return RenderResult(message=text_result.message, error=text_result.error)

        return RenderResult(html=html_result.html, text=text_result.text)

    def preview(self, html: str) -> str:
        """Convert rendered HTML to readable terminal text."""
        return self._previewer.render(html)
