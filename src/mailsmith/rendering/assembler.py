# =============================================================================
# Document Assembly
# =============================================================================
# Wraps the rendered elements in a complete, email-safe HTML document.
#
# The shell is fixed and carries the usual email client workarounds:
#   - UTF-8 / viewport / IE=edge meta tags, and Apple's reformatting opt-out
#   - An Outlook-only conditional comment pinning 96 DPI, so images don't
#     get rescaled on high-DPI Windows displays
#   - A small CSS reset (margins, table border-collapse, image borders)
#   - A narrow-screen media query letting the content column go full width
#   - A centered wrapper table capped at the content width, holding a
#     padded white cell with the rendered elements
#
# Assembly is all-or-nothing: either a complete document or a failure
# envelope, never a partially written document.
# =============================================================================

import logging
from collections.abc import Mapping
from typing import Any

from mailsmith.core.document import Document, Settings
from mailsmith.rendering.dispatch import ElementRenderer
from mailsmith.rendering.results import HtmlResult

logger = logging.getLogger(__name__)


def generate_email_html(
    document: Document | Mapping[str, Any] | None,
    renderer: ElementRenderer | None = None,
    defaults: Settings | None = None,
) -> HtmlResult:
    """
    Render a complete HTML email from a template.

    Args:
        document: The template, as a Document or in its JSON shape.
        renderer: Element renderer to use. A default one if None.
        defaults: Page settings to fall back on. DEFAULT_SETTINGS if None.

    Returns:
        HtmlResult holding the document, or the failure message and error.
    """
    try:
        if document is None:
            raise ValueError("Template data is required")
        if not isinstance(document, Document):
            document = Document.from_dict(document)

        renderer = renderer or ElementRenderer()
        settings = document.resolved_settings(defaults)
        body = renderer.render_children(document.elements, 0)

        html = build_shell(document.name, settings, body)
        logger.debug(f"Rendered '{document.name}' ({len(document.elements)} elements, {len(html)} bytes)")
        return HtmlResult(html=html)

    except Exception as e:
        logger.error(f"Error generating email HTML: {e}", exc_info=True)
        return HtmlResult(
            message=str(e) or "Failed to generate email HTML",
            error=e,
        )


def build_shell(title: str, settings: Settings, body: str) -> str:
    """Interpolate page settings and rendered body into the HTML shell."""
    return f"""<!DOCTYPE html>
<html lang="en" xmlns="http://www.w3.org/1999/xhtml" xmlns:o="urn:schemas-microsoft-com:office:office">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <meta http-equiv="X-UA-Compatible" content="IE=edge">
  <meta name="x-apple-disable-message-reformatting">
  <title>{title}</title>
  <!--[if mso]>
  <noscript>
    <xml>
      <o:OfficeDocumentSettings>
        <o:PixelsPerInch>96</o:PixelsPerInch>
      </o:OfficeDocumentSettings>
    </xml>
  </noscript>
  <![endif]-->
  <style>
    * {{ margin: 0; padding: 0; box-sizing: border-box; }}
    body {{ margin: 0; padding: 0; -webkit-text-size-adjust: 100%; -ms-text-size-adjust: 100%; }}
    table {{ border-collapse: collapse; mso-table-lspace: 0pt; mso-table-rspace: 0pt; }}
    img {{ border: 0; height: auto; line-height: 100%; outline: none; text-decoration: none; -ms-interpolation-mode: bicubic; }}
    @media only screen and (max-width: 600px) {{
      .email-container {{ width: 100% !important; }}
      .mobile-padding {{ padding: 10px !important; }}
    }}
  </style>
</head>
<body style="margin: 0; padding: 0; background-color: {settings.background_color}; font-family: {settings.font_family};">
  <center style="width: 100%; background-color: {settings.background_color};">
    <div class="email-container" style="max-width: {settings.content_width}; margin: 0 auto;">
      <table role="presentation" cellspacing="0" cellpadding="0" border="0" width="100%" style="max-width: {settings.content_width}; margin: 0 auto;">
        <tr>
          <td class="mobile-padding" style="padding: {settings.padding}; background-color: #ffffff;">
            {body}
          </td>
        </tr>
      </table>
    </div>
  </center>
</body>
</html>"""
