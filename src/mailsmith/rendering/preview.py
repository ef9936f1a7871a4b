# =============================================================================
# Terminal Preview
# =============================================================================
# Shows what a rendered email roughly looks like, right in the terminal,
# using inscriptis.
#
# inscriptis is a battle-tested HTML-to-text converter that handles:
#   - Complex table layouts (which is all our output is)
#   - Proper whitespace and line break handling
#   - Headings, paragraphs, links and image alt text
#
# This is a proofreading aid for the rendered HTML. The text/plain MIME
# part comes from plain_text.py, which walks the template instead.
# =============================================================================

import re
from dataclasses import dataclass

from bs4 import BeautifulSoup
from inscriptis import get_text
from inscriptis.css_profiles import CSS_PROFILES
from inscriptis.model.config import ParserConfig


@dataclass
class PreviewOptions:
    """
    Options for the terminal preview.

    Attributes:
        display_links: Show link targets after link text.
        display_images: Show image alt text as [alt] placeholders.
    """
    display_links: bool = True
    display_images: bool = True


class PreviewRenderer:
    """
    Renders email HTML to readable terminal text using inscriptis.

    Usage:
        >>> previewer = PreviewRenderer()
        >>> text = previewer.render(result.html)
    """

    def __init__(self, options: PreviewOptions | None = None) -> None:
        """
        Initialize the preview renderer.

        Args:
            options: Preview options.
        """
        self.options = options or PreviewOptions()

        # Configure inscriptis
        self._config = ParserConfig(
            css=CSS_PROFILES['strict'],  # Better whitespace handling
            display_links=self.options.display_links,
            display_images=self.options.display_images,
            display_anchors=False,
        )

    def render(self, html_content: str) -> str:
        """
        Convert email HTML to terminal text.

        Args:
            html_content: HTML document to preview.

        Returns:
            Plain text with layout tables flattened.
        """
        if not html_content or not html_content.strip():
            return ""

        html_content = self._preclean_html(html_content)
        text = get_text(html_content, self._config)
        return self._clean_output(text)

    def _preclean_html(self, html: str) -> str:
        """Strip the parts of an email document that aren't content."""
        # Outlook conditional comments
        html = re.sub(r'<!--\[if[^\]]*\]>.*?<!\[endif\]-->', '', html, flags=re.DOTALL | re.IGNORECASE)

        # Style and head blocks
        html = re.sub(r'<style[^>]*>.*?</style>', '', html, flags=re.DOTALL | re.IGNORECASE)
        html = re.sub(r'<title[^>]*>.*?</title>', '', html, flags=re.DOTALL | re.IGNORECASE)

        # Spacer cells are only &nbsp;
        html = html.replace("&nbsp;", " ")

        return html

    def _clean_output(self, text: str) -> str:
        """Clean up the converted text."""
        # Remove trailing whitespace from lines
        lines = [line.rstrip() for line in text.split('\n')]
        text = '\n'.join(lines)

        # Normalize multiple blank lines to max 2
        text = re.sub(r'\n{3,}', '\n\n', text)

        return text.strip()

    def extract_images(self, html_content: str) -> list[dict]:
        """
        Extract image references from email HTML.

        Returns a list of dicts with:
            - src: Image source URL
            - alt: Alt text
            - is_inline: True if src starts with "cid:"
        """
        soup = BeautifulSoup(html_content, "lxml")
        images = []

        for img in soup.find_all("img"):
            src = img.get("src", "")
            images.append({
                "src": src,
                "alt": img.get("alt", ""),
                "is_inline": src.startswith("cid:"),
            })

        return images

    def extract_links(self, html_content: str) -> list[dict]:
        """
        Extract link targets from email HTML, in document order.

        Returns a list of dicts with:
            - href: Link target
            - text: Visible link text (alt text for image links)
            - is_placeholder: True for "#" and empty targets
        """
        soup = BeautifulSoup(html_content, "lxml")
        links = []

        for anchor in soup.find_all("a"):
            href = anchor.get("href", "")
            text = anchor.get_text(strip=True)
            if not text:
                img = anchor.find("img")
                text = img.get("alt", "") if img else ""
            links.append({
                "href": href,
                "text": text,
                "is_placeholder": href in ("", "#"),
            })

        return links
