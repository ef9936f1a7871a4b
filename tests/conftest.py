# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the Mailsmith test suite.
# =============================================================================

import json
import tempfile
from pathlib import Path

import pytest

from mailsmith.core import Document
from mailsmith.rendering import ElementRenderer


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def renderer():
    """A default ElementRenderer."""
    return ElementRenderer()


@pytest.fixture
def sample_template():
    """A newsletter template in the editor's JSON shape."""
    return {
        "name": "Spring Newsletter",
        "elements": [
            {
                "type": "heading",
                "tag": "h1",
                "content": "Spring is here",
                "styles": {"fontSize": "28px", "color": "#1a1a1a"},
            },
            {
                "type": "image",
                "src": "https://cdn.example.com/banner.png",
                "alt": "Banner",
                "width": 600,
            },
            {
                "type": "section",
                "styles": {"backgroundColor": "#f3f4f6", "padding": "20px"},
                "children": [
                    {"type": "paragraph", "content": "Fresh arrivals every week."},
                    {"type": "button", "text": "Shop now", "href": "https://shop.example.com"},
                ],
            },
            {"type": "divider"},
            {
                "type": "columns",
                "columns": [
                    {"styles": {"padding": "8px"}, "children": [{"type": "text", "content": "Left"}]},
                    {"styles": {"padding": "8px"}, "children": [{"type": "text", "content": "Right"}]},
                ],
            },
            {"type": "spacer", "height": 30},
            {
                "type": "social",
                "links": [
                    {"url": "https://facebook.com/example", "icon": "https://cdn.example.com/fb.png", "platform": "facebook"},
                    {"url": "https://x.com/example", "icon": "https://cdn.example.com/x.png", "platform": "x"},
                ],
            },
        ],
        "settings": {"backgroundColor": "#eeeeee"},
    }


@pytest.fixture
def sample_document(sample_template):
    """The sample template as a Document."""
    return Document.from_dict(sample_template)


@pytest.fixture
def template_file(temp_dir, sample_template):
    """The sample template written to a JSON file."""
    path = temp_dir / "newsletter.json"
    path.write_text(json.dumps(sample_template), encoding="utf-8")
    return path
