# =============================================================================
# Plain-Text Extractor Tests
# =============================================================================

from mailsmith.core import Document
from mailsmith.rendering import generate_plain_text


class TestGeneratePlainText:
    """Tests for generate_plain_text()."""

    def test_button_inside_container(self):
        doc = {"elements": [{"type": "container", "children": [{"type": "button", "text": "Go", "href": "http://x"}]}]}
        result = generate_plain_text(doc)
        assert result.success
        assert result.text == "Go - http://x"

    def test_fragments_joined_with_blank_line(self):
        doc = {"elements": [
            {"type": "heading", "content": "Title"},
            {"type": "paragraph", "text": "Body"},
            {"type": "text", "content": "End"},
        ]}
        assert generate_plain_text(doc).text == "Title\n\nBody\n\nEnd"

    def test_type_name_is_case_insensitive(self):
        doc = {"elements": [{"type": "Heading", "content": "Big"}, {"type": "BUTTON", "text": "Go", "href": "h"}]}
        assert generate_plain_text(doc).text == "Big\n\nGo - h"

    def test_other_types_contribute_nothing(self):
        doc = {"elements": [
            {"type": "image", "src": "a.png"},
            {"type": "divider"},
            {"type": "spacer"},
            {"type": "text", "content": "Only me"},
            {"type": "social", "links": [{"url": "https://x.com"}]},
        ]}
        assert generate_plain_text(doc).text == "Only me"

    def test_aliases_are_not_text(self):
        doc = {"elements": [
            {"type": "title", "content": "T"},
            {"type": "cta", "text": "Go", "href": "h"},
            {"type": "text", "content": "kept"},
        ]}
        assert generate_plain_text(doc).text == "kept"

    def test_button_reads_only_text_and_href(self):
        doc = {"elements": [{"type": "button", "content": "Lbl", "url": "u"}]}
        assert generate_plain_text(doc).text == " - "

    def test_empty_button_keeps_separator(self):
        doc = {"elements": [
            {"type": "text", "content": "   "},
            {"type": "text", "content": "Real"},
            {"type": "button"},
        ]}
        assert generate_plain_text(doc).text == "Real\n\n - "

    def test_children_are_inlined_in_order(self):
        doc = {"elements": [
            {"type": "text", "content": "Intro"},
            {"type": "section", "elements": [
                {"type": "text", "content": "A"},
                {"type": "box", "children": [{"type": "text", "content": "B"}]},
            ]},
        ]}
        assert generate_plain_text(doc).text == "Intro\n\nA\n\nB"

    def test_columns_list_is_not_read(self):
        doc = {"elements": [
            {"type": "columns", "columns": [{"children": [{"type": "text", "content": "Left"}]}]},
            {"type": "text", "content": "After"},
        ]}
        assert generate_plain_text(doc).text == "After"

    def test_unknown_type_with_children(self):
        doc = {"elements": [{"type": "mystery", "children": [{"type": "text", "content": "hi"}]}]}
        assert generate_plain_text(doc).text == "hi"

    def test_untyped_nodes_ignored(self):
        doc = {"elements": [None, {"content": "no type"}, {"type": "text", "content": "ok"}]}
        assert generate_plain_text(doc).text == "ok"

    def test_accepts_document(self, sample_document):
        result = generate_plain_text(sample_document)
        assert result.text == (
            "Spring is here\n\nFresh arrivals every week.\n\n"
            "Shop now - https://shop.example.com"
        )

    def test_empty_document(self):
        result = generate_plain_text(Document())
        assert result.success
        assert result.to_dict() == {"success": True, "text": ""}

    def test_missing_document(self):
        result = generate_plain_text(None)
        assert not result.success
        assert result.message == "Template data is required"

    def test_depth_limit(self):
        element = {"type": "text", "content": "bottom"}
        for _ in range(5):
            element = {"type": "section", "children": [element]}
        assert generate_plain_text({"elements": [element]}, max_depth=3).text == ""
        assert generate_plain_text({"elements": [element]}).text == "bottom"


def test_grid_children_read_in_order():
    doc = {"elements": [{"type": "grid", "children": [
        {"type": "text", "content": "One"},
        {"type": "image", "src": "a.png"},
        {"type": "text", "content": "Two"},
    ]}]}
    assert generate_plain_text(doc).text == "One\n\nTwo"
