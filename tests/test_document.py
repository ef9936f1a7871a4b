# =============================================================================
# Document Model Tests
# =============================================================================

import pytest

from mailsmith.core import (
    DEFAULT_SETTINGS,
    Document,
    DocumentError,
    ElementKind,
    Settings,
    child_list,
    element_type,
    first_value,
    resolve_kind,
)


class TestSettings:
    """Tests for settings resolution."""

    def test_defaults(self):
        settings = Settings.resolve({})
        assert settings.background_color == "#f4f4f4"
        assert settings.content_width == "600px"
        assert settings.font_family == "Arial, Helvetica, sans-serif"
        assert settings.padding == "20px"

    def test_none_uses_defaults(self):
        assert Settings.resolve(None) == DEFAULT_SETTINGS

    def test_overrides_and_empty_values(self):
        settings = Settings.resolve({"backgroundColor": "#000", "contentWidth": ""})
        assert settings.background_color == "#000"
        assert settings.content_width == "600px"

    def test_custom_defaults(self):
        house = Settings(content_width="640px")
        assert Settings.resolve({}, house).content_width == "640px"

    def test_round_trip_keys(self):
        assert Settings().to_dict() == {
            "backgroundColor": "#f4f4f4",
            "contentWidth": "600px",
            "fontFamily": "Arial, Helvetica, sans-serif",
            "padding": "20px",
        }


class TestDocument:
    """Tests for building Documents from template data."""

    def test_from_dict(self, sample_template):
        doc = Document.from_dict(sample_template)
        assert doc.name == "Spring Newsletter"
        assert len(doc.elements) == len(sample_template["elements"])
        assert doc.settings == {"backgroundColor": "#eeeeee"}

    def test_missing_name_gets_default(self):
        assert Document.from_dict({"elements": []}).name == "Email Template"

    def test_global_settings_alias(self):
        doc = Document.from_dict({"elements": [], "globalSettings": {"padding": "0"}})
        assert doc.resolved_settings().padding == "0"

    def test_rejects_non_mapping(self):
        with pytest.raises(DocumentError):
            Document.from_dict(["not", "a", "template"])

    def test_rejects_non_list_elements(self):
        with pytest.raises(DocumentError):
            Document.from_dict({"elements": "text"})

    def test_does_not_share_element_list(self, sample_template):
        doc = Document.from_dict(sample_template)
        doc.elements.append({"type": "spacer"})
        assert len(sample_template["elements"]) == 7

    def test_load(self, template_file):
        doc = Document.load(template_file)
        assert doc.name == "Spring Newsletter"

    def test_load_missing_file(self, temp_dir):
        with pytest.raises(DocumentError, match="Cannot read template"):
            Document.load(temp_dir / "missing.json")

    def test_load_invalid_json(self, temp_dir):
        path = temp_dir / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DocumentError, match="Invalid template JSON"):
            Document.load(path)


class TestElementHelpers:
    """Tests for type resolution and field lookup."""

    @pytest.mark.parametrize("type_name,kind", [
        ("heading", ElementKind.TEXT),
        ("TITLE", ElementKind.TEXT),
        ("img", ElementKind.IMAGE),
        ("cta", ElementKind.BUTTON),
        ("separator", ElementKind.DIVIDER),
        ("space", ElementKind.SPACER),
        ("social-icons", ElementKind.SOCIAL),
        ("box", ElementKind.CONTAINER),
        ("grid", ElementKind.COLUMNS),
        ("mystery", ElementKind.UNKNOWN),
        (None, ElementKind.UNKNOWN),
    ])
    def test_resolve_kind(self, type_name, kind):
        assert resolve_kind(type_name) is kind

    def test_element_type(self):
        assert element_type({"type": "Image"}) == "image"
        assert element_type({"content": "no type"}) is None
        assert element_type({"type": ""}) is None
        assert element_type("text") is None
        assert element_type(None) is None

    def test_first_value_skips_empty(self):
        element = {"src": "", "url": "https://example.com/a.png"}
        assert first_value(element, "src", "url") == "https://example.com/a.png"
        assert first_value(element, "imageUrl", default="x") == "x"

    def test_child_list_empty_list_counts_as_present(self):
        assert child_list({"children": [], "elements": [{"type": "text"}]}, "children", "elements") == []
        assert child_list({"type": "text"}, "children", "elements") is None
