# =============================================================================
# Configuration Tests
# =============================================================================

import pytest

from mailsmith.config import Config, ConfigError, RenderingConfig, get_xdg_config_home
from mailsmith.core import DEFAULT_SETTINGS


class TestConfig:
    """Tests for loading and saving config.toml."""

    def test_missing_file_gives_defaults(self, temp_dir):
        config = Config.load(temp_dir / "config.toml")
        assert config.rendering == RenderingConfig()
        assert config.preview.display_links is True

    def test_load(self, temp_dir):
        path = temp_dir / "config.toml"
        path.write_text(
            '[rendering]\n'
            'background_color = "#eeeeee"\n'
            'max_depth = 12\n'
            '\n'
            '[rendering.social_icons]\n'
            'facebook = "https://cdn.example.com/fb.png"\n'
            '\n'
            '[preview]\n'
            'display_images = false\n',
            encoding="utf-8",
        )

        config = Config.load(path)

        assert config.rendering.background_color == "#eeeeee"
        assert config.rendering.content_width == DEFAULT_SETTINGS.content_width
        assert config.rendering.max_depth == 12
        assert config.rendering.social_icons == {"facebook": "https://cdn.example.com/fb.png"}
        assert config.preview.display_images is False

    def test_save_and_reload(self, temp_dir):
        path = temp_dir / "nested" / "config.toml"
        config = Config()
        config.rendering.padding = "12px"
        config.rendering.social_icons["x"] = "https://cdn.example.com/x.png"
        config.save(path)

        reloaded = Config.load(path)
        assert reloaded.rendering.padding == "12px"
        assert reloaded.rendering.social_icons == {"x": "https://cdn.example.com/x.png"}

    def test_invalid_toml(self, temp_dir):
        path = temp_dir / "config.toml"
        path.write_text("[rendering\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid config file"):
            Config.load(path)

    def test_invalid_max_depth(self, temp_dir):
        path = temp_dir / "config.toml"
        path.write_text('[rendering]\nmax_depth = "deep"\n', encoding="utf-8")
        with pytest.raises(ConfigError, match="max_depth"):
            Config.load(path)

    @pytest.mark.parametrize("section", ["rendering", "preview"])
    def test_section_must_be_table(self, temp_dir, section):
        path = temp_dir / "config.toml"
        path.write_text(f"{section} = 5\n", encoding="utf-8")
        with pytest.raises(ConfigError, match=rf"\[{section}\] must be a table"):
            Config.load(path)

    def test_default_settings(self):
        settings = RenderingConfig(font_family="Georgia, serif").default_settings()
        assert settings.font_family == "Georgia, serif"
        assert settings.padding == "20px"


def test_xdg_config_home(monkeypatch, temp_dir):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(temp_dir))
    assert get_xdg_config_home() == temp_dir / "mailsmith"
    assert Config.config_file_path() == temp_dir / "mailsmith" / "config.toml"
