"""Tests for display configuration."""

import pytest

from wolves_cli_helper.config import DisplayConfig, load_display_config
from wolves_cli_helper.errors import ConfigError


class TestLoadDisplayConfig:
    """Test load_display_config."""

    def test_defaults(self):
        config = DisplayConfig()
        assert config.lead_style == "color(208)"
        assert config.value_style == "green"
        assert config.rule_style == "blue"
        assert config.rule_width == 65

    def test_partial_file(self, tmp_path):
        path = tmp_path / "display.yml"
        path.write_text("rule_width: 40\nvalue_style: cyan\n")

        config = load_display_config(path)
        assert config.rule_width == 40
        assert config.value_style == "cyan"
        assert config.lead_style == "color(208)"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "display.yml"
        path.write_text("")
        assert load_display_config(path) == DisplayConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Could not load display config"):
            load_display_config(tmp_path / "absent.yml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "display.yml"
        path.write_text("rule_width: [40\n")
        with pytest.raises(ConfigError):
            load_display_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "display.yml"
        path.write_text("- green\n- blue\n")
        with pytest.raises(ConfigError, match="must be a mapping"):
            load_display_config(path)

    def test_unknown_keys(self, tmp_path):
        path = tmp_path / "display.yml"
        path.write_text("rule_colour: red\nbanner: yes\n")
        with pytest.raises(ConfigError, match="banner, rule_colour"):
            load_display_config(path)
