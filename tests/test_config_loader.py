"""
Tests for settings loading.
"""

import pytest

from core.config_loader import DEFAULT_OUTPUT_PATH, Settings, load_settings
from core.exceptions import ConfigurationError


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_missing_file_gives_defaults(self, tmp_path):
        settings = load_settings(str(tmp_path / "settings.yaml"))

        assert settings.output.path == DEFAULT_OUTPUT_PATH
        assert settings.output.indent == "  "
        assert settings.logging.verbose is False

    def test_values_read_from_yaml(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(
            "output:\n  path: exported.xml\n  indent: \"    \"\nlogging:\n  verbose: true\n",
            encoding="utf-8",
        )

        settings = load_settings(str(path))

        assert settings.output.path == "exported.xml"
        assert settings.output.indent == "    "
        assert settings.logging.verbose is True

    def test_partial_file_keeps_other_defaults(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("logging:\n  verbose: true\nunknown: 1\n", encoding="utf-8")

        settings = load_settings(str(path))

        assert settings.output.path == DEFAULT_OUTPUT_PATH
        assert settings.logging.verbose is True

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("", encoding="utf-8")

        assert load_settings(str(path)) == Settings()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("output: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_settings(str(path))

    def test_non_mapping_document(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_settings(str(path))

    def test_non_mapping_section(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("output: exported.xml\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="output"):
            load_settings(str(path))
