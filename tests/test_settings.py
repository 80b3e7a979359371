"""
Tests for library settings and environment overrides.
"""

import pytest

from confseek.config import DEFAULT_EXTENSIONS, Settings, get_settings
from confseek.exceptions import SettingsError
from confseek.types import Extension


@pytest.mark.unit
class TestSettingsFromEnv:
    """Tests for Settings.from_env."""

    def test_defaults_without_variables(self):
        settings = Settings.from_env({})
        assert settings == Settings()
        assert settings.extensions == DEFAULT_EXTENSIONS
        assert settings.max_depth == 10
        assert settings.manifest_filename == "pyproject.toml"
        assert settings.use_cache is True

    def test_extensions_override(self):
        settings = Settings.from_env({"CONFSEEK_EXTENSIONS": "toml, .json"})
        assert settings.extensions == (Extension.TOML, Extension.JSON)

    def test_max_depth_override(self):
        assert Settings.from_env({"CONFSEEK_MAX_DEPTH": "3"}).max_depth == 3

    def test_manifest_override(self):
        assert Settings.from_env({"CONFSEEK_MANIFEST": "package.json"}).manifest_filename == "package.json"

    @pytest.mark.parametrize("raw,expected", [("0", False), ("off", False), ("YES", True), ("true", True)])
    def test_use_cache_override(self, raw, expected):
        assert Settings.from_env({"CONFSEEK_USE_CACHE": raw}).use_cache is expected

    def test_blank_values_ignored(self):
        assert Settings.from_env({"CONFSEEK_MAX_DEPTH": " ", "CONFSEEK_EXTENSIONS": ""}) == Settings()

    @pytest.mark.parametrize(
        "variable,value",
        [
            ("CONFSEEK_MAX_DEPTH", "ten"),
            ("CONFSEEK_MAX_DEPTH", "-1"),
            ("CONFSEEK_USE_CACHE", "maybe"),
            ("CONFSEEK_EXTENSIONS", ".json,.ini"),
        ],
    )
    def test_invalid_values_raise(self, variable, value):
        with pytest.raises(SettingsError) as exc_info:
            Settings.from_env({variable: value})
        assert exc_info.value.variable == variable
        assert exc_info.value.details["value"] == value

    def test_get_settings_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("CONFSEEK_MAX_DEPTH", "4")
        assert get_settings().max_depth == 4
