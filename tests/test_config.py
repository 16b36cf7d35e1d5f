"""Tests for settings loading"""

import pytest
from pydantic import ValidationError

from layerfs.core.config import Settings, get_settings, reset_settings


class TestSettings:
    """Test environment driven configuration"""

    def test_defaults(self):
        settings = Settings()

        assert settings.environment == "development"
        assert settings.is_development
        assert settings.log_format == "console"
        assert settings.default_roots == ["."]
        assert settings.embed_module_name == "_embedded_data"
        assert settings.ignore_files == [".gitignore", ".hgignore"]

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("LAYERFS_OUTPUT_FORMAT", "yaml")
        monkeypatch.setenv("LAYERFS_DEFAULT_ROOTS", '["./overrides", "./defaults"]')

        settings = Settings()

        assert settings.output_format == "yaml"
        assert settings.default_roots == ["./overrides", "./defaults"]

    def test_production_forces_json_logs(self, monkeypatch):
        monkeypatch.setenv("LAYERFS_ENVIRONMENT", "production")
        monkeypatch.setenv("LAYERFS_LOG_FORMAT", "console")

        settings = Settings()

        assert settings.is_production
        assert settings.log_format == "json"

    def test_production_default_log_format(self, monkeypatch):
        monkeypatch.setenv("LAYERFS_ENVIRONMENT", "production")

        assert Settings().log_format == "json"

    @pytest.mark.parametrize("name", ["not a module", "1st", "with-dash"])
    def test_invalid_embed_module_name(self, name: str):
        with pytest.raises(ValidationError):
            Settings(embed_module_name=name)

    def test_invalid_output_format(self):
        with pytest.raises(ValidationError):
            Settings(output_format="xml")

    def test_get_settings_is_cached(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("LAYERFS_OUTPUT_FORMAT", "json")

        assert get_settings() is first

        reset_settings()

        assert get_settings().output_format == "json"
