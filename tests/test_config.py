"""
Tests for configuration loading.
"""

import pytest
from pydantic import ValidationError

from listing_ai.config import Settings, get_settings, reload_settings


class TestSettings:
    """Tests for the Settings aggregate."""

    def test_defaults(self):
        settings = Settings()

        assert settings.is_supabase_configured is False
        assert settings.is_production is False
        assert settings.analysis.max_text_length == 20000
        assert settings.database.compliance_table == "compliance_checks"
        assert settings.database.seo_table == "seo_analyses"

    def test_supabase_service_key_alias(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
        monkeypatch.setenv("SUPABASE_SERVICE_KEY", "service-key")

        settings = Settings()

        assert settings.is_supabase_configured is True
        assert settings.database.supabase_key.get_secret_value() == "service-key"

    def test_production_environment(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")

        assert Settings().is_production is True

    def test_invalid_max_text_length(self, monkeypatch):
        monkeypatch.setenv("MAX_TEXT_LENGTH", "0")

        with pytest.raises(ValidationError):
            Settings()

    def test_summary_excludes_secrets(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
        monkeypatch.setenv("SUPABASE_KEY", "super-secret")

        summary = Settings().get_config_summary()

        assert summary["supabase_configured"] is True
        assert "super-secret" not in str(summary)


def test_get_settings_is_cached_until_reload(monkeypatch):
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("MAX_TEXT_LENGTH", "123")
    reloaded = reload_settings()

    assert reloaded is not first
    assert reloaded.analysis.max_text_length == 123
