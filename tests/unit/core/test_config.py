"""
Tests for core configuration.
"""

import pytest
from pydantic import ValidationError

from chat_gateway.core.config import Settings, get_settings


class TestSettingsDefaults:
    def test_upstream_defaults(self) -> None:
        settings = Settings()

        assert settings.openai_base_url == "https://api.openai.com/v1"
        assert settings.openai_model == "gpt-3.5-turbo"
        assert settings.gemini_base_url == "https://generativelanguage.googleapis.com/v1beta"
        assert settings.gemini_model == "gemini-pro"
        assert settings.perplexity_base_url == "https://api.perplexity.ai"
        assert settings.perplexity_model == "sonar-pro"

    def test_http_defaults(self) -> None:
        settings = Settings()

        assert settings.upstream_timeout_seconds == 120.0
        assert settings.max_connections == 100

    def test_has_no_provider_key_fields(self) -> None:
        """Keys arrive per request and are never configured."""
        assert not any("key" in name for name in Settings.model_fields)


class TestSettingsEnvironment:
    def test_reads_prefixed_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("CHAT_GATEWAY_OPENAI_MODEL", "gpt-4o-mini")
        monkeypatch.setenv("CHAT_GATEWAY_UPSTREAM_TIMEOUT_SECONDS", "30")

        settings = Settings()

        assert settings.openai_model == "gpt-4o-mini"
        assert settings.upstream_timeout_seconds == 30.0

    def test_log_level_is_normalized(self, monkeypatch) -> None:
        monkeypatch.setenv("CHAT_GATEWAY_LOG_LEVEL", "debug")

        assert Settings().log_level == "DEBUG"

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level="verbose")

    def test_timeout_bounds(self) -> None:
        with pytest.raises(ValidationError):
            Settings(upstream_timeout_seconds=0.1)

    def test_favicon_template_requires_placeholder(self) -> None:
        with pytest.raises(ValidationError):
            Settings(favicon_url_template="https://icons.test/static.ico")


class TestCorsOrigins:
    def test_development_allows_all(self) -> None:
        assert Settings(environment="development").get_cors_origins() == ["*"]

    def test_production_parses_list(self) -> None:
        settings = Settings(
            environment="production",
            cors_origins="https://app.example.com, https://admin.example.com,",
        )

        assert settings.get_cors_origins() == [
            "https://app.example.com",
            "https://admin.example.com",
        ]

    def test_production_without_origins_is_empty(self) -> None:
        assert Settings(environment="production").get_cors_origins() == []


class TestGetSettings:
    def test_returns_cached_instance(self) -> None:
        assert get_settings() is get_settings()
