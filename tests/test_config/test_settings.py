"""Testes para config.settings (base, voip.ms, Groundwire)."""

from __future__ import annotations

import pytest

from config.settings import (
    DEFAULT_CURRENCY,
    IP_ECHO_URL,
    VOIPMS_API_URL,
    BaseSettings,
    Credentials,
    GroundwireSettings,
    VoipMsSettings,
    get_base_settings,
    get_groundwire_settings,
    get_voipms_settings,
)


class TestBaseSettings:
    def test_defaults_from_empty_env(self) -> None:
        settings = get_base_settings()
        assert settings.environment == "development"
        assert settings.service_name == "groundwire-balance"
        assert settings.debug is False
        assert settings.effective_log_level == "INFO"
        assert settings.validate() == []

    @pytest.mark.parametrize("raw", ["true", "1", "yes", "TRUE"])
    def test_debug_flag_forces_debug_level(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("DEBUG", raw)
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        settings = get_base_settings()
        assert settings.debug is True
        assert settings.effective_log_level == "DEBUG"

    def test_environment_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        assert get_base_settings().is_production is True

    def test_invalid_log_level_is_reported(self) -> None:
        errors = BaseSettings(log_level="LOUD").validate()
        assert errors == ["LOG_LEVEL inválido: LOUD"]


class TestVoipMsSettings:
    def test_defaults(self) -> None:
        settings = get_voipms_settings()
        assert settings.api_url == VOIPMS_API_URL
        assert settings.ip_echo_url == IP_ECHO_URL
        assert settings.request_timeout_seconds == 10.0
        assert settings.ip_echo_timeout_seconds == 5.0
        assert settings.credentials is None

    def test_credentials_require_both_values(self) -> None:
        assert VoipMsSettings(username="user").credentials is None
        assert VoipMsSettings(password="secret").credentials is None
        assert VoipMsSettings(username="user", password="secret").credentials == Credentials(
            username="user", password="secret"
        )

    def test_password_never_in_repr(self) -> None:
        settings = VoipMsSettings(username="user", password="s3cr3t")
        assert "s3cr3t" not in repr(settings)
        assert "s3cr3t" not in repr(settings.credentials)

    def test_loads_from_env(self, account_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VOIPMS_REQUEST_TIMEOUT_SECONDS", "2.5")
        get_voipms_settings.cache_clear()
        settings = get_voipms_settings()
        assert settings.username == "test_user@example.com"
        assert settings.password == "test_password"
        assert settings.request_timeout_seconds == 2.5

    def test_validate_reports_missing_credentials_and_bad_timeouts(self) -> None:
        errors = VoipMsSettings(request_timeout_seconds=0, ip_echo_timeout_seconds=-1).validate()
        assert "VOIP_USERNAME não configurado" in errors
        assert "VOIP_PASSWORD não configurado" in errors
        assert "VOIPMS_REQUEST_TIMEOUT_SECONDS deve ser > 0" in errors
        assert "IP_ECHO_TIMEOUT_SECONDS deve ser > 0" in errors


class TestGroundwireSettings:
    def test_defaults_to_usd_open_mode(self) -> None:
        settings = get_groundwire_settings()
        assert settings.currency == DEFAULT_CURRENCY == "USD"
        assert settings.token == ""
        assert settings.requires_token is False

    def test_currency_is_normalized(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CURRENCY", " cad ")
        monkeypatch.setenv("TOKEN", "123")
        settings = get_groundwire_settings()
        assert settings.currency == "CAD"
        assert settings.requires_token is True
        assert "123" not in repr(settings)

    def test_validate_rejects_non_alpha_currency(self) -> None:
        assert GroundwireSettings(currency="US$").validate() == ["CURRENCY inválido: US$"]
