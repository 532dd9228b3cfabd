"""Configuração do pytest para o adapter de saldo Groundwire."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import (  # noqa: E402
    get_base_settings,
    get_groundwire_settings,
    get_voipms_settings,
)

_ENV_VARS = (
    "ENVIRONMENT",
    "SERVICE_NAME",
    "DEBUG",
    "LOG_LEVEL",
    "VOIP_USERNAME",
    "VOIP_PASSWORD",
    "VOIPMS_API_URL",
    "VOIPMS_REQUEST_TIMEOUT_SECONDS",
    "IP_ECHO_URL",
    "IP_ECHO_TIMEOUT_SECONDS",
    "CURRENCY",
    "TOKEN",
)


def _clear_settings_cache() -> None:
    get_base_settings.cache_clear()
    get_groundwire_settings.cache_clear()
    get_voipms_settings.cache_clear()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Cada teste parte de um ambiente limpo e sem settings em cache."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    _clear_settings_cache()
    yield
    _clear_settings_cache()


@pytest.fixture
def account_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ambiente com conta voip.ms, moeda CAD e token "123"."""
    monkeypatch.setenv("VOIP_USERNAME", "test_user@example.com")
    monkeypatch.setenv("VOIP_PASSWORD", "test_password")
    monkeypatch.setenv("CURRENCY", "CAD")
    monkeypatch.setenv("TOKEN", "123")
    monkeypatch.setenv("DEBUG", "false")
    _clear_settings_cache()
