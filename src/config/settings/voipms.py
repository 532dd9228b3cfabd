"""Settings específicas da API REST da voip.ms.

Credenciais da conta e endpoints usados na consulta de saldo,
incluindo o serviço de eco de IP usado em diagnósticos.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

# Endpoints padrão
VOIPMS_API_URL: str = "https://voip.ms/api/v1/rest.php"
IP_ECHO_URL: str = "https://ifconfig.me"


@dataclass(frozen=True)
class Credentials:
    """Credenciais da conta voip.ms (a senha nunca aparece em repr)."""

    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class VoipMsSettings:
    """Configurações da integração com a voip.ms.

    Attributes:
        username: Usuário da API (e-mail da conta)
        password: Senha da API
        api_url: Endpoint REST da voip.ms
        request_timeout_seconds: Timeout da chamada de saldo
        ip_echo_url: Serviço público que devolve o IP de saída
        ip_echo_timeout_seconds: Timeout da consulta de IP
    """

    # Credenciais
    username: str = ""
    password: str = field(default="", repr=False)

    # API
    api_url: str = VOIPMS_API_URL
    request_timeout_seconds: float = 10.0

    # Diagnóstico de IP
    ip_echo_url: str = IP_ECHO_URL
    ip_echo_timeout_seconds: float = 5.0

    @property
    def credentials(self) -> Credentials | None:
        """Credenciais completas ou None se alguma estiver ausente."""
        if not self.username or not self.password:
            return None
        return Credentials(username=self.username, password=self.password)

    def validate(self) -> list[str]:
        """Valida configurações mínimas da voip.ms.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.username:
            errors.append("VOIP_USERNAME não configurado")

        if not self.password:
            errors.append("VOIP_PASSWORD não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("VOIPMS_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.ip_echo_timeout_seconds <= 0:
            errors.append("IP_ECHO_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> VoipMsSettings:
    """Carrega VoipMsSettings a partir de variáveis de ambiente."""
    return VoipMsSettings(
        username=os.getenv("VOIP_USERNAME", ""),
        password=os.getenv("VOIP_PASSWORD", ""),
        api_url=os.getenv("VOIPMS_API_URL", VOIPMS_API_URL),
        request_timeout_seconds=float(os.getenv("VOIPMS_REQUEST_TIMEOUT_SECONDS", "10")),
        ip_echo_url=os.getenv("IP_ECHO_URL", IP_ECHO_URL),
        ip_echo_timeout_seconds=float(os.getenv("IP_ECHO_TIMEOUT_SECONDS", "5")),
    )


@lru_cache(maxsize=1)
def get_voipms_settings() -> VoipMsSettings:
    """Retorna instância cacheada de VoipMsSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
