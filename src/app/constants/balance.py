"""Enums e mensagens do fluxo de consulta de saldo."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Taxonomia fechada de falhas, cada uma ligada a um status HTTP."""

    AUTHENTICATION = "authentication"
    CONFIGURATION = "configuration"
    UPSTREAM_PERMISSION = "upstream_permission"
    MALFORMED_RESPONSE = "malformed_response"
    TRANSPORT = "transport"
    UPSTREAM = "upstream"

    @property
    def http_status(self) -> int:
        """Status HTTP devolvido ao softphone para esta falha."""
        return _HTTP_STATUS[self]


_HTTP_STATUS: dict[ErrorKind, int] = {
    ErrorKind.AUTHENTICATION: 401,
    ErrorKind.CONFIGURATION: 500,
    ErrorKind.UPSTREAM_PERMISSION: 403,
    ErrorKind.MALFORMED_RESPONSE: 502,
    ErrorKind.TRANSPORT: 503,
    ErrorKind.UPSTREAM: 503,
}


class UpstreamStatus(StrEnum):
    """Valores de `status` da voip.ms com tratamento próprio."""

    SUCCESS = "success"
    IP_NOT_ENABLED = "ip_not_enabled"


# Mensagens exibidas ao usuário (contrato do Groundwire)
MESSAGE_UNAUTHORIZED = "Unauthorized"
MESSAGE_AUTHENTICATION_REQUIRED = "Authentication required"
MESSAGE_SERVER_CONFIGURATION = "Server configuration error"
MESSAGE_CONFIGURATION = "Configuration error"
MESSAGE_INVALID_DATA = "Invalid data received from API"
MESSAGE_UNAVAILABLE = "Service temporarily unavailable"
MESSAGE_IP_NOT_PERMITTED = "IP not permitted by VOIP.MS. Source IP: {ip}"

DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.AUTHENTICATION: MESSAGE_UNAUTHORIZED,
    ErrorKind.CONFIGURATION: MESSAGE_CONFIGURATION,
    ErrorKind.UPSTREAM_PERMISSION: MESSAGE_IP_NOT_PERMITTED.format(ip="unknown"),
    ErrorKind.MALFORMED_RESPONSE: MESSAGE_INVALID_DATA,
    ErrorKind.TRANSPORT: MESSAGE_UNAVAILABLE,
    ErrorKind.UPSTREAM: MESSAGE_UNAVAILABLE,
}
