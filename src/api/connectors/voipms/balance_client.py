"""Cliente da API REST da voip.ms para consulta de saldo (getBalance).

Interpreta o vocabulário de status da voip.ms:
- success: extrai e normaliza `balance.current_balance`
- ip_not_enabled: falha de permissão, enriquecida com o IP de saída
- qualquer outro: erro genérico do upstream

Nenhuma falha esperada vira exceção: tudo volta como
`BalanceFetchResult` com o `ErrorKind` atribuído aqui.
A senha da conta nunca aparece em logs.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.voipms.redaction import redacted_url
from api.connectors.voipms.response import read_current_balance, read_message, read_status
from app.constants.balance import (
    MESSAGE_IP_NOT_PERMITTED,
    ErrorKind,
    UpstreamStatus,
)
from app.domain.balance import BalanceFetchResult, ErrorOutcome, parse_balance
from app.infra.http import HttpClient, HttpClientConfig, HttpError

if TYPE_CHECKING:
    import httpx

    from app.protocols.address_resolver import AddressResolverProtocol
    from config.settings import Credentials, VoipMsSettings

logger = logging.getLogger(__name__)

GET_BALANCE_METHOD = "getBalance"
USER_AGENT = "groundwire-balance/1.0"


class VoipMsBalanceClient:
    """Consulta o saldo da conta e classifica cada caminho de falha."""

    def __init__(
        self,
        api_url: str,
        http_client: HttpClient,
        address_resolver: AddressResolverProtocol,
    ) -> None:
        self._api_url = api_url
        self._http = http_client
        self._address_resolver = address_resolver

    async def fetch_balance(self, credentials: Credentials | None) -> BalanceFetchResult:
        """Busca o saldo atual.

        Args:
            credentials: Usuário/senha da API voip.ms

        Returns:
            BalanceFetchResult com saldo em duas casas ou ErrorOutcome.
        """
        if credentials is None:
            logger.debug("voipms_credentials_missing")
            return _fail(ErrorKind.CONFIGURATION, "Missing API credentials")

        params = _build_params(credentials)
        logger.debug(
            "voipms_request_started",
            extra={
                "username": credentials.username,
                "url": redacted_url(self._api_url, params),
            },
        )

        try:
            response = await self._http.get(self._api_url, params=params)
        except HttpError as exc:
            logger.warning(
                "voipms_transport_error",
                extra={"status_code": exc.status_code, "error": str(exc)},
            )
            return _fail(ErrorKind.TRANSPORT, str(exc))

        data = _decode_json(response)
        status = read_status(data)
        logger.debug(
            "voipms_response_received",
            extra={
                "status": status,
                "has_balance": isinstance(data, dict) and bool(data.get("balance")),
            },
        )
        if status is None:
            return _fail(ErrorKind.MALFORMED_RESPONSE, "Invalid API response format")

        if status == UpstreamStatus.SUCCESS:
            return self._handle_success(data)
        if status == UpstreamStatus.IP_NOT_ENABLED:
            return await self._handle_ip_not_enabled(status)
        return self._handle_upstream_error(data, status)

    def _handle_success(self, data: dict[str, Any]) -> BalanceFetchResult:
        raw_balance = read_current_balance(data)
        if raw_balance is None:
            logger.debug("voipms_balance_missing", extra={"balance": data.get("balance")})
            return _fail(ErrorKind.MALFORMED_RESPONSE, "Invalid balance data in API response")

        balance = parse_balance(raw_balance)
        if balance is None:
            logger.debug("voipms_balance_invalid", extra={"raw_balance": repr(raw_balance)})
            return _fail(ErrorKind.MALFORMED_RESPONSE, "Invalid balance value received")

        logger.debug("voipms_balance_retrieved", extra={"balance": balance.formatted})
        return BalanceFetchResult.success(balance)

    async def _handle_ip_not_enabled(self, status: str) -> BalanceFetchResult:
        logger.debug("voipms_ip_not_enabled")
        ip = await self._address_resolver.resolve_own_address()
        message = MESSAGE_IP_NOT_PERMITTED.format(ip=ip)
        return _fail(
            ErrorKind.UPSTREAM_PERMISSION,
            message,
            message=message,
            upstream_status=status,
        )

    def _handle_upstream_error(self, data: dict[str, Any], status: str) -> BalanceFetchResult:
        message = read_message(data)
        logger.debug("voipms_api_error", extra={"status": status, "upstream_message": message})
        return _fail(ErrorKind.UPSTREAM, f"{message} ({status})", upstream_status=status)


def _build_params(credentials: Credentials) -> dict[str, str]:
    return {
        "content_type": "json",
        "api_username": credentials.username,
        "api_password": credentials.password,
        "method": GET_BALANCE_METHOD,
    }


def _decode_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.debug("voipms_response_not_json", extra={"size": len(response.content)})
        return None


def _fail(
    kind: ErrorKind,
    detail: str,
    *,
    message: str | None = None,
    upstream_status: str | None = None,
) -> BalanceFetchResult:
    return BalanceFetchResult.failure(
        ErrorOutcome.of(kind, detail, message=message, upstream_status=upstream_status)
    )


def create_voipms_balance_client(
    settings: VoipMsSettings,
    address_resolver: AddressResolverProtocol,
    transport: httpx.AsyncBaseTransport | None = None,
) -> VoipMsBalanceClient:
    """Factory para criar o cliente com timeout e User-Agent padrão.

    Args:
        settings: VoipMsSettings (URL e timeout).
        address_resolver: Resolvedor de IP para o caso ip_not_enabled.
        transport: Transport httpx opcional (testes).
    """
    config = HttpClientConfig(
        timeout_seconds=settings.request_timeout_seconds,
        default_headers={"User-Agent": USER_AGENT},
    )
    return VoipMsBalanceClient(
        api_url=settings.api_url,
        http_client=HttpClient(config, transport=transport),
        address_resolver=address_resolver,
    )
