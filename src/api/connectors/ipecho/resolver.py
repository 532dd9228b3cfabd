"""Descoberta do IP público de saída via serviço de eco (ifconfig.me).

Usado apenas para enriquecer a mensagem de erro `ip_not_enabled`:
o usuário precisa saber qual IP liberar no painel da voip.ms.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from app.infra.http import HttpClient, HttpClientConfig, HttpError
from app.protocols.address_resolver import UNKNOWN_ADDRESS
from config.logging import log_fallback

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)

# IPv6 completo tem no máximo 45 caracteres
_MAX_ADDRESS_LENGTH = 45


class IfconfigAddressResolver:
    """Resolve o IP de saída; devolve UNKNOWN_ADDRESS em qualquer falha."""

    def __init__(self, url: str, http_client: HttpClient) -> None:
        self._url = url
        self._http = http_client

    async def resolve_own_address(self) -> str:
        """Consulta o serviço de eco e devolve o IP sem espaços.

        Nunca levanta exceção: o chamador está montando um diagnóstico
        e não pode ser bloqueado por esta consulta secundária.
        """
        logger.debug("ip_echo_request_started", extra={"url": self._url})
        started_at = time.perf_counter()
        try:
            response = await self._http.get(self._url, headers={"Accept": "text/plain"})
            address = response.text.strip()
        except HttpError as exc:
            log_fallback(
                logger,
                "ip_resolver",
                reason=str(exc),
                elapsed_ms=_elapsed_ms(started_at),
            )
            return UNKNOWN_ADDRESS

        if not _looks_like_address(address):
            log_fallback(logger, "ip_resolver", reason="malformed_body")
            return UNKNOWN_ADDRESS

        logger.debug("ip_echo_resolved", extra={"ip": address})
        return address


def _looks_like_address(text: str) -> bool:
    if not text or len(text) > _MAX_ADDRESS_LENGTH:
        return False
    return all(ch.isalnum() or ch in ".:" for ch in text)


def _elapsed_ms(started_at: float) -> float:
    return round((time.perf_counter() - started_at) * 1000, 2)


def create_address_resolver(
    url: str,
    timeout_seconds: float,
    transport: httpx.AsyncBaseTransport | None = None,
) -> IfconfigAddressResolver:
    """Factory com timeout curto para a consulta de diagnóstico."""
    config = HttpClientConfig(timeout_seconds=timeout_seconds)
    return IfconfigAddressResolver(url=url, http_client=HttpClient(config, transport=transport))
