"""Cliente HTTP base para chamadas externas.

Uma única tentativa por chamada, sempre com timeout: o serviço não faz
retry nem backoff. Erros saem como `HttpError` sem dados sensíveis
(a URL com credenciais nunca entra na mensagem).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP simples sobre httpx.AsyncClient.

    Args:
        config: Timeout, headers padrão e verificação TLS.
        transport: Transport httpx opcional (ex: httpx.MockTransport em testes).
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa GET e devolve a resposta 2xx.

        Raises:
            HttpError: Status não-2xx, timeout ou falha de conexão.
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                timeout=self._config.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.get(url, params=params, headers=merged_headers)
        except httpx.TimeoutException as exc:
            raise HttpError("http_timeout") from exc
        except httpx.HTTPError as exc:
            raise HttpError("http_connection_error") from exc

        logger.debug(
            "http_response_received",
            extra={"host": response.url.host, "status_code": response.status_code},
        )
        if not response.is_success:
            raise HttpError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )
        return response
