"""Use case de consulta de saldo para o Groundwire.

Pipeline linear, cada etapa uma saída terminal, sem retry:
1. Assinatura do cliente (User-Agent)
2. Configuração da conta (credenciais voip.ms presentes)
3. Bearer token (quando configurado)
4. Consulta ao provedor de saldo

A formatação HTTP do resultado fica na rota.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from app.constants.balance import (
    MESSAGE_AUTHENTICATION_REQUIRED,
    MESSAGE_SERVER_CONFIGURATION,
    MESSAGE_UNAUTHORIZED,
    ErrorKind,
)
from app.domain.balance import BalanceFetchResult, ErrorOutcome
from app.observability import get_correlation_id, record_latency

if TYPE_CHECKING:
    from app.domain.balance import ClientIdentity
    from app.protocols.balance_provider import BalanceProviderProtocol
    from app.protocols.request_gate import RequestGateProtocol
    from config.settings import GroundwireSettings, VoipMsSettings

logger = logging.getLogger(__name__)


class CheckBalanceUseCase:
    """Orquestra gate, checagem de configuração e consulta de saldo."""

    def __init__(
        self,
        gate: RequestGateProtocol,
        provider: BalanceProviderProtocol,
        voipms_settings: VoipMsSettings,
        groundwire_settings: GroundwireSettings,
    ) -> None:
        self._gate = gate
        self._provider = provider
        self._voipms = voipms_settings
        self._groundwire = groundwire_settings

    @property
    def currency(self) -> str:
        return self._groundwire.currency

    async def execute(self, identity: ClientIdentity) -> BalanceFetchResult:
        """Executa o pipeline para uma requisição do softphone."""
        if not self._gate.check_signature(identity.user_agent):
            logger.info("balance_request_rejected", extra={"reason": "invalid_user_agent"})
            return _reject(ErrorKind.AUTHENTICATION, MESSAGE_UNAUTHORIZED, "invalid_user_agent")

        credentials = self._voipms.credentials
        logger.debug(
            "balance_configuration",
            extra={
                "has_voip_username": bool(self._voipms.username),
                "has_voip_password": bool(self._voipms.password),
                "currency": self._groundwire.currency,
                "requires_token": self._groundwire.requires_token,
            },
        )
        if credentials is None:
            logger.error("balance_configuration_missing", extra={"component": "voipms"})
            return _reject(
                ErrorKind.CONFIGURATION,
                MESSAGE_SERVER_CONFIGURATION,
                "missing_voipms_credentials",
            )

        if not self._gate.check_credential(identity.authorization, self._groundwire.token):
            logger.info("balance_request_rejected", extra={"reason": "invalid_bearer_token"})
            return _reject(
                ErrorKind.AUTHENTICATION,
                MESSAGE_AUTHENTICATION_REQUIRED,
                "invalid_bearer_token",
            )

        started_at = time.perf_counter()
        result = await self._provider.fetch_balance(credentials)
        record_latency(
            "voipms",
            "get_balance",
            (time.perf_counter() - started_at) * 1000,
            get_correlation_id(),
            outcome="ok" if result.ok else str(result.error.kind),
        )
        return result


def _reject(kind: ErrorKind, message: str, detail: str) -> BalanceFetchResult:
    return BalanceFetchResult.failure(ErrorOutcome.of(kind, detail, message=message))
