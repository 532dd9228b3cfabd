"""Protocolo do provedor de saldo (billing upstream)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.balance import BalanceFetchResult
    from config.settings import Credentials


class BalanceProviderProtocol(Protocol):
    """Contrato mínimo para consultar o saldo da conta.

    Nunca levanta exceção para falhas esperadas: toda falha volta
    classificada dentro de `BalanceFetchResult.error`.
    """

    async def fetch_balance(self, credentials: Credentials | None) -> BalanceFetchResult: ...
