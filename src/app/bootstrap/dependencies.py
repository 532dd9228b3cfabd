"""Factories de dependências — composition root do pipeline de saldo.

Conecta implementações concretas (api/) aos protocolos usados pelo
use case. Settings vêm das funções cacheadas de config.settings.

Referência: app/ não importa de api/ exceto via bootstrap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.ipecho import create_address_resolver
from api.connectors.voipms import create_voipms_balance_client
from api.validators.groundwire import GroundwireRequestGate
from app.use_cases.balance import CheckBalanceUseCase
from config.settings import get_groundwire_settings, get_voipms_settings

if TYPE_CHECKING:
    import httpx

    from app.protocols.address_resolver import AddressResolverProtocol
    from app.protocols.balance_provider import BalanceProviderProtocol
    from config.settings import VoipMsSettings


def create_address_resolver_for(
    settings: VoipMsSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AddressResolverProtocol:
    """Cria resolvedor de IP de saída (diagnóstico de ip_not_enabled)."""
    return create_address_resolver(
        url=settings.ip_echo_url,
        timeout_seconds=settings.ip_echo_timeout_seconds,
        transport=transport,
    )


def create_balance_provider(
    settings: VoipMsSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> BalanceProviderProtocol:
    """Cria cliente voip.ms com resolvedor de IP acoplado.

    Args:
        settings: VoipMsSettings com URLs e timeouts.
        transport: Transport httpx compartilhado pelas duas chamadas (testes).
    """
    return create_voipms_balance_client(
        settings=settings,
        address_resolver=create_address_resolver_for(settings, transport),
        transport=transport,
    )


def create_check_balance_use_case(
    transport: httpx.AsyncBaseTransport | None = None,
) -> CheckBalanceUseCase:
    """Monta o use case de saldo com as settings atuais do processo."""
    voipms = get_voipms_settings()
    return CheckBalanceUseCase(
        gate=GroundwireRequestGate(),
        provider=create_balance_provider(voipms, transport),
        voipms_settings=voipms,
        groundwire_settings=get_groundwire_settings(),
    )
