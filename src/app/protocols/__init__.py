"""Protocolos e contratos do core da aplicação."""

from .address_resolver import UNKNOWN_ADDRESS, AddressResolverProtocol
from .balance_provider import BalanceProviderProtocol
from .request_gate import RequestGateProtocol

__all__ = [
    "UNKNOWN_ADDRESS",
    "AddressResolverProtocol",
    "BalanceProviderProtocol",
    "RequestGateProtocol",
]
