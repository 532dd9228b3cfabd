"""Protocolo do resolvedor de IP de saída (diagnóstico)."""

from __future__ import annotations

from typing import Protocol

# Valor devolvido quando o IP não pôde ser determinado
UNKNOWN_ADDRESS = "unknown"


class AddressResolverProtocol(Protocol):
    """Descobre o IP público de saída do adapter.

    Contrato: nunca levanta exceção. Qualquer falha (rede, status
    não-2xx, corpo inválido) resulta em `UNKNOWN_ADDRESS`.
    """

    async def resolve_own_address(self) -> str: ...
