"""Settings do contrato com o cliente Groundwire."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

DEFAULT_CURRENCY: str = "USD"


@dataclass(frozen=True)
class GroundwireSettings:
    """Configurações expostas ao softphone.

    Attributes:
        currency: Código da moeda exibida junto ao saldo
        token: Bearer token esperado (vazio = modo aberto)
    """

    currency: str = DEFAULT_CURRENCY
    token: str = field(default="", repr=False)

    @property
    def requires_token(self) -> bool:
        """True se as requisições precisam de Authorization: Bearer."""
        return bool(self.token)

    def validate(self) -> list[str]:
        """Valida configurações do contrato Groundwire.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.currency:
            errors.append("CURRENCY não pode ser vazio")
        elif not self.currency.isalpha():
            errors.append(f"CURRENCY inválido: {self.currency}")

        return errors


def _load_from_env() -> GroundwireSettings:
    """Carrega GroundwireSettings a partir de variáveis de ambiente."""
    return GroundwireSettings(
        currency=(os.getenv("CURRENCY") or DEFAULT_CURRENCY).strip().upper(),
        token=os.getenv("TOKEN", "").strip(),
    )


@lru_cache(maxsize=1)
def get_groundwire_settings() -> GroundwireSettings:
    """Retorna instância cacheada de GroundwireSettings."""
    return _load_from_env()
