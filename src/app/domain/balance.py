"""Modelos de domínio da consulta de saldo.

Tudo aqui vive no escopo de uma única requisição: é criado a partir
dos headers do softphone ou da resposta da voip.ms e descartado ao fim.
Falhas viajam como valores (`ErrorOutcome` dentro de `BalanceFetchResult`),
com o `ErrorKind` atribuído no ponto onde a falha acontece.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from app.constants.balance import DEFAULT_MESSAGES, ErrorKind

TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True, slots=True)
class ClientIdentity:
    """Identidade declarada pelo chamador (headers da requisição)."""

    user_agent: str | None
    authorization: str | None = field(default=None, repr=False)


@dataclass(frozen=True, slots=True)
class BalanceResult:
    """Saldo finito com representação fixa de duas casas decimais."""

    amount: Decimal
    formatted: str

    def __post_init__(self) -> None:
        if not self.amount.is_finite():
            raise ValueError("balance_not_finite")
        _, _, fraction = self.formatted.partition(".")
        if len(fraction) != 2 or not fraction.isdigit():
            raise ValueError("balance_not_two_decimal_places")

    @classmethod
    def from_decimal(cls, value: Decimal) -> BalanceResult:
        """Arredonda (half-up) para centavos e monta o resultado.

        Raises:
            ValueError: Se o valor não for finito.
        """
        if not value.is_finite():
            raise ValueError("balance_not_finite")
        amount = value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
        if amount.is_zero():
            amount = amount.copy_abs()
        return cls(amount=amount, formatted=f"{amount:.2f}")

    @property
    def as_float(self) -> float:
        """Valor numérico para o campo `balance` do JSON."""
        return float(self.amount)


def parse_balance(raw: object) -> BalanceResult | None:
    """Converte o `current_balance` da voip.ms em BalanceResult.

    Aceita string numérica ou número JSON. Retorna None para booleanos,
    valores ausentes, texto não numérico, NaN ou infinito.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        text = raw.strip()
    elif isinstance(raw, (int, float)):
        text = str(raw)
    else:
        return None

    try:
        value = Decimal(text)
        if not value.is_finite():
            return None
        # quantize falha quando o valor excede a precisão do contexto
        return BalanceResult.from_decimal(value)
    except InvalidOperation:
        return None


@dataclass(frozen=True, slots=True)
class ErrorOutcome:
    """Falha classificada.

    Attributes:
        kind: Categoria fechada (define o status HTTP)
        message: Texto devolvido ao usuário
        detail: Texto interno para logs, nunca devolvido
        upstream_status: `status` bruto da voip.ms, quando houver
    """

    kind: ErrorKind
    message: str
    detail: str = ""
    upstream_status: str | None = None

    @property
    def http_status(self) -> int:
        return self.kind.http_status

    @classmethod
    def of(
        cls,
        kind: ErrorKind,
        detail: str = "",
        *,
        message: str | None = None,
        upstream_status: str | None = None,
    ) -> ErrorOutcome:
        """Cria outcome usando a mensagem padrão do kind quando omitida."""
        return cls(
            kind=kind,
            message=message or DEFAULT_MESSAGES[kind],
            detail=detail,
            upstream_status=upstream_status,
        )


@dataclass(frozen=True, slots=True)
class BalanceFetchResult:
    """Resultado explícito: saldo OU falha classificada, nunca ambos."""

    balance: BalanceResult | None = None
    error: ErrorOutcome | None = None

    def __post_init__(self) -> None:
        if (self.balance is None) == (self.error is None):
            raise ValueError("BalanceFetchResult exige exatamente um de balance/error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, balance: BalanceResult) -> BalanceFetchResult:
        return cls(balance=balance)

    @classmethod
    def failure(cls, error: ErrorOutcome) -> BalanceFetchResult:
        return cls(error=error)


__all__ = [
    "BalanceFetchResult",
    "BalanceResult",
    "ClientIdentity",
    "ErrorOutcome",
    "parse_balance",
]
