"""Construção das respostas HTTP para o Groundwire.

Converte saldo ou ErrorOutcome no formato do softphone.
Toda resposta sai marcada como não cacheável.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import status
from fastapi.responses import JSONResponse

from api.payload_builders.groundwire.models import BalanceWireResponse, ErrorWireResponse

if TYPE_CHECKING:
    from app.domain.balance import BalanceResult, ErrorOutcome

NO_CACHE_HEADERS = {"Cache-Control": "no-cache, no-store, must-revalidate"}


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 em UTC com milissegundos e sufixo Z."""
    moment = (now or datetime.now(UTC)).astimezone(UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class GroundwireResponseBuilder:
    """Formata respostas de sucesso e de erro."""

    def success(
        self,
        balance: BalanceResult,
        currency: str,
        now: datetime | None = None,
    ) -> JSONResponse:
        body = BalanceWireResponse(
            balance_string=f"{currency} {balance.formatted}",
            balance=balance.as_float,
            currency=currency,
            timestamp=utc_timestamp(now),
        )
        return JSONResponse(
            content=body.model_dump(by_alias=True),
            status_code=status.HTTP_200_OK,
            headers=NO_CACHE_HEADERS,
        )

    def failure(self, outcome: ErrorOutcome, now: datetime | None = None) -> JSONResponse:
        body = ErrorWireResponse(message=outcome.message, timestamp=utc_timestamp(now))
        return JSONResponse(
            content=body.model_dump(),
            status_code=outcome.http_status,
            headers=NO_CACHE_HEADERS,
        )
