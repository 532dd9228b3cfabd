"""Contrato JSON esperado pelo Balance Checker do Groundwire."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class BalanceWireResponse(BaseModel):
    """Resposta de sucesso (HTTP 200)."""

    model_config = ConfigDict(populate_by_name=True)

    balance_string: str = Field(..., alias="balanceString", description="'<CUR> <NN.NN>'")
    balance: float = Field(..., description="Saldo numérico.")
    currency: str = Field(..., description="Código da moeda.")
    timestamp: str = Field(..., description="ISO-8601 UTC do momento da formatação.")


class ErrorWireResponse(BaseModel):
    """Envelope de erro (status HTTP conforme ErrorKind)."""

    error: bool = True
    message: str
    timestamp: str
