"""Connector da API REST da voip.ms."""

from .balance_client import (
    GET_BALANCE_METHOD,
    VoipMsBalanceClient,
    create_voipms_balance_client,
)

__all__ = [
    "GET_BALANCE_METHOD",
    "VoipMsBalanceClient",
    "create_voipms_balance_client",
]
