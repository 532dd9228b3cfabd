"""Protocolo do gate de entrada (assinatura do cliente + bearer token)."""

from __future__ import annotations

from typing import Protocol


class RequestGateProtocol(Protocol):
    """Validações feitas antes de qualquer chamada externa."""

    def check_signature(self, user_agent: str | None) -> bool: ...

    def check_credential(self, authorization: str | None, expected_token: str | None) -> bool: ...

    def admit(
        self,
        user_agent: str | None,
        authorization: str | None,
        expected_token: str | None,
    ) -> bool: ...
