"""Validação e leitura do JSON devolvido pela voip.ms."""

from __future__ import annotations

from typing import Any


def read_status(data: Any) -> str | None:
    """Gate único de validação da resposta.

    A resposta só é utilizável se for um objeto JSON com `status`
    string não vazia. Retorna o status ou None (resposta malformada).
    """
    if not isinstance(data, dict):
        return None
    status = data.get("status")
    if not isinstance(status, str) or not status:
        return None
    return status


def read_current_balance(data: dict[str, Any]) -> object | None:
    """Extrai `balance.current_balance` (bruto) ou None se ausente."""
    balance = data.get("balance")
    if not isinstance(balance, dict):
        return None
    return balance.get("current_balance")


def read_message(data: dict[str, Any]) -> str:
    """Mensagem legível do upstream, com fallback genérico."""
    message = data.get("message")
    if isinstance(message, str) and message.strip():
        return message.strip()
    return "Unknown error"
