"""Validação da assinatura do cliente (header User-Agent)."""

from __future__ import annotations

from api.validators.groundwire.limits import (
    GROUNDWIRE_MARKER,
    MAX_USER_AGENT_LENGTH,
    USER_AGENT_PATTERN,
)


def validate_user_agent(user_agent: str | None) -> bool:
    """Valida o User-Agent declarado pelo softphone.

    Regras:
    - presente e com menos de 200 caracteres
    - apenas letras, dígitos, espaço e `./-_();`
    - contém o marcador `Groundwire/`

    Returns:
        True se a assinatura for aceita.
    """
    if not user_agent:
        return False

    if len(user_agent) >= MAX_USER_AGENT_LENGTH:
        return False

    if USER_AGENT_PATTERN.fullmatch(user_agent) is None:
        return False

    return GROUNDWIRE_MARKER in user_agent
