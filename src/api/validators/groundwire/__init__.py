"""Validadores de entrada do softphone Groundwire.

Uso:
    from api.validators.groundwire import GroundwireRequestGate

    gate = GroundwireRequestGate()
    gate.admit(user_agent, authorization, expected_token)
"""

from api.validators.groundwire.bearer import (
    parse_bearer_token,
    token_fingerprint,
    validate_bearer_token,
)
from api.validators.groundwire.gate import GroundwireRequestGate
from api.validators.groundwire.limits import GROUNDWIRE_MARKER, MAX_USER_AGENT_LENGTH
from api.validators.groundwire.user_agent import validate_user_agent

__all__ = [
    "GROUNDWIRE_MARKER",
    "MAX_USER_AGENT_LENGTH",
    "GroundwireRequestGate",
    "parse_bearer_token",
    "token_fingerprint",
    "validate_bearer_token",
    "validate_user_agent",
]
