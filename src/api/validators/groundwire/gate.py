"""Gate de entrada do Groundwire: assinatura do cliente + bearer token."""

from __future__ import annotations

import logging

from api.validators.groundwire.bearer import validate_bearer_token
from api.validators.groundwire.user_agent import validate_user_agent

logger = logging.getLogger(__name__)


class GroundwireRequestGate:
    """Implementa RequestGateProtocol sem efeitos além de logs de diagnóstico."""

    def check_signature(self, user_agent: str | None) -> bool:
        valid = validate_user_agent(user_agent)
        logger.debug(
            "gate_signature_checked",
            extra={
                "valid": valid,
                "user_agent_length": len(user_agent) if user_agent else 0,
            },
        )
        return valid

    def check_credential(self, authorization: str | None, expected_token: str | None) -> bool:
        return validate_bearer_token(authorization, expected_token)

    def admit(
        self,
        user_agent: str | None,
        authorization: str | None,
        expected_token: str | None,
    ) -> bool:
        """Assinatura válida e, se houver token configurado, credencial válida."""
        if not self.check_signature(user_agent):
            return False
        return self.check_credential(authorization, expected_token)
