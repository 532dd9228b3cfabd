"""Parse e verificação do bearer token (header Authorization).

Tokens nunca são logados: apenas tamanho e um fingerprint SHA-256
truncado, que não permite recuperar o valor.
"""

from __future__ import annotations

import hashlib
import hmac
import logging

from api.validators.groundwire.limits import BEARER_PREFIX, TOKEN_FINGERPRINT_LENGTH

logger = logging.getLogger(__name__)


def token_fingerprint(token: str) -> str:
    """Prévia não reversível do token para logs."""
    digest = hashlib.sha256(token.encode("utf-8")).hexdigest()
    return digest[:TOKEN_FINGERPRINT_LENGTH]


def parse_bearer_token(auth_header: str | None) -> str | None:
    """Extrai o token de `Authorization: Bearer <token>`.

    Returns:
        Token sem espaços ou None (header ausente, outro esquema, token vazio).
    """
    if not auth_header:
        logger.debug("auth_header_missing")
        return None

    if not auth_header.startswith(BEARER_PREFIX):
        logger.debug(
            "auth_header_not_bearer",
            extra={"scheme": auth_header.split(" ", 1)[0][:20]},
        )
        return None

    token = auth_header[len(BEARER_PREFIX):].strip()
    if not token:
        logger.debug("auth_bearer_token_empty")
        return None

    logger.debug(
        "auth_bearer_token_parsed",
        extra={"token_length": len(token), "token_fingerprint": token_fingerprint(token)},
    )
    return token


def validate_bearer_token(auth_header: str | None, expected_token: str | None) -> bool:
    """Verifica o bearer token contra o token configurado.

    Sem token configurado (modo aberto) toda requisição é aceita.
    A comparação é em tempo constante (hmac.compare_digest).
    """
    if not expected_token:
        logger.debug("auth_not_required")
        return True

    token = parse_bearer_token(auth_header)
    if token is None:
        logger.debug("auth_failed_invalid_header", extra={"has_auth_header": bool(auth_header)})
        return False

    is_valid = hmac.compare_digest(token.encode("utf-8"), expected_token.encode("utf-8"))
    logger.debug(
        "auth_token_checked",
        extra={
            "token_length": len(token),
            "token_fingerprint": token_fingerprint(token),
            "expected_length": len(expected_token),
            "token_match": is_valid,
        },
    )
    return is_valid
