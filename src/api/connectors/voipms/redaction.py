"""Helpers para logar chamadas à voip.ms sem expor a senha."""

from __future__ import annotations

from typing import Any

import httpx

REDACTED = "***"
_SECRET_PARAMS = frozenset({"api_password"})


def redact_params(params: dict[str, Any]) -> dict[str, Any]:
    """Cópia dos query params com segredos mascarados."""
    return {key: REDACTED if key in _SECRET_PARAMS else value for key, value in params.items()}


def redacted_url(url: str, params: dict[str, Any]) -> str:
    """URL final (com encoding) como seria enviada, mas sem a senha."""
    return str(httpx.URL(url, params=redact_params(params)))
