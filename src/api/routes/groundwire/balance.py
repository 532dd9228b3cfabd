"""Endpoint consultado pelo Balance Checker do Groundwire.

Aceita qualquer método HTTP em qualquer path (exceto /health); nenhum
corpo é lido. Relevantes apenas os headers `User-Agent` (assinatura do
cliente) e `Authorization` (bearer token opcional).

Fluxo:
1. correlation_id a partir de X-Correlation-ID (ou novo UUID)
2. CheckBalanceUseCase (gate → configuração → voip.ms)
3. GroundwireResponseBuilder (sucesso 200 ou envelope de erro)
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.payload_builders.groundwire import GroundwireResponseBuilder
from app.bootstrap.dependencies import create_check_balance_use_case
from app.constants.balance import ErrorKind
from app.domain.balance import BalanceFetchResult, ClientIdentity, ErrorOutcome
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

router = APIRouter()

BALANCE_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

_response_builder = GroundwireResponseBuilder()


@router.api_route("/{path:path}", methods=BALANCE_METHODS, response_model=None)
async def check_balance(request: Request) -> JSONResponse:
    """Consulta o saldo da conta e responde no formato do Groundwire."""
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        identity = ClientIdentity(
            user_agent=request.headers.get("user-agent"),
            authorization=request.headers.get("authorization"),
        )
        logger.debug(
            "balance_request_received",
            extra={
                "method": request.method,
                "path": request.url.path,
                "user_agent": identity.user_agent,
                "has_auth_header": identity.authorization is not None,
            },
        )

        use_case = create_check_balance_use_case()
        try:
            result = await use_case.execute(identity)
        except Exception:
            logger.exception("balance_request_failed", extra={"error_kind": ErrorKind.TRANSPORT})
            response = _response_builder.failure(
                ErrorOutcome.of(ErrorKind.TRANSPORT, "unexpected_error")
            )
        else:
            response = _build_response(result, use_case.currency)

        response.headers["X-Correlation-ID"] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)


def _build_response(result: BalanceFetchResult, currency: str) -> JSONResponse:
    if result.error is not None:
        logger.info(
            "balance_request_completed",
            extra={
                "status_code": result.error.http_status,
                "error_kind": result.error.kind,
                "upstream_status": result.error.upstream_status,
                "detail": result.error.detail,
            },
        )
        return _response_builder.failure(result.error)

    logger.info(
        "balance_request_completed",
        extra={"status_code": 200, "currency": currency},
    )
    return _response_builder.success(result.balance, currency)
