"""Métricas via structured logging.

As métricas saem como logs `metric_*` e são agregadas fora do serviço
(ex: Cloud Logging, CloudWatch Insights).

Uso:
    start = time.perf_counter()
    result = await client.fetch_balance(credentials)
    record_latency("voipms", "get_balance", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
    outcome: str | None = None,
) -> None:
    """Registra latência de uma chamada externa.

    Args:
        component: Nome do componente (ex: "voipms")
        operation: Nome da operação (ex: "get_balance")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
        outcome: "ok" ou o ErrorKind da falha
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
            "outcome": outcome,
        },
    )
