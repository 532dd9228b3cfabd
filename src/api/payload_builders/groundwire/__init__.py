"""Payloads de resposta para o softphone Groundwire."""

from api.payload_builders.groundwire.models import BalanceWireResponse, ErrorWireResponse
from api.payload_builders.groundwire.response import (
    NO_CACHE_HEADERS,
    GroundwireResponseBuilder,
    utc_timestamp,
)

__all__ = [
    "NO_CACHE_HEADERS",
    "BalanceWireResponse",
    "ErrorWireResponse",
    "GroundwireResponseBuilder",
    "utc_timestamp",
]
