"""Testes do builder de respostas do Groundwire."""

from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from api.payload_builders.groundwire import (
    NO_CACHE_HEADERS,
    BalanceWireResponse,
    GroundwireResponseBuilder,
    utc_timestamp,
)
from app.constants.balance import ErrorKind
from app.domain.balance import BalanceResult, ErrorOutcome

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)


def _body(response) -> dict:
    return json.loads(response.body)


class TestUtcTimestamp:
    def test_millisecond_precision_with_z_suffix(self) -> None:
        assert utc_timestamp(FIXED_NOW) == "2024-01-02T03:04:05.678Z"

    def test_converts_other_timezones_to_utc(self) -> None:
        local = datetime(2024, 1, 2, 0, 4, 5, tzinfo=timezone(timedelta(hours=-3)))
        assert utc_timestamp(local) == "2024-01-02T03:04:05.000Z"

    def test_defaults_to_now(self) -> None:
        assert utc_timestamp().endswith("Z")


class TestSuccess:
    def test_balance_body_and_headers(self) -> None:
        balance = BalanceResult.from_decimal(Decimal("15.67"))

        response = GroundwireResponseBuilder().success(balance, "CAD", now=FIXED_NOW)

        assert response.status_code == 200
        assert response.headers["cache-control"] == NO_CACHE_HEADERS["Cache-Control"]
        assert response.headers["content-type"] == "application/json"
        assert _body(response) == {
            "balanceString": "CAD 15.67",
            "balance": 15.67,
            "currency": "CAD",
            "timestamp": "2024-01-02T03:04:05.678Z",
        }

    @pytest.mark.parametrize(
        ("raw", "balance_string", "number"),
        [
            ("0", "USD 0.00", 0.0),
            ("-4.5", "USD -4.50", -4.5),
            ("100", "USD 100.00", 100.0),
        ],
    )
    def test_balance_string_always_has_two_decimals(
        self, raw: str, balance_string: str, number: float
    ) -> None:
        balance = BalanceResult.from_decimal(Decimal(raw))

        body = _body(GroundwireResponseBuilder().success(balance, "USD"))

        assert body["balanceString"] == balance_string
        assert body["balance"] == number

    def test_wire_model_accepts_alias(self) -> None:
        model = BalanceWireResponse.model_validate(
            {"balanceString": "USD 1.00", "balance": 1.0, "currency": "USD", "timestamp": "t"}
        )
        assert model.balance_string == "USD 1.00"


class TestFailure:
    @pytest.mark.parametrize(
        ("kind", "status_code"),
        [
            (ErrorKind.AUTHENTICATION, 401),
            (ErrorKind.CONFIGURATION, 500),
            (ErrorKind.UPSTREAM_PERMISSION, 403),
            (ErrorKind.MALFORMED_RESPONSE, 502),
            (ErrorKind.TRANSPORT, 503),
            (ErrorKind.UPSTREAM, 503),
        ],
    )
    def test_status_follows_error_kind(self, kind: ErrorKind, status_code: int) -> None:
        outcome = ErrorOutcome.of(kind, "internal detail")

        response = GroundwireResponseBuilder().failure(outcome, now=FIXED_NOW)

        assert response.status_code == status_code
        assert response.headers["cache-control"] == "no-cache, no-store, must-revalidate"
        body = _body(response)
        assert body == {
            "error": True,
            "message": outcome.message,
            "timestamp": "2024-01-02T03:04:05.678Z",
        }

    def test_detail_is_not_exposed(self) -> None:
        outcome = ErrorOutcome.of(ErrorKind.UPSTREAM, "Bad login (invalid_credentials)")

        body = _body(GroundwireResponseBuilder().failure(outcome))

        assert "invalid_credentials" not in json.dumps(body)
        assert body["message"] == "Service temporarily unavailable"
