"""Testes do cliente voip.ms (getBalance) com transport httpx simulado."""

from __future__ import annotations

import json
import logging
from decimal import Decimal

import httpx
import pytest

from api.connectors.voipms import GET_BALANCE_METHOD, create_voipms_balance_client
from app.constants.balance import ErrorKind
from config.settings import Credentials, VoipMsSettings

CREDENTIALS = Credentials(username="test_user@example.com", password="p@ss&word=1")
SETTINGS = VoipMsSettings(username=CREDENTIALS.username, password=CREDENTIALS.password)


class FakeResolver:
    def __init__(self, address: str = "1.2.3.4") -> None:
        self.address = address
        self.calls = 0

    async def resolve_own_address(self) -> str:
        self.calls += 1
        return self.address


def _client(handler, resolver: FakeResolver | None = None):
    resolver = resolver or FakeResolver()
    transport = httpx.MockTransport(handler)
    return create_voipms_balance_client(SETTINGS, resolver, transport=transport), resolver


def _json_handler(payload: object, status_code: int = 200):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return handler


@pytest.mark.asyncio
async def test_success_returns_two_decimal_balance() -> None:
    client, resolver = _client(
        _json_handler({"status": "success", "balance": {"current_balance": "12.34"}})
    )

    result = await client.fetch_balance(CREDENTIALS)

    assert result.ok is True
    assert result.balance is not None
    assert result.balance.formatted == "12.34"
    assert result.balance.amount == Decimal("12.34")
    assert resolver.calls == 0


@pytest.mark.asyncio
async def test_request_carries_encoded_query_params() -> None:
    captured: dict[str, httpx.Request] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["request"] = request
        return httpx.Response(200, json={"status": "success", "balance": {"current_balance": 1}})

    client, _ = _client(handler)
    await client.fetch_balance(CREDENTIALS)

    request = captured["request"]
    assert request.method == "GET"
    assert request.url.host == "voip.ms"
    assert request.url.path == "/api/v1/rest.php"
    assert request.url.params["content_type"] == "json"
    assert request.url.params["api_username"] == CREDENTIALS.username
    assert request.url.params["api_password"] == CREDENTIALS.password
    assert request.url.params["method"] == GET_BALANCE_METHOD
    assert b"p%40ss%26word%3D1" in request.url.query
    assert request.headers["user-agent"].startswith("groundwire-balance/")


@pytest.mark.asyncio
async def test_password_is_never_logged(caplog: pytest.LogCaptureFixture) -> None:
    client, _ = _client(_json_handler({"status": "success", "balance": {"current_balance": "1"}}))

    with caplog.at_level(logging.DEBUG):
        await client.fetch_balance(CREDENTIALS)

    assert any(r.getMessage() == "voipms_request_started" for r in caplog.records)
    for record in caplog.records:
        for value in record.__dict__.values():
            assert CREDENTIALS.password not in str(value)
            assert "p%40ss%26word%3D1" not in str(value)


@pytest.mark.asyncio
async def test_missing_credentials_is_configuration_error_without_network() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("unexpected network call")

    client, _ = _client(handler)
    result = await client.fetch_balance(None)

    assert result.error is not None
    assert result.error.kind is ErrorKind.CONFIGURATION
    assert result.error.message == "Configuration error"


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [400, 401, 404, 500, 502])
async def test_non_2xx_is_transport_error_with_status(status_code: int) -> None:
    client, _ = _client(_json_handler({"status": "success"}, status_code=status_code))

    result = await client.fetch_balance(CREDENTIALS)

    assert result.error is not None
    assert result.error.kind is ErrorKind.TRANSPORT
    assert result.error.http_status == 503
    assert str(status_code) in result.error.detail
    assert result.error.message == "Service temporarily unavailable"


@pytest.mark.asyncio
@pytest.mark.parametrize("exc_type", [httpx.ConnectError, httpx.ReadTimeout])
async def test_network_failure_is_transport_error(exc_type: type[httpx.TransportError]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_type("boom", request=request)

    client, _ = _client(handler)
    result = await client.fetch_balance(CREDENTIALS)

    assert result.error is not None
    assert result.error.kind is ErrorKind.TRANSPORT


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        b"not json",
        b"",
        json.dumps([1, 2, 3]).encode(),
        json.dumps("success").encode(),
        json.dumps({"balance": {"current_balance": "1.00"}}).encode(),
        json.dumps({"status": ""}).encode(),
        json.dumps({"status": None}).encode(),
    ],
)
async def test_malformed_body_is_rejected_before_status_dispatch(body: bytes) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=body)

    client, resolver = _client(handler)
    result = await client.fetch_balance(CREDENTIALS)

    assert result.error is not None
    assert result.error.kind is ErrorKind.MALFORMED_RESPONSE
    assert result.error.message == "Invalid data received from API"
    assert resolver.calls == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"status": "success"},
        {"status": "success", "balance": None},
        {"status": "success", "balance": "12.34"},
        {"status": "success", "balance": {}},
        {"status": "success", "balance": {"current_balance": "invalid"}},
        {"status": "success", "balance": {"current_balance": "NaN"}},
        {"status": "success", "balance": {"current_balance": True}},
    ],
)
async def test_success_without_usable_balance_is_malformed(payload: dict) -> None:
    client, _ = _client(_json_handler(payload))

    result = await client.fetch_balance(CREDENTIALS)

    assert result.error is not None
    assert result.error.kind is ErrorKind.MALFORMED_RESPONSE
    assert result.error.http_status == 502


@pytest.mark.asyncio
async def test_ip_not_enabled_resolves_source_address() -> None:
    client, resolver = _client(
        _json_handler({"status": "ip_not_enabled", "message": "IP not enabled"}),
        FakeResolver("1.2.3.4"),
    )

    result = await client.fetch_balance(CREDENTIALS)

    assert resolver.calls == 1
    assert result.error is not None
    assert result.error.kind is ErrorKind.UPSTREAM_PERMISSION
    assert result.error.http_status == 403
    assert result.error.message == "IP not permitted by VOIP.MS. Source IP: 1.2.3.4"
    assert result.error.upstream_status == "ip_not_enabled"


@pytest.mark.asyncio
async def test_ip_not_enabled_with_unknown_address() -> None:
    client, _ = _client(_json_handler({"status": "ip_not_enabled"}), FakeResolver("unknown"))

    result = await client.fetch_balance(CREDENTIALS)

    assert result.error is not None
    assert "IP not permitted" in result.error.message
    assert result.error.message.endswith("Source IP: unknown")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("payload", "detail"),
    [
        ({"status": "invalid_credentials", "message": "Bad login"}, "Bad login (invalid_credentials)"),
        ({"status": "missing_method"}, "Unknown error (missing_method)"),
        ({"status": "limit_reached", "message": "  "}, "Unknown error (limit_reached)"),
    ],
)
async def test_other_status_is_generic_upstream_error(payload: dict, detail: str) -> None:
    client, resolver = _client(_json_handler(payload))

    result = await client.fetch_balance(CREDENTIALS)

    assert resolver.calls == 0
    assert result.error is not None
    assert result.error.kind is ErrorKind.UPSTREAM
    assert result.error.http_status == 503
    assert result.error.detail == detail
    assert result.error.upstream_status == payload["status"]
    assert result.error.message == "Service temporarily unavailable"
