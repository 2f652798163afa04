"""Tests for HTTP-side rate limit wiring: client keys, limiter factory, sweeper."""

import asyncio
from unittest.mock import Mock

import pytest
from starlette.requests import Request

from app.adapters.rate_limit.in_memory import InMemoryFixedWindowRateLimiter
from app.core.config import AppSettings
from app.core.rate_limit import (
    UNKNOWN_CLIENT,
    build_client_key,
    build_rate_limiter,
    get_client_ip,
    sweep_periodically,
)


def _request(headers: dict[str, str] | None = None, client: tuple[str, int] | None = ("10.0.0.9", 5000)) -> Request:
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/v1/chat",
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
        "client": client,
    }
    return Request(scope)


@pytest.mark.parametrize(
    ("headers", "client", "expected"),
    [
        ({"X-Forwarded-For": "203.0.113.7, 10.0.0.1"}, ("10.0.0.9", 1), "203.0.113.7"),
        ({"X-Forwarded-For": " , 10.0.0.1", "X-Real-IP": "198.51.100.2"}, ("10.0.0.9", 1), "198.51.100.2"),
        ({"X-Real-IP": " 198.51.100.2 "}, ("10.0.0.9", 1), "198.51.100.2"),
        ({}, ("10.0.0.9", 1), "10.0.0.9"),
        ({}, None, UNKNOWN_CLIENT),
    ],
)
def test_get_client_ip(headers, client, expected) -> None:
    assert get_client_ip(_request(headers, client)) == expected


def test_client_id_wins_over_address() -> None:
    request = _request({"X-Forwarded-For": "203.0.113.7"})

    assert build_client_key(request, " alice ") == "session:alice"


@pytest.mark.parametrize("client_id", [None, "", "   "])
def test_blank_client_id_uses_address(client_id) -> None:
    assert build_client_key(_request(), client_id) == "ip:10.0.0.9"


def test_build_rate_limiter_uses_settings() -> None:
    limiter = build_rate_limiter(
        AppSettings(rate_limit_max_requests=5, rate_limit_window_ms=60_000)
    )

    assert isinstance(limiter, InMemoryFixedWindowRateLimiter)
    assert limiter.max_requests == 5
    assert limiter.window_ms == 60_000


@pytest.mark.asyncio
async def test_sweeper_runs_until_cancelled() -> None:
    calls = []

    def sweep() -> int:
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("boom")
        return 0

    limiter = Mock()
    limiter.sweep_expired.side_effect = sweep

    task = asyncio.create_task(sweep_periodically(limiter, 0.01))
    await asyncio.sleep(0.1)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    # keeps sweeping after a failed sweep
    assert limiter.sweep_expired.call_count >= 2
