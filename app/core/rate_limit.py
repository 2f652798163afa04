"""Rate limiting wiring for the HTTP layer.

The limiter itself is built once per application by the app factory and held
on ``app.state``; this module only exposes it to routes and derives the client
key for each request.

Client key strategy:
- An explicit client/session id from the request body wins.
- Otherwise the first X-Forwarded-For hop, then X-Real-IP, then the socket
  peer address.
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import Request

from app.adapters.rate_limit.base import AbstractRateLimiter
from app.adapters.rate_limit.in_memory import InMemoryFixedWindowRateLimiter
from app.core.config import AppSettings

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT = "unknown-client"


def build_rate_limiter(app_settings: AppSettings) -> AbstractRateLimiter:
    """Create the limiter configured by ``app_settings``."""

    return InMemoryFixedWindowRateLimiter(
        max_requests=app_settings.rate_limit_max_requests,
        window_ms=app_settings.rate_limit_window_ms,
    )


def get_rate_limiter(request: Request) -> AbstractRateLimiter:
    """FastAPI dependency returning the application's limiter."""

    return request.app.state.rate_limiter


def get_client_ip(request: Request) -> str:
    """Best-effort client address, honoring proxy headers."""

    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        first_hop = forwarded_for.split(",")[0].strip()
        if first_hop:
            return first_hop

    real_ip = request.headers.get("X-Real-IP")
    if real_ip and real_ip.strip():
        return real_ip.strip()

    if request.client and request.client.host:
        return request.client.host

    return UNKNOWN_CLIENT


def build_client_key(request: Request, client_id: str | None = None) -> str:
    """Build the namespaced limiter key for the current request.

    Args:
        request: FastAPI request.
        client_id: Optional caller-supplied session id.

    Returns:
        str: ``session:<id>`` or ``ip:<address>``.
    """

    if client_id and client_id.strip():
        return f"session:{client_id.strip()}"
    return f"ip:{get_client_ip(request)}"


async def sweep_periodically(limiter: AbstractRateLimiter, interval_seconds: float) -> None:
    """Run ``limiter.sweep_expired`` forever, every ``interval_seconds``.

    Meant to run as a background task for the lifetime of the app; it stops
    when cancelled.
    """

    while True:
        await asyncio.sleep(interval_seconds)
        try:
            limiter.sweep_expired()
        except Exception:
            logger.exception("rate_limit.sweep_failed")
