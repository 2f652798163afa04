from __future__ import annotations

from fastapi import APIRouter, Depends

from app.adapters.rate_limit.base import AbstractRateLimiter
from app.core.auth import verify_admin_key
from app.core.rate_limit import get_rate_limiter
from app.schemas.admin import (
    RateLimitResetResponse,
    RateLimitStatsResponse,
    RateLimitSweepResponse,
)

router = APIRouter(
    prefix="/admin/rate-limit",
    tags=["Admin"],
    dependencies=[Depends(verify_admin_key)],
)


@router.get("/stats", response_model=RateLimitStatsResponse)
def rate_limit_stats(
    limiter: AbstractRateLimiter = Depends(get_rate_limiter),
) -> RateLimitStatsResponse:
    """Report window configuration and current store size."""

    stats = limiter.stats()
    return RateLimitStatsResponse(
        window_ms=stats.window_ms,
        max_requests=stats.max_requests,
        active_clients=stats.active_clients,
        total_requests=stats.total_requests,
    )


@router.delete("/{client_key:path}", response_model=RateLimitResetResponse)
def reset_client(
    client_key: str,
    limiter: AbstractRateLimiter = Depends(get_rate_limiter),
) -> RateLimitResetResponse:
    """Un-throttle a client by dropping its counter.

    ``client_key`` is the namespaced limiter key, e.g. ``session:abc`` or
    ``ip:203.0.113.7``.
    """

    return RateLimitResetResponse(client_key=client_key, reset=limiter.reset_key(client_key))


@router.post("/sweep", response_model=RateLimitSweepResponse)
def sweep_expired(
    limiter: AbstractRateLimiter = Depends(get_rate_limiter),
) -> RateLimitSweepResponse:
    """Delete expired entries now instead of waiting for the background sweep."""

    return RateLimitSweepResponse(removed=limiter.sweep_expired())
