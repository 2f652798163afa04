"""Pydantic schemas for admin rate limit endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RateLimitStatsResponse(BaseModel):
    """Snapshot of the rate limiter store."""

    window_ms: int = Field(..., description="Length of each counting window in milliseconds.")
    max_requests: int = Field(..., description="Requests admitted per window per client.")
    active_clients: int = Field(..., description="Client entries currently held in memory.")
    total_requests: int = Field(
        ..., description="Requests counted across all held entries (includes denied ones)."
    )


class RateLimitResetResponse(BaseModel):
    client_key: str
    reset: bool = Field(..., description="True if the client had state that was removed.")


class RateLimitSweepResponse(BaseModel):
    removed: int = Field(..., description="Expired entries deleted by this sweep.")
