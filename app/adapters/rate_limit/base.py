"""Rate limiter interfaces.

Callers depend on this abstraction (not the concrete implementation) so the
storage backend can be swapped later (e.g., Redis) with minimal changes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class RateLimitResult:
    """Result of a rate limit admission check.

    Attributes:
        allowed: Whether the request is allowed to proceed.
        limit: Max requests per window.
        remaining: Remaining requests in the current window (0 when blocked).
        reset_at: UNIX epoch milliseconds when the current window ends.
        window_ms: Length of the counting window in milliseconds.
        retry_after_seconds: Suggested wait time in seconds when blocked.
    """

    allowed: bool
    limit: int
    remaining: int
    reset_at: int
    window_ms: int
    retry_after_seconds: int | None = None


@dataclass(frozen=True)
class RateLimitStats:
    """Point-in-time view of the limiter store."""

    window_ms: int
    max_requests: int
    active_clients: int
    total_requests: int


class AbstractRateLimiter(ABC):
    """Interface for rate limiters."""

    @abstractmethod
    def check_rate_limit(self, key: str) -> RateLimitResult:
        """Count one request for ``key`` and decide whether it is admitted.

        Args:
            key: Unique client identifier (e.g., session id, IP address).

        Returns:
            RateLimitResult describing whether it was allowed.
        """
        raise NotImplementedError

    @abstractmethod
    def sweep_expired(self) -> int:
        """Delete entries whose window has already ended.

        Returns:
            Number of entries removed.
        """
        raise NotImplementedError

    @abstractmethod
    def reset_key(self, key: str) -> bool:
        """Forget all state for ``key``.

        Returns:
            True if an entry existed.
        """
        raise NotImplementedError

    @abstractmethod
    def stats(self) -> RateLimitStats:
        """Return lightweight store metrics."""
        raise NotImplementedError
