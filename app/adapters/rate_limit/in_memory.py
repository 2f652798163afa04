"""In-memory fixed-window rate limiter.

Notes:
- Per-process only: running multiple workers multiplies the effective limit.
- Thread-safe: uses a lock around shared state.
- Windows are anchored at each key's first request, not at wall-clock
  boundaries; an expired window is reset by the next check for that key.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Callable

from app.adapters.rate_limit.base import AbstractRateLimiter, RateLimitResult, RateLimitStats
from app.core.logging import hash_for_log

logger = logging.getLogger(__name__)


@dataclass
class _WindowState:
    count: int
    window_end: int


class InMemoryFixedWindowRateLimiter(AbstractRateLimiter):
    """Rate limiter counting requests per key inside a fixed window.

    Every check counts, including the one that crosses the limit: with
    ``max_requests=100`` calls 1-100 are admitted and call 101 is denied.

    Important:
        This limiter is per-process only. If the API runs with multiple workers
        (e.g., multiple Uvicorn/Gunicorn workers), each worker will enforce its
        own independent limits.
    """

    def __init__(
        self,
        *,
        max_requests: int = 100,
        window_ms: int = 900_000,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the in-memory rate limiter.

        Args:
            max_requests: Maximum number of admitted requests per window.
            window_ms: Length of the window in milliseconds.
            clock: Time source function returning UNIX time in seconds.

        Raises:
            ValueError: If max_requests or window_ms are invalid.
        """
        if max_requests < 1:
            raise ValueError("max_requests must be >= 1")
        if window_ms < 1:
            raise ValueError("window_ms must be >= 1")

        self._max_requests = max_requests
        self._window_ms = window_ms
        self._clock = clock
        self._lock = threading.RLock()
        self._state_by_key: dict[str, _WindowState] = {}

    @property
    def max_requests(self) -> int:
        return self._max_requests

    @property
    def window_ms(self) -> int:
        return self._window_ms

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def _start_window(self, key: str, now_ms: int) -> RateLimitResult:
        state = _WindowState(count=1, window_end=now_ms + self._window_ms)
        self._state_by_key[key] = state
        return RateLimitResult(
            allowed=True,
            limit=self._max_requests,
            remaining=self._max_requests - 1,
            reset_at=state.window_end,
            window_ms=self._window_ms,
        )

    def check_rate_limit(self, key: str) -> RateLimitResult:
        """Count one request for ``key`` and decide whether it is admitted.

        Args:
            key: Opaque identifier for rate limiting (e.g., session id); any
                string, including "", is its own bucket.

        Returns:
            RateLimitResult with allowance decision and metadata.
        """
        with self._lock:
            now_ms = self._now_ms()
            state = self._state_by_key.get(key)

            if state is None or now_ms > state.window_end:
                return self._start_window(key, now_ms)

            state.count += 1

            if state.count > self._max_requests:
                retry_after = math.ceil((state.window_end - now_ms) / 1000)
                return RateLimitResult(
                    allowed=False,
                    limit=self._max_requests,
                    remaining=0,
                    reset_at=state.window_end,
                    window_ms=self._window_ms,
                    retry_after_seconds=retry_after,
                )

            return RateLimitResult(
                allowed=True,
                limit=self._max_requests,
                remaining=self._max_requests - state.count,
                reset_at=state.window_end,
                window_ms=self._window_ms,
            )

    def sweep_expired(self) -> int:
        """Delete every entry whose window ended before now.

        Only bounds memory; expired entries are reset lazily by
        ``check_rate_limit`` anyway.
        """
        with self._lock:
            now_ms = self._now_ms()
            expired_keys = [
                key for key, state in self._state_by_key.items() if state.window_end < now_ms
            ]
            for key in expired_keys:
                del self._state_by_key[key]
            remaining_entries = len(self._state_by_key)

        logger.info(
            "rate_limit.swept",
            extra={"removed": len(expired_keys), "active_clients": remaining_entries},
        )
        return len(expired_keys)

    def reset_key(self, key: str) -> bool:
        with self._lock:
            existed = self._state_by_key.pop(key, None) is not None

        logger.info(
            "rate_limit.reset",
            extra={"key_hash": hash_for_log(key), "existed": existed},
        )
        return existed

    def stats(self) -> RateLimitStats:
        with self._lock:
            return RateLimitStats(
                window_ms=self._window_ms,
                max_requests=self._max_requests,
                active_clients=len(self._state_by_key),
                total_requests=sum(state.count for state in self._state_by_key.values()),
            )
