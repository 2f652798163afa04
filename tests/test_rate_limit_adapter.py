"""Unit tests for the in-memory fixed-window rate limiter."""

from unittest.mock import Mock

import pytest

from app.adapters.rate_limit.in_memory import InMemoryFixedWindowRateLimiter


def test_first_request_starts_window() -> None:
    clock = Mock(return_value=1000.0)
    limiter = InMemoryFixedWindowRateLimiter(max_requests=100, window_ms=900_000, clock=clock)

    result = limiter.check_rate_limit("A")

    assert result.allowed is True
    assert result.remaining == 99
    assert result.limit == 100
    assert result.reset_at == 1_000_000 + 900_000
    assert result.retry_after_seconds is None


def test_remaining_strictly_decreases_to_zero(limiter: InMemoryFixedWindowRateLimiter) -> None:
    remaining = [limiter.check_rate_limit("A").remaining for _ in range(100)]

    assert remaining == list(range(99, -1, -1))


def test_hundred_and_first_request_is_denied(limiter: InMemoryFixedWindowRateLimiter) -> None:
    results = [limiter.check_rate_limit("A") for _ in range(101)]

    assert all(r.allowed for r in results[:100])
    denied = results[100]
    assert denied.allowed is False
    assert denied.remaining == 0
    assert denied.retry_after_seconds == 900


def test_denied_requests_are_still_counted(clock: Mock) -> None:
    limiter = InMemoryFixedWindowRateLimiter(max_requests=2, window_ms=60_000, clock=clock)

    for _ in range(5):
        limiter.check_rate_limit("k")

    assert limiter.stats().total_requests == 5


def test_retry_after_rounds_up_remaining_window(clock: Mock) -> None:
    limiter = InMemoryFixedWindowRateLimiter(max_requests=1, window_ms=10_000, clock=clock)

    assert limiter.check_rate_limit("k").allowed is True

    clock.return_value = 1003.2
    blocked = limiter.check_rate_limit("k")

    assert blocked.allowed is False
    # 6.8 seconds left in the window
    assert blocked.retry_after_seconds == 7


def test_window_end_is_still_inside_window(clock: Mock) -> None:
    limiter = InMemoryFixedWindowRateLimiter(max_requests=1, window_ms=10_000, clock=clock)
    limiter.check_rate_limit("k")

    clock.return_value = 1010.0
    blocked = limiter.check_rate_limit("k")

    assert blocked.allowed is False
    assert blocked.retry_after_seconds == 0


def test_expired_window_behaves_like_fresh_key(clock: Mock) -> None:
    limiter = InMemoryFixedWindowRateLimiter(max_requests=2, window_ms=10_000, clock=clock)
    for _ in range(3):
        limiter.check_rate_limit("k")

    clock.return_value = 1010.5
    result = limiter.check_rate_limit("k")

    assert result.allowed is True
    assert result.remaining == 1
    assert result.reset_at == 1_010_500 + 10_000
    assert limiter.stats().total_requests == 1


def test_isolated_by_key(clock: Mock) -> None:
    limiter = InMemoryFixedWindowRateLimiter(max_requests=100, window_ms=900_000, clock=clock)

    for _ in range(101):
        limiter.check_rate_limit("A")

    assert limiter.check_rate_limit("A").allowed is False
    result_b = limiter.check_rate_limit("B")
    assert result_b.allowed is True
    assert result_b.remaining == 99


def test_reset_key_behaves_like_fresh_key(limiter: InMemoryFixedWindowRateLimiter, clock: Mock) -> None:
    for _ in range(101):
        limiter.check_rate_limit("A")

    clock.return_value = 1100.0
    assert limiter.reset_key("A") is True

    result = limiter.check_rate_limit("A")
    assert result.allowed is True
    assert result.remaining == 99
    assert result.reset_at == 1_100_000 + 900_000


def test_reset_unknown_key_returns_false(limiter: InMemoryFixedWindowRateLimiter) -> None:
    assert limiter.reset_key("never-seen") is False


def test_sweep_removes_only_expired_entries(clock: Mock) -> None:
    limiter = InMemoryFixedWindowRateLimiter(max_requests=5, window_ms=10_000, clock=clock)
    limiter.check_rate_limit("old")

    clock.return_value = 1008.0
    limiter.check_rate_limit("new")

    clock.return_value = 1012.0
    removed = limiter.sweep_expired()

    assert removed == 1
    stats = limiter.stats()
    assert stats.active_clients == 1
    assert limiter.reset_key("new") is True
    assert limiter.reset_key("old") is False


def test_sweep_keeps_entry_ending_exactly_now(clock: Mock) -> None:
    limiter = InMemoryFixedWindowRateLimiter(max_requests=5, window_ms=10_000, clock=clock)
    limiter.check_rate_limit("k")

    clock.return_value = 1010.0

    assert limiter.sweep_expired() == 0
    assert limiter.stats().active_clients == 1


def test_sweep_on_empty_store(limiter: InMemoryFixedWindowRateLimiter) -> None:
    assert limiter.sweep_expired() == 0


def test_stats_reports_configuration_and_usage(limiter: InMemoryFixedWindowRateLimiter) -> None:
    limiter.check_rate_limit("A")
    limiter.check_rate_limit("A")
    limiter.check_rate_limit("B")

    stats = limiter.stats()

    assert stats.window_ms == 900_000
    assert stats.max_requests == 100
    assert stats.active_clients == 2
    assert stats.total_requests == 3


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_requests": 0, "window_ms": 60_000},
        {"max_requests": 1, "window_ms": 0},
    ],
)
def test_invalid_constructor_args(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        InMemoryFixedWindowRateLimiter(**kwargs)


def test_empty_key_is_an_ordinary_bucket(limiter: InMemoryFixedWindowRateLimiter) -> None:
    first = limiter.check_rate_limit("")
    second = limiter.check_rate_limit("")

    assert first.allowed is True
    assert first.remaining == 99
    assert second.remaining == 98
    assert limiter.stats().total_requests == 2
    assert limiter.check_rate_limit("A").remaining == 99


def test_result_reports_window_length(limiter: InMemoryFixedWindowRateLimiter) -> None:
    assert limiter.check_rate_limit("A").window_ms == 900_000
