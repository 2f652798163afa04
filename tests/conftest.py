"""Pytest configuration and fixtures shared across all test modules.

Environment variables are set before anything imports ``app.core.config``
so the global settings object is built from known values.
"""

import os

# CRITICAL: Set these before any imports that might load settings
os.environ["APP_ENV"] = "testing"
os.environ.setdefault("LLM_PROVIDER", "openai")
os.environ.setdefault("LLM_MODEL", "gpt-4.1-nano")
os.environ.setdefault("LLM_API_KEY", "test-key-123")
os.environ.setdefault("APP_ADMIN_API_KEY_REQUIRED", "true")
os.environ.setdefault("APP_ADMIN_API_KEYS", "test-admin-key-123,test-admin-key-456")
os.environ.setdefault("APP_RATE_LIMIT_SWEEP_INTERVAL_SECONDS", "0")

from unittest.mock import AsyncMock, Mock

import pytest

from app.adapters.llm.base import AbstractLLMClient
from app.adapters.rate_limit.in_memory import InMemoryFixedWindowRateLimiter


@pytest.fixture
def clock() -> Mock:
    """Controllable time source (UNIX seconds) for rate limiter tests."""
    return Mock(return_value=1000.0)


@pytest.fixture
def limiter(clock: Mock) -> InMemoryFixedWindowRateLimiter:
    """Isolated limiter with the production defaults and a fake clock."""
    return InMemoryFixedWindowRateLimiter(max_requests=100, window_ms=900_000, clock=clock)


@pytest.fixture
def llm() -> AsyncMock:
    """Completion client double; set ``llm.complete`` behavior per test."""
    client = AsyncMock(spec=AbstractLLMClient)
    client.complete.return_value = "Answer from the policy model."
    return client
