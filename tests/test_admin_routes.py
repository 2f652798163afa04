"""Tests for the admin rate limit endpoints."""

from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from app.adapters.rate_limit.in_memory import InMemoryFixedWindowRateLimiter
from app.core.app_factory import create_app

ADMIN_HEADERS = {"X-API-Key": "test-admin-key-123"}


@pytest.fixture
def clock() -> Mock:
    return Mock(return_value=1000.0)


@pytest.fixture
def small_limiter(clock: Mock) -> InMemoryFixedWindowRateLimiter:
    return InMemoryFixedWindowRateLimiter(max_requests=1, window_ms=10_000, clock=clock)


@pytest.fixture
def client(small_limiter: InMemoryFixedWindowRateLimiter, llm: AsyncMock) -> TestClient:
    return TestClient(create_app(rate_limiter=small_limiter, llm_client=llm))


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("get", "/v1/admin/rate-limit/stats"),
        ("post", "/v1/admin/rate-limit/sweep"),
        ("delete", "/v1/admin/rate-limit/session:alice"),
    ],
)
def test_admin_endpoints_require_key(client: TestClient, method: str, path: str) -> None:
    missing = client.request(method, path)
    wrong = client.request(method, path, headers={"X-API-Key": "nope"})

    assert missing.status_code == 403
    assert wrong.status_code == 403


def test_stats(client: TestClient) -> None:
    client.post("/v1/chat", json={"prompt": "q", "client_id": "alice"})
    client.post("/v1/chat", json={"prompt": "q", "client_id": "alice"})

    response = client.get("/v1/admin/rate-limit/stats", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    assert response.json() == {
        "window_ms": 10_000,
        "max_requests": 1,
        "active_clients": 1,
        "total_requests": 2,
    }


def test_reset_unthrottles_client(client: TestClient) -> None:
    for _ in range(2):
        client.post("/v1/chat", json={"prompt": "q", "client_id": "alice"})
    assert client.post("/v1/chat", json={"prompt": "q", "client_id": "alice"}).json()["source"] == "rate_limited"

    response = client.delete("/v1/admin/rate-limit/session:alice", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    assert response.json() == {"client_key": "session:alice", "reset": True}
    assert client.post("/v1/chat", json={"prompt": "q", "client_id": "alice"}).json()["source"] == "llm"


def test_reset_unknown_client(client: TestClient) -> None:
    response = client.delete("/v1/admin/rate-limit/ip:198.51.100.2", headers=ADMIN_HEADERS)

    assert response.json() == {"client_key": "ip:198.51.100.2", "reset": False}


def test_sweep_removes_expired(client: TestClient, clock: Mock) -> None:
    client.post("/v1/chat", json={"prompt": "q", "client_id": "alice"})
    clock.return_value = 1011.0

    response = client.post("/v1/admin/rate-limit/sweep", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    assert response.json() == {"removed": 1}


def test_openapi_marks_only_admin_routes_secured(client: TestClient) -> None:
    schema = client.get("/openapi.json").json()

    assert "AdminApiKey" in schema["components"]["securitySchemes"]
    assert schema["paths"]["/v1/admin/rate-limit/stats"]["get"]["security"] == [{"AdminApiKey": []}]
    assert "security" not in schema["paths"]["/v1/chat"]["post"]
