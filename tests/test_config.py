"""Tests for environment-driven settings."""

import pytest

from app.core.config import DEFAULT_POLICY_CONTEXT, AppSettings, LLMSettings


@pytest.fixture(autouse=True)
def _clean_rate_limit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "APP_RATE_LIMIT_MAX_REQUESTS",
        "RATE_LIMIT_MAX_REQUESTS",
        "APP_RATE_LIMIT_WINDOW_MS",
        "APP_POLICY_CONTEXT",
        "APP_POLICY_CONTEXT_FILE",
    ):
        monkeypatch.delenv(name, raising=False)


def test_rate_limit_defaults() -> None:
    cfg = AppSettings()

    assert cfg.rate_limit_max_requests == 100
    assert cfg.rate_limit_window_ms == 900_000


def test_max_requests_from_unprefixed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RATE_LIMIT_MAX_REQUESTS", "25")

    assert AppSettings().rate_limit_max_requests == 25


def test_prefixed_env_wins_over_unprefixed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RATE_LIMIT_MAX_REQUESTS", "25")
    monkeypatch.setenv("APP_RATE_LIMIT_MAX_REQUESTS", "7")

    assert AppSettings().rate_limit_max_requests == 7


def test_window_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_RATE_LIMIT_WINDOW_MS", "60000")

    assert AppSettings().rate_limit_window_ms == 60_000


def test_policy_context_file_wins(tmp_path) -> None:
    context_file = tmp_path / "policy.txt"
    context_file.write_text("  Full EV policy text\n", encoding="utf-8")

    cfg = AppSettings(policy_context_file=str(context_file))

    assert cfg.load_policy_context() == "Full EV policy text"


def test_missing_policy_context_file_uses_inline(tmp_path) -> None:
    cfg = AppSettings(policy_context_file=str(tmp_path / "absent.txt"))

    assert cfg.load_policy_context() == DEFAULT_POLICY_CONTEXT


def test_llm_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LLM_MODEL", "LLM_TEMPERATURE", "LLM_MAX_OUTPUT_TOKENS"):
        monkeypatch.delenv(name, raising=False)

    cfg = LLMSettings()

    assert cfg.model == "gpt-4.1-nano"
    assert cfg.temperature == 0.2
    assert cfg.max_output_tokens == 2000
