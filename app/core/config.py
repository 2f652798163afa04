"""Application configuration using Pydantic Settings.

Configuration is environment-aware:
- APP_ENV determines which .env file to load
- Supports: development, testing, staging, production
- Each environment has its own .env.{environment} file
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Determine which environment to load (default: development)
APP_ENV = os.getenv("APP_ENV", "development")

# Project root (so .env resolution doesn't depend on current working directory)
PROJECT_ROOT = Path(__file__).resolve().parents[2]

ENV_FILE_MAP = {
    "development": ".env.development",
    "testing": ".env.testing",
    "staging": ".env.staging",
    "production": ".env.production",
}

_env_filename = ENV_FILE_MAP.get(APP_ENV, ".env.development")
_env_path = PROJECT_ROOT / _env_filename

# Only load from file if it exists (production might inject via env vars only)
_env_file = str(_env_path) if _env_path.is_file() else None


# Nested BaseSettings don't inherit env_file, so populate os.environ up front
if _env_file:
    from dotenv import load_dotenv
    load_dotenv(_env_file, override=True)


DEFAULT_POLICY_CONTEXT = (
    "Jharkhand Electric Vehicle Policy 2022 - Comprehensive Knowledge Base "
    "(See fallback responses for full details)"
)


def _build_llm_settings() -> "LLMSettings":
    """Build LLM settings from environment."""

    return LLMSettings()  # type: ignore[call-arg]


def _build_app_settings() -> "AppSettings":
    """Build app settings from environment."""

    return AppSettings()  # type: ignore[call-arg]


def _build_log_settings() -> "LogSettings":
    return LogSettings()  # type: ignore[call-arg]


class LLMSettings(BaseSettings):
    """Completion provider configuration.

    A missing API key is not a startup error: the chat endpoint keeps
    answering from the fallback templates until a key is configured.
    """

    provider: str = Field(
        "openai",
        description="LLM provider name (currently: openai)",
    )
    model: str = Field(
        "gpt-4.1-nano",
        description="Model name used for chat completions",
    )
    api_key: str | None = Field(
        None,
        description="API key for the provider",
    )
    base_url: str | None = Field(
        None,
        description="Custom API endpoint (OpenAI-compatible gateways)",
    )
    timeout_seconds: float = Field(
        45.0,
        description="Request timeout in seconds",
    )
    temperature: float = Field(
        0.2,
        description="Sampling temperature for answers",
    )
    max_output_tokens: int = Field(
        2000,
        description="Maximum number of tokens the provider may generate per answer",
        ge=1,
    )

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        case_sensitive=False,
    )


class AppSettings(BaseSettings):
    """Application-wide configuration."""

    debug: bool = Field(
        False,
        description="Enable debug mode with verbose logging",
    )

    rate_limit_window_ms: int = Field(
        900_000,
        description="Length of each fixed counting window in milliseconds",
        ge=1,
    )
    rate_limit_max_requests: int = Field(
        100,
        description="Maximum number of chat requests per window (per client key)",
        ge=1,
        validation_alias=AliasChoices(
            "APP_RATE_LIMIT_MAX_REQUESTS",
            "RATE_LIMIT_MAX_REQUESTS",
            "rate_limit_max_requests",
        ),
    )
    rate_limit_sweep_interval_seconds: int = Field(
        300,
        description="Interval between expired-entry sweeps; 0 disables the background sweep",
        ge=0,
    )

    policy_context: str = Field(
        DEFAULT_POLICY_CONTEXT,
        description="Policy knowledge base injected into the system instruction",
    )
    policy_context_file: str | None = Field(
        None,
        description="Path to a text file holding the policy knowledge base (wins over policy_context)",
    )

    admin_api_key_required: bool = Field(
        True,
        description="Whether admin endpoints require an API key",
    )
    admin_api_keys: str | None = Field(
        None,
        description="Comma-separated list of valid admin API keys",
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        case_sensitive=False,
    )

    def load_policy_context(self) -> str:
        """Return the policy context, preferring the configured file when readable."""

        if self.policy_context_file:
            path = Path(self.policy_context_file)
            if path.is_file():
                text = path.read_text(encoding="utf-8").strip()
                if text:
                    return text
        return self.policy_context


class LogSettings(BaseSettings):
    """Logging configuration."""

    level: str = Field("INFO", description="Root log level")
    format: str = Field("json", description="Log format: json or plain")
    output: str = Field("stdout", description="Log output: stdout or file")
    file_path: str | None = Field(None, description="Log file path when output=file")
    max_bytes: int = Field(
        10_485_760,
        description="Rotate the log file after this many bytes (0 disables rotation)",
        ge=0,
    )
    backup_count: int = Field(5, description="Rotated log files to keep", ge=0)
    request_id_header: str = Field(
        "X-Request-ID",
        description="Header carrying the request correlation id",
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
    )


class Settings(BaseSettings):
    """Main application settings container.

    Automatically loads from the appropriate .env.{APP_ENV} file.

    Environments:
    - development: Local development (DEBUG=true)
    - testing: Automated tests (uses .env.testing)
    - staging: Pre-production (uses .env.staging)
    - production: Production deployment (uses .env.production)
    """

    app_env: str = APP_ENV
    llm: LLMSettings = Field(default_factory=_build_llm_settings)
    app: AppSettings = Field(default_factory=_build_app_settings)
    log: LogSettings = Field(default_factory=_build_log_settings)

    model_config = SettingsConfigDict(
        case_sensitive=False,
    )


settings = Settings()
