"""Application factory for FastAPI app.

Centralizes app construction (services, middleware, handlers, routers) so
each app instance owns its own rate limiter and tests can build isolated
instances.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.adapters.llm.base import AbstractLLMClient
from app.adapters.llm.factory import create_llm_client
from app.adapters.rate_limit.base import AbstractRateLimiter
from app.api.routes import admin_router, chat_router, health_router
from app.core.config import Settings, settings as default_settings
from app.core.exception_handlers import setup_exception_handlers
from app.core.logging import configure_logging
from app.core.middleware import request_id_middleware
from app.core.openapi import apply_openapi_customizations
from app.core.rate_limit import build_rate_limiter, sweep_periodically
from app.services.answer_service import AnswerService
from app.services.fallback_service import FallbackResponder

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run the periodic expired-entry sweep while the app is serving."""

    interval = app.state.sweep_interval_seconds
    sweeper: asyncio.Task | None = None
    if interval > 0:
        sweeper = asyncio.create_task(sweep_periodically(app.state.rate_limiter, interval))
        logger.info("rate_limit.sweeper_started", extra={"interval_s": interval})

    try:
        yield
    finally:
        if sweeper is not None:
            sweeper.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await sweeper
            logger.info("rate_limit.sweeper_stopped")


def create_app(
    app_settings: Settings | None = None,
    *,
    rate_limiter: AbstractRateLimiter | None = None,
    llm_client: AbstractLLMClient | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application instance.

    Args:
        app_settings: Settings to build from; defaults to the global settings.
        rate_limiter: Optional pre-built limiter (tests inject clocks this way).
        llm_client: Optional pre-built completion client.

    Returns:
        Configured FastAPI app with services, middleware, handlers and routers.
    """
    cfg = app_settings or default_settings

    # Logging first so subsequent init logs are formatted as desired
    configure_logging(cfg.log)

    app = FastAPI(
        title="Jharkhand Policy Bot API",
        description=(
            "Chat API answering questions about the Jharkhand Electric Vehicle "
            "Policy 2022. Answers come from an LLM constrained to the policy "
            "text, with keyword-based fallback answers when the provider is "
            "unavailable and a per-client fixed-window rate limit."
        ),
        version="0.1.0",
        license_info={
            "name": "MIT License",
            "url": "https://opensource.org/licenses/MIT",
        },
        lifespan=lifespan,
    )

    limiter = rate_limiter or build_rate_limiter(cfg.app)
    app.state.rate_limiter = limiter
    app.state.sweep_interval_seconds = cfg.app.rate_limit_sweep_interval_seconds
    app.state.answer_service = AnswerService(
        limiter=limiter,
        llm=llm_client or create_llm_client(cfg.llm),
        fallback=FallbackResponder(),
        policy_context=cfg.app.load_policy_context(),
        max_output_tokens=cfg.llm.max_output_tokens,
    )

    app.middleware("http")(request_id_middleware)

    setup_exception_handlers(app)

    app.include_router(chat_router, prefix="/v1")
    app.include_router(admin_router, prefix="/v1")
    app.include_router(health_router)

    # OpenAPI customizations (admin security scheme, tags)
    apply_openapi_customizations(app)

    return app
