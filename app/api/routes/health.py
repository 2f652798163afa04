from __future__ import annotations

from fastapi import APIRouter

from app.core.config import settings

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check() -> dict:
    """Health check endpoint.

    The service is healthy without an LLM key (answers come from fallback
    templates), so ``llm_configured`` is informational only.

    Returns:
        dict: ``status`` set to "ok" and whether an LLM key is configured.
    """

    return {"status": "ok", "llm_configured": bool(settings.llm.api_key)}
