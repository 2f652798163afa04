"""Pydantic schemas for the chat endpoint and answer results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class AnswerSource(str, Enum):
    """Where an answer's text came from."""

    INVALID_INPUT = "invalid_input"
    RATE_LIMITED = "rate_limited"
    LLM = "llm"
    FALLBACK = "fallback"


class AnswerResult(BaseModel):
    """Display-ready answer plus how it was produced."""

    text: str
    source: AnswerSource
    retry_after_seconds: int | None = None
    remaining: int | None = None


class ChatRequest(BaseModel):
    """Question submitted by a user."""

    prompt: str = Field(
        ...,
        max_length=4000,
        description="Free-text question about the Jharkhand EV Policy.",
    )
    client_id: str | None = Field(
        default=None,
        max_length=200,
        description=(
            "Optional stable client/session identifier used for rate limiting. "
            "When omitted the caller's network address is used."
        ),
    )


class ChatResponse(BaseModel):
    """Answer returned to the UI; always display-ready text."""

    answer: str = Field(..., description="Answer text, sanitized for display.")
    source: AnswerSource = Field(
        ..., description="invalid_input, rate_limited, llm or fallback."
    )
    retry_after_seconds: int | None = Field(
        default=None,
        description="Seconds until the client may ask again (rate-limited answers only).",
    )
    remaining: int | None = Field(
        default=None,
        description="Questions left in the current window (admitted requests only).",
    )
