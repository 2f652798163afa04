"""Chat answer orchestration: rate limiting, LLM call, sanitizing and fallback.

This service is the single entry point for answering a user's question. It:
- Rejects blank prompts before touching any quota
- Admits or denies the request through the injected rate limiter
- Asks the completion provider, constrained to the policy context
- Falls back to canned keyword answers on any provider failure or empty output

``get_answer`` never raises for provider problems; the caller always receives
display-ready text.
"""

from __future__ import annotations

import logging

from app.adapters.llm.base import AbstractLLMClient, ChatMessage
from app.adapters.rate_limit.base import AbstractRateLimiter, RateLimitResult
from app.core.config import DEFAULT_POLICY_CONTEXT
from app.core.errors import LLMAppError
from app.core.logging import hash_for_log
from app.schemas.chat import AnswerResult, AnswerSource
from app.services.fallback_service import FallbackResponder
from app.utils.text_sanitizer import sanitize_response

logger = logging.getLogger(__name__)

DEFAULT_CLIENT_KEY = "client-session"

EMPTY_PROMPT_MESSAGE = "Please enter a question about the Jharkhand EV Policy."

DEFAULT_MAX_OUTPUT_TOKENS = 2000


def describe_window(window_ms: int) -> str:
    """Render a window length for user-facing text (e.g. "15 minutes").

    Args:
        window_ms: Window length in milliseconds.

    Returns:
        Human-readable duration using the largest whole unit.
    """
    seconds = max(1, window_ms // 1000)
    for unit_seconds, unit in ((3600, "hour"), (60, "minute")):
        if seconds % unit_seconds == 0:
            amount = seconds // unit_seconds
            return f"{amount} {unit}" if amount == 1 else f"{amount} {unit}s"
    return "1 second" if seconds == 1 else f"{seconds} seconds"


def build_rate_limit_message(retry_after_seconds: int, max_requests: int, window_ms: int) -> str:
    """Build the message shown to a throttled client."""
    return (
        f"⏳ **Rate limit exceeded.** Please try again in {retry_after_seconds} seconds.\n\n"
        f"Reminder: You can ask up to {max_requests} questions every "
        f"{describe_window(window_ms)}. Thank you for your patience!"
    )


def build_system_prompt(policy_context: str) -> str:
    """Build the system instruction that pins answers to the policy context."""
    return f"""
You are the Jharkhand Policy Bot. Answer only using the provided policy context.
If the user asks outside the policy scope, politely ask them to rephrase.
Give concise, structured answers with bullet points when helpful.

Policy Context:
{policy_context}
""".strip()


def build_messages(prompt: str, policy_context: str) -> list[ChatMessage]:
    return [
        {"role": "system", "content": build_system_prompt(policy_context)},
        {"role": "user", "content": prompt},
    ]


class AnswerService:
    """Answer policy questions for rate-limited clients.

    Attributes:
        limiter: Rate limiter consulted once per non-blank prompt.
        llm: Completion provider client.
        fallback: Deterministic responder used when the provider fails.
        policy_context: Knowledge base injected into the system instruction.
        max_output_tokens: Output token budget per answer.
    """

    def __init__(
        self,
        limiter: AbstractRateLimiter,
        llm: AbstractLLMClient,
        fallback: FallbackResponder | None = None,
        *,
        policy_context: str = DEFAULT_POLICY_CONTEXT,
        max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS,
    ) -> None:
        self.limiter = limiter
        self.llm = llm
        self.fallback = fallback or FallbackResponder()
        self.policy_context = policy_context
        self.max_output_tokens = max_output_tokens

    def _rate_limited(self, result: RateLimitResult) -> AnswerResult:
        retry_after = result.retry_after_seconds
        # 0 at the exact window end; quote a full window rather than "0 seconds"
        if not retry_after:
            retry_after = max(1, result.window_ms // 1000)
        return AnswerResult(
            text=build_rate_limit_message(retry_after, result.limit, result.window_ms),
            source=AnswerSource.RATE_LIMITED,
            retry_after_seconds=retry_after,
            remaining=0,
        )

    def _fallback(self, prompt: str, remaining: int) -> AnswerResult:
        return AnswerResult(
            text=self.fallback.respond(prompt),
            source=AnswerSource.FALLBACK,
            remaining=remaining,
        )

    async def answer(self, prompt: str, client_key: str | None = None) -> AnswerResult:
        """Answer ``prompt`` for ``client_key`` and report how the answer was produced.

        Args:
            prompt: User question.
            client_key: Rate limit partition; defaults to a fixed session key.

        Returns:
            AnswerResult with display-ready text.
        """
        if not prompt or not prompt.strip():
            return AnswerResult(text=EMPTY_PROMPT_MESSAGE, source=AnswerSource.INVALID_INPUT)

        key = client_key or DEFAULT_CLIENT_KEY
        key_hash = hash_for_log(key)

        result = self.limiter.check_rate_limit(key)
        if not result.allowed:
            logger.warning(
                "rate_limit.denied",
                extra={
                    "key_hash": key_hash,
                    "limit": result.limit,
                    "retry_after_s": result.retry_after_seconds,
                },
            )
            return self._rate_limited(result)

        logger.info(
            "rate_limit.allowed",
            extra={"key_hash": key_hash, "limit": result.limit, "remaining": result.remaining},
        )

        messages = build_messages(prompt, self.policy_context)

        try:
            text = await self.llm.complete(messages, max_tokens=self.max_output_tokens)
        except LLMAppError as exc:
            logger.error(
                "answer.provider_unavailable",
                extra={"error_code": exc.code, "error_message": exc.message, "key_hash": key_hash},
            )
            return self._fallback(prompt, result.remaining)
        except Exception as exc:
            logger.exception(
                "answer.provider_unexpected_error",
                extra={"error_type": type(exc).__name__, "key_hash": key_hash},
            )
            return self._fallback(prompt, result.remaining)

        if not text or not text.strip():
            logger.warning("answer.empty_completion", extra={"key_hash": key_hash})
            return self._fallback(prompt, result.remaining)

        logger.info(
            "answer.completed",
            extra={"key_hash": key_hash, "answer_chars": len(text)},
        )
        return AnswerResult(
            text=sanitize_response(text.strip()),
            source=AnswerSource.LLM,
            remaining=result.remaining,
        )

    async def get_answer(self, prompt: str, client_key: str | None = None) -> str:
        """Return display-ready answer text for ``prompt``; never raises on provider failure."""
        result = await self.answer(prompt, client_key)
        return result.text
