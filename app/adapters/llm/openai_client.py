"""OpenAI LLM client adapter."""

from typing import Any

from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from app.adapters.llm.base import AbstractLLMClient, ChatMessage
from app.adapters.llm.response_shapes import extract_text
from app.core.errors import LLMAppError


class OpenAIClient(AbstractLLMClient):
    """Client for calling OpenAI chat completions and returning answer text.

    Uses the official OpenAI Python SDK with async support. The SDK client is
    only built when an API key is configured; without one every call fails
    fast with ``llm_missing_api_key`` and never touches the network.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str,
        base_url: str | None = None,
        timeout_seconds: float = 45.0,
        temperature: float = 0.2,
    ) -> None:
        """Initialize OpenAI async client.

        Args:
            api_key: OpenAI API key for authentication (None when not configured).
            model: Model name (e.g., "gpt-4.1-nano", "gpt-4o-mini").
            base_url: Optional custom base URL for OpenAI API.
            timeout_seconds: Timeout for requests in seconds.
            temperature: Default sampling temperature.
        """
        self.client = (
            AsyncOpenAI(api_key=api_key, base_url=base_url, timeout=timeout_seconds)
            if api_key
            else None
        )
        self.model = model
        self.temperature = temperature

    async def complete(
        self,
        messages: list[ChatMessage],
        *,
        max_tokens: int | None = None,
        **kwargs: Any,
    ) -> str:
        """Generate an answer using OpenAI chat completions.

        Args:
            messages: Conversation turns, system instruction first.
            max_tokens: Output token budget.
            **kwargs: Provider options (temperature, top_p, seed, etc.).

        Returns:
            str: Answer text, or "" when the response carried no text.

        Raises:
            LLMAppError: If the API key is missing or the API call fails.
        """
        if self.client is None:
            raise LLMAppError(
                code="llm_missing_api_key",
                message="OpenAI provider requires LLM_API_KEY environment variable",
                details={"provider": "openai"},
            )

        request_params: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": kwargs.pop("temperature", self.temperature),
        }
        if max_tokens is not None:
            request_params["max_tokens"] = max_tokens

        allowed_params = {
            "top_p",
            "frequency_penalty",
            "presence_penalty",
            "seed",
        }
        for param in allowed_params:
            if param in kwargs:
                request_params[param] = kwargs[param]

        try:
            response = await self.client.chat.completions.create(**request_params)
        except APIStatusError as exc:
            raise LLMAppError(
                code="llm_http_error",
                message=f"OpenAI API error ({exc.status_code})",
                details={"http_status": exc.status_code, "model": self.model},
            ) from exc
        except APIConnectionError as exc:
            raise LLMAppError(
                code="llm_connection_error",
                message=f"Could not reach OpenAI API: {exc}",
                details={"error_type": type(exc).__name__, "model": self.model},
            ) from exc
        except Exception as exc:
            raise LLMAppError(
                code="llm_request_failed",
                message=f"OpenAI API error: {exc}",
                details={"error_type": type(exc).__name__, "model": self.model},
            ) from exc

        return extract_text(response)
