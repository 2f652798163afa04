from abc import ABC, abstractmethod
from typing import Any, Literal, TypedDict


class ChatMessage(TypedDict):
	"""One turn of a chat conversation sent to the provider."""

	role: Literal["system", "user", "assistant"]
	content: str


class AbstractLLMClient(ABC):
	"""Interface for LLM clients that produce free-text completions."""

	@abstractmethod
	async def complete(
		self,
		messages: list[ChatMessage],
		*,
		max_tokens: int | None = None,
		**kwargs: Any,
	) -> str:
		"""Generate a text completion for an ordered list of messages.

		Args:
			messages: System/user/assistant turns, oldest first.
			max_tokens: Output token budget for the answer.
			**kwargs: Provider-specific options (e.g., temperature).

		Returns:
			str: Extracted answer text, or "" when the provider returned no text.

		Raises:
			LLMAppError: If credentials are missing or the provider call fails.
		"""
		...
