"""LLM adapter layer - abstracts over completion providers."""

from app.adapters.llm.base import AbstractLLMClient, ChatMessage
from app.adapters.llm.factory import create_llm_client
from app.adapters.llm.openai_client import OpenAIClient
from app.adapters.llm.response_shapes import extract_text

__all__ = [
    "AbstractLLMClient",
    "ChatMessage",
    "OpenAIClient",
    "create_llm_client",
    "extract_text",
]
