"""Decode answer text out of the provider response envelopes we accept.

Three shapes are recognised, tried in this order:

1. ``{"output_text": "..."}`` (Responses API convenience field)
2. ``{"output": [{"content": [{"text": "..."}]}]}`` (Responses API items)
3. ``{"choices": [{"message": {"content": "..."}}]}`` (Chat Completions)

The first shape that validates and yields non-empty text wins. Anything else
decodes to an empty string, which callers treat as "no answer".
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from pydantic import BaseModel, ValidationError


class OutputTextEnvelope(BaseModel):
    output_text: str | None = None


class OutputContentPart(BaseModel):
    text: str | None = None


class OutputItem(BaseModel):
    content: list[OutputContentPart] = []


class ResponsesEnvelope(BaseModel):
    output: list[OutputItem]


class ChoiceMessage(BaseModel):
    content: str | None = None


class Choice(BaseModel):
    message: ChoiceMessage


class ChatCompletionEnvelope(BaseModel):
    choices: list[Choice]


def _from_output_text(envelope: OutputTextEnvelope) -> str | None:
    return envelope.output_text


def _from_output_items(envelope: ResponsesEnvelope) -> str | None:
    if not envelope.output or not envelope.output[0].content:
        return None
    return envelope.output[0].content[0].text


def _from_choices(envelope: ChatCompletionEnvelope) -> str | None:
    if not envelope.choices:
        return None
    return envelope.choices[0].message.content


_EXTRACTORS: tuple[tuple[type[BaseModel], Callable[[Any], str | None]], ...] = (
    (OutputTextEnvelope, _from_output_text),
    (ResponsesEnvelope, _from_output_items),
    (ChatCompletionEnvelope, _from_choices),
)


def to_payload(response: Any) -> dict[str, Any]:
    """Normalize an SDK response object or raw mapping into a plain dict."""

    if response is None:
        return {}
    if isinstance(response, Mapping):
        return dict(response)
    model_dump = getattr(response, "model_dump", None)
    if callable(model_dump):
        dumped = model_dump()
        if isinstance(dumped, Mapping):
            return dict(dumped)
    return {}


def extract_text(response: Any) -> str:
    """Return the first non-empty answer text found in ``response``, else ""."""

    payload = to_payload(response)
    if not payload:
        return ""

    for model, extractor in _EXTRACTORS:
        try:
            envelope = model.model_validate(payload)
        except ValidationError:
            continue
        text = extractor(envelope)
        if text:
            return text

    return ""
