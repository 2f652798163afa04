from fastapi import APIRouter, Depends, Request

from app.core.rate_limit import build_client_key
from app.schemas.chat import ChatRequest, ChatResponse
from app.services.answer_service import AnswerService

router = APIRouter(tags=["Chat"])


def get_answer_service(request: Request) -> AnswerService:
    """FastAPI dependency returning the application's answer service."""
    return request.app.state.answer_service


@router.post("/chat", response_model=ChatResponse)
async def chat(
    body: ChatRequest,
    request: Request,
    service: AnswerService = Depends(get_answer_service),
) -> ChatResponse:
    """Answer a question about the Jharkhand EV Policy.

    Blank prompts, throttled clients and provider outages all still produce a
    200 response with display-ready text; ``source`` tells them apart.

    Args:
        body: Prompt and optional client/session id.
        request: Incoming request (used to derive the client key).
        service: Answer orchestrator.

    Returns:
        ChatResponse: Answer text and how it was produced.
    """
    client_key = build_client_key(request, body.client_id)
    result = await service.answer(body.prompt, client_key)
    return ChatResponse(
        answer=result.text,
        source=result.source,
        retry_after_seconds=result.retry_after_seconds,
        remaining=result.remaining,
    )
