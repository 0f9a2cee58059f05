from __future__ import annotations

from fastapi import APIRouter, Depends

from arky_api.api.deps import get_app_settings, require_ai_responder
from arky_api.core.config import Settings
from arky_api.core.errors import ValidationError
from arky_api.schemas.chat import ChatRequest, ChatResponse
from arky_api.schemas.common import ErrorResponse
from arky_api.services.ai_service import AIResponder, generate_reply

router = APIRouter(tags=["chat"])


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(
    responder: AIResponder = Depends(require_ai_responder),
    settings: Settings = Depends(get_app_settings),
    payload: ChatRequest | None = None,
) -> ChatResponse:
    message = payload.message if payload is not None else None
    if not (message or "").strip():
        raise ValidationError("Message is required.")

    reply = await generate_reply(message, responder, timeout=settings.ai_timeout_seconds)
    return ChatResponse(reply=reply)
