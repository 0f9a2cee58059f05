from __future__ import annotations

from pydantic import BaseModel


class ChatRequest(BaseModel):
    # Presence is checked by the handler so a missing message maps to 400.
    message: str | None = None


class ChatResponse(BaseModel):
    reply: str
