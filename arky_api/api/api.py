from __future__ import annotations

from fastapi import APIRouter

from arky_api.api import chat, contact

api_router = APIRouter(prefix="/api")
api_router.include_router(chat.router)
api_router.include_router(contact.router)
