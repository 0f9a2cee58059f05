from __future__ import annotations

import abc
import asyncio
import logging

import httpx

from arky_api.core.config import Settings
from arky_api.core.errors import UpstreamServiceError

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "You are ARKY, a helpful and secure AI agent for business operations. "
    "Keep responses concise and professional."
)
FALLBACK_REPLY = "I processed your request but could not generate a text response."


class AIResponder(abc.ABC):
    """Turns one user message into one text reply. No history is kept."""

    @abc.abstractmethod
    async def generate(self, message: str) -> str | None:
        ...

    async def aclose(self) -> None:
        return None


class GeminiResponder(AIResponder):
    def __init__(
        self,
        api_key: str,
        *,
        model: str,
        base_url: str,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key
        self.model = model
        self._client = client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"), timeout=timeout
        )

    async def generate(self, message: str) -> str | None:
        payload = {
            "systemInstruction": {"parts": [{"text": SYSTEM_INSTRUCTION}]},
            "contents": [{"role": "user", "parts": [{"text": message}]}],
        }
        headers = {
            "x-goog-api-key": self._api_key,
            "Content-Type": "application/json",
        }

        logger.info(f"Calling Gemini with model {self.model}")
        resp = await self._client.post(
            f"/models/{self.model}:generateContent", json=payload, headers=headers
        )
        resp.raise_for_status()
        return extract_text(resp.json())

    async def aclose(self) -> None:
        await self._client.aclose()


def extract_text(data: dict) -> str | None:
    """Join the text parts of the first candidate, skipping thought summaries."""
    candidates = (data or {}).get("candidates") or []
    if not candidates:
        return None
    parts = ((candidates[0] or {}).get("content") or {}).get("parts") or []
    text = "".join(
        str(p["text"]) for p in parts if p and p.get("text") and not p.get("thought")
    )
    return text or None


def build_ai_responder(settings: Settings) -> AIResponder | None:
    if not settings.ai_enabled:
        return None
    return GeminiResponder(
        settings.gemini_api_key,
        model=settings.gemini_model,
        base_url=settings.gemini_base_url,
        timeout=settings.ai_timeout_seconds,
    )


async def generate_reply(
    message: str, responder: AIResponder, *, timeout: float = 30.0
) -> str:
    try:
        text = await asyncio.wait_for(responder.generate(message), timeout=timeout)
    except httpx.HTTPStatusError as e:
        logger.error(f"Gemini API error: {e.response.status_code} - {e.response.text}")
        raise UpstreamServiceError("Failed to connect to AI service.") from e
    except (httpx.TimeoutException, asyncio.TimeoutError) as e:
        logger.error("Gemini API timeout")
        raise UpstreamServiceError("Failed to connect to AI service.") from e
    except Exception as e:
        logger.exception(f"Unexpected Gemini error: {e}")
        raise UpstreamServiceError("Failed to connect to AI service.") from e

    return text or FALLBACK_REPLY
