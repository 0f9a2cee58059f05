from __future__ import annotations

from fastapi import Request

from arky_api.core.config import Settings
from arky_api.core.errors import ConfigurationError
from arky_api.services.ai_service import AIResponder
from arky_api.services.email_service import MailSender


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_ai_responder(request: Request) -> AIResponder | None:
    return request.app.state.ai_responder


def get_mail_sender(request: Request) -> MailSender:
    return request.app.state.mail_sender


def require_ai_responder(request: Request) -> AIResponder:
    # Resolved before the body is validated, so a missing key wins over a bad payload.
    responder = get_ai_responder(request)
    if responder is None:
        raise ConfigurationError("Server configuration error: Missing API Key.")
    return responder
