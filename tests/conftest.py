from __future__ import annotations

from email.message import EmailMessage

import pytest
from fastapi.testclient import TestClient

from arky_api.core.config import Settings
from arky_api.main import create_app
from arky_api.services.ai_service import AIResponder
from arky_api.services.email_service import MailSender


# ── Fakes ────────────────────────────────────────────────────

class FakeResponder(AIResponder):
    def __init__(self, reply: str | None = "Hello from ARKY", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[str] = []

    async def generate(self, message: str) -> str | None:
        self.calls.append(message)
        if self.error is not None:
            raise self.error
        return self.reply


class FakeMailSender(MailSender):
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.sent: list[EmailMessage] = []

    async def send(self, message: EmailMessage) -> None:
        if self.error is not None:
            raise self.error
        self.sent.append(message)


# ── Helpers ──────────────────────────────────────────────────

def make_settings(**overrides) -> Settings:
    values = {
        "gemini_api_key": "test-key",
        "smtp_user": "bot@gkedgemedia.com",
        "smtp_pass": "app-password",
        "environment": "test",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_client(settings: Settings | None = None, **adapters) -> TestClient:
    return TestClient(create_app(settings or make_settings(), **adapters))


# ── Fixtures ─────────────────────────────────────────────────

@pytest.fixture
def responder() -> FakeResponder:
    return FakeResponder()


@pytest.fixture
def sender() -> FakeMailSender:
    return FakeMailSender()


@pytest.fixture
def client(responder, sender) -> TestClient:
    return make_client(ai_responder=responder, mail_sender=sender)
