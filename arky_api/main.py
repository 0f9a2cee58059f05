from __future__ import annotations

import logging
import platform
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from arky_api.api.api import api_router
from arky_api.api.health import router as health_router
from arky_api.core.config import Settings, get_settings
from arky_api.core.errors import ServiceError
from arky_api.core.logging import setup_logging
from arky_api.services.ai_service import AIResponder, build_ai_responder
from arky_api.services.email_service import MailSender, SMTPMailSender

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("🚀 ARKY Backend API starting")
    logger.info(f"Python version: {platform.python_version()}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"🔧 Listening port: {settings.port}")
    logger.info(
        "✅ Gemini AI initialized: %s",
        "YES" if app.state.ai_responder is not None else "NO (missing API key)",
    )

    yield

    responder: AIResponder | None = app.state.ai_responder
    if responder is not None:
        await responder.aclose()


async def _service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.debug(f"Rejected body on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body."})


def create_app(
    settings: Settings | None = None,
    *,
    ai_responder: AIResponder | None = None,
    mail_sender: MailSender | None = None,
) -> FastAPI:
    """
    Build the application.

    Adapters not passed in are built from settings; the AI responder stays
    ``None`` when no Gemini key is configured.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    docs = settings.docs_enabled
    app = FastAPI(
        title="ARKY Backend API",
        lifespan=lifespan,
        docs_url="/docs" if docs else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs else None,
    )

    app.state.settings = settings
    app.state.ai_responder = (
        ai_responder if ai_responder is not None else build_ai_responder(settings)
    )
    app.state.mail_sender = mail_sender or SMTPMailSender(settings)

    origins = settings.cors_origins()

    # If allowing '*', credentials must be False.
    allow_credentials = False if "*" in origins else True

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ServiceError, _service_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    app.include_router(health_router)
    app.include_router(api_router)
    return app


app = create_app()
