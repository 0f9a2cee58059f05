from __future__ import annotations

from fastapi import status


class ServiceError(Exception):
    """Base error rendered to clients as ``{"error": message}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."


class ConfigurationError(ServiceError):
    default_message = "Server configuration error."


class UpstreamServiceError(ServiceError):
    default_message = "Failed to connect to AI service."


class DeliveryError(ServiceError):
    default_message = "Failed to send email. Please try again later."
