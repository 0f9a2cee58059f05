from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str


class ServiceDescriptor(BaseModel):
    status: str
    service: str
    endpoints: list[str]
