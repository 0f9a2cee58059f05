from __future__ import annotations

from fastapi import APIRouter

from arky_api.schemas.common import ServiceDescriptor

router = APIRouter(tags=["health"])

SERVICE_NAME = "ARKY Backend API"
ENDPOINTS = ["/api/chat", "/api/contact"]


@router.get("/", response_model=ServiceDescriptor)
async def root() -> ServiceDescriptor:
    return ServiceDescriptor(status="running", service=SERVICE_NAME, endpoints=list(ENDPOINTS))
