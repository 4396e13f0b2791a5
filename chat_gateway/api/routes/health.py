"""
Health Router - Liveness endpoint.

The gateway keeps no backing stores, so liveness is the only check.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from chat_gateway.api.deps import get_chat_service
from chat_gateway.services.chat import ChatService

APP_VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    providers: list[str]


router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health(chat_service: ChatService = Depends(get_chat_service)) -> HealthResponse:
    """Report liveness and the providers the gateway can dispatch to."""
    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        providers=chat_service.registry.list_providers(),
    )
