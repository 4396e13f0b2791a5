"""
API Dependencies

FastAPI dependency functions for the API layer. Each can be replaced in
tests through ``app.dependency_overrides``.
"""

import logging
from typing import Optional

from chat_gateway.core.config import Settings, get_settings as _get_settings
from chat_gateway.services.chat import ChatService, create_chat_service

logger = logging.getLogger(__name__)

_chat_service: Optional[ChatService] = None


def get_settings() -> Settings:
    """Dependency returning the cached application settings."""
    return _get_settings()


def get_chat_service() -> ChatService:
    """
    Dependency returning the process-wide ChatService.

    Created lazily on first use so that the app works without a lifespan
    (e.g. under a bare TestClient).
    """
    global _chat_service
    if _chat_service is None:
        _chat_service = create_chat_service(_get_settings())
        logger.debug("ChatService created")
    return _chat_service


async def shutdown_chat_service() -> None:
    """Close the ChatService and its HTTP client, if one was created."""
    global _chat_service
    if _chat_service is not None:
        await _chat_service.close()
        _chat_service = None
