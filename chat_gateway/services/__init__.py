"""
Services Package - Chat dispatch and envelope/error mapping.
"""

from chat_gateway.services.chat import (
    MISSING_FIELDS_MESSAGE,
    ChatService,
    create_chat_service,
    parse_chat_request,
)
from chat_gateway.services.envelope import (
    INTERNAL_ERROR_MESSAGE,
    build_envelope,
    redact,
    to_error_response,
)

__all__ = [
    "MISSING_FIELDS_MESSAGE",
    "ChatService",
    "create_chat_service",
    "parse_chat_request",
    "INTERNAL_ERROR_MESSAGE",
    "build_envelope",
    "redact",
    "to_error_response",
]
