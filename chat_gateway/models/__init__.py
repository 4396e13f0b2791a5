"""Models Package - Request, response and domain models."""

from chat_gateway.models.domain import (
    FALLBACK_RESPONSE,
    AdapterResult,
    ChatMessage,
    CitationsResult,
    Icon,
    Provider,
    TextResult,
)
from chat_gateway.models.requests import ChatRequest
from chat_gateway.models.responses import (
    ChatResponseEnvelope,
    ErrorResponse,
    utc_timestamp,
)

__all__ = [
    # Domain
    "FALLBACK_RESPONSE",
    "AdapterResult",
    "ChatMessage",
    "CitationsResult",
    "Icon",
    "Provider",
    "TextResult",
    # Requests
    "ChatRequest",
    # Responses
    "ChatResponseEnvelope",
    "ErrorResponse",
    "utc_timestamp",
]
