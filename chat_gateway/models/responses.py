"""
Response Models - Success envelope and error body.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field


def utc_timestamp() -> str:
    """ISO-8601 UTC instant with millisecond precision and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ChatResponseEnvelope(BaseModel):
    """
    Uniform success envelope.

    Attributes:
        response: Provider-shaped payload (text, or a dict for Perplexity)
        provider: Echo of the request's provider
        timestamp: ISO-8601 instant of envelope creation
    """

    response: Any = Field(..., description="Provider-shaped payload")
    provider: str = Field(..., description="Provider that served the request")
    timestamp: str = Field(default_factory=utc_timestamp)


class ErrorResponse(BaseModel):
    """Error body returned for every 4xx/5xx outcome."""

    error: str
