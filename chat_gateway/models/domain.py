"""
Domain Models - Providers, messages and normalized adapter results.

The normalized result of an adapter is a tagged variant: plain text for
OpenAI and Gemini, the full payload plus favicon icons for Perplexity.
Callers match on ``kind`` instead of guessing the shape from the provider.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

FALLBACK_RESPONSE = "No response received"
"""Returned instead of an error when the upstream answer carries no text."""


# =============================================================================
# Provider Enumeration
# =============================================================================


class Provider(str, Enum):
    """Closed set of upstream providers, valued by their wire names."""

    OPENAI = "OpenAI"
    GEMINI = "Gemini"
    PERPLEXITY = "Perplexity"

    @classmethod
    def from_name(cls, name: str) -> "Provider | None":
        """Exact, case-sensitive lookup by wire name."""
        for provider in cls:
            if provider.value == name:
                return provider
        return None


# =============================================================================
# Messages
# =============================================================================


class ChatMessage(BaseModel):
    """
    One turn of conversation history.

    Attributes:
        role: Message role (user, assistant, system)
        content: Message text
    """

    role: Literal["user", "assistant", "system"]
    content: str

    def to_upstream(self) -> dict[str, str]:
        """Render as an OpenAI-style message dict."""
        return {"role": self.role, "content": self.content}


# =============================================================================
# Citation Icons
# =============================================================================


class Icon(BaseModel):
    """Site metadata for one citation URL."""

    hostname: str = Field(..., description="Hostname parsed from the URL")
    url: str = Field(..., description="The citation URL")
    favicon: str = Field(..., description="Favicon image URL")


# =============================================================================
# Normalized Adapter Results
# =============================================================================


class TextResult(BaseModel):
    """Adapter result reduced to a single text answer."""

    kind: Literal["text"] = "text"
    value: str

    def to_wire(self) -> str:
        return self.value


class CitationsResult(BaseModel):
    """
    Adapter result that keeps the full upstream payload.

    The wire form is the payload itself with an added ``icons`` list that
    lines up one-to-one with ``payload["citations"]``.
    """

    kind: Literal["citations"] = "citations"
    payload: dict[str, Any]
    icons: list[Icon] = Field(default_factory=list)

    def to_wire(self) -> dict[str, Any]:
        wire = dict(self.payload)
        wire["icons"] = [icon.model_dump() for icon in self.icons]
        return wire


AdapterResult = Annotated[Union[TextResult, CitationsResult], Field(discriminator="kind")]
