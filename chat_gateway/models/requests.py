"""
Request Models - Inbound chat request.

Field presence is checked by the chat service rather than by Pydantic so
that a missing field produces the gateway's own 400 message instead of a
422 validation report.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, SecretStr, field_validator

from chat_gateway.models.domain import ChatMessage


class ChatRequest(BaseModel):
    """
    Chat request model.

    Attributes:
        message: The new user turn
        provider: Provider wire name (OpenAI, Gemini, Perplexity)
        api_key: Caller-supplied provider key, sent as ``apiKey``
        messages: Prior conversation history, oldest first
    """

    model_config = {"populate_by_name": True}

    message: Optional[str] = None
    provider: Optional[str] = None
    api_key: Optional[SecretStr] = Field(default=None, alias="apiKey")
    messages: list[ChatMessage] = Field(default_factory=list)

    @field_validator("messages", mode="before")
    @classmethod
    def default_messages(cls, v: Any) -> Any:
        """Treat an explicit null history as empty."""
        return [] if v is None else v

    def missing_required(self) -> bool:
        """True when message, provider or apiKey is absent or empty."""
        key = self.api_key.get_secret_value() if self.api_key is not None else ""
        return not self.message or not self.provider or not key

    def secret_values(self) -> list[str]:
        """Values that must never appear in responses or logs."""
        if self.api_key is None or not self.api_key.get_secret_value():
            return []
        return [self.api_key.get_secret_value()]
