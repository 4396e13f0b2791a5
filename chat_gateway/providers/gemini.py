"""
Gemini Adapter - Google Generative Language generateContent API.

Gemini is single-turn here: conversation history is accepted for interface
parity but never forwarded. The API key travels as the ``key`` query
parameter rather than a header.
"""

from typing import Any, Optional

import httpx

from chat_gateway.models.domain import FALLBACK_RESPONSE, ChatMessage, Provider, TextResult
from chat_gateway.providers.base import MAX_TOKENS, TEMPERATURE, ChatAdapter

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-pro"


class GeminiAdapter(ChatAdapter):
    """
    Gemini generateContent adapter.

    Args:
        http_client: Shared HTTP client.
        base_url: API base URL.
        model: Model name used in the ``models/{model}:generateContent`` path.
    """

    provider = Provider.GEMINI

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        base_url: str = GEMINI_API_BASE,
        model: str = DEFAULT_MODEL,
    ) -> None:
        super().__init__(http_client)
        self._base_url = base_url.rstrip("/")
        self._model = model

    async def complete(
        self,
        message: str,
        api_key: str,
        history: list[ChatMessage],
    ) -> TextResult:
        # History is intentionally dropped: Gemini requests are single-turn.
        data = await self._post_json(
            f"{self._base_url}/models/{self._model}:generateContent",
            self._build_payload(message),
            params={"key": api_key},
        )
        return TextResult(value=self._extract_text(data))

    def _build_payload(self, message: str) -> dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": message}]}],
            "generationConfig": {
                "maxOutputTokens": MAX_TOKENS,
                "temperature": TEMPERATURE,
            },
        }

    def _extract_text(self, data: Any) -> str:
        """candidates[0].content.parts[0].text, or the fallback text."""
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return FALLBACK_RESPONSE
        return text if isinstance(text, str) and text else FALLBACK_RESPONSE
