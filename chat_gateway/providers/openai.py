"""
OpenAI Adapter - Chat Completions API.

Forwards the conversation history plus the new turn with a bearer token and
reduces the answer to the first choice's message text.
"""

from typing import Any, Optional

import httpx

from chat_gateway.models.domain import FALLBACK_RESPONSE, ChatMessage, Provider, TextResult
from chat_gateway.providers.base import MAX_TOKENS, TEMPERATURE, ChatAdapter

OPENAI_API_BASE = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-3.5-turbo"


class OpenAIAdapter(ChatAdapter):
    """
    OpenAI chat completions adapter.

    Args:
        http_client: Shared HTTP client.
        base_url: API base URL (for proxies or compatible servers).
        model: Chat model name.
    """

    provider = Provider.OPENAI

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        base_url: str = OPENAI_API_BASE,
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
        payload = self._build_payload(message, history)
        data = await self._post_json(
            f"{self._base_url}/chat/completions",
            payload,
            headers={"Authorization": f"Bearer {api_key}"},
        )
        return TextResult(value=self._extract_text(data))

    def _build_payload(self, message: str, history: list[ChatMessage]) -> dict[str, Any]:
        return {
            "model": self._model,
            "messages": self.build_messages(message, history),
            "max_tokens": MAX_TOKENS,
            "temperature": TEMPERATURE,
        }

    def _extract_text(self, data: Any) -> str:
        """choices[0].message.content, or the fallback text when absent or empty."""
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return FALLBACK_RESPONSE
        return content if isinstance(content, str) and content else FALLBACK_RESPONSE
