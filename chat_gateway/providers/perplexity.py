"""
Perplexity Adapter - Sonar chat completions with citations.

Unlike the other adapters the answer is not reduced to text: the whole
decoded payload is kept and decorated with one favicon icon per citation.
"""

from typing import Any, Optional

import httpx

from chat_gateway.clients.favicons import CitationEnricher, FaviconEnricher
from chat_gateway.models.domain import (
    FALLBACK_RESPONSE,
    AdapterResult,
    ChatMessage,
    CitationsResult,
    Provider,
    TextResult,
)
from chat_gateway.observability.logging import get_logger
from chat_gateway.providers.base import MAX_TOKENS, TEMPERATURE, ChatAdapter

logger = get_logger(__name__)

PERPLEXITY_API_BASE = "https://api.perplexity.ai"
DEFAULT_MODEL = "sonar-pro"


class PerplexityAdapter(ChatAdapter):
    """
    Perplexity chat completions adapter.

    Args:
        http_client: Shared HTTP client.
        enricher: Citation enrichment collaborator.
        base_url: API base URL.
        model: Chat model name.
    """

    provider = Provider.PERPLEXITY

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        enricher: Optional[CitationEnricher] = None,
        base_url: str = PERPLEXITY_API_BASE,
        model: str = DEFAULT_MODEL,
    ) -> None:
        super().__init__(http_client)
        self._enricher = enricher or FaviconEnricher()
        self._base_url = base_url.rstrip("/")
        self._model = model

    async def complete(
        self,
        message: str,
        api_key: str,
        history: list[ChatMessage],
    ) -> AdapterResult:
        payload = {
            "model": self._model,
            "messages": self.build_messages(message, history),
            "max_tokens": MAX_TOKENS,
            "temperature": TEMPERATURE,
        }
        data = await self._post_json(
            f"{self._base_url}/chat/completions",
            payload,
            headers={"Authorization": f"Bearer {api_key}"},
        )
        if data is None:
            return TextResult(value=FALLBACK_RESPONSE)
        if not isinstance(data, dict):
            raise ValueError("Perplexity API returned a non-object payload")

        citations = self._citations(data)
        icons = await self._enricher.enrich(citations)
        logger.debug("perplexity citations", count=len(citations))
        return CitationsResult(payload=data, icons=icons)

    def _citations(self, data: dict[str, Any]) -> list[str]:
        """Citation URLs in upstream order; anything but a list means none."""
        citations = data.get("citations")
        if not isinstance(citations, list):
            return []
        return [str(url) for url in citations]
