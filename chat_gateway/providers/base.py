"""
Provider Base Interface - Abstract chat adapter.

This module defines the abstract base class for all upstream provider
adapters. Each adapter shapes the outbound request for one vendor API and
normalizes the vendor's answer into an AdapterResult.

Design Pattern:
- Ports and Adapters (Hexagonal Architecture)
- ChatAdapter is the "port"; openai.py, gemini.py and perplexity.py are
  the "adapters"

Adapters never recover from upstream failures. Non-success statuses raise
UpstreamError and transport or decode errors propagate unchanged; the API
route is the single place that converts failures into error bodies.
"""

import time
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from chat_gateway.clients.http import create_http_client
from chat_gateway.core.exceptions import UpstreamError
from chat_gateway.models.domain import AdapterResult, ChatMessage, Provider
from chat_gateway.observability.logging import get_logger
from chat_gateway.observability.metrics import record_upstream_call

logger = get_logger(__name__)

MAX_TOKENS = 1000
TEMPERATURE = 0.7


class ChatAdapter(ABC):
    """
    Abstract base class for provider adapters.

    Subclasses set ``provider`` and implement ``complete``. The shared
    ``_post_json`` helper performs the single outbound call, records
    metrics and raises UpstreamError on a non-2xx status.

    Example:
        >>> adapter = OpenAIAdapter(http_client=client)
        >>> result = await adapter.complete("Hello", api_key, history=[])
        >>> result.to_wire()
        'Hi there!'
    """

    provider: Provider

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None) -> None:
        """
        Initialize the adapter.

        Args:
            http_client: Shared client; when omitted the adapter owns one.
        """
        if http_client is not None:
            self._client = http_client
            self._owns_client = False
        else:
            self._client = create_http_client()
            self._owns_client = True

    async def close(self) -> None:
        """Close the HTTP client if this adapter created it."""
        if self._owns_client:
            await self._client.aclose()

    @abstractmethod
    async def complete(
        self,
        message: str,
        api_key: str,
        history: list[ChatMessage],
    ) -> AdapterResult:
        """
        Send one chat turn upstream and normalize the answer.

        Args:
            message: The new user turn.
            api_key: Caller-supplied provider key.
            history: Prior turns, oldest first.

        Returns:
            AdapterResult: TextResult or CitationsResult.

        Raises:
            UpstreamError: If the upstream API returns a non-success status.
        """
        ...

    def build_messages(self, message: str, history: list[ChatMessage]) -> list[dict[str, str]]:
        """History followed by the new user turn, in chronological order."""
        messages = [turn.to_upstream() for turn in history]
        messages.append({"role": "user", "content": message})
        return messages

    async def _post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: Optional[dict[str, str]] = None,
        params: Optional[dict[str, str]] = None,
    ) -> Any:
        """
        POST ``payload`` as JSON and return the decoded response body.

        Raises:
            UpstreamError: On a non-2xx status.
            httpx.HTTPError: On transport failures.
            ValueError: If the body is not valid JSON.
        """
        provider = self.provider.value
        request_headers = {"Content-Type": "application/json"}
        if headers:
            request_headers.update(headers)

        start_time = time.perf_counter()
        try:
            response = await self._client.post(
                url,
                json=payload,
                headers=request_headers,
                params=params,
            )
        except httpx.HTTPError as e:
            duration = time.perf_counter() - start_time
            record_upstream_call(provider, "error", duration)
            logger.warning(
                "upstream call failed",
                provider=provider,
                error_type=type(e).__name__,
                duration_ms=round(duration * 1000, 2),
            )
            raise

        duration = time.perf_counter() - start_time
        record_upstream_call(provider, response.status_code, duration)
        logger.info(
            "upstream call completed",
            provider=provider,
            status=response.status_code,
            duration_ms=round(duration * 1000, 2),
        )

        if not 200 <= response.status_code < 300:
            raise UpstreamError(
                provider=provider,
                status_code=response.status_code,
                status_text=response.reason_phrase or "",
            )

        return response.json()
