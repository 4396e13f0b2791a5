"""
Chat Service - Request validation and provider dispatch.

The service validates the inbound request, picks the adapter for the
requested provider, awaits it, and wraps the result in the envelope.
It holds no per-request state; the only shared resource is the adapter
registry and its pooled HTTP client.
"""

from typing import Any, Optional

import httpx
from pydantic import ValidationError

from chat_gateway.clients.favicons import CitationEnricher
from chat_gateway.clients.http import create_http_client
from chat_gateway.core.config import Settings
from chat_gateway.core.exceptions import GatewayValidationError
from chat_gateway.models.requests import ChatRequest
from chat_gateway.models.responses import ChatResponseEnvelope
from chat_gateway.observability.logging import get_logger
from chat_gateway.providers.registry import AdapterRegistry, create_adapter_registry
from chat_gateway.services.envelope import build_envelope

logger = get_logger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields: message, provider, or apiKey"


def parse_chat_request(body: Any) -> ChatRequest:
    """
    Build a ChatRequest from a decoded JSON body.

    Required-field presence is checked on the raw body before any type
    validation, so a request missing message, provider or apiKey always gets
    the missing-fields error. A body that is not an object counts as empty.

    Raises:
        GatewayValidationError: If a required field is missing or empty, or
            a present field has the wrong type.
    """
    if not isinstance(body, dict):
        body = {}
    api_key = body.get("apiKey", body.get("api_key"))
    if not body.get("message") or not body.get("provider") or not api_key:
        raise GatewayValidationError(MISSING_FIELDS_MESSAGE)
    try:
        return ChatRequest.model_validate(body)
    except ValidationError as e:
        fields = sorted({".".join(str(part) for part in err["loc"]) for err in e.errors()})
        raise GatewayValidationError(
            f"Invalid request: {', '.join(fields)}",
            field=fields[0] if fields else None,
        ) from e


class ChatService:
    """
    Dispatches chat requests to provider adapters.

    Example:
        >>> service = ChatService(registry)
        >>> envelope = await service.dispatch(request)
        >>> envelope.provider
        'OpenAI'
    """

    def __init__(
        self,
        registry: AdapterRegistry,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Args:
            registry: Adapter registry used for provider selection.
            http_client: Shared client to close on shutdown, if owned here.
        """
        self._registry = registry
        self._http_client = http_client

    @property
    def registry(self) -> AdapterRegistry:
        return self._registry

    async def dispatch(self, request: ChatRequest) -> ChatResponseEnvelope:
        """
        Validate, route and complete one chat request.

        Raises:
            GatewayValidationError: Missing fields (no adapter is called).
            UnsupportedProviderError: Unknown provider (no adapter is called).
            UpstreamError: Upstream returned a non-success status.
            Exception: Transport and decode failures propagate unchanged.
        """
        if request.missing_required():
            raise GatewayValidationError(MISSING_FIELDS_MESSAGE)

        adapter = self._registry.get_adapter(request.provider)
        logger.info(
            "dispatching chat request",
            provider=adapter.provider.value,
            history_length=len(request.messages),
        )

        result = await adapter.complete(
            request.message,
            request.api_key.get_secret_value(),
            list(request.messages),
        )
        return build_envelope(result, adapter.provider)

    async def close(self) -> None:
        """Release adapter resources and the shared HTTP client."""
        await self._registry.close()
        if self._http_client is not None:
            await self._http_client.aclose()


def create_chat_service(
    settings: Settings,
    enricher: Optional[CitationEnricher] = None,
) -> ChatService:
    """Build a ChatService with one pooled HTTP client shared by all adapters."""
    http_client = create_http_client(
        timeout_seconds=settings.upstream_timeout_seconds,
        max_connections=settings.max_connections,
    )
    registry = create_adapter_registry(settings, http_client=http_client, enricher=enricher)
    return ChatService(registry, http_client=http_client)
