"""Adapter Registry - Selects the adapter for a provider name.

Selection goes through the closed Provider enumeration: a name outside it
never reaches an adapter.
"""

import logging
from typing import TYPE_CHECKING, Optional

import httpx

from chat_gateway.clients.favicons import CitationEnricher, FaviconEnricher
from chat_gateway.core.exceptions import UnsupportedProviderError
from chat_gateway.models.domain import Provider
from chat_gateway.providers.base import ChatAdapter
from chat_gateway.providers.gemini import GeminiAdapter
from chat_gateway.providers.openai import OpenAIAdapter
from chat_gateway.providers.perplexity import PerplexityAdapter

if TYPE_CHECKING:
    from chat_gateway.core.config import Settings

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """Maps each Provider to its adapter instance.

    Example:
        >>> registry = AdapterRegistry({Provider.OPENAI: openai_adapter})
        >>> registry.get_adapter("OpenAI")
        <OpenAIAdapter ...>
    """

    def __init__(self, adapters: dict[Provider, ChatAdapter] | None = None) -> None:
        self._adapters: dict[Provider, ChatAdapter] = adapters or {}

    @property
    def adapters(self) -> dict[Provider, ChatAdapter]:
        """Get the registered adapters."""
        return self._adapters

    def register(self, adapter: ChatAdapter) -> None:
        """Register ``adapter`` under its own provider."""
        self._adapters[adapter.provider] = adapter

    def resolve(self, name: str) -> Provider:
        """Map a wire name to a Provider by exact match.

        Raises:
            UnsupportedProviderError: If the name is unknown or unregistered.
        """
        provider = Provider.from_name(name)
        if provider is None or provider not in self._adapters:
            raise UnsupportedProviderError(provider=name)
        return provider

    def get_adapter(self, name: str) -> ChatAdapter:
        """Get the adapter for a provider wire name.

        Raises:
            UnsupportedProviderError: If the name is unknown or unregistered.
        """
        return self._adapters[self.resolve(name)]

    def list_providers(self) -> list[str]:
        """Wire names of all registered providers."""
        return [provider.value for provider in self._adapters]

    async def close(self) -> None:
        """Close adapters that own their HTTP clients."""
        for adapter in self._adapters.values():
            await adapter.close()


def create_adapter_registry(
    settings: "Settings",
    http_client: Optional[httpx.AsyncClient] = None,
    enricher: Optional[CitationEnricher] = None,
) -> AdapterRegistry:
    """Build a registry with all three adapters configured from settings.

    Args:
        settings: Application settings (base URLs, models, favicon template).
        http_client: Shared HTTP client for all adapters.
        enricher: Citation enricher; defaults to a FaviconEnricher.

    Returns:
        AdapterRegistry with OpenAI, Gemini and Perplexity registered.
    """
    registry = AdapterRegistry()
    registry.register(
        OpenAIAdapter(
            http_client=http_client,
            base_url=settings.openai_base_url,
            model=settings.openai_model,
        )
    )
    registry.register(
        GeminiAdapter(
            http_client=http_client,
            base_url=settings.gemini_base_url,
            model=settings.gemini_model,
        )
    )
    registry.register(
        PerplexityAdapter(
            http_client=http_client,
            enricher=enricher or FaviconEnricher(settings.favicon_url_template),
            base_url=settings.perplexity_base_url,
            model=settings.perplexity_model,
        )
    )
    logger.info(f"Registered providers: {registry.list_providers()}")
    return registry
