"""
Pytest configuration and shared fixtures.

Upstream APIs are never contacted: adapters receive an
AsyncMock(spec=httpx.AsyncClient) whose ``post`` returns MagicMock
responses shaped like httpx.Response.
"""

from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient

from chat_gateway.clients.favicons import CitationEnricher
from chat_gateway.models.domain import Icon, Provider, TextResult
from chat_gateway.providers.base import ChatAdapter
from chat_gateway.providers.registry import AdapterRegistry
from chat_gateway.services.chat import ChatService


def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for service interactions")


# =============================================================================
# Settings
# =============================================================================


@pytest.fixture
def test_settings():
    """Settings pointing at fake upstream hosts."""
    from chat_gateway.core.config import Settings

    return Settings(
        service_name="chat-gateway-test",
        environment="development",
        openai_base_url="https://openai.test/v1",
        gemini_base_url="https://gemini.test/v1beta",
        perplexity_base_url="https://perplexity.test",
        upstream_timeout_seconds=5.0,
    )


# =============================================================================
# HTTP Mocks
# =============================================================================


def make_response(
    status_code: int = 200,
    json_data: Any = None,
    reason_phrase: str = "OK",
) -> MagicMock:
    """Build a MagicMock that quacks like an httpx.Response."""
    response = MagicMock(spec=httpx.Response)
    response.status_code = status_code
    response.reason_phrase = reason_phrase
    response.json.return_value = json_data
    return response


@pytest.fixture
def response_factory() -> Callable[..., MagicMock]:
    """Factory fixture for canned upstream responses."""
    return make_response


@pytest.fixture
def mock_http_client():
    """
    Mock HTTP client shared by adapters.

    Returns:
        AsyncMock: A mock httpx.AsyncClient; set ``post.return_value``.
    """
    return AsyncMock(spec=httpx.AsyncClient)


# =============================================================================
# Citation Enrichment Stub
# =============================================================================


class StubEnricher(CitationEnricher):
    """Deterministic enricher recording the URLs it was asked about."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []

    async def enrich(self, urls: list[str]) -> list[Icon]:
        self.calls.append(list(urls))
        return [
            Icon(hostname=f"host-{i}", url=url, favicon=f"https://icons.test/{i}.png")
            for i, url in enumerate(urls)
        ]


@pytest.fixture
def stub_enricher() -> StubEnricher:
    return StubEnricher()


# =============================================================================
# Adapter / Service Mocks
# =============================================================================


def make_mock_adapter(provider: Provider, result: Any = None) -> AsyncMock:
    """AsyncMock adapter for ``provider`` returning ``result`` from complete()."""
    adapter = AsyncMock(spec=ChatAdapter)
    adapter.provider = provider
    adapter.complete.return_value = result or TextResult(value=f"{provider.value} says hi")
    return adapter


@pytest.fixture
def mock_adapters() -> dict[Provider, AsyncMock]:
    """One mock adapter per provider."""
    return {provider: make_mock_adapter(provider) for provider in Provider}


@pytest.fixture
def mock_chat_service(mock_adapters) -> ChatService:
    """ChatService over mock adapters."""
    return ChatService(AdapterRegistry(dict(mock_adapters)))


@pytest.fixture
def client(mock_chat_service):
    """
    TestClient for the full app with the chat service overridden.

    Yields:
        TestClient: Client whose /api/chat calls hit mock adapters.
    """
    from chat_gateway.api.deps import get_chat_service
    from chat_gateway.main import app

    app.dependency_overrides[get_chat_service] = lambda: mock_chat_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
