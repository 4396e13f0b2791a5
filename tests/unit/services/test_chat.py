"""
Tests for the chat service: parsing, validation and dispatch.

Adapters are AsyncMocks, so these tests assert which adapter was called
(and that none was called on rejected requests).
"""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from chat_gateway.core.exceptions import (
    GatewayValidationError,
    UnsupportedProviderError,
    UpstreamError,
)
from chat_gateway.models.domain import ChatMessage, CitationsResult, Icon, Provider
from chat_gateway.models.requests import ChatRequest
from chat_gateway.services.chat import (
    MISSING_FIELDS_MESSAGE,
    ChatService,
    create_chat_service,
    parse_chat_request,
)


def make_request(**overrides) -> ChatRequest:
    body = {"message": "Hello", "provider": "OpenAI", "apiKey": "sk-test"}
    body.update(overrides)
    return ChatRequest.model_validate(body)


# =============================================================================
# parse_chat_request
# =============================================================================


class TestParseChatRequest:
    def test_valid_body(self) -> None:
        request = parse_chat_request({"message": "Hi", "provider": "Gemini", "apiKey": "k"})

        assert request.provider == "Gemini"

    @pytest.mark.parametrize("body", [None, [], "text", 42])
    def test_non_object_body_is_missing_fields(self, body) -> None:
        with pytest.raises(GatewayValidationError) as exc_info:
            parse_chat_request(body)

        assert exc_info.value.message == MISSING_FIELDS_MESSAGE

    @pytest.mark.parametrize(
        "body",
        [
            {"provider": "OpenAI", "apiKey": "k", "messages": "bad"},
            {"provider": 5, "apiKey": "k"},
            {"message": ["x"], "provider": "OpenAI"},
            {"message": "Hi", "provider": "OpenAI", "apiKey": "", "messages": [{"role": 1}]},
        ],
    )
    def test_missing_fields_reported_before_type_errors(self, body) -> None:
        with pytest.raises(GatewayValidationError) as exc_info:
            parse_chat_request(body)

        assert exc_info.value.message == MISSING_FIELDS_MESSAGE

    def test_wrong_field_type_is_validation_error(self) -> None:
        with pytest.raises(GatewayValidationError) as exc_info:
            parse_chat_request({"message": 123, "provider": "OpenAI", "apiKey": "k"})

        assert exc_info.value.message == "Invalid request: message"
        assert exc_info.value.field == "message"

    def test_malformed_history_lists_paths(self) -> None:
        with pytest.raises(GatewayValidationError) as exc_info:
            parse_chat_request(
                {
                    "message": "Hi",
                    "provider": "OpenAI",
                    "apiKey": "k",
                    "messages": [{"role": "robot", "content": "x"}],
                }
            )

        assert exc_info.value.message == "Invalid request: messages.0.role"


# =============================================================================
# ChatService.dispatch
# =============================================================================


class TestChatServiceDispatch:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["OpenAI", "Gemini", "Perplexity"])
    async def test_routes_to_requested_adapter_only(
        self, mock_chat_service, mock_adapters, name
    ) -> None:
        envelope = await mock_chat_service.dispatch(make_request(provider=name))

        assert envelope.provider == name
        assert envelope.response == f"{name} says hi"
        for provider, adapter in mock_adapters.items():
            if provider.value == name:
                adapter.complete.assert_awaited_once()
            else:
                adapter.complete.assert_not_called()

    @pytest.mark.asyncio
    async def test_passes_message_key_and_history(self, mock_chat_service, mock_adapters) -> None:
        history = [{"role": "user", "content": "Earlier"}]

        await mock_chat_service.dispatch(make_request(messages=history))

        mock_adapters[Provider.OPENAI].complete.assert_awaited_once_with(
            "Hello", "sk-test", [ChatMessage(role="user", content="Earlier")]
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [{"message": ""}, {"provider": None}, {"apiKey": ""}, {"message": None, "apiKey": None}],
    )
    async def test_missing_fields_rejected_before_any_adapter(
        self, mock_chat_service, mock_adapters, overrides
    ) -> None:
        with pytest.raises(GatewayValidationError) as exc_info:
            await mock_chat_service.dispatch(make_request(**overrides))

        assert exc_info.value.message == MISSING_FIELDS_MESSAGE
        for adapter in mock_adapters.values():
            adapter.complete.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_fields_take_precedence_over_unknown_provider(
        self, mock_chat_service
    ) -> None:
        with pytest.raises(GatewayValidationError) as exc_info:
            await mock_chat_service.dispatch(make_request(provider="Claude", apiKey=""))

        assert exc_info.value.message == MISSING_FIELDS_MESSAGE

    @pytest.mark.asyncio
    async def test_unknown_provider_rejected(self, mock_chat_service, mock_adapters) -> None:
        with pytest.raises(UnsupportedProviderError):
            await mock_chat_service.dispatch(make_request(provider="openai"))

        for adapter in mock_adapters.values():
            adapter.complete.assert_not_called()

    @pytest.mark.asyncio
    async def test_citations_result_wire_form(self, mock_chat_service, mock_adapters) -> None:
        mock_adapters[Provider.PERPLEXITY].complete.return_value = CitationsResult(
            payload={"citations": ["https://a.example"]},
            icons=[Icon(hostname="a.example", url="https://a.example", favicon="f")],
        )

        envelope = await mock_chat_service.dispatch(make_request(provider="Perplexity"))

        assert envelope.response["citations"] == ["https://a.example"]
        assert envelope.response["icons"][0]["hostname"] == "a.example"

    @pytest.mark.asyncio
    async def test_upstream_error_propagates(self, mock_chat_service, mock_adapters) -> None:
        mock_adapters[Provider.GEMINI].complete.side_effect = UpstreamError(
            "Gemini", 403, "Forbidden"
        )

        with pytest.raises(UpstreamError):
            await mock_chat_service.dispatch(make_request(provider="Gemini"))

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, mock_chat_service, mock_adapters) -> None:
        mock_adapters[Provider.OPENAI].complete.side_effect = httpx.ReadTimeout("timed out")

        with pytest.raises(httpx.ReadTimeout):
            await mock_chat_service.dispatch(make_request())


# =============================================================================
# Lifecycle
# =============================================================================


class TestChatServiceLifecycle:
    @pytest.mark.asyncio
    async def test_close_closes_registry_and_client(self, mock_http_client) -> None:
        registry = AsyncMock()
        service = ChatService(registry, http_client=mock_http_client)

        await service.close()

        registry.close.assert_awaited_once()
        mock_http_client.aclose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_without_client(self) -> None:
        registry = AsyncMock()

        await ChatService(registry).close()

        registry.close.assert_awaited_once()

    def test_create_chat_service_shares_one_client(self, test_settings, mock_http_client) -> None:
        with patch(
            "chat_gateway.services.chat.create_http_client", return_value=mock_http_client
        ) as factory:
            service = create_chat_service(test_settings)

        factory.assert_called_once_with(timeout_seconds=5.0, max_connections=100)
        assert service.registry.list_providers() == ["OpenAI", "Gemini", "Perplexity"]
