"""
Tests for request and response models.
"""

import re

import pytest

from chat_gateway.models.requests import ChatRequest
from chat_gateway.models.responses import ChatResponseEnvelope, utc_timestamp


class TestChatRequest:
    def test_parses_wire_aliases(self) -> None:
        request = ChatRequest.model_validate(
            {
                "message": "Hi",
                "provider": "OpenAI",
                "apiKey": "sk-test",
                "messages": [{"role": "user", "content": "Earlier"}],
            }
        )

        assert request.api_key.get_secret_value() == "sk-test"
        assert request.messages[0].content == "Earlier"
        assert request.missing_required() is False

    def test_messages_default_to_empty(self) -> None:
        assert ChatRequest().messages == []

    def test_null_messages_treated_as_empty(self) -> None:
        assert ChatRequest.model_validate({"messages": None}).messages == []

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"provider": "OpenAI", "apiKey": "k"},
            {"message": "", "provider": "OpenAI", "apiKey": "k"},
            {"message": "Hi", "apiKey": "k"},
            {"message": "Hi", "provider": "", "apiKey": "k"},
            {"message": "Hi", "provider": "OpenAI"},
            {"message": "Hi", "provider": "OpenAI", "apiKey": ""},
        ],
    )
    def test_missing_required(self, body) -> None:
        assert ChatRequest.model_validate(body).missing_required() is True

    def test_api_key_hidden_from_repr(self) -> None:
        request = ChatRequest.model_validate({"apiKey": "sk-secret"})

        assert "sk-secret" not in repr(request)
        assert "sk-secret" not in str(request.model_dump())

    def test_secret_values(self) -> None:
        assert ChatRequest.model_validate({"apiKey": "sk-secret"}).secret_values() == ["sk-secret"]
        assert ChatRequest().secret_values() == []


class TestResponses:
    def test_timestamp_format(self) -> None:
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_timestamp())

    def test_envelope_keys(self) -> None:
        envelope = ChatResponseEnvelope(response="hi", provider="Gemini")

        assert set(envelope.model_dump()) == {"response", "provider", "timestamp"}
