"""
Providers Package - Upstream LLM adapters.

This package contains the abstract adapter interface, the OpenAI, Gemini
and Perplexity adapters, and the registry that selects among them.
"""

from chat_gateway.providers.base import MAX_TOKENS, TEMPERATURE, ChatAdapter
from chat_gateway.providers.gemini import GeminiAdapter
from chat_gateway.providers.openai import OpenAIAdapter
from chat_gateway.providers.perplexity import PerplexityAdapter
from chat_gateway.providers.registry import AdapterRegistry, create_adapter_registry

__all__ = [
    "ChatAdapter",
    "MAX_TOKENS",
    "TEMPERATURE",
    "OpenAIAdapter",
    "GeminiAdapter",
    "PerplexityAdapter",
    "AdapterRegistry",
    "create_adapter_registry",
]
