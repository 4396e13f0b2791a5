"""
Core module for the Chat Gateway.

This module contains configuration, exceptions, and shared utilities.
"""

from chat_gateway.core.config import Settings, get_settings
from chat_gateway.core.exceptions import (
    ChatGatewayException,
    ErrorCode,
    GatewayValidationError,
    UnsupportedProviderError,
    UpstreamError,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Exceptions
    "ErrorCode",
    "ChatGatewayException",
    "GatewayValidationError",
    "UnsupportedProviderError",
    "UpstreamError",
]
