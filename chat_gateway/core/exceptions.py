"""
Custom exceptions for the Chat Gateway.

All exceptions inherit from ChatGatewayException and carry an error code for
consistent error handling and logging. The API boundary maps validation
errors to 400 and every other failure to 500.
"""

from enum import Enum
from typing import Any


# =============================================================================
# Error Codes
# =============================================================================


class ErrorCode(str, Enum):
    """
    Error codes for Chat Gateway exceptions.

    These codes identify error types in logs; they are not part of the
    public error body.
    """

    GATEWAY_ERROR = "GATEWAY_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"


# =============================================================================
# Base Exception
# =============================================================================


class ChatGatewayException(Exception):
    """
    Base exception for all Chat Gateway errors.

    Attributes:
        message: Human-readable error message.
        error_code: Machine-readable error code from ErrorCode enum.
    """

    def __init__(
        self,
        message: str,
        error_code: str = ErrorCode.GATEWAY_ERROR,
        **kwargs: Any,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            error_code: Machine-readable error code.
            **kwargs: Additional attributes to set on the exception.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code

        for key, value in kwargs.items():
            setattr(self, key, value)


# =============================================================================
# Validation Errors (client errors)
# =============================================================================


class GatewayValidationError(ChatGatewayException):
    """
    Exception for request validation errors.

    Raised when the inbound chat request is missing a required field or
    carries values of the wrong shape. Always surfaced as a client error.

    Note: Named GatewayValidationError to avoid conflict with
    pydantic.ValidationError.

    Attributes:
        field: Name of the field that failed validation (if known).
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        error_code: str = ErrorCode.VALIDATION_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.field = field


class UnsupportedProviderError(GatewayValidationError):
    """Raised when the requested provider is not one of the known providers."""

    def __init__(self, provider: str | None = None, **kwargs: Any) -> None:
        super().__init__("Unsupported provider", field="provider", **kwargs)
        self.provider = provider


# =============================================================================
# Upstream Errors (server errors)
# =============================================================================


class UpstreamError(ChatGatewayException):
    """
    Exception for non-success responses from an upstream provider API.

    The message embeds the provider label, status code and reason phrase,
    e.g. "OpenAI API error: 401 Unauthorized".

    Attributes:
        provider: Provider label (e.g., "OpenAI").
        status_code: HTTP status code returned by the upstream API.
        status_text: HTTP reason phrase returned by the upstream API.
    """

    def __init__(
        self,
        provider: str,
        status_code: int,
        status_text: str = "",
        error_code: str = ErrorCode.UPSTREAM_ERROR,
        **kwargs: Any,
    ) -> None:
        message = f"{provider} API error: {status_code} {status_text}".rstrip()
        super().__init__(message, error_code, **kwargs)
        self.provider = provider
        self.status_code = status_code
        self.status_text = status_text
