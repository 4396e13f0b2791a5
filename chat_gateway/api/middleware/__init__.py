"""
API Middleware Package

- logging: Request/response logging with header redaction and correlation IDs
"""

from chat_gateway.api.middleware.logging import (
    REQUEST_ID_HEADER,
    RequestLoggingMiddleware,
    redact_sensitive_headers,
)

__all__ = [
    "REQUEST_ID_HEADER",
    "RequestLoggingMiddleware",
    "redact_sensitive_headers",
]
