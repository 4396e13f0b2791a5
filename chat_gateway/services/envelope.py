"""
Envelope and Error Mapping.

Turns adapter results into the success envelope and exceptions into the
``{"error": ...}`` body with its status code. This is the only place that
decides which failures are client errors.
"""

from typing import Iterable

from chat_gateway.core.exceptions import GatewayValidationError
from chat_gateway.models.domain import AdapterResult, Provider
from chat_gateway.models.responses import ChatResponseEnvelope, ErrorResponse

INTERNAL_ERROR_MESSAGE = "Internal server error"
REDACTED = "[REDACTED]"


def build_envelope(result: AdapterResult, provider: Provider) -> ChatResponseEnvelope:
    """Wrap a normalized result with the provider name and a fresh timestamp."""
    return ChatResponseEnvelope(response=result.to_wire(), provider=provider.value)


def to_error_response(
    exc: BaseException,
    secrets: Iterable[str] = (),
) -> tuple[int, ErrorResponse]:
    """
    Map an exception to a status code and error body.

    Validation errors become 400; anything else becomes 500 carrying the
    exception's message, or a generic message when it has none. Secret
    values are scrubbed from the message.

    Args:
        exc: The failure raised while handling the request.
        secrets: Values (the caller's API key) that must not be echoed.

    Returns:
        (status_code, ErrorResponse)
    """
    status_code = 400 if isinstance(exc, GatewayValidationError) else 500
    message = getattr(exc, "message", None) or str(exc) or INTERNAL_ERROR_MESSAGE
    return status_code, ErrorResponse(error=redact(message, secrets))


def redact(text: str, secrets: Iterable[str]) -> str:
    """Replace every occurrence of each non-empty secret with [REDACTED]."""
    for secret in secrets:
        if secret:
            text = text.replace(secret, REDACTED)
    return text
