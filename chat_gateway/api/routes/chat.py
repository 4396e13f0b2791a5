"""
Chat Router - POST /api/chat

Single entry point for chat requests. The route is the boundary where every
failure is converted into an ``{"error": ...}`` body:

- 200: ``{response, provider, timestamp}``
- 400: missing fields, malformed fields, unsupported provider
- 500: upstream and internal failures
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from chat_gateway.api.deps import get_chat_service
from chat_gateway.core.exceptions import GatewayValidationError, UpstreamError
from chat_gateway.models.requests import ChatRequest
from chat_gateway.models.responses import ChatResponseEnvelope, ErrorResponse
from chat_gateway.services.chat import ChatService, parse_chat_request
from chat_gateway.services.envelope import to_error_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Chat"])


@router.post(
    "/chat",
    response_model=ChatResponseEnvelope,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(
    request: Request,
    chat_service: ChatService = Depends(get_chat_service),
) -> Any:
    """
    Dispatch one chat turn to the requested provider.

    Args:
        request: Raw request; the JSON body is parsed inside the error boundary
        chat_service: Injected chat service dependency

    Returns:
        JSONResponse with the envelope (200) or an error body (400/500)
    """
    chat_request: ChatRequest | None = None
    try:
        body = await request.json()
        chat_request = parse_chat_request(body)
        envelope = await chat_service.dispatch(chat_request)
    except GatewayValidationError as e:
        logger.info(f"Rejected chat request: {e.message}")
        return _error_response(e, chat_request)
    except UpstreamError as e:
        logger.error(
            f"Upstream error: provider={e.provider}, "
            f"status_code={e.status_code}, status_text={e.status_text}"
        )
        return _error_response(e, chat_request)
    except Exception as e:
        logger.error(f"Chat request failed: {type(e).__name__}")
        return _error_response(e, chat_request)

    return JSONResponse(status_code=200, content=envelope.model_dump())


def _error_response(exc: Exception, chat_request: ChatRequest | None) -> JSONResponse:
    secrets = chat_request.secret_values() if chat_request is not None else []
    status_code, body = to_error_response(exc, secrets)
    return JSONResponse(status_code=status_code, content=body.model_dump())
