"""
Chat Gateway - Main Application Entry Point

This module provides the FastAPI application for the Chat Gateway service.
The gateway accepts one chat turn and dispatches it to OpenAI, Gemini or
Perplexity, returning a uniform envelope.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chat_gateway.api.deps import get_chat_service, shutdown_chat_service
from chat_gateway.api.middleware.logging import RequestLoggingMiddleware
from chat_gateway.api.routes.chat import router as chat_router
from chat_gateway.api.routes.health import router as health_router
from chat_gateway.core.config import get_settings
from chat_gateway.observability.logging import configure_logging, get_logger
from chat_gateway.observability.metrics import MetricsMiddleware, get_metrics_app

APP_NAME = "Chat Gateway"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "Single entry point for chat completions across OpenAI, Gemini and Perplexity"

settings = get_settings()
logger = get_logger(__name__)


# =============================================================================
# Lifespan Context Manager
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager for startup/shutdown events.

    Startup configures logging and builds the chat service with its pooled
    HTTP client; shutdown closes that client.
    """
    configure_logging(level=settings.log_level)
    logger.info(
        "service starting",
        service=settings.service_name,
        version=APP_VERSION,
        environment=settings.environment,
    )

    app.state.chat_service = get_chat_service()
    app.state.initialized = True

    yield

    logger.info("service shutting down", service=settings.service_name)
    await shutdown_chat_service()
    app.state.initialized = False


app = FastAPI(
    title=APP_NAME,
    description=APP_DESCRIPTION,
    version=APP_VERSION,
    docs_url="/docs" if settings.environment != "production" else None,
    redoc_url="/redoc" if settings.environment != "production" else None,
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(MetricsMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(chat_router)
app.mount("/metrics", get_metrics_app())


# =============================================================================
# Root Endpoint
# =============================================================================


@app.get("/", tags=["Info"])
async def root() -> dict[str, Any]:
    """Root endpoint returning basic service information."""
    return {
        "service": APP_NAME,
        "version": APP_VERSION,
        "docs": "/docs" if settings.environment != "production" else "disabled",
    }
