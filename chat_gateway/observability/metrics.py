"""
Prometheus Metrics Module

HTTP request metrics collected by an ASGI middleware, plus per-provider
upstream call metrics recorded by the adapters.
"""

import time
from typing import Any, Callable, Optional

from prometheus_client import (
    REGISTRY,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
    make_asgi_app,
)

# =============================================================================
# HTTP Request Metrics
# =============================================================================

REQUESTS_TOTAL = Counter(
    name="chat_gateway_requests_total",
    documentation="Total number of HTTP requests",
    labelnames=["method", "path", "status"],
)

REQUEST_DURATION_SECONDS = Histogram(
    name="chat_gateway_request_duration_seconds",
    documentation="HTTP request duration in seconds",
    labelnames=["method", "path"],
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0),
)

REQUESTS_IN_PROGRESS = Gauge(
    name="chat_gateway_requests_in_progress",
    documentation="Number of HTTP requests currently being processed",
    labelnames=["method"],
)

# =============================================================================
# Upstream Provider Metrics
# =============================================================================

UPSTREAM_REQUESTS_TOTAL = Counter(
    name="chat_gateway_upstream_requests_total",
    documentation="Upstream provider calls by response status",
    labelnames=["provider", "status"],
)

UPSTREAM_DURATION_SECONDS = Histogram(
    name="chat_gateway_upstream_duration_seconds",
    documentation="Upstream provider call duration in seconds",
    labelnames=["provider"],
    buckets=(0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0, 120.0),
)


def record_upstream_call(provider: str, status: int | str, duration_seconds: float) -> None:
    """
    Record one upstream call.

    Args:
        provider: Provider wire name (OpenAI, Gemini, Perplexity)
        status: HTTP status code, or "error" when no response arrived
        duration_seconds: Wall time of the call
    """
    UPSTREAM_REQUESTS_TOTAL.labels(provider=provider, status=str(status)).inc()
    UPSTREAM_DURATION_SECONDS.labels(provider=provider).observe(duration_seconds)


# =============================================================================
# MetricsMiddleware ASGI Middleware
# =============================================================================


class MetricsMiddleware:
    """
    ASGI middleware for Prometheus metrics collection.

    Increments the request counter per method/path/status, records latency
    and tracks in-progress requests. Paths in ``exclude_paths`` are skipped.
    """

    def __init__(
        self,
        app: Callable[..., Any],
        exclude_paths: Optional[list[str]] = None,
    ) -> None:
        self.app = app
        self.exclude_paths = exclude_paths or ["/metrics"]

    async def __call__(
        self,
        scope: dict[str, Any],
        receive: Callable[..., Any],
        send: Callable[..., Any],
    ) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        method = scope.get("method", "GET")
        path = scope.get("path", "/")

        if any(path.startswith(excluded) for excluded in self.exclude_paths):
            await self.app(scope, receive, send)
            return

        REQUESTS_IN_PROGRESS.labels(method=method).inc()
        start_time = time.perf_counter()
        status_code = "500"

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = str(message.get("status", 500))
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            duration = time.perf_counter() - start_time
            REQUESTS_TOTAL.labels(method=method, path=path, status=status_code).inc()
            REQUEST_DURATION_SECONDS.labels(method=method, path=path).observe(duration)
            REQUESTS_IN_PROGRESS.labels(method=method).dec()


# =============================================================================
# Metrics Endpoint
# =============================================================================


def get_metrics_app() -> Callable[..., Any]:
    """ASGI app serving the Prometheus exposition format."""
    return make_asgi_app()


def generate_metrics() -> str:
    """Generate Prometheus metrics text format."""
    return generate_latest(REGISTRY).decode("utf-8")
