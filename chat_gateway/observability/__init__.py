"""
Observability Package

- Structured JSON logging with correlation IDs (structlog)
- Prometheus metrics for HTTP requests and upstream provider calls
"""

from chat_gateway.observability.logging import (
    clear_correlation_id,
    configure_logging,
    correlation_id_context,
    get_correlation_id,
    get_logger,
    set_correlation_id,
)
from chat_gateway.observability.metrics import (
    MetricsMiddleware,
    generate_metrics,
    get_metrics_app,
    record_upstream_call,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
    "correlation_id_context",
    # Metrics
    "MetricsMiddleware",
    "get_metrics_app",
    "generate_metrics",
    "record_upstream_call",
]
