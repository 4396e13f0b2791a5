"""
HTTP Client Module - Upstream client factory.

Builds the pooled httpx.AsyncClient shared by all provider adapters.
Transport retries are disabled: a failed upstream call surfaces immediately.
"""

from typing import Optional

import httpx

DEFAULT_TIMEOUT_SECONDS: float = 120.0
"""Default timeout for upstream calls; LLM completions are slow."""

DEFAULT_MAX_CONNECTIONS: int = 100
"""Maximum number of connections in the pool."""

DEFAULT_MAX_KEEPALIVE: int = 20
"""Maximum number of keepalive connections."""

USER_AGENT = "chat-gateway/1.0"


def create_http_client(
    timeout_seconds: Optional[float] = None,
    max_connections: Optional[int] = None,
    max_keepalive: Optional[int] = None,
    headers: Optional[dict[str, str]] = None,
) -> httpx.AsyncClient:
    """
    Create a configured HTTP client with connection pooling and timeouts.

    Args:
        timeout_seconds: Request timeout in seconds (default: 120.0)
        max_connections: Maximum connections in pool (default: 100)
        max_keepalive: Maximum keepalive connections (default: 20)
        headers: Additional headers to include in all requests

    Returns:
        httpx.AsyncClient: Configured async HTTP client

    Example:
        >>> client = create_http_client(timeout_seconds=60.0)
        >>> async with client:
        ...     response = await client.post(url, json=payload)
    """
    timeout = timeout_seconds if timeout_seconds is not None else DEFAULT_TIMEOUT_SECONDS
    max_conn = max_connections if max_connections is not None else DEFAULT_MAX_CONNECTIONS
    max_keep = max_keepalive if max_keepalive is not None else DEFAULT_MAX_KEEPALIVE

    limits = httpx.Limits(
        max_connections=max_conn,
        max_keepalive_connections=min(max_keep, max_conn),
    )

    default_headers = {
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    }
    if headers:
        default_headers.update(headers)

    transport = httpx.AsyncHTTPTransport(retries=0, limits=limits)

    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        headers=default_headers,
        transport=transport,
    )
