"""
Clients Package - Outbound HTTP plumbing and the citation enrichment client.
"""

from chat_gateway.clients.favicons import (
    CitationEnricher,
    FaviconEnricher,
    extract_hostname,
)
from chat_gateway.clients.http import (
    DEFAULT_MAX_CONNECTIONS,
    DEFAULT_MAX_KEEPALIVE,
    DEFAULT_TIMEOUT_SECONDS,
    create_http_client,
)

__all__ = [
    # HTTP client factory
    "create_http_client",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_MAX_CONNECTIONS",
    "DEFAULT_MAX_KEEPALIVE",
    # Citation enrichment
    "CitationEnricher",
    "FaviconEnricher",
    "extract_hostname",
]
