"""
Citation Enrichment Client

Maps citation URLs to site metadata (hostname and favicon image URL) for
the Perplexity adapter. The enricher is an injected collaborator so tests
and alternative favicon services can stand in for the default.
"""

from abc import ABC, abstractmethod
from urllib.parse import quote, urlsplit

from chat_gateway.models.domain import Icon
from chat_gateway.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_FAVICON_TEMPLATE = "https://www.google.com/s2/favicons?domain={hostname}&sz=64"


class CitationEnricher(ABC):
    """Port for citation enrichment."""

    @abstractmethod
    async def enrich(self, urls: list[str]) -> list[Icon]:
        """
        Return one Icon per URL, in the same order.

        Must return an empty list for an empty input rather than failing.
        """
        ...


class FaviconEnricher(CitationEnricher):
    """
    Enricher backed by a public favicon image service.

    The favicon URL is built from ``url_template`` with the citation's
    hostname; browsers fetch the image directly from that service.

    Example:
        >>> enricher = FaviconEnricher()
        >>> icons = await enricher.enrich(["https://docs.python.org/3/"])
        >>> icons[0].hostname
        'docs.python.org'
    """

    def __init__(self, url_template: str = DEFAULT_FAVICON_TEMPLATE) -> None:
        self._url_template = url_template

    async def enrich(self, urls: list[str]) -> list[Icon]:
        icons = [self._icon_for(url) for url in urls]
        logger.debug("citations enriched", count=len(icons))
        return icons

    def _icon_for(self, url: str) -> Icon:
        hostname = extract_hostname(url)
        favicon = ""
        if hostname:
            # Only {hostname} is substituted; other braces stay literal
            favicon = self._url_template.replace("{hostname}", quote(hostname, safe=".-"))
        return Icon(hostname=hostname, url=url, favicon=favicon)


def extract_hostname(url: str) -> str:
    """
    Hostname of ``url``, or "" when it cannot be parsed.

    Scheme-less URLs ("example.com/page") are parsed as if http:// were given.
    """
    if not isinstance(url, str) or not url.strip():
        return ""
    candidate = url.strip()
    if "://" not in candidate:
        candidate = f"http://{candidate}"
    try:
        return urlsplit(candidate).hostname or ""
    except ValueError:
        return ""
