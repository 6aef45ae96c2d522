"""Fetches pages linked from contacts."""

import httpx
import logfire

from nexus.domain.service.insight_service import PageFetcher
from nexus.domain.value import SourcePage

USER_AGENT = "Mozilla/5.0 (compatible; NexusCRM/1.0; +https://nexus.app)"


class HttpxPageFetcher(PageFetcher):
    """Page fetcher over httpx with a per-request timeout."""

    def __init__(self, timeout: float = 8.0) -> None:
        """Initialize fetcher.

        Args:
            timeout: Seconds allowed per page
        """
        self.timeout = timeout

    async def fetch(self, url: str) -> SourcePage:
        """Fetch a page.

        Network errors and timeouts yield a page without a status.
        """
        try:
            async with httpx.AsyncClient(follow_redirects=True) as client:
                response = await client.get(
                    url,
                    headers={"User-Agent": USER_AGENT},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.warn("Source page unavailable", url=url, error=str(e))
            return SourcePage(url=url)

        logfire.debug("Source page fetched", url=url, status_code=response.status_code)
        return SourcePage(url=url, status=response.status_code, body=response.text)


class MockPageFetcher(PageFetcher):
    """Mock fetcher serving preset pages; unknown URLs are unavailable."""

    def __init__(self, pages: dict[str, SourcePage] | None = None) -> None:
        self.pages = pages or {}
        self.requested: list[str] = []

    async def fetch(self, url: str) -> SourcePage:
        """Return the preset page for the URL."""
        self.requested.append(url)
        return self.pages.get(url, SourcePage(url=url))
