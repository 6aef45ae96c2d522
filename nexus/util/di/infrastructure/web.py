"""Web page fetching infrastructure providers."""

from dishka import Scope, provide

from nexus.adapter.web import HttpxPageFetcher
from nexus.config import AISettings
from nexus.domain.service import PageFetcher
from nexus.util.di.base import ProviderBase


class WebProvider(ProviderBase):
    """Web component base."""

    __mock_component__ = "web"


class ProdWebProvider(WebProvider):
    """Production page fetcher provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_page_fetcher(self, ai_settings: AISettings) -> PageFetcher:
        """Provide the httpx page fetcher."""
        return HttpxPageFetcher(timeout=ai_settings.fetch_timeout_seconds)
