"""Unit tests for the source page fetcher."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from nexus.adapter.web.fetcher import USER_AGENT, HttpxPageFetcher


class TestHttpxPageFetcher:
    """Tests for HttpxPageFetcher.fetch."""

    @pytest.mark.asyncio
    async def test_returns_status_and_body(self):
        """Should fetch with the crawler user agent and keep the body."""
        response = MagicMock()
        response.status_code = 200
        response.text = "<p>Jane</p>"

        with patch("httpx.AsyncClient") as mock_client:
            get = AsyncMock(return_value=response)
            mock_client.return_value.__aenter__.return_value.get = get

            page = await HttpxPageFetcher(timeout=3.0).fetch("https://example.com/jane")

        assert page.ok
        assert page.body == "<p>Jane</p>"
        assert get.call_args.kwargs["headers"] == {"User-Agent": USER_AGENT}
        assert get.call_args.kwargs["timeout"] == 3.0
        mock_client.assert_called_once_with(follow_redirects=True)

    @pytest.mark.asyncio
    async def test_error_status_is_kept(self):
        response = MagicMock()
        response.status_code = 404
        response.text = "missing"

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=response
            )

            page = await HttpxPageFetcher().fetch("https://example.com/gone")

        assert page.status == 404
        assert not page.ok

    @pytest.mark.asyncio
    async def test_network_failure_yields_page_without_status(self):
        """Should not raise when the page cannot be reached."""
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                side_effect=httpx.ReadTimeout("slow")
            )

            page = await HttpxPageFetcher().fetch("https://example.com/slow")

        assert page.url == "https://example.com/slow"
        assert page.status is None
        assert not page.ok
