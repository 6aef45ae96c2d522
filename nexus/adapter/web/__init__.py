"""Web page fetching adapter."""

from .fetcher import HttpxPageFetcher, MockPageFetcher

__all__ = ["HttpxPageFetcher", "MockPageFetcher"]
