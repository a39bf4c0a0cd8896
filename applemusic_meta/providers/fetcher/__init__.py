"""Page fetcher adapters."""

from applemusic_meta.providers.fetcher.httpx_fetcher import HttpxPageFetcher

__all__ = ["HttpxPageFetcher"]
