"""httpx-backed page fetcher.

Implements IPageFetcher over an injected ``httpx.AsyncClient``.  Unlike the
scraping providers' usual "return None on HTTP trouble" approach, any
transport failure or non-success status is raised as :class:`FetchError`:
the metadata source must be able to tell "page missing the expected item"
(``None``) apart from "could not load the page" (error).
"""

from __future__ import annotations

import httpx
from bs4 import BeautifulSoup

from applemusic_meta.interfaces.page_fetcher import Document, IPageFetcher
from applemusic_meta.utils.errors import FetchError
from applemusic_meta.utils.logging import get_logger

_PROVIDER_NAME = "web_fetcher"


class HttpxPageFetcher(IPageFetcher):
    """Fetch catalog pages with httpx and parse them with BeautifulSoup.

    The client is owned by the caller (the plugin wiring), which closes it.
    No caching and no retries happen here; redirects are followed.
    """

    def __init__(self, http_client: httpx.AsyncClient, user_agent: str | None = None) -> None:
        self._http = http_client
        self._headers = {"User-Agent": user_agent} if user_agent else {}
        self._logger = get_logger(__name__)

    async def fetch(self, url: str) -> Document:
        self._logger.debug("page_fetch_started", url=url)
        # InvalidURL (e.g. from a malformed stored id) is not an HTTPError subclass.
        try:
            response = await self._http.get(url, headers=self._headers, follow_redirects=True)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            self._logger.warning("page_fetch_failed", url=url, error=str(exc))
            raise FetchError(
                f"Request to {url} failed: {exc}", provider_name=_PROVIDER_NAME, url=url
            ) from exc

        if not response.is_success:
            self._logger.warning("page_fetch_http_error", url=url, status=response.status_code)
            raise FetchError(
                f"HTTP {response.status_code} for {url}",
                provider_name=_PROVIDER_NAME,
                url=url,
                status_code=response.status_code,
            )

        self._logger.debug("page_fetch_complete", url=url, status=response.status_code)
        return Document(url=url, soup=BeautifulSoup(response.text, "html.parser"))
