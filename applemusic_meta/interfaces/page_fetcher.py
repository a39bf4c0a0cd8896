"""Abstract base class for page fetchers.

A page fetcher turns a catalog URL into a parsed, navigable document.  It is
pure I/O plus parsing; scrapers and the metadata source never talk to the
HTTP client directly, so tests can inject a fake fetcher serving inline HTML.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from bs4 import BeautifulSoup


@dataclass(frozen=True)
class Document:
    """A fetched catalog page.

    Attributes
    ----------
    url:
        The URL that was requested.  Scrapers derive item ids from it, so it
        is the requested URL rather than any post-redirect location.
    soup:
        The parsed HTML tree.
    """

    url: str
    soup: BeautifulSoup


class IPageFetcher(ABC):
    """Contract for retrieving and parsing catalog pages."""

    @abstractmethod
    async def fetch(self, url: str) -> Document:
        """Fetch *url* and return the parsed document.

        Raises
        ------
        applemusic_meta.utils.errors.FetchError
            On network failure or a non-success HTTP status.
        """
