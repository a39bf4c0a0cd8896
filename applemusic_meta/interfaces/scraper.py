"""Abstract base class for detail-page scrapers.

Each scraper owns the structural queries for one page grammar, so a markup
change on the catalog site is fixed in exactly one scraper module.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from applemusic_meta.interfaces.page_fetcher import Document

_RecordT = TypeVar("_RecordT")


class IScraper(ABC, Generic[_RecordT]):
    """Contract for turning a detail page into a catalog record."""

    @abstractmethod
    def scrape(self, document: Document) -> _RecordT | None:
        """Extract a record from *document*.

        Returns
        -------
        record or None
            ``None`` when a mandatory field is missing -- the page did not
            contain the expected item.  Never raises for missing markup.
        """
