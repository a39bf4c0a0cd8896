"""Apple Music search-results page scraper.

A search page groups hits into labelled sections ("Albums", "Artists", ...).
The page only carries identity and linkage, so this scraper returns item
URLs; the metadata source resolves each one from its detail page.
"""

from __future__ import annotations

from urllib.parse import urljoin

from applemusic_meta.interfaces.page_fetcher import Document
from applemusic_meta.models.entities import ItemType
from applemusic_meta.utils.logging import get_logger

_SECTION = "div[data-testid='section-container'][aria-label='{label}']"
_SECTION_LABELS = {
    ItemType.ALBUM: "Albums",
    ItemType.ARTIST: "Artists",
}
# Album rows also link to their artists; only the title link identifies the album.
_ALBUM_TITLE_LINK = "li a[data-testid='product-lockup-title']"
_ANY_LINK = "li a"


class SearchResultScraper:
    """Extract item URLs for one section of a search-results page."""

    def __init__(self) -> None:
        self._logger = get_logger(__name__)

    @staticmethod
    def section_selector(item_type: ItemType) -> str:
        section = _SECTION.format(label=_SECTION_LABELS[item_type])
        link = _ALBUM_TITLE_LINK if item_type is ItemType.ALBUM else _ANY_LINK
        return f"{section} {link}"

    def scrape(self, document: Document, item_type: ItemType) -> list[str]:
        """Return absolute item URLs in document order.

        Anchors without an ``href`` are skipped; a missing section yields an
        empty list.
        """
        urls: list[str] = []
        for anchor in document.soup.select(self.section_selector(item_type)):
            href = anchor.get("href")
            if href:
                urls.append(urljoin(document.url, href))

        self._logger.debug(
            "search_section_scraped",
            url=document.url,
            item_type=item_type.value,
            link_count=len(urls),
        )
        return urls
