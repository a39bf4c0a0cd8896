"""Apple Music artist detail-page scraper."""

from __future__ import annotations

from bs4 import BeautifulSoup

from applemusic_meta.interfaces.page_fetcher import Document
from applemusic_meta.interfaces.scraper import IScraper
from applemusic_meta.models.entities import Artist
from applemusic_meta.utils.logging import get_logger
from applemusic_meta.utils.urls import get_id_from_url

_ARTIST_NAME = "h1[data-testid='artist-header-name']"
_OVERVIEW = "p[data-testid='truncate-text']"
_OG_IMAGE = "meta[property='og:image']"
# Artists without artwork get the generic Apple Music logo as og:image.
_PLACEHOLDER_IMAGE = "apple-music.png"


class ArtistScraper(IScraper[Artist]):
    """Scrape an artist detail page into an :class:`Artist`.

    Only the header name is mandatory.  The image comes from the page's
    Open Graph metadata and is kept exactly as published.
    """

    def __init__(self) -> None:
        self._logger = get_logger(__name__)

    def scrape(self, document: Document) -> Artist | None:
        soup = document.soup

        name_el = soup.select_one(_ARTIST_NAME)
        if name_el is None:
            self._logger.debug("artist_name_not_found", url=document.url)
            return None

        overview_el = soup.select_one(_OVERVIEW)
        if overview_el is None:
            self._logger.debug("artist_overview_not_found", url=document.url)

        return Artist(
            id=get_id_from_url(document.url),
            name=name_el.get_text().strip(),
            url=document.url,
            image_url=self._scrape_image_url(soup),
            about=overview_el.get_text().strip() if overview_el is not None else None,
        )

    @staticmethod
    def _scrape_image_url(soup: BeautifulSoup) -> str | None:
        for meta in soup.select(_OG_IMAGE):
            content = meta.get("content", "")
            if content and _PLACEHOLDER_IMAGE not in content:
                return content
        return None
