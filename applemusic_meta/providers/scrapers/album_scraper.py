"""Apple Music album detail-page scraper.

Mandatory fields are the album title and at least one artist link in the
detail header; without them the page is not an album page and ``scrape``
returns ``None``.  Artwork, the editorial blurb and the release date are
optional and degrade to ``None`` independently.

Artists are emitted as stubs (name, url, url-derived id).  Resolving them to
full artist records is the metadata source's job, not the scraper's.
"""

from __future__ import annotations

import datetime
import re
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from applemusic_meta.interfaces.page_fetcher import Document
from applemusic_meta.interfaces.scraper import IScraper
from applemusic_meta.models.entities import Album, AlbumDescription, Artist
from applemusic_meta.utils.logging import get_logger
from applemusic_meta.utils.urls import get_id_from_url

_DETAIL_HEADER = "div[data-testid='container-detail-header']"
_ALBUM_NAME = f"{_DETAIL_HEADER} h1[data-testid='non-editable-product-title']"
_ALBUM_ARTISTS = f"{_DETAIL_HEADER} a[data-testid='click-action']"
_ABOUT = f"{_DETAIL_HEADER} p[data-testid='truncate-text']"
_IMAGE_SOURCE = (
    f"{_DETAIL_HEADER} div[data-testid='artwork-component'] source[type='image/jpeg']"
)
_ALBUM_DESCRIPTION = "p[data-testid='tracklist-footer-description']"

# "<Month> <day>, <year> · <runtime> <unit> · <production year> <producer>"
_ALBUM_DESCRIPTION_RE = re.compile(
    r"(?P<date>\w+ \d+, \d+)\W+(?P<runtime>\d+)\W+(?P<runtime_unit>\w+)"
    r"\W+(?P<production_year>\d+)\W+(?P<producer>\w+)",
    re.MULTILINE,
)
_DATE_RE = re.compile(r"(?P<month>\w+) (?P<day>\d+), (?P<year>\d+)")

# Fixed table so parsing never depends on the process locale.
_MONTHS = {
    name: index
    for index, name in enumerate(
        (
            "january", "february", "march", "april", "may", "june",
            "july", "august", "september", "october", "november", "december",
        ),
        start=1,
    )
}


def parse_release_date(text: str) -> datetime.date | None:
    """Parse ``"<Month name> <day>, <year>"`` (English month names only)."""
    match = _DATE_RE.fullmatch(text.strip())
    if match is None:
        return None
    month = _MONTHS.get(match.group("month").lower())
    if month is None:
        return None
    try:
        return datetime.date(int(match.group("year")), month, int(match.group("day")))
    except ValueError:
        return None


def parse_album_description(text: str | None) -> AlbumDescription | None:
    """Parse the tracklist footer text, or return ``None`` if it does not match."""
    if text is None:
        return None
    match = _ALBUM_DESCRIPTION_RE.search(text)
    if match is None:
        return None
    release_date = parse_release_date(match.group("date"))
    if release_date is None:
        return None
    return AlbumDescription(
        date=release_date,
        runtime=int(match.group("runtime")),
        runtime_unit=match.group("runtime_unit"),
        production_year=int(match.group("production_year")),
        producer=match.group("producer"),
    )


class AlbumScraper(IScraper[Album]):
    """Scrape an album detail page into an :class:`Album` with artist stubs."""

    def __init__(self) -> None:
        self._logger = get_logger(__name__)

    def scrape(self, document: Document) -> Album | None:
        soup = document.soup

        name_el = soup.select_one(_ALBUM_NAME)
        if name_el is None:
            self._logger.debug("album_name_not_found", url=document.url)
            return None

        artists = self._scrape_artist_stubs(soup, document.url)
        if not artists:
            self._logger.debug("album_artists_not_found", url=document.url)
            return None

        about_el = soup.select_one(_ABOUT)
        description_el = soup.select_one(_ALBUM_DESCRIPTION)
        description_text = description_el.get_text() if description_el is not None else None
        description = parse_album_description(description_text)
        if description_text is not None and description is None:
            self._logger.debug("album_description_unparsed", text=description_text)

        album = Album(
            id=get_id_from_url(document.url),
            name=name_el.get_text().strip(),
            url=document.url,
            image_url=self._scrape_image_url(soup),
            about=about_el.get_text().strip() if about_el is not None else None,
            release_date=description.date if description is not None else None,
            artists=tuple(artists),
        )
        self._logger.debug(
            "album_scrape_complete", url=document.url, artist_count=len(album.artists)
        )
        return album

    @staticmethod
    def _scrape_artist_stubs(soup: BeautifulSoup, page_url: str) -> list[Artist]:
        stubs: list[Artist] = []
        for anchor in soup.select(_ALBUM_ARTISTS):
            href = anchor.get("href")
            if not href:
                continue
            url = urljoin(page_url, href)
            stubs.append(
                Artist(id=get_id_from_url(url), name=anchor.get_text().strip(), url=url)
            )
        return stubs

    @staticmethod
    def _scrape_image_url(soup: BeautifulSoup) -> str | None:
        source = soup.select_one(_IMAGE_SOURCE)
        if source is None:
            return None
        # srcset lists "<url> <width>w, <url> <width>w"; keep the first candidate.
        candidates = source.get("srcset", "").split()
        return candidates[0] if candidates else None
