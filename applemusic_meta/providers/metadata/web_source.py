"""Apple Music web metadata source.

Implements IMetadataSource by scraping ``music.apple.com``.  Detail pages are
fetched through an injected :class:`IPageFetcher` and parsed by the album and
artist scrapers; this module only orchestrates:

- ``search`` fetches the results page, then resolves *every* linked item from
  its own detail page (1 + N fetches), because the results page carries no
  item data beyond the link.
- ``get_album`` resolves every artist stub found on the album page through
  ``get_artist``, so album records always carry full artist records.

Both fan-outs run concurrently through :func:`ordered_gather`: output order
follows the page order, failed scrapes are dropped, a transport failure
cancels the remaining fetches and propagates, and cancelling the caller
cancels everything still in flight.
"""

from __future__ import annotations

import asyncio

from applemusic_meta.interfaces.metadata_source import IMetadataSource
from applemusic_meta.interfaces.page_fetcher import Document, IPageFetcher
from applemusic_meta.interfaces.scraper import IScraper
from applemusic_meta.models.entities import Album, Artist, CatalogItem, ItemType
from applemusic_meta.providers.scrapers.album_scraper import AlbumScraper
from applemusic_meta.providers.scrapers.artist_scraper import ArtistScraper
from applemusic_meta.providers.scrapers.search_scraper import SearchResultScraper
from applemusic_meta.utils import urls
from applemusic_meta.utils.concurrency import ordered_gather
from applemusic_meta.utils.logging import get_logger

_DEFAULT_MAX_CONCURRENCY = 5


class WebMetadataSource(IMetadataSource):
    """Metadata source that scrapes the Apple Music website.

    Parameters
    ----------
    fetcher:
        Page fetcher; its :class:`FetchError` is never caught here.
    region:
        Storefront region substituted into every catalog URL (``"us"``, ``"jp"``).
    album_scraper, artist_scraper, search_scraper:
        Optional scraper overrides; defaults are used when omitted.
    max_concurrency:
        Upper bound on concurrent page fetches issued by one source.
    """

    def __init__(
        self,
        fetcher: IPageFetcher,
        region: str = "jp",
        album_scraper: IScraper[Album] | None = None,
        artist_scraper: IScraper[Artist] | None = None,
        search_scraper: SearchResultScraper | None = None,
        max_concurrency: int = _DEFAULT_MAX_CONCURRENCY,
    ) -> None:
        self._fetcher = fetcher
        self._region = region
        self._album_scraper = album_scraper or AlbumScraper()
        self._artist_scraper = artist_scraper or ArtistScraper()
        self._search_scraper = search_scraper or SearchResultScraper()
        self._semaphore = asyncio.Semaphore(max_concurrency)
        self._logger = get_logger(__name__)

    @property
    def region(self) -> str:
        return self._region

    # -- IMetadataSource implementation ----------------------------------------

    async def search(self, term: str, item_type: ItemType) -> list[CatalogItem]:
        search_url = urls.search_url(self._region, term)
        self._logger.info("catalog_search_started", term=term, item_type=item_type.value)

        document = await self._fetch(search_url)
        item_urls = self._search_scraper.scrape(document, item_type)
        item_ids = [urls.get_id_from_url(u) for u in item_urls]

        lookup = self.get_album if item_type is ItemType.ALBUM else self.get_artist
        resolved = await ordered_gather([lookup(item_id) for item_id in item_ids])
        results: list[CatalogItem] = [item for item in resolved if item is not None]

        self._logger.info(
            "catalog_search_complete",
            term=term,
            item_type=item_type.value,
            link_count=len(item_ids),
            result_count=len(results),
        )
        return results

    async def get_album(self, album_id: str) -> Album | None:
        album_url = urls.album_url(self._region, album_id)
        document = await self._fetch(album_url)

        album = self._album_scraper.scrape(document)
        if album is None:
            self._logger.info("album_scrape_failed", url=album_url)
            return None

        artists = await self._resolve_artists(album.artists)
        self._logger.info(
            "album_resolved",
            album_id=album.id,
            stub_count=len(album.artists),
            artist_count=len(artists),
        )
        return album.model_copy(update={"artists": tuple(artists)})

    async def get_artist(self, artist_id: str) -> Artist | None:
        artist_url = urls.artist_url(self._region, artist_id)
        document = await self._fetch(artist_url)

        artist = self._artist_scraper.scrape(document)
        if artist is None:
            self._logger.info("artist_scrape_failed", url=artist_url)
        return artist

    # -- Private helpers -------------------------------------------------------

    async def _fetch(self, url: str) -> Document:
        async with self._semaphore:
            return await self._fetcher.fetch(url)

    async def _resolve_artists(self, stubs: tuple[Artist, ...]) -> list[Artist]:
        """Replace stubs with full artist records, keeping stub order."""
        resolved = await ordered_gather(
            [self.get_artist(urls.get_id_from_url(stub.url)) for stub in stubs]
        )
        return [artist for artist in resolved if artist is not None]
