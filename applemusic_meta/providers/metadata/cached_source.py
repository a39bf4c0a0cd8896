"""Caching decorator for metadata sources.

Wraps any IMetadataSource and memoises ``get_album`` / ``get_artist``
results by catalog identity in an ICacheProvider.  Misses (``None``) are
never cached so a page that failed to scrape is retried on the next request.
``search`` is passed straight through; the items it returns are not added
to the cache because the wrapped source resolves them internally.
"""

from __future__ import annotations

from applemusic_meta.interfaces.cache_provider import ICacheProvider
from applemusic_meta.interfaces.metadata_source import IMetadataSource
from applemusic_meta.models.entities import Album, Artist, CatalogItem, ItemType
from applemusic_meta.utils.logging import get_logger


class CachedMetadataSource(IMetadataSource):
    """IMetadataSource that consults *cache* before delegating to *inner*."""

    def __init__(self, inner: IMetadataSource, cache: ICacheProvider) -> None:
        self._inner = inner
        self._cache = cache
        self._logger = get_logger(__name__)

    async def search(self, term: str, item_type: ItemType) -> list[CatalogItem]:
        return await self._inner.search(term, item_type)

    async def get_album(self, album_id: str) -> Album | None:
        cached = await self._cache.get(ItemType.ALBUM, album_id)
        if isinstance(cached, Album):
            self._logger.debug("album_cache_hit", album_id=album_id)
            return cached

        album = await self._inner.get_album(album_id)
        if album is not None:
            await self._cache.put(album)
        return album

    async def get_artist(self, artist_id: str) -> Artist | None:
        cached = await self._cache.get(ItemType.ARTIST, artist_id)
        if isinstance(cached, Artist):
            self._logger.debug("artist_cache_hit", artist_id=artist_id)
            return cached

        artist = await self._inner.get_artist(artist_id)
        if artist is not None:
            await self._cache.put(artist)
        return artist
