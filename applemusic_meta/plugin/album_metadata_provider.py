"""Album metadata provider for the host media server.

Search results come from a stored ``ITunesAlbum`` id when the host already
knows one, otherwise from a catalog search by album name (optionally
filtered by year).  Full metadata is only fetched by id; without a stored id
the provider reports "no metadata" and lets the host pick a search result
first.
"""

from __future__ import annotations

from applemusic_meta.models.entities import Album, ItemType
from applemusic_meta.models.host import (
    AlbumInfo,
    ImageType,
    MetadataResult,
    MusicAlbum,
    ProviderKey,
    RemoteSearchResult,
)
from applemusic_meta.plugin.base import AppleMusicProviderBase
from applemusic_meta.plugin.mapping import album_to_search_result
from applemusic_meta.utils.logging import get_logger

_logger = get_logger(__name__)


class AlbumMetadataProvider(AppleMusicProviderBase):
    """Remote metadata provider for music albums."""

    async def get_search_results(self, info: AlbumInfo) -> list[RemoteSearchResult]:
        album_id = info.get_provider_id(ProviderKey.ITUNES_ALBUM)
        if album_id:
            _logger.info("album_lookup_by_id", album_id=album_id)
            album = await self._source.get_album(album_id)
            return [album_to_search_result(album)] if album is not None else []

        _logger.info("album_lookup_by_search", term=info.name)
        search_results = await self._source.search(info.name, ItemType.ALBUM)

        results: list[RemoteSearchResult] = []
        for item in search_results:
            if not isinstance(item, Album):
                continue
            # Year only filters when the host supplied one.
            if info.year is not None and (
                item.release_date is None or item.release_date.year != info.year
            ):
                _logger.debug("album_year_mismatch", album=item.name, year=info.year)
                continue
            results.append(album_to_search_result(item))

        _logger.info("album_search_results", term=info.name, count=len(results))
        return results

    async def get_metadata(self, info: AlbumInfo) -> MetadataResult[MusicAlbum]:
        album_id = info.get_provider_id(ProviderKey.ITUNES_ALBUM)
        if not album_id:
            _logger.debug("album_id_missing", name=info.name)
            return MetadataResult[MusicAlbum](has_metadata=False)

        album = await self._source.get_album(album_id)
        if album is None:
            _logger.debug("album_not_found", album_id=album_id)
            return MetadataResult[MusicAlbum](has_metadata=False)

        artist_names = [artist.name for artist in album.artists]
        item = MusicAlbum(
            name=album.name,
            overview=album.about,
            production_year=album.release_date.year if album.release_date else None,
            artists=artist_names,
            album_artists=artist_names[:1],
        )
        if album.artists:
            item.set_provider_id(ProviderKey.ITUNES_ALBUM_ARTIST, album.artists[0].id)
        item.set_provider_id(ProviderKey.ITUNES_ALBUM, album.id)

        result = MetadataResult[MusicAlbum](item=item, has_metadata=album.has_metadata())
        if album.image_url is not None:
            result.remote_images.append((album.image_url, ImageType.PRIMARY))
        return result
