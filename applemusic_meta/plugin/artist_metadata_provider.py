"""Artist metadata provider for the host media server."""

from __future__ import annotations

from applemusic_meta.models.entities import Artist, ItemType
from applemusic_meta.models.host import (
    ArtistInfo,
    ImageType,
    MetadataResult,
    MusicArtist,
    ProviderKey,
    RemoteSearchResult,
)
from applemusic_meta.plugin.base import AppleMusicProviderBase
from applemusic_meta.plugin.mapping import artist_to_search_result
from applemusic_meta.utils.logging import get_logger

_logger = get_logger(__name__)


class ArtistMetadataProvider(AppleMusicProviderBase):
    """Remote metadata provider for music artists."""

    async def get_search_results(self, info: ArtistInfo) -> list[RemoteSearchResult]:
        artist_id = info.get_provider_id(ProviderKey.ITUNES_ARTIST)
        if artist_id:
            _logger.info("artist_lookup_by_id", artist_id=artist_id)
            artist = await self._source.get_artist(artist_id)
            return [artist_to_search_result(artist)] if artist is not None else []

        _logger.info("artist_lookup_by_search", term=info.name)
        search_results = await self._source.search(info.name, ItemType.ARTIST)
        results = [
            artist_to_search_result(item) for item in search_results if isinstance(item, Artist)
        ]
        _logger.info("artist_search_results", term=info.name, count=len(results))
        return results

    async def get_metadata(self, info: ArtistInfo) -> MetadataResult[MusicArtist]:
        artist_id = info.get_provider_id(ProviderKey.ITUNES_ARTIST)
        if not artist_id:
            _logger.debug("artist_id_missing", name=info.name)
            return MetadataResult[MusicArtist](has_metadata=False)

        artist = await self._source.get_artist(artist_id)
        if artist is None:
            _logger.debug("artist_not_found", artist_id=artist_id)
            return MetadataResult[MusicArtist](has_metadata=False)

        item = MusicArtist(name=artist.name, overview=artist.about)
        item.set_provider_id(ProviderKey.ITUNES_ARTIST, artist.id)

        result = MetadataResult[MusicArtist](item=item, has_metadata=artist.has_metadata())
        if artist.image_url is not None:
            result.remote_images.append((artist.image_url, ImageType.PRIMARY))
        return result
