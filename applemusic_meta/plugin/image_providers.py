"""Album and artist image providers for the host media server.

With a stored external id the single catalog record is looked up; without
one the catalog is searched and every hit that carries artwork becomes a
candidate.  Candidates are always 1400x1400 with a 100x100 thumbnail.
"""

from __future__ import annotations

from typing import Any

from applemusic_meta.models.entities import Album, Artist, CatalogItem, ItemType
from applemusic_meta.models.host import ImageType, MusicAlbum, MusicArtist, ProviderKey, RemoteImageInfo
from applemusic_meta.plugin.base import AppleMusicProviderBase
from applemusic_meta.plugin.mapping import image_info
from applemusic_meta.utils.logging import get_logger

_logger = get_logger(__name__)


def _images_for(items: list[CatalogItem]) -> list[RemoteImageInfo]:
    return [image_info(item.image_url) for item in items if item.image_url]


class AlbumImageProvider(AppleMusicProviderBase):
    """Remote image provider for music albums."""

    def supports(self, item: Any) -> bool:
        return isinstance(item, MusicAlbum)

    def get_supported_images(self, item: Any) -> list[ImageType]:
        return [ImageType.PRIMARY]

    @staticmethod
    def search_term(album: MusicAlbum) -> str:
        album_artist = album.album_artists[0] if album.album_artists else ""
        return f"{album_artist} {album.name}"

    async def get_images(self, item: Any) -> list[RemoteImageInfo]:
        if not isinstance(item, MusicAlbum):
            _logger.info("album_images_unsupported_item", item_type=type(item).__name__)
            return []

        album_id = item.get_provider_id(ProviderKey.ITUNES_ALBUM)
        if album_id:
            album = await self._source.get_album(album_id)
            images = _images_for([album]) if album is not None else []
            _logger.info("album_images_by_id", album_id=album_id, count=len(images))
            return images

        term = self.search_term(item)
        results = await self._source.search(term, ItemType.ALBUM)
        images = _images_for([r for r in results if isinstance(r, Album)])
        _logger.info("album_images_by_search", term=term, count=len(images))
        return images


class ArtistImageProvider(AppleMusicProviderBase):
    """Remote image provider for music artists."""

    def supports(self, item: Any) -> bool:
        return isinstance(item, MusicArtist)

    def get_supported_images(self, item: Any) -> list[ImageType]:
        return [ImageType.PRIMARY]

    async def get_images(self, item: Any) -> list[RemoteImageInfo]:
        if not isinstance(item, MusicArtist):
            _logger.info("artist_images_unsupported_item", item_type=type(item).__name__)
            return []

        artist_id = item.get_provider_id(ProviderKey.ITUNES_ARTIST)
        if artist_id:
            artist = await self._source.get_artist(artist_id)
            images = _images_for([artist]) if artist is not None else []
            _logger.info("artist_images_by_id", artist_id=artist_id, count=len(images))
            return images

        results = await self._source.search(item.name, ItemType.ARTIST)
        images = _images_for([r for r in results if isinstance(r, Artist)])
        _logger.info("artist_images_by_search", term=item.name, count=len(images))
        return images
