"""Mapping from catalog records to host result DTOs.

The "first artist doubles as album artist" rule lives here: the same
:class:`Artist` is emitted twice for an album, once under the
``ITunesAlbumArtist`` key and once under ``ITunesArtist``.  The entity itself
knows nothing about that role.
"""

from __future__ import annotations

from applemusic_meta.models.entities import Album, Artist
from applemusic_meta.models.host import ImageType, ProviderKey, RemoteImageInfo, RemoteSearchResult
from applemusic_meta.utils.urls import update_image_size

PLUGIN_NAME = "Apple Music"

IMAGE_SIZE = 1400
THUMBNAIL_SIZE = 100
_CROP_FLAG = "cc"


def artist_to_search_result(
    artist: Artist, key: ProviderKey = ProviderKey.ITUNES_ARTIST
) -> RemoteSearchResult:
    """Map *artist*; pass ``ProviderKey.ITUNES_ALBUM_ARTIST`` for the album-artist role."""
    return RemoteSearchResult(
        name=artist.name,
        image_url=artist.image_url,
        overview=artist.about,
        provider_ids={key.value: artist.id},
    )


def album_to_search_result(album: Album) -> RemoteSearchResult:
    album_artist = album.artists[0] if album.artists else None
    return RemoteSearchResult(
        name=album.name,
        image_url=album.image_url,
        overview=album.about,
        premiere_date=album.release_date,
        production_year=album.release_date.year if album.release_date else None,
        album_artist=(
            artist_to_search_result(album_artist, ProviderKey.ITUNES_ALBUM_ARTIST)
            if album_artist is not None
            else None
        ),
        artists=tuple(artist_to_search_result(a) for a in album.artists),
        provider_ids={ProviderKey.ITUNES_ALBUM.value: album.id},
    )


def _size_token(size: int) -> str:
    return f"{size}x{size}{_CROP_FLAG}"


def image_info(image_url: str) -> RemoteImageInfo:
    """Build a primary image candidate with a resized URL and thumbnail."""
    return RemoteImageInfo(
        url=update_image_size(image_url, _size_token(IMAGE_SIZE)),
        thumbnail_url=update_image_size(image_url, _size_token(THUMBNAIL_SIZE)),
        width=IMAGE_SIZE,
        height=IMAGE_SIZE,
        provider_name=PLUGIN_NAME,
        type=ImageType.PRIMARY,
    )
