"""applemusic-meta models -- re-exports all public model classes.

    - entities.py -- catalog records scraped from Apple Music (Artist, Album)
    - host.py     -- media-server contract shapes (lookup info, results)
"""

from __future__ import annotations

from applemusic_meta.models.entities import (
    Album,
    AlbumDescription,
    Artist,
    CatalogItem,
    ItemType,
)
from applemusic_meta.models.host import (
    AlbumInfo,
    ArtistInfo,
    ImageType,
    MetadataResult,
    MusicAlbum,
    MusicArtist,
    ProviderKey,
    RemoteImageInfo,
    RemoteSearchResult,
)

__all__ = [
    "Album",
    "AlbumDescription",
    "AlbumInfo",
    "Artist",
    "ArtistInfo",
    "CatalogItem",
    "ImageType",
    "ItemType",
    "MetadataResult",
    "MusicAlbum",
    "MusicArtist",
    "ProviderKey",
    "RemoteImageInfo",
    "RemoteSearchResult",
]
