"""Host-facing providers: the adapter between catalog records and the media server."""

from applemusic_meta.plugin.album_metadata_provider import AlbumMetadataProvider
from applemusic_meta.plugin.artist_metadata_provider import ArtistMetadataProvider
from applemusic_meta.plugin.image_providers import AlbumImageProvider, ArtistImageProvider
from applemusic_meta.plugin.mapping import PLUGIN_NAME

__all__ = [
    "PLUGIN_NAME",
    "AlbumImageProvider",
    "AlbumMetadataProvider",
    "ArtistImageProvider",
    "ArtistMetadataProvider",
]
