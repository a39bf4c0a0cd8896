"""Public interface definitions for the metadata-sourcing subsystem.

Every collaborator of the metadata source is reached through the abstract
base classes defined here; concrete adapters live in
``applemusic_meta.providers`` and are wired together in
``applemusic_meta.main``.

    Interface          ->  Concrete implementations
    ------------------------------------------------------------------
    IPageFetcher       ->  HttpxPageFetcher
    IScraper           ->  AlbumScraper, ArtistScraper
    IMetadataSource    ->  WebMetadataSource, CachedMetadataSource
    ICacheProvider     ->  MemoryCacheProvider
"""

from applemusic_meta.interfaces.cache_provider import ICacheProvider
from applemusic_meta.interfaces.metadata_source import IMetadataSource
from applemusic_meta.interfaces.page_fetcher import Document, IPageFetcher
from applemusic_meta.interfaces.scraper import IScraper

__all__ = [
    "Document",
    "ICacheProvider",
    "IMetadataSource",
    "IPageFetcher",
    "IScraper",
]
