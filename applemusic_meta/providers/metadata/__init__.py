"""Metadata source implementations."""

from applemusic_meta.providers.metadata.cached_source import CachedMetadataSource
from applemusic_meta.providers.metadata.web_source import WebMetadataSource

__all__ = ["CachedMetadataSource", "WebMetadataSource"]
