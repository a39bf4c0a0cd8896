"""Abstract base class for catalog record caches.

Used by :class:`~applemusic_meta.providers.metadata.cached_source.CachedMetadataSource`
to remember resolved albums and artists between host requests.  Entries are
addressed by catalog identity, the pair of :class:`ItemType` and catalog id,
so an album and an artist sharing a numeric id never collide.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from applemusic_meta.models.entities import CatalogItem, ItemType


class ICacheProvider(ABC):
    """Contract for caches holding resolved catalog records."""

    @abstractmethod
    async def get(self, item_type: ItemType, item_id: str) -> CatalogItem | None:
        """Return the cached record for (*item_type*, *item_id*), or ``None``."""

    @abstractmethod
    async def put(self, item: CatalogItem) -> None:
        """Store *item* under its own type and id; expiry is up to the provider."""
