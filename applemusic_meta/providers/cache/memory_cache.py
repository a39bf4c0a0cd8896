"""Process-local catalog cache on ``cachetools.TTLCache``.

One TTL applies to every record: catalog pages change rarely, and a stale
record only costs a slightly outdated overview until it expires.
"""

from __future__ import annotations

from cachetools import TTLCache

from applemusic_meta.interfaces.cache_provider import ICacheProvider
from applemusic_meta.models.entities import Album, CatalogItem, ItemType
from applemusic_meta.utils.logging import get_logger

_CacheKey = tuple[ItemType, str]


def _key_for(item: CatalogItem) -> _CacheKey:
    item_type = ItemType.ALBUM if isinstance(item, Album) else ItemType.ARTIST
    return item_type, item.id


class MemoryCacheProvider(ICacheProvider):
    """Albums and artists keyed by ``(ItemType, id)``.

    Parameters
    ----------
    max_size:
        Record count after which the least-recently-used record is evicted.
    ttl:
        Seconds a record stays valid after it was stored.
    """

    def __init__(self, max_size: int = 256, ttl: int = 3600) -> None:
        self._records: TTLCache[_CacheKey, CatalogItem] = TTLCache(maxsize=max_size, ttl=ttl)
        self._logger = get_logger(__name__)

    def __len__(self) -> int:
        return len(self._records)

    async def get(self, item_type: ItemType, item_id: str) -> CatalogItem | None:
        record = self._records.get((item_type, item_id))
        self._logger.debug(
            "catalog_cache_lookup",
            item_type=item_type.value,
            item_id=item_id,
            hit=record is not None,
        )
        return record

    async def put(self, item: CatalogItem) -> None:
        item_type, item_id = _key_for(item)
        self._records[(item_type, item_id)] = item
        self._logger.debug(
            "catalog_cache_store",
            item_type=item_type.value,
            item_id=item_id,
            size=len(self._records),
        )
