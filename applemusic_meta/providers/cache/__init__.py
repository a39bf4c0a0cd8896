"""Cache provider adapters."""

from applemusic_meta.providers.cache.memory_cache import MemoryCacheProvider

__all__ = ["MemoryCacheProvider"]
