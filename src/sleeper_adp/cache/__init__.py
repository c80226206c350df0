from sleeper_adp.cache.memory_store import MemoryCacheStore, NullCacheStore
from sleeper_adp.cache.protocol import CacheStore

__all__ = ["CacheStore", "MemoryCacheStore", "NullCacheStore"]
