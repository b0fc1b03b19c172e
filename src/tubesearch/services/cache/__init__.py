"""
Search result caching.

Modules
-------
lru_cache
    Capacity- and age-bounded LRU cache over a text store.
stores
    In-memory and file-backed text stores.
models
    Persisted cache entry model.
"""

from tubesearch.services.cache.lru_cache import LRUCache
from tubesearch.services.cache.models import CacheEntry
from tubesearch.services.cache.stores import FileStore, MemoryStore

__all__ = [
    "CacheEntry",
    "FileStore",
    "LRUCache",
    "MemoryStore",
]
