"""
Least-recently-used cache with expiry over a persistent text store.

The cache keeps an ordered index of its keys (least recent first) and
persists it next to the entries under ``"{namespace}keys"``. Every index
mutation is computed as a new list by one of the pure helpers below and
then committed with a single store write.

The index is read-modify-written without locking. Under asyncio this is
safe because no cache method awaits; sharing one instance between threads
can lose index updates.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from tubesearch.constants import (
    DEFAULT_CACHE_CAPACITY,
    DEFAULT_CACHE_MAX_AGE_SECONDS,
    DEFAULT_CACHE_NAMESPACE,
)
from tubesearch.services.cache.models import CacheEntry
from tubesearch.services.interfaces import KeyValueStoreInterface

logger = logging.getLogger(__name__)


def _promoted(keys: list[str], key: str) -> list[str]:
    """Move or append ``key`` to the most-recent end."""
    return [k for k in keys if k != key] + [key]


def _without(keys: list[str], key: str) -> list[str]:
    return [k for k in keys if k != key]


def _evicted(keys: list[str], capacity: int) -> tuple[list[str], list[str]]:
    """Split ``keys`` into (kept, evicted) so that at most ``capacity`` remain."""
    overflow = max(len(keys) - max(capacity, 0), 0)
    return keys[overflow:], keys[:overflow]


class LRUCache:
    """
    Capacity- and age-bounded cache over a ``KeyValueStoreInterface``.

    No method raises: store failures, quota errors and corrupt entries
    are logged and turned into misses or dropped writes.

    Parameters
    ----------
    store : KeyValueStoreInterface
        Persistent text store holding the entries and the index.
    namespace : str, optional
        Prefix for every store key (default: ``"yt_search_"``).
    max_age : float, optional
        Entry lifetime in seconds; non-positive expires every entry on
        read (default: 3600).
    capacity : int, optional
        Maximum number of entries; non-positive evicts every write
        (default: 20).
    clock : Callable[[], float], optional
        Time source in epoch seconds (default: ``time.time``).

    Examples
    --------
    >>> cache = LRUCache(MemoryStore(), capacity=2)
    >>> cache.set("a", [1])
    >>> cache.get("a")
    [1]
    """

    def __init__(
        self,
        store: KeyValueStoreInterface,
        namespace: str = DEFAULT_CACHE_NAMESPACE,
        max_age: float = DEFAULT_CACHE_MAX_AGE_SECONDS,
        capacity: int = DEFAULT_CACHE_CAPACITY,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.store = store
        self.namespace = namespace
        self.max_age = max_age
        self.capacity = capacity
        self._clock = clock
        self._keys: list[str] = self._load_keys()

    @property
    def index_key(self) -> str:
        """Store key under which the recency index is persisted."""
        return f"{self.namespace}keys"

    @property
    def keys(self) -> tuple[str, ...]:
        """Cache keys in recency order, least recent first."""
        return tuple(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def _full_key(self, key: str) -> str:
        return f"{self.namespace}{key}"

    def _load_keys(self) -> list[str]:
        try:
            raw = self.store.get_item(self.index_key)
            if raw is None:
                return []
            keys = json.loads(raw)
        except Exception as e:
            logger.warning("Failed to load cache keys: %s", e)
            return []

        if not isinstance(keys, list) or not all(isinstance(k, str) for k in keys):
            logger.warning("Ignoring malformed cache index under '%s'", self.index_key)
            return []
        return keys

    def _commit(self, keys: list[str]) -> None:
        """Adopt ``keys`` as the index and persist it."""
        self._keys = keys
        try:
            self.store.set_item(self.index_key, json.dumps(keys))
        except Exception as e:
            logger.warning("Failed to save cache keys: %s", e)

    def _remove_entry(self, key: str) -> None:
        try:
            self.store.remove_item(self._full_key(key))
        except Exception as e:
            logger.warning("Failed to remove cache entry '%s': %s", key, e)

    def get(self, key: str) -> Optional[Any]:
        """
        Return the value cached under ``key``.

        Expired entries are removed. Entries that cannot be decoded are
        left in place until a later ``remove`` or eviction. A hit promotes
        ``key`` to most recently used.

        Parameters
        ----------
        key : str
            Cache key, without namespace.

        Returns
        -------
        Optional[Any]
            The cached value, or None on miss, expiry or read failure.
        """
        try:
            raw = self.store.get_item(self._full_key(key))
        except Exception as e:
            logger.warning("Cache get failed for '%s': %s", key, e)
            return None

        if raw is None:
            return None

        try:
            entry = CacheEntry.model_validate_json(raw)
        except PydanticValidationError as e:
            logger.warning("Cache get failed for '%s': corrupt entry (%s)", key, e)
            return None

        if entry.is_expired(now=self._clock(), max_age=self.max_age):
            logger.debug("Cache entry '%s' expired", key)
            self.remove(key)
            return None

        if key in self._keys:
            self._commit(_promoted(self._keys, key))
        return entry.value

    def set(self, key: str, value: Any) -> None:
        """
        Cache ``value`` under ``key`` as the most recently used entry.

        Entries beyond ``capacity`` are evicted from the least recent end.
        If the entry itself cannot be written, the index is left untouched.

        Parameters
        ----------
        key : str
            Cache key, without namespace.
        value : Any
            JSON-serializable payload.
        """
        entry = CacheEntry(value=value, timestamp=self._clock())
        try:
            self.store.set_item(self._full_key(key), entry.model_dump_json())
        except Exception as e:
            logger.warning("Cache set failed for '%s': %s", key, e)
            return

        keys, evicted = _evicted(_promoted(self._keys, key), self.capacity)
        for old_key in evicted:
            logger.debug("Evicting cache entry '%s'", old_key)
            self._remove_entry(old_key)
        self._commit(keys)

    def remove(self, key: str) -> None:
        """Delete ``key`` and its index entry; no-op if absent."""
        self._remove_entry(key)
        if key in self._keys:
            self._commit(_without(self._keys, key))

    def clear(self) -> None:
        """Delete every indexed entry, then the index itself."""
        for key in self._keys:
            self._remove_entry(key)
        try:
            self.store.remove_item(self.index_key)
        except Exception as e:
            logger.warning("Cache clear failed: %s", e)
        self._keys = []
