"""
Persistent text stores backing the search result cache.

Classes
-------
MemoryStore
    Process-local dict store with an optional quota, mainly for tests and
    short-lived sessions.
FileStore
    One UTF-8 file per key under a root directory, with an optional quota.
"""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Optional

from tubesearch.exceptions import StoreQuotaExceededError
from tubesearch.services.interfaces import KeyValueStoreInterface

logger = logging.getLogger(__name__)


class MemoryStore(KeyValueStoreInterface):
    """
    In-memory text store.

    Parameters
    ----------
    quota_bytes : int | None, optional
        Maximum total size of keys and values, in UTF-8 bytes. None means
        unlimited (default: None).

    Examples
    --------
    >>> store = MemoryStore(quota_bytes=16)
    >>> store.set_item("k", "v")
    >>> store.get_item("k")
    'v'
    """

    def __init__(self, quota_bytes: int | None = None) -> None:
        self.quota_bytes = quota_bytes
        self._items: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.quota_bytes is not None:
            used = self.used_bytes() - self._entry_size(key, self._items.get(key))
            if used + self._entry_size(key, value) > self.quota_bytes:
                raise StoreQuotaExceededError(
                    message=f"Writing '{key}' would exceed the {self.quota_bytes}-byte quota",
                    key=key,
                    quota_bytes=self.quota_bytes,
                )
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def used_bytes(self) -> int:
        """Total size of all keys and values, in UTF-8 bytes."""
        return sum(self._entry_size(k, v) for k, v in self._items.items())

    @staticmethod
    def _entry_size(key: str, value: str | None) -> int:
        if value is None:
            return 0
        return len(key.encode("utf-8")) + len(value.encode("utf-8"))


class FileStore(KeyValueStoreInterface):
    """
    File-backed text store.

    Each key is written to ``{root}/{sha256(key)}.txt`` so arbitrary keys
    (queries with slashes, unicode, ...) map to safe file names. The root
    directory is created on first write.

    Parameters
    ----------
    root : Path
        Directory holding the store's files.
    quota_bytes : int | None, optional
        Maximum total size of the stored values, in bytes. None means
        unlimited (default: None).

    Examples
    --------
    >>> store = FileStore(root=Path("./cache/search"))
    >>> store.set_item("yt_search_keys", "[]")
    """

    def __init__(self, root: Path, quota_bytes: int | None = None) -> None:
        self.root = root
        self.quota_bytes = quota_bytes

    def _path(self, key: str) -> Path:
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.root / f"{digest}.txt"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        data = value.encode("utf-8")

        if self.quota_bytes is not None:
            current = path.stat().st_size if path.exists() else 0
            if self.used_bytes() - current + len(data) > self.quota_bytes:
                raise StoreQuotaExceededError(
                    message=f"Writing '{key}' would exceed the {self.quota_bytes}-byte quota",
                    key=key,
                    quota_bytes=self.quota_bytes,
                )

        self.root.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink()
        except FileNotFoundError:
            logger.debug("Store key '%s' already absent", key)

    def used_bytes(self) -> int:
        """Total size of the files under ``root``, in bytes."""
        if not self.root.exists():
            return 0
        return sum(p.stat().st_size for p in self.root.glob("*.txt"))
