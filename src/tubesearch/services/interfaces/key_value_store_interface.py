"""
Abstract Base Class for persistent text key/value stores.

Models host storage such as a browser's ``localStorage``: string keys,
string values, and a capacity limit imposed by the host. Writes may fail.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStoreInterface(ABC):
    """Abstract interface for namespaced text storage."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """
        Read the text stored under ``key``.

        Returns
        -------
        Optional[str]
            The stored text, or None if the key is absent.
        """
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """
        Store ``value`` under ``key``, replacing any previous value.

        Raises
        ------
        StoreQuotaExceededError
            If the write would exceed the store's quota.
        """
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete ``key``; no-op if it is absent."""
        ...
