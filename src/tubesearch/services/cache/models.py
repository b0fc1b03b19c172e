"""
Pydantic models for the search result cache.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class CacheEntry(BaseModel):
    """
    One cached value as persisted in the store.

    Attributes
    ----------
    value : Any
        JSON-serializable payload.
    timestamp : float
        Write time, in seconds since the epoch.
    """

    model_config = ConfigDict(frozen=True)

    value: Any
    timestamp: float

    def is_expired(self, now: float, max_age: float) -> bool:
        """
        Check whether this entry is older than ``max_age`` seconds.

        A non-positive ``max_age`` expires every entry.

        Parameters
        ----------
        now : float
            Current time, in seconds since the epoch.
        max_age : float
            Maximum age in seconds.

        Returns
        -------
        bool
            True if the entry must be treated as a miss.
        """
        if max_age <= 0:
            return True
        return now - self.timestamp > max_age
