"""
Enums for tubesearch models.

Defines enumeration types used across the package for consistent
type safety and validation.
"""

from __future__ import annotations

from enum import Enum


class SearchType(str, Enum):
    """Result type filter accepted by a search."""

    VIDEO = "video"
    CHANNEL = "channel"
    PLAYLIST = "playlist"
    ALL = "all"

    def matches(self, result_type: str) -> bool:
        """Check whether a record of ``result_type`` passes this filter."""
        return self is SearchType.ALL or self.value == result_type
