"""
Data models module for tubesearch.

Defines Pydantic models for search result records and parsed pages.
"""

from __future__ import annotations

from .enums import SearchType
from .results import (
    ChannelResult,
    PageResult,
    PlaylistResult,
    SearchResult,
    Thumbnail,
    VideoResult,
    search_results_adapter,
)

__all__ = [
    "SearchType",
    "Thumbnail",
    "VideoResult",
    "ChannelResult",
    "PlaylistResult",
    "SearchResult",
    "PageResult",
    "search_results_adapter",
]
