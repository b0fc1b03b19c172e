"""
Services module for tubesearch.

Contains the InnerTube transport, result pagination, the bounded result
cache and the search service tying them together.
"""

from __future__ import annotations

from tubesearch.services.cache import FileStore, LRUCache, MemoryStore
from tubesearch.services.paginator import SearchPaginator
from tubesearch.services.search_service import SearchService
from tubesearch.services.transport import InnerTubeTransport

__all__: list[str] = [
    "FileStore",
    "InnerTubeTransport",
    "LRUCache",
    "MemoryStore",
    "SearchPaginator",
    "SearchService",
]
