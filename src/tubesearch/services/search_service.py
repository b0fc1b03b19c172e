"""
Search service: the public entry point of tubesearch.

Validates input, serves repeated searches from the bounded cache and
delegates everything else to ``SearchPaginator``.
"""

from __future__ import annotations

import json
import logging
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from tubesearch.constants import DEFAULT_SEARCH_LIMIT
from tubesearch.exceptions import ValidationError
from tubesearch.models.enums import SearchType
from tubesearch.models.results import SearchResult, search_results_adapter
from tubesearch.services.cache.lru_cache import LRUCache
from tubesearch.services.paginator import SearchPaginator

logger = logging.getLogger(__name__)


class SearchService:
    """
    Cached InnerTube search.

    Parameters
    ----------
    paginator : SearchPaginator
        Fetches and merges result pages.
    cache : LRUCache | None, optional
        Result cache; None disables caching (default: None).
    default_limit : int, optional
        Limit used when ``search`` is called without one (default: 20).

    Examples
    --------
    >>> service = SearchService(paginator, cache=LRUCache(MemoryStore()))
    >>> videos = await service.search("never gonna give you up", limit=5)
    >>> videos[0].link
    'https://www.youtube.com/watch?v=dQw4w9WgXcQ'
    """

    def __init__(
        self,
        paginator: SearchPaginator,
        cache: LRUCache | None = None,
        default_limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> None:
        self.paginator = paginator
        self.cache = cache
        self.default_limit = default_limit

    @staticmethod
    def cache_key(query: str, limit: int, search_type: SearchType) -> str:
        """
        Build the cache key for one combination of search options.

        The key is a JSON array, so no two distinct ``(query, limit,
        search_type)`` combinations can produce the same key.
        """
        return json.dumps([query, limit, search_type.value], ensure_ascii=False)

    def _validate(
        self, query: str, limit: Optional[int], search_type: SearchType | str
    ) -> tuple[int, SearchType]:
        if not isinstance(query, str) or not query.strip():
            raise ValidationError(
                message="Query is required",
                field_name="query",
                invalid_value=query,
            )

        if limit is None:
            limit = self.default_limit
        if limit < 0:
            raise ValidationError(
                message=f"limit must be non-negative, got {limit}",
                field_name="limit",
                invalid_value=limit,
            )

        try:
            resolved_type = SearchType(search_type)
        except ValueError as e:
            valid = ", ".join(t.value for t in SearchType)
            raise ValidationError(
                message=f"Invalid search type '{search_type}'. Must be one of: {valid}",
                field_name="search_type",
                invalid_value=search_type,
            ) from e

        return limit, resolved_type

    def _cached_results(self, cache_key: str) -> Optional[list[SearchResult]]:
        if self.cache is None:
            return None

        cached = self.cache.get(cache_key)
        if cached is None:
            return None

        try:
            return search_results_adapter.validate_python(cached)
        except PydanticValidationError as e:
            logger.warning("Ignoring cached results that no longer validate: %s", e)
            return None

    async def search(
        self,
        query: str,
        limit: Optional[int] = None,
        search_type: SearchType | str = SearchType.VIDEO,
    ) -> list[SearchResult]:
        """
        Search for videos, channels or playlists.

        Parameters
        ----------
        query : str
            Search query; must contain non-whitespace text.
        limit : int | None, optional
            Maximum number of records to return; defaults to
            ``default_limit``.
        search_type : SearchType | str, optional
            ``"video"``, ``"channel"``, ``"playlist"`` or ``"all"``
            (default: video).

        Returns
        -------
        list[SearchResult]
            At most ``limit`` records in upstream order.

        Raises
        ------
        ValidationError
            If the query is empty, the limit negative or the type unknown.
            Raised before any network call.
        SearchFailedError
            If a search request fails. Nothing is cached in that case.
        """
        limit, resolved_type = self._validate(query, limit, search_type)
        cache_key = self.cache_key(query, limit, resolved_type)

        cached = self._cached_results(cache_key)
        if cached is not None:
            logger.debug("Cache hit for %r (%d records)", query, len(cached))
            return cached

        results = await self.paginator.collect(query, limit, resolved_type)
        logger.info(
            "Search %r (%s) returned %d record(s)", query, resolved_type.value, len(results)
        )

        if self.cache is not None:
            self.cache.set(
                cache_key, search_results_adapter.dump_python(results, mode="json")
            )

        return results

    def clear_cache(self) -> None:
        """Empty the result cache; no-op when caching is disabled."""
        if self.cache is not None:
            self.cache.clear()
