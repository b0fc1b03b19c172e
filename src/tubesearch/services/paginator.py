"""
Pagination over InnerTube search results.

A search returns one page of results plus an opaque continuation token.
``SearchPaginator`` follows tokens strictly one after another until it
has enough records, the token runs out, or a fixed number of
continuation requests has been spent.
"""

from __future__ import annotations

import logging
from typing import Any

from tubesearch.constants import (
    DEFAULT_API_KEY,
    DEFAULT_CLIENT_CONTEXT,
    INNERTUBE_BASE_URL,
    MAX_CONTINUATION_ATTEMPTS,
    SEARCH_ENDPOINT,
)
from tubesearch.exceptions import SearchFailedError, TransportError
from tubesearch.models.enums import SearchType
from tubesearch.models.results import PageResult, SearchResult
from tubesearch.parsers.response_parser import parse_search_response
from tubesearch.services.interfaces import TransportInterface

logger = logging.getLogger(__name__)


class SearchPaginator:
    """
    Collects search results across continuation pages.

    Parameters
    ----------
    transport : TransportInterface
        Transport used to POST search requests.
    api_key : str, optional
        InnerTube API key appended to the search URL.
    client_context : dict[str, Any] | None, optional
        Overrides merged over the default WEB client context.
    max_attempts : int, optional
        Maximum number of continuation requests per search (default: 5).
        Bounds latency and request volume when upstream keeps returning
        tokens or loops.

    Examples
    --------
    >>> paginator = SearchPaginator(InnerTubeTransport())
    >>> records = await paginator.collect("lofi", limit=10, search_type="all")
    """

    def __init__(
        self,
        transport: TransportInterface,
        api_key: str = DEFAULT_API_KEY,
        client_context: dict[str, Any] | None = None,
        max_attempts: int = MAX_CONTINUATION_ATTEMPTS,
    ) -> None:
        self.transport = transport
        self.api_key = api_key
        self.client_context = {**DEFAULT_CLIENT_CONTEXT, **(client_context or {})}
        self.max_attempts = max_attempts

    @property
    def search_url(self) -> str:
        """Full search endpoint URL, including the API key."""
        return f"{INNERTUBE_BASE_URL}{SEARCH_ENDPOINT}?key={self.api_key}"

    def _initial_body(self, query: str) -> dict[str, Any]:
        return {"context": {"client": self.client_context}, "query": query}

    def _continuation_body(self, token: str) -> dict[str, Any]:
        return {"context": {"client": self.client_context}, "continuation": token}

    async def _fetch_page(
        self, body: dict[str, Any], query: str, page: int
    ) -> PageResult:
        """
        Request and parse one page.

        Raises
        ------
        SearchFailedError
            If the transport fails; ``page`` identifies the request.
        """
        try:
            raw = await self.transport.post(self.search_url, body)
        except TransportError as e:
            logger.error(
                "YouTube search error for %r on page %d: %s", query, page, e.message
            )
            raise SearchFailedError(
                message=f"Search for '{query}' failed on page {page}: {e.message}",
                query=query,
                page=page,
                original_error=e,
            ) from e

        result = parse_search_response(raw)
        if result.is_partial:
            logger.warning(
                "Page %d for %r parsed partially (%d records): %s",
                page,
                query,
                len(result.records),
                result.error,
            )
        return result

    async def collect(
        self,
        query: str,
        limit: int,
        search_type: SearchType | str = SearchType.VIDEO,
    ) -> list[SearchResult]:
        """
        Fetch up to ``limit`` records of ``search_type`` for ``query``.

        The first page is filtered by type. Each continuation page is
        filtered the same way and loses any record whose id was already
        collected, so the first occurrence of an id keeps its position.

        Parameters
        ----------
        query : str
            Search query; validated by the caller.
        limit : int
            Maximum number of records to return.
        search_type : SearchType | str, optional
            Record type to keep, or ``"all"`` (default: video).

        Returns
        -------
        list[SearchResult]
            At most ``limit`` records in upstream order.

        Raises
        ------
        SearchFailedError
            If the transport fails on the initial or any continuation
            request. Records gathered from earlier pages are discarded.
        """
        search_type = SearchType(search_type)

        first_page = await self._fetch_page(self._initial_body(query), query, page=0)
        results = [r for r in first_page.records if search_type.matches(r.type)]
        token = first_page.continuation_token
        logger.debug(
            "Initial page for %r: %d matching record(s), token=%s",
            query,
            len(results),
            bool(token),
        )

        attempt = 0
        while len(results) < limit and token and attempt < self.max_attempts:
            attempt += 1
            page = await self._fetch_page(
                self._continuation_body(token), query, page=attempt
            )

            seen_ids = {r.id for r in results}
            new_count = 0
            for record in page.records:
                if not search_type.matches(record.type) or record.id in seen_ids:
                    continue
                seen_ids.add(record.id)
                results.append(record)
                new_count += 1

            logger.debug(
                "Continuation %d for %r: %d new record(s)", attempt, query, new_count
            )
            token = page.continuation_token

        if token and len(results) < limit:
            logger.info(
                "Stopped paginating %r after %d continuation request(s) with %d/%d records",
                query,
                attempt,
                len(results),
                limit,
            )

        return results[:limit]
