"""
Response parser for InnerTube search responses.

Two response shapes are supported:

* Initial search page::

    {"contents": {"twoColumnSearchResultsRenderer": {"primaryContents":
        {"sectionListRenderer": {"contents": [<section>, ...]}}}}}

* Continuation page::

    {"onResponseReceivedCommands": [
        {"appendContinuationItemsAction": {"continuationItems": [<section>, ...]}}
    ]}

A section is either an ``itemSectionRenderer`` wrapping a list of items,
a bare renderer item, or a ``continuationItemRenderer`` carrying the
token of the next page.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from tubesearch.models.results import PageResult, SearchResult
from tubesearch.parsers.record_parser import is_renderer_item, parse_record
from tubesearch.utils.accessors import dig, dig_list

logger = logging.getLogger(__name__)

_INITIAL_SECTIONS_PATH = (
    "contents",
    "twoColumnSearchResultsRenderer",
    "primaryContents",
    "sectionListRenderer",
    "contents",
)
_TOKEN_PATH = (
    "continuationItemRenderer",
    "continuationEndpoint",
    "continuationCommand",
    "token",
)


def _find_sections(response: Any) -> list[Any] | None:
    """
    Locate the section list of an initial or continuation response.

    Returns
    -------
    list[Any] | None
        The sections, or None when neither shape is present.
    """
    sections = dig(response, *_INITIAL_SECTIONS_PATH)
    if isinstance(sections, list):
        return sections

    for command in dig_list(response, "onResponseReceivedCommands"):
        action = dig(command, "appendContinuationItemsAction")
        if isinstance(action, Mapping):
            items = dig(action, "continuationItems")
            return items if isinstance(items, list) else None

    return None


def _section_items(section: Mapping[str, Any]) -> list[Any]:
    """Items carried by one section: its wrapped list, or the section itself."""
    if section.get("itemSectionRenderer"):
        return dig_list(section, "itemSectionRenderer", "contents")
    if is_renderer_item(section):
        return [section]
    return []


def parse_search_response(response: Any) -> PageResult:
    """
    Extract result records and the continuation token from a response.

    Unrecognized items and sections that are not objects are skipped.
    When several sections carry a continuation marker, the last one wins.
    If extracting a record fails unexpectedly, parsing stops and the
    records and token found so far are returned with ``error`` set;
    nothing is raised.

    Parameters
    ----------
    response : Any
        Decoded JSON body of an InnerTube ``search`` call.

    Returns
    -------
    PageResult
        Records in upstream order and the next-page token, if any.

    Examples
    --------
    >>> page = parse_search_response({})
    >>> page.records, page.continuation_token, page.is_partial
    ((), None, False)
    """
    records: list[SearchResult] = []
    continuation_token: str | None = None

    try:
        sections = _find_sections(response)
        if sections is None:
            logger.debug("No result container found in search response")
            return PageResult()

        for index, section in enumerate(sections):
            if not isinstance(section, Mapping):
                logger.debug(
                    "Skipping section %d of type %s", index, type(section).__name__
                )
                continue

            for item in _section_items(section):
                record = parse_record(item)
                if record is not None:
                    records.append(record)

            if section.get("continuationItemRenderer"):
                token = dig(section, *_TOKEN_PATH)
                continuation_token = token if isinstance(token, str) else None
    except Exception as e:
        logger.warning(
            "Error parsing search results after %d record(s): %s",
            len(records),
            e,
        )
        return PageResult(
            records=tuple(records),
            continuation_token=continuation_token,
            error=f"{type(e).__name__}: {e}",
        )

    return PageResult(records=tuple(records), continuation_token=continuation_token)
