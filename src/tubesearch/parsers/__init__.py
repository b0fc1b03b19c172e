"""
Parsers for InnerTube search responses.

Modules
-------
text_extractor
    Normalizes InnerTube text nodes into plain strings.
record_parser
    Turns one renderer node into a typed result record.
response_parser
    Walks a full search or continuation response into a PageResult.
"""

from __future__ import annotations

from tubesearch.parsers.record_parser import RENDERER_PARSERS, parse_record
from tubesearch.parsers.response_parser import parse_search_response
from tubesearch.parsers.text_extractor import get_text

__all__ = [
    "RENDERER_PARSERS",
    "get_text",
    "parse_record",
    "parse_search_response",
]
