"""
Constants for the YouTube InnerTube API.

These are the generic values used by the public WEB client.
"""

from __future__ import annotations

from typing import Any

INNERTUBE_BASE_URL = "https://www.youtube.com/youtubei/v1"
SEARCH_ENDPOINT = "/search"
WATCH_URL = "https://www.youtube.com/watch?v="

# Public key embedded in YouTube's client-side JS; not a secret.
DEFAULT_API_KEY = "AIzaSyB5BoZcW8y7_Gk"

DEFAULT_CLIENT_CONTEXT: dict[str, Any] = {
    "clientName": "WEB",
    "clientVersion": "2.20230920.00.00",
    "hl": "en",
    "gl": "US",
    "utcOffsetMinutes": 0,
}

DEFAULT_CACHE_NAMESPACE = "yt_search_"
DEFAULT_CACHE_MAX_AGE_SECONDS = 3600.0
DEFAULT_CACHE_CAPACITY = 20
DEFAULT_SEARCH_LIMIT = 20
MAX_CONTINUATION_ATTEMPTS = 5
