"""
Tests for the tubesearch exception hierarchy.
"""

from __future__ import annotations

import pytest

from tubesearch.exceptions import (
    CacheError,
    NetworkError,
    SearchFailedError,
    StoreQuotaExceededError,
    TransportError,
    TubeSearchError,
    ValidationError,
    YouTubeAPIError,
)


class TestHierarchy:
    """All package errors share one base class."""

    @pytest.mark.parametrize(
        "exc_class",
        [
            ValidationError,
            TransportError,
            NetworkError,
            YouTubeAPIError,
            SearchFailedError,
            CacheError,
            StoreQuotaExceededError,
        ],
    )
    def test_subclass_of_base(self, exc_class: type[Exception]) -> None:
        assert issubclass(exc_class, TubeSearchError)

    def test_transport_errors(self) -> None:
        assert issubclass(NetworkError, TransportError)
        assert issubclass(YouTubeAPIError, TransportError)

    def test_search_failed_is_not_transport_error(self) -> None:
        assert not issubclass(SearchFailedError, TransportError)


class TestAttributes:
    """Errors carry structured context."""

    def test_base_message(self) -> None:
        error = TubeSearchError("boom")

        assert error.message == "boom"
        assert str(error) == "boom"

    def test_validation_error(self) -> None:
        error = ValidationError(
            message="Query is required", field_name="query", invalid_value=""
        )

        assert error.field_name == "query"
        assert error.invalid_value == ""
        assert str(error) == "Query is required"

    def test_network_error_default_message(self) -> None:
        cause = OSError("unreachable")
        error = NetworkError(original_error=cause)

        assert error.message.startswith("Network error: Failed to connect.")
        assert error.original_error is cause

    def test_youtube_api_error(self) -> None:
        error = YouTubeAPIError(
            message="Request failed: 403 Forbidden - quota",
            status_code=403,
            response_text="quota",
        )

        assert error.status_code == 403
        assert error.response_text == "quota"

    def test_search_failed_error(self) -> None:
        cause = NetworkError()
        error = SearchFailedError(
            message="Search for 'lofi' failed on page 1",
            query="lofi",
            page=1,
            original_error=cause,
        )

        assert error.query == "lofi"
        assert error.page == 1
        assert error.original_error is cause

    def test_store_quota_exceeded(self) -> None:
        error = StoreQuotaExceededError(key="yt_search_keys", quota_bytes=1024)

        assert error.message == "Store quota exceeded"
        assert error.key == "yt_search_keys"
        assert error.quota_bytes == 1024
