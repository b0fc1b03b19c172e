"""
Custom exceptions for the tubesearch package.

This module defines the error taxonomy used across the package: invalid
caller input, transport failures (unreachable network vs. upstream HTTP
errors), failed searches and local storage faults.

Parse anomalies and cache faults are never raised to callers of
``SearchService``; they degrade to empty/partial results or cache misses
and are only logged. ``CacheError`` subclasses are raised by stores and
caught inside ``LRUCache``.
"""

from __future__ import annotations


class TubeSearchError(Exception):
    """Base exception for all tubesearch errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize TubeSearchError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        """
        self.message = message
        super().__init__(message)


class ValidationError(TubeSearchError):
    """
    Exception raised when caller input is invalid.

    Raised immediately, before any network call, and never retried.

    Attributes
    ----------
    message : str
        Human-readable error message.
    field_name : str | None
        The name of the argument that failed validation.
    invalid_value : object
        The value that failed validation.

    Examples
    --------
    >>> try:
    ...     await service.search("")
    ... except ValidationError as e:
    ...     print(f"Invalid {e.field_name}: {e.invalid_value!r}")
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field_name: str | None = None,
        invalid_value: object = None,
    ) -> None:
        """
        Initialize ValidationError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Validation failed").
        field_name : str | None, optional
            The name of the argument that failed validation (default: None).
        invalid_value : object, optional
            The value that failed validation (default: None).
        """
        self.field_name: str | None = field_name
        self.invalid_value: object = invalid_value
        super().__init__(message)


class TransportError(TubeSearchError):
    """Base exception for failures while talking to the InnerTube API."""


class NetworkError(TransportError):
    """
    Exception raised when the network is unreachable.

    Wraps low-level connectivity failures (DNS, refused connections,
    timeouts) so callers can tell them apart from an upstream HTTP error.

    Attributes
    ----------
    message : str
        Human-readable error message.
    original_error : Exception | None
        The original exception that caused this error.
    """

    def __init__(
        self,
        message: str = (
            "Network error: Failed to connect. "
            "Check your internet connection or proxy settings."
        ),
        original_error: Exception | None = None,
    ) -> None:
        """
        Initialize NetworkError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message.
        original_error : Exception | None, optional
            The original exception that caused this error (default: None).
        """
        self.original_error = original_error
        super().__init__(message)


class YouTubeAPIError(TransportError):
    """
    Exception raised when the InnerTube API answers with an error.

    Covers non-success HTTP status codes and bodies that are not JSON.

    Attributes
    ----------
    message : str
        Human-readable error message.
    status_code : int | None
        HTTP status code returned by the API.
    response_text : str | None
        Body of the failed response, if any.

    Examples
    --------
    >>> try:
    ...     data = await transport.post(url, body)
    ... except YouTubeAPIError as e:
    ...     if e.status_code == 403:
    ...         print("API key rejected")
    """

    def __init__(
        self,
        message: str = "YouTube API error occurred",
        status_code: int | None = None,
        response_text: str | None = None,
    ) -> None:
        """
        Initialize YouTubeAPIError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "YouTube API error occurred").
        status_code : int | None, optional
            HTTP status code returned by the API (default: None).
        response_text : str | None, optional
            Body of the failed response (default: None).
        """
        self.status_code: int | None = status_code
        self.response_text: str | None = response_text
        super().__init__(message)


class SearchFailedError(TubeSearchError):
    """
    Exception raised when a search cannot be completed.

    Raised when the transport fails on any page of a search. ``page`` is
    0 for the initial request and N for the N-th continuation request.

    Attributes
    ----------
    message : str
        Human-readable error message.
    query : str
        The query being searched.
    page : int
        Index of the page whose request failed.
    original_error : Exception | None
        The transport error that caused the failure.

    Examples
    --------
    >>> try:
    ...     results = await service.search("lofi")
    ... except SearchFailedError as e:
    ...     if isinstance(e.original_error, NetworkError):
    ...         print("offline")
    """

    def __init__(
        self,
        message: str = "Search failed",
        query: str = "",
        page: int = 0,
        original_error: Exception | None = None,
    ) -> None:
        """
        Initialize SearchFailedError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Search failed").
        query : str, optional
            The query being searched (default: "").
        page : int, optional
            Index of the page whose request failed (default: 0).
        original_error : Exception | None, optional
            The transport error that caused the failure (default: None).
        """
        self.query = query
        self.page = page
        self.original_error = original_error
        super().__init__(message)


class CacheError(TubeSearchError):
    """Base exception for persistent store failures."""


class StoreQuotaExceededError(CacheError):
    """
    Exception raised when a store write would exceed its quota.

    Attributes
    ----------
    message : str
        Human-readable error message.
    key : str | None
        The key whose write was rejected.
    quota_bytes : int | None
        The configured quota of the store.
    """

    def __init__(
        self,
        message: str = "Store quota exceeded",
        key: str | None = None,
        quota_bytes: int | None = None,
    ) -> None:
        """
        Initialize StoreQuotaExceededError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Store quota exceeded").
        key : str | None, optional
            The key whose write was rejected (default: None).
        quota_bytes : int | None, optional
            The configured quota of the store (default: None).
        """
        self.key = key
        self.quota_bytes = quota_bytes
        super().__init__(message)
