"""
Abstract Base Class for the InnerTube transport.

The search core only needs "send JSON, receive JSON or fail"; this
interface keeps the HTTP client out of the paginator and the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class TransportInterface(ABC):
    """
    Abstract interface for posting JSON to the InnerTube API.

    Examples
    --------
    >>> class CannedTransport(TransportInterface):
    ...     async def post(self, url, body):
    ...         return {}
    """

    @abstractmethod
    async def post(self, url: str, body: dict[str, Any]) -> Any:
        """
        POST ``body`` as JSON to ``url`` and return the decoded response.

        Parameters
        ----------
        url : str
            Full request URL, including the API key.
        body : dict[str, Any]
            JSON-serializable request body.

        Returns
        -------
        Any
            Decoded JSON response.

        Raises
        ------
        NetworkError
            If the API cannot be reached.
        YouTubeAPIError
            If the API answers with a non-success status or a non-JSON body.
        """
        ...
