"""
HTTP transport for the InnerTube API.

Posts JSON bodies with ``httpx`` and normalizes failures into the
package's exception types: connectivity problems become
``NetworkError``; error statuses, undecodable bodies and every other
``httpx`` failure become ``YouTubeAPIError``.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from tubesearch.exceptions import NetworkError, YouTubeAPIError
from tubesearch.services.interfaces import TransportInterface

logger = logging.getLogger(__name__)

_REQUEST_TIMEOUT_SECONDS = 30.0
_ERROR_BODY_EXCERPT = 500


class InnerTubeTransport(TransportInterface):
    """
    Async JSON-over-HTTP transport.

    Parameters
    ----------
    proxy_url : str, optional
        Prefix prepended to every request URL, for CORS-style forwarding
        proxies (e.g. ``"https://proxy.example.com/"``). Empty disables
        proxying (default: "").
    headers : dict[str, str] | None, optional
        Extra request headers, merged over ``Content-Type`` (default: None).
    timeout : float, optional
        Per-request timeout in seconds (default: 30).
    client : httpx.AsyncClient | None, optional
        Client to reuse for every request. When omitted, a short-lived
        client is opened per request (default: None).

    Examples
    --------
    >>> transport = InnerTubeTransport(headers={"X-Goog-Visitor-Id": "abc"})
    >>> data = await transport.post(url, {"context": {...}, "query": "lofi"})
    """

    def __init__(
        self,
        proxy_url: str = "",
        headers: dict[str, str] | None = None,
        timeout: float = _REQUEST_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.proxy_url = proxy_url
        self.headers = headers or {}
        self.timeout = timeout
        self._client = client

    def _target_url(self, url: str) -> str:
        return f"{self.proxy_url}{url}" if self.proxy_url else url

    async def post(self, url: str, body: dict[str, Any]) -> Any:
        """
        POST ``body`` as JSON and return the decoded response.

        Parameters
        ----------
        url : str
            Full InnerTube URL; the proxy prefix is added here.
        body : dict[str, Any]
            JSON-serializable request body.

        Returns
        -------
        Any
            Decoded JSON response.

        Raises
        ------
        NetworkError
            If the request could not reach the server (connect errors,
            timeouts, protocol errors).
        YouTubeAPIError
            If the server answered with a non-2xx status or a body that
            is not JSON, the body could not be decoded, or the URL is
            malformed.
        """
        target_url = self._target_url(url)
        request_headers = {"Content-Type": "application/json", **self.headers}

        if self._client is not None:
            return await self._send(self._client, target_url, request_headers, body)

        async with httpx.AsyncClient(follow_redirects=True) as client:
            return await self._send(client, target_url, request_headers, body)

    async def _send(
        self,
        client: httpx.AsyncClient,
        url: str,
        headers: dict[str, str],
        body: dict[str, Any],
    ) -> Any:
        try:
            response = await client.post(
                url,
                headers=headers,
                json=body,
                timeout=self.timeout,
            )
        except httpx.TransportError as e:
            logger.warning("InnerTube request failed (%s)", type(e).__name__)
            raise NetworkError(original_error=e) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("InnerTube request failed (%s)", type(e).__name__)
            raise YouTubeAPIError(
                message=f"InnerTube request failed: {type(e).__name__}: {e}",
            ) from e

        if not response.is_success:
            error_text = response.text
            raise YouTubeAPIError(
                message=(
                    f"Request failed: {response.status_code} "
                    f"{response.reason_phrase} - {error_text[:_ERROR_BODY_EXCERPT]}"
                ),
                status_code=response.status_code,
                response_text=error_text,
            )

        try:
            return response.json()
        except ValueError as e:
            raise YouTubeAPIError(
                message=f"InnerTube returned a non-JSON body ({response.status_code})",
                status_code=response.status_code,
                response_text=response.text[:_ERROR_BODY_EXCERPT],
            ) from e
