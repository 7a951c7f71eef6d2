"""
Authenticated async HTTP layer for the Pinport API.

Every request goes through ``AsyncHTTPClient.request``, which:
- merges the per-call options with the client-wide ``request_init`` defaults
- forces ``Content-Type: application/json`` and ``Authorization: Bearer <key>``
- parses the response body as JSON, whatever the status
- raises a ``PinportRequestError`` subclass for status codes above 399

The transport is an ``httpx.AsyncClient``. It can be injected (and is then
owned by the caller), or it is created lazily and closed by ``close()``.
"""

from typing import Any, Dict, Optional, TypedDict, Union
import logging

import httpx

from pinport_client.exceptions import exception_from_response

logger = logging.getLogger(__name__)


class RequestInit(TypedDict, total=False):
    """Per-request options, mirroring the fields of a fetch ``RequestInit``."""

    method: str
    headers: Dict[str, str]
    body: Optional[str]
    timeout: Optional[float]


class AsyncHTTPClient:
    """
    Async HTTP client that authenticates every request with a bearer key.

    The client keeps no per-request state, so concurrent calls are independent.
    """

    def __init__(
        self,
        key: str,
        *,
        request_init: Optional[RequestInit] = None,
        transport: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        follow_redirects: bool = True,
    ):
        """
        Initialize the HTTP client.

        Args:
            key: Bearer key sent with every request
            request_init: Default options merged into every request
            transport: httpx client to send requests with (not closed by us)
            timeout: Timeout for a self-created transport (None disables it)
            follow_redirects: Redirect policy for a self-created transport
        """
        self._key = key
        self._request_init: RequestInit = dict(request_init or {})
        self._timeout = timeout
        self._follow_redirects = follow_redirects
        self._client = transport
        self._owns_client = transport is None

    @property
    def request_init(self) -> RequestInit:
        return dict(self._request_init)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=self._follow_redirects,
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AsyncHTTPClient":
        await self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _build_headers(
        self,
        headers: Optional[Dict[str, str]] = None,
        default_headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Headers:
        """Merge call and default headers, then apply the forced ones."""
        merged = httpx.Headers(headers)
        if default_headers:
            merged.update(default_headers)
        # Assignment replaces every case-insensitive match.
        merged["Content-Type"] = "application/json"
        merged["Authorization"] = f"Bearer {self._key}"
        return merged

    def _merge_init(self, init: Optional[RequestInit] = None) -> Dict[str, Any]:
        """Apply the client-wide defaults over the per-call options."""
        init = init or {}
        options: Dict[str, Any] = {**init, **self._request_init}
        options["headers"] = self._build_headers(
            init.get("headers"),
            self._request_init.get("headers"),
        )
        return options

    async def request(
        self,
        url: Union[str, httpx.URL],
        init: Optional[RequestInit] = None,
    ) -> Any:
        """
        Send an authenticated request and return the parsed JSON body.

        Args:
            url: Absolute request URL, including any query string
            init: Per-request options (method, headers, body, timeout)

        Returns:
            The parsed JSON body, unvalidated

        Raises:
            PinportRequestError: If the response status is greater than 399
            json.JSONDecodeError: If the body is not valid JSON
            httpx.TransportError: On network failures, unwrapped
        """
        client = await self._get_client()
        options = self._merge_init(init)
        method = (options.get("method") or "GET").upper()

        logger.debug(f"{method} {url}")
        response = await client.request(
            method,
            url,
            content=options.get("body"),
            headers=options["headers"],
            timeout=options["timeout"] if "timeout" in options else httpx.USE_CLIENT_DEFAULT,
        )
        logger.debug(f"{method} {url} -> {response.status_code}")

        data = response.json()
        if response.status_code > 399:
            logger.warning(f"Pinport API returned HTTP {response.status_code} for {method} {url}")
            raise exception_from_response(response.status_code, data)
        return data
