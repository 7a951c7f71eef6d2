"""
Main Pinport API client.

This module provides the PinportClient class, the entry point for creating,
reading, updating and deleting pins and for reading pin metadata.
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Union
from urllib.parse import quote
import json
import logging

import httpx
from pydantic import BaseModel

from pinport_client.config import PinportSettings, get_pinport_settings
from pinport_client.exceptions import PinportConfigurationError
from pinport_client.extensions import Extension, ExtensionRegistry, PinOperations, build_extensions
from pinport_client.http import AsyncHTTPClient, RequestInit
from pinport_client.schemas import CreatePin, UpdatePin

logger = logging.getLogger(__name__)


def validate_key(key: Optional[str]) -> str:
    """
    Check that ``key`` looks like a three-part signed token.

    Only the shape is checked, the signature is not verified.

    Raises:
        PinportConfigurationError: If the key is empty or malformed
    """
    if not key:
        raise PinportConfigurationError("Pinport public or private key is needed")
    if len(key.split(".")) != 3:
        raise PinportConfigurationError("Pinport key must be a JWT.")
    return key


def _serialize(items: Sequence[Union[BaseModel, Dict[str, Any], str]]) -> str:
    payload = [
        item.model_dump(mode="json", by_alias=True, exclude_unset=True)
        if isinstance(item, BaseModel) else item
        for item in items
    ]
    return json.dumps(payload)


class PinportClient:
    """
    Client for the Pinport API.

    Example usage:
        ```python
        async with PinportClient("https://api.pinport.io", "<public or private key>") as pinport:
            created = await pinport.create_pins([
                CreatePin(meta_id="meta1", position=Position(x=1, y=2, z=3), html="<div>Pin 1</div>"),
            ])
            pins = await pinport.get_pins("meta1")
        ```

    Every call is a fresh round trip; nothing is cached. Requests that fail with
    a status above 399 raise a PinportRequestError subclass.
    """

    def __init__(
        self,
        api_url: str,
        key: str,
        *,
        request_init: Optional[RequestInit] = None,
        extensions: Optional[Iterable[Extension]] = None,
        transport: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        follow_redirects: bool = True,
    ):
        """
        Initialize the Pinport client.

        Args:
            api_url: URL of the Pinport API
            key: Public or private Pinport key, must be a three-segment token
            request_init: Default request options merged into every call
            extensions: Extension descriptors, instantiated in order
            transport: httpx.AsyncClient used to send requests (caller-owned)
            timeout: Timeout for a self-created transport
            follow_redirects: Redirect policy for a self-created transport

        Raises:
            PinportConfigurationError: If the key is missing or not a valid token
        """
        if not api_url:
            raise PinportConfigurationError("Pinport API URL is needed")
        self._api_url = api_url.rstrip("/")
        self._key = validate_key(key)

        self._http = AsyncHTTPClient(
            self._key,
            request_init=request_init,
            transport=transport,
            timeout=timeout,
            follow_redirects=follow_redirects,
        )

        self._extensions = build_extensions(extensions, PinOperations.bind(self))
        logger.debug(f"Initialized PinportClient for {self._api_url} with {len(self._extensions)} extension(s)")

    @classmethod
    def from_settings(
        cls,
        settings: Optional[PinportSettings] = None,
        **kwargs: Any,
    ) -> "PinportClient":
        """
        Create a client from PinportSettings (environment by default).

        Keyword arguments are passed on to the constructor.
        """
        settings = settings or get_pinport_settings()
        kwargs.setdefault("timeout", settings.timeout)
        kwargs.setdefault("follow_redirects", settings.follow_redirects)
        return cls(settings.api_url, settings.key, **kwargs)

    @property
    def api_url(self) -> str:
        """Get the base URL for the API."""
        return self._api_url

    @property
    def extensions(self) -> ExtensionRegistry:
        """Extension instances keyed by their descriptor key."""
        return self._extensions

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def close(self) -> None:
        """Close the HTTP transport if the client created it."""
        await self._http.close()

    async def __aenter__(self) -> "PinportClient":
        await self._http.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"PinportClient(api_url={self._api_url!r}, extensions={sorted(self._extensions)})"

    # =========================================================================
    # Requests
    # =========================================================================

    async def request(
        self,
        url: Union[str, httpx.URL],
        init: Optional[RequestInit] = None,
    ) -> Any:
        """
        Send an authenticated request to ``url`` and return the parsed JSON.

        The bearer key and JSON content type are always applied and override
        any headers from ``init`` or the client's ``request_init``.
        """
        return await self._http.request(url, init)

    def _url(self, *parts: str) -> str:
        return "/".join([self._api_url, *parts])

    async def create_pins(
        self,
        pins: Sequence[Union[CreatePin, Dict[str, Any]]],
    ) -> List[Dict[str, Any]]:
        """
        Create multiple pins.

        Args:
            pins: Pins to create. ``meta_id`` groups pins so they can be
                fetched together with ``get_pins``.

        Returns:
            The created pins as returned by the API
        """
        return await self.request(
            self._url("pins"),
            {"method": "POST", "body": _serialize(pins)},
        )

    async def get_pins(self, meta_id: str) -> List[Dict[str, Any]]:
        """
        Retrieve all pins sharing ``meta_id``.

        Returns:
            List of pins as returned by the API
        """
        return await self.request(httpx.URL(self._url("pins"), params={"meta-id": meta_id}))

    async def update_pins(
        self,
        pins: Sequence[Union[UpdatePin, Dict[str, Any]]],
    ) -> List[Dict[str, Any]]:
        """
        Update multiple pins. Each entry needs an ``id``; other fields are optional.

        Returns:
            The updated pins as returned by the API
        """
        return await self.request(
            self._url("pins"),
            {"method": "PUT", "body": _serialize(pins)},
        )

    async def delete_pins(self, ids: Sequence[str]) -> Dict[str, Any]:
        """
        Delete pins by id.

        Returns:
            ``{"deleted": <count>}``

        Raises:
            TypeError: If ``ids`` is a single string instead of a list of ids
        """
        if isinstance(ids, str):
            raise TypeError("delete_pins expects a list of ids, not a single string")
        return await self.request(
            self._url("pins"),
            {"method": "DELETE", "body": _serialize(list(ids))},
        )

    async def get_metadata(self, meta_id: str) -> Any:
        """Retrieve the metadata record associated with ``meta_id``."""
        return await self.request(self._url("metadata", quote(meta_id, safe="")))
