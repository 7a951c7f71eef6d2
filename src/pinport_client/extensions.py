"""
Extension composition for the Pinport client.

An extension is any callable (usually a class) that accepts the client's
bound operations and returns an object. The client builds every configured
extension once, in order, while it is constructed, and stores each result
under the extension's key:

    class Labels:
        def __init__(self, ops: PinOperations):
            self._ops = ops

        async def relabel(self, meta_id: str, html: str):
            pins = await self._ops.get_pins(meta_id)
            return await self._ops.update_pins(
                [{"id": pin["id"], "html": html} for pin in pins]
            )

    client = PinportClient(url, key, extensions=[Extension("labels", Labels)])
    await client.extensions.labels.relabel("meta1", "<b>done</b>")
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, Iterable, Iterator, Optional

from pinport_client.exceptions import PinportConfigurationError

if TYPE_CHECKING:
    from pinport_client.client import PinportClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PinOperations:
    """
    The client's operations, bound to one client instance.

    Calling any of these performs the same authenticated request as calling
    the client method of the same name.
    """

    create_pins: Callable[..., Awaitable[Any]]
    get_pins: Callable[..., Awaitable[Any]]
    update_pins: Callable[..., Awaitable[Any]]
    delete_pins: Callable[..., Awaitable[Any]]
    get_metadata: Callable[..., Awaitable[Any]]
    request: Callable[..., Awaitable[Any]]

    @classmethod
    def bind(cls, client: "PinportClient") -> "PinOperations":
        return cls(
            create_pins=client.create_pins,
            get_pins=client.get_pins,
            update_pins=client.update_pins,
            delete_pins=client.delete_pins,
            get_metadata=client.get_metadata,
            request=client.request,
        )


ExtensionFactory = Callable[[PinOperations], Any]


@dataclass(frozen=True)
class Extension:
    """
    Descriptor for an extension.

    Attributes:
        key: Name the extension instance is stored under
        factory: Callable receiving the bound PinOperations
    """

    key: str
    factory: ExtensionFactory

    def __post_init__(self):
        if not self.key or not isinstance(self.key, str):
            raise PinportConfigurationError("Extension key must be a non-empty string")
        if not callable(self.factory):
            raise PinportConfigurationError(
                f"Extension {self.key!r} factory must be callable"
            )


class ExtensionRegistry(Mapping):
    """
    Read-only mapping of extension key to instance, also readable as attributes.

    Registered keys take precedence over the mapping methods, so an extension
    named ``update`` or ``items`` is returned by ``registry.update``.
    """

    def __init__(self, *args: Any, **kwargs: Any):
        self._extensions: Dict[str, Any] = dict(*args, **kwargs)

    def __getattribute__(self, name: str) -> Any:
        if not name.startswith("_"):
            extensions = object.__getattribute__(self, "_extensions")
            if name in extensions:
                return extensions[name]
        return object.__getattribute__(self, name)

    def __getattr__(self, name: str) -> Any:
        raise AttributeError(f"No extension registered under {name!r}")

    def __getitem__(self, key: str) -> Any:
        return self._extensions[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._extensions)

    def __len__(self) -> int:
        return len(self._extensions)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ExtensionRegistry):
            return self._extensions == other._extensions
        if isinstance(other, Mapping):
            return self._extensions == dict(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"ExtensionRegistry({self._extensions!r})"

    def _register(self, key: str, instance: Any) -> None:
        self._extensions[key] = instance


def build_extensions(
    extensions: Optional[Iterable[Extension]],
    operations: PinOperations,
) -> ExtensionRegistry:
    """
    Instantiate extensions in the given order.

    A later descriptor with an already used key replaces the earlier instance.
    """
    registry = ExtensionRegistry()
    for ext in extensions or ():
        if not isinstance(ext, Extension):
            raise PinportConfigurationError(
                f"Expected an Extension descriptor, got {type(ext).__name__}"
            )
        if ext.key in registry:
            logger.debug(f"Extension key {ext.key!r} registered again, replacing previous instance")
        registry._register(ext.key, ext.factory(operations))
        logger.debug(f"Initialized extension {ext.key!r}")
    return registry
