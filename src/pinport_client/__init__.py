"""
Pinport Client Library.

An async HTTP client for the Pinport pin management API.

Example usage:
    ```python
    from pinport_client import PinportClient, CreatePin, Position

    async with PinportClient("https://api.pinport.io", "<key>") as pinport:
        await pinport.create_pins([
            CreatePin(meta_id="meta1", position=Position(x=1, y=2, z=3), html="<div>Pin</div>"),
        ])
        pins = await pinport.get_pins("meta1")
    ```
"""

__version__ = "0.3.0"

# Main client
from pinport_client.client import PinportClient, validate_key

# HTTP layer (for advanced usage)
from pinport_client.http import AsyncHTTPClient, RequestInit

# Configuration
from pinport_client.config import (
    PinportSettings,
    get_pinport_settings,
    configure_pinport_settings,
    reset_pinport_settings,
)

# Extensions
from pinport_client.extensions import (
    Extension,
    ExtensionRegistry,
    PinOperations,
)

# Schemas
from pinport_client.schemas import (
    Position,
    Pin,
    CreatePin,
    UpdatePin,
    DeletePinsResult,
    ErrorIssue,
    ErrorResponse,
)

# Exceptions
from pinport_client.exceptions import (
    PinportError,
    PinportConfigurationError,
    PinportRequestError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    RateLimitError,
    ServerError,
    exception_from_response,
)

__all__ = [
    "__version__",
    # Main client
    "PinportClient",
    "validate_key",
    # HTTP layer
    "AsyncHTTPClient",
    "RequestInit",
    # Configuration
    "PinportSettings",
    "get_pinport_settings",
    "configure_pinport_settings",
    "reset_pinport_settings",
    # Extensions
    "Extension",
    "ExtensionRegistry",
    "PinOperations",
    # Schemas
    "Position",
    "Pin",
    "CreatePin",
    "UpdatePin",
    "DeletePinsResult",
    "ErrorIssue",
    "ErrorResponse",
    # Exceptions
    "PinportError",
    "PinportConfigurationError",
    "PinportRequestError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "exception_from_response",
]
