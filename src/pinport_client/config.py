"""
Configuration settings for the Pinport client.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PinportSettings(BaseSettings):
    """
    Configuration for the Pinport API client.

    Settings are loaded from environment variables with PINPORT_ prefix.
    Example: PINPORT_API_URL, PINPORT_KEY, PINPORT_TIMEOUT.
    """

    model_config = SettingsConfigDict(
        env_prefix="PINPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_url: str = Field(
        ...,
        min_length=1,
        description="Base URL of the Pinport API, without trailing slash"
    )
    key: str = Field(
        ...,
        description="Public or private Pinport key (three-segment token)"
    )

    # HTTP client settings, only used when the client owns its transport
    timeout: Optional[float] = Field(
        default=None,
        description="Request timeout in seconds (None disables the timeout)"
    )
    follow_redirects: bool = Field(
        default=True,
        description="Follow 3xx responses"
    )


@lru_cache
def get_pinport_settings() -> PinportSettings:
    """
    Get Pinport settings singleton.

    Uses lru_cache to ensure settings are only loaded once.

    Raises:
        ValidationError: If required settings are missing
    """
    return PinportSettings()


def configure_pinport_settings(
    api_url: Optional[str] = None,
    key: Optional[str] = None,
    **kwargs,
) -> PinportSettings:
    """
    Build settings programmatically, falling back to the environment
    for anything not given.
    """
    settings_dict = {
        k: v for k, v in {
            "api_url": api_url,
            "key": key,
            **kwargs,
        }.items() if v is not None
    }
    return PinportSettings(**settings_dict)


def reset_pinport_settings() -> None:
    """Reset settings to default (reload from environment)."""
    get_pinport_settings.cache_clear()
