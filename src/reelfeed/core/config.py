"""reelfeed configuration.

Application settings loaded from environment variables with REELFEED_ prefix.

Example:
    >>> from reelfeed.core.config import get_settings
    >>> settings = get_settings(log_level="DEBUG")
    >>> settings.log_level
    'DEBUG'
    >>> settings.feed_media_type
    'text/plain'
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Loads from environment variables with REELFEED_ prefix.

    Example:
        >>> from reelfeed.core.config import Settings
        >>> s = Settings(max_upscan_hops=10)
        >>> s.max_upscan_hops
        10
        >>> s.feed_link_type
        'text/feed'
    """

    model_config = SettingsConfigDict(
        env_prefix="REELFEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Transport
    request_timeout: float = Field(default=30.0, ge=1.0)
    user_agent: str = Field(default="reelfeed/0.1", description="User-Agent header")

    # Protocol
    feed_media_type: str = Field(default="text/plain", description="Required media type of feed listings")
    feed_link_type: str = Field(default="text/feed", description="Type marker of subscribable feed links")
    max_upscan_hops: int = Field(default=1000, ge=1, description="Upper bound on directories visited by metadata discovery")


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Example:
        >>> from reelfeed.core.config import get_settings
        >>> s = get_settings(request_timeout=5.0)
        >>> s.request_timeout
        5.0
    """
    return Settings(**overrides)
