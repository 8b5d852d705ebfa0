"""Core module - configuration, exceptions and orchestration."""

from reelfeed.core.config import Settings, get_settings
from reelfeed.core.exceptions import (
    ConfigurationError,
    FetchError,
    NotFoundError,
    ReelFeedError,
)

__all__ = [
    "ConfigurationError",
    "FetchError",
    "NotFoundError",
    "ReelFeedError",
    "Settings",
    "get_settings",
]
