"""Custom exceptions.

Lookups in the pipeline degrade to ``None`` or empty results instead of
raising. The exceptions below are reserved for configuration mistakes and for
callers that explicitly ask for a strict answer.

Example:
    >>> from reelfeed.core.exceptions import ConfigurationError, ReelFeedError
    >>> isinstance(ConfigurationError("fetcher missing"), ReelFeedError)
    True
    >>> try:
    ...     raise NotFoundError("https://example.com/r/index.html")
    ... except ReelFeedError as e:
    ...     print(f"Caught: {type(e).__name__}")
    Caught: NotFoundError
"""

from __future__ import annotations


class ReelFeedError(Exception):
    """Base exception for reelfeed.

    Example:
        >>> from reelfeed.core.exceptions import ReelFeedError
        >>> e = ReelFeedError("something went wrong")
        >>> str(e)
        'something went wrong'
    """


class ConfigurationError(ReelFeedError):
    """A required collaborator or setting is missing.

    Example:
        >>> from reelfeed.core.exceptions import ConfigurationError
        >>> raise ConfigurationError("isolator")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ConfigurationError: isolator
    """


class FetchError(ReelFeedError):
    """A transport-level failure, raised only by strict fetch helpers.

    Example:
        >>> from reelfeed.core.exceptions import FetchError
        >>> err = FetchError("HTTP 404", location="https://example.com/feed.txt")
        >>> err.location
        'https://example.com/feed.txt'
    """

    def __init__(self, message: str, location: str | None = None) -> None:
        super().__init__(message)
        self.location = location


class NotFoundError(ReelFeedError):
    """A resource could not be resolved to usable content.

    Example:
        >>> from reelfeed.core.exceptions import NotFoundError
        >>> raise NotFoundError("reel")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        NotFoundError: reel
    """


def require(collaborator: object, name: str) -> None:
    """Raise ConfigurationError when ``collaborator`` was not supplied.

    Example:
        >>> from reelfeed.core.exceptions import require
        >>> require(object(), "fetcher")
        >>> require(None, "fetcher")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ConfigurationError: fetcher is required
    """
    if collaborator is None:
        raise ConfigurationError(f"{name} is required")
