"""Content fetcher protocol.

Example:
    >>> from reelfeed.protocols.fetcher import ContentFetcher
    >>> hasattr(ContentFetcher, "fetch")
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from reelfeed.models.fetch import FetchResult


@runtime_checkable
class ContentFetcher(Protocol):
    """Byte-range-capable document retrieval.

    Implementations send ``Range: bytes=N-`` when ``starting_byte > 0``,
    disable intermediary caching, and return None instead of raising on
    network errors or non-success statuses.
    """

    async def fetch(self, location: str, starting_byte: int = 0) -> FetchResult | None:
        """Fetch ``location``, optionally from ``starting_byte`` onward."""
        ...
