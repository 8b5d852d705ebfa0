"""In-memory content fetcher.

Serves documents from a dictionary instead of the network, useful for
testing, demos, and offline pipelines. Every request is recorded so tests
can assert how lazily the pipeline fetches.

Example:
    >>> import asyncio
    >>> from reelfeed.fetcher.memory import MemoryFetcher
    >>> fetcher = MemoryFetcher()
    >>> fetcher.add("https://example.com/feed.txt", "a.html\\n", "text/plain")
    >>> result = asyncio.run(fetcher.fetch("https://example.com/feed.txt"))
    >>> result.text
    'a.html\\n'
    >>> fetcher.requested
    ['https://example.com/feed.txt']
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from reelfeed.models.fetch import FetchResult, charset_of

logger = logging.getLogger(__name__)


@dataclass
class StoredDocument:
    """A document served by MemoryFetcher.

    Example:
        >>> from reelfeed.fetcher.memory import StoredDocument
        >>> StoredDocument(text="<p>hi</p>").media_type
        'text/html'
    """

    text: str
    media_type: str = "text/html"

    @property
    def content(self) -> bytes:
        return self.text.encode(charset_of(self.media_type), errors="replace")


class MemoryFetcher:
    """Dictionary-backed implementation of the ContentFetcher protocol.

    Args:
        documents: Initial mapping of location to body text (served as HTML).
        honor_ranges: When False, range requests are answered with the full
            body and status 200, like a server that ignores ``Range``.
    """

    def __init__(
        self,
        documents: dict[str, str] | None = None,
        *,
        honor_ranges: bool = True,
    ) -> None:
        self._documents: dict[str, StoredDocument] = {}
        self.honor_ranges = honor_ranges
        self.requests: list[tuple[str, int]] = []
        for location, text in (documents or {}).items():
            self.add(location, text)

    def add(self, location: str, text: str, media_type: str = "text/html") -> None:
        """Serve ``text`` at ``location`` with ``media_type``."""
        self._documents[location] = StoredDocument(text=text, media_type=media_type)

    def append(self, location: str, text: str) -> None:
        """Append ``text`` to an existing document, as a growing feed would."""
        stored = self._documents[location]
        self._documents[location] = StoredDocument(
            text=stored.text + text,
            media_type=stored.media_type,
        )

    def remove(self, location: str) -> None:
        """Stop serving ``location``."""
        self._documents.pop(location, None)

    @property
    def requested(self) -> list[str]:
        """Locations requested so far, in order."""
        return [location for location, _ in self.requests]

    def count(self, location: str) -> int:
        """Number of times ``location`` was requested."""
        return self.requested.count(location)

    async def fetch(self, location: str, starting_byte: int = 0) -> FetchResult | None:
        """Serve a stored document, honoring byte ranges."""
        self.requests.append((location, starting_byte))

        stored = self._documents.get(location)
        if stored is None:
            logger.error(f"Fetch failed: {location} (not found)")
            return None

        headers = {"Content-Type": stored.media_type, "Cache-Control": "no-cache"}
        if starting_byte <= 0 or not self.honor_ranges:
            return FetchResult(headers=headers, text=stored.text, content=stored.content)

        content = stored.content
        if starting_byte >= len(content):
            return FetchResult(headers=headers, text="", status_code=416)

        headers["Content-Range"] = f"bytes {starting_byte}-{len(content) - 1}/{len(content)}"
        return FetchResult(
            headers=headers,
            text=content[starting_byte:].decode(charset_of(stored.media_type), errors="replace"),
            status_code=206,
            content=content[starting_byte:],
        )


__all__ = ["MemoryFetcher", "StoredDocument"]
