"""Feed listing reader.

A feed is a newline-delimited text resource, UTF-8 unless its Content-Type
names another charset. Every line that is not blank and does not start
with ``#`` references one Reel, relative to the feed's own directory:

    # my feed
    2024/first.html
    2024/second.html

Reads can start at a byte offset so that a caller polling a growing feed
only downloads what was appended since the previous read.

Example:
    >>> import asyncio
    >>> from reelfeed.fetcher import MemoryFetcher
    >>> from reelfeed.reader.feed import FeedListingReader
    >>> fetcher = MemoryFetcher()
    >>> fetcher.add("https://x/feed.txt", "#comment\\n\\na.html\\nb.html\\n", "text/plain")
    >>> listing = asyncio.run(FeedListingReader(fetcher).read("https://x/feed.txt"))
    >>> listing.items
    ('https://x/a.html', 'https://x/b.html')
    >>> listing.bytes_consumed
    24
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from reelfeed.core.config import get_settings
from reelfeed.core.exceptions import require
from reelfeed.models.feed import FeedListing
from reelfeed.url import folder_of, try_resolve

if TYPE_CHECKING:
    from reelfeed.models.fetch import FetchResult
    from reelfeed.protocols.fetcher import ContentFetcher

logger = logging.getLogger(__name__)


def parse_feed_text(text: str, feed_location: str) -> tuple[str, ...]:
    """Extract absolute Reel locations from feed ``text``.

    Example:
        >>> parse_feed_text("# c\\n a.html \\n\\nsub/b.html", "https://x/f/feed.txt")
        ('https://x/f/a.html', 'https://x/f/sub/b.html')
    """
    folder = folder_of(feed_location)
    items = []

    for line in text.split("\n"):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        location = try_resolve(line, folder)
        if location is None:
            logger.debug(f"Skipping malformed feed entry {line!r} in {feed_location}")
            continue
        items.append(location)

    return tuple(items)


class FeedListingReader:
    """Reads feed resources into FeedListing values.

    Args:
        fetcher: ContentFetcher used for every read.
        media_type: Required media type (default from settings).
    """

    def __init__(self, fetcher: ContentFetcher, *, media_type: str | None = None) -> None:
        require(fetcher, "fetcher")
        self._fetcher = fetcher
        self.media_type = (media_type or get_settings().feed_media_type).lower()

    async def read(self, feed_location: str, starting_byte: int = 0) -> FeedListing:
        """Read the feed at ``feed_location`` from ``starting_byte`` onward.

        Returns a listing with ``bytes_consumed == -1`` when the fetch failed
        or the response had the wrong media type.
        """
        unusable = FeedListing(source_location=feed_location, starting_byte=starting_byte)
        result = await self._fetcher.fetch(feed_location, starting_byte)
        if result is None:
            return unusable

        if result.status_code == 416:
            logger.debug(f"No new content in feed {feed_location} past byte {starting_byte}")
            return FeedListing(
                source_location=feed_location,
                bytes_consumed=0,
                starting_byte=starting_byte,
            )

        if result.media_type != self.media_type:
            logger.warning(
                f"Feed at URL: {feed_location} was returned with an incorrect mime type. "
                f'Expected mime type is "{self.media_type}", but the mime type '
                f'"{result.media_type}" was returned.'
            )
            return unusable

        text, size = self._received(result, feed_location, starting_byte)
        return FeedListing(
            source_location=feed_location,
            items=parse_feed_text(text, feed_location),
            bytes_consumed=size,
            starting_byte=starting_byte,
        )

    async def read_more(self, listing: FeedListing) -> FeedListing:
        """Read whatever was appended to a feed since ``listing`` was read."""
        return await self.read(listing.source_location, listing.resume_from)

    def _received(self, result: FetchResult, feed_location: str, starting_byte: int) -> tuple[str, int]:
        """Body text past ``starting_byte`` and its size in received bytes.

        A 200 answer to a range request carries the whole resource, so the
        part before ``starting_byte`` is cut off here.
        """
        body = result.body
        if starting_byte > 0 and result.status_code == 200:
            logger.debug(f"Range ignored by server for {feed_location}; trimming {starting_byte} bytes")
            body = body[starting_byte:]
            return body.decode(result.charset, errors="replace"), len(body)
        return result.text, len(body)


__all__ = ["FeedListingReader", "parse_feed_text"]
