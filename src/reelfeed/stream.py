"""Lazy poster stream.

Turns a feed location into an async stream of posters. Nothing is fetched
ahead of the consumer: each Reel is requested only when the next item is
pulled, so at most one Reel fetch is in flight and a consumer that stops
iterating (or calls ``aclose()``) leaves no pending work behind.

Example:
    >>> producer = PosterStreamProducer(listing_reader, reel_reader, isolator)
    >>> async for item in producer.produce("https://example.com/feed.txt"):
    ...     print(item.location)
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING

from reelfeed.core.exceptions import require
from reelfeed.models.reel import PosterItem

if TYPE_CHECKING:
    from reelfeed.isolation import ContentIsolator, IsolationScope
    from reelfeed.reader.feed import FeedListingReader
    from reelfeed.reader.reel import ReelReader

logger = logging.getLogger(__name__)


class PosterStreamProducer:
    """Combines listing, Reel reading and isolation into a poster stream.

    Args:
        listing_reader: Reads the feed listing.
        reel_reader: Reads each Reel named by the listing.
        isolator: Builds the poster scope of each Reel.

    Raises:
        ConfigurationError: If a collaborator is missing.
    """

    def __init__(
        self,
        listing_reader: FeedListingReader,
        reel_reader: ReelReader,
        isolator: ContentIsolator,
    ) -> None:
        require(listing_reader, "listing_reader")
        require(reel_reader, "reel_reader")
        require(isolator, "isolator")
        self._listing_reader = listing_reader
        self._reel_reader = reel_reader
        self._isolator = isolator

    async def poster(self, location: str) -> IsolationScope | None:
        """Poster of the Reel at ``location``; None when it cannot be resolved."""
        reel = await self._reel_reader.read(location)
        if reel is None:
            return None
        return self._isolator.poster(reel)

    async def produce(self, feed_location: str) -> AsyncIterator[PosterItem]:
        """Yield a PosterItem for every resolvable Reel, in listing order.

        Each call reads the listing afresh. Reels that cannot be fetched,
        parsed, or that have no sections are skipped.
        """
        listing = await self._listing_reader.read(feed_location)

        for location in listing.items:
            poster = await self.poster(location)
            if poster is None:
                logger.debug(f"Skipping unresolvable reel {location}")
                continue

            yield PosterItem(location=location, poster=poster)


__all__ = ["PosterStreamProducer"]
