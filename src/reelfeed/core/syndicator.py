"""Syndicator - entry point wiring the feed pipeline together.

Example:
    >>> from reelfeed import Syndicator
    >>> async with Syndicator() as syndicator:
    ...     async for item in syndicator.posters("https://example.com/feed.txt"):
    ...         print(item.location)
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from typing import TYPE_CHECKING

from reelfeed.core.config import Settings, get_settings
from reelfeed.core.exceptions import NotFoundError
from reelfeed.http.client import HttpClient
from reelfeed.isolation import ContentIsolator
from reelfeed.parser.html import SoupDocumentParser
from reelfeed.provider import FeedProvider
from reelfeed.reader.feed import FeedListingReader
from reelfeed.reader.metadata import MetadataDiscoverer
from reelfeed.reader.reel import ReelReader
from reelfeed.stream import PosterStreamProducer

if TYPE_CHECKING:
    from reelfeed.models.feed import FeedListing, FeedMetaData
    from reelfeed.models.reel import PosterItem, ReelDocument
    from reelfeed.protocols.fetcher import ContentFetcher
    from reelfeed.protocols.parser import DocumentParser


class Syndicator:
    """Builds the readers, isolator and producers over one fetcher.

    When no fetcher is given, an HttpClient is created and closed with the
    syndicator.

    Args:
        fetcher: ContentFetcher to use (default: HttpClient).
        parser: DocumentParser to use (default: SoupDocumentParser).
        isolator: ContentIsolator to use.
        settings: Settings (default: environment).
    """

    def __init__(
        self,
        fetcher: ContentFetcher | None = None,
        parser: DocumentParser | None = None,
        *,
        isolator: ContentIsolator | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._owns_fetcher = fetcher is None
        self.fetcher = fetcher or HttpClient(
            user_agent=self.settings.user_agent,
            timeout=self.settings.request_timeout,
        )
        self.parser = parser or SoupDocumentParser()
        self.isolator = isolator or ContentIsolator()

        self.listing_reader = FeedListingReader(self.fetcher, media_type=self.settings.feed_media_type)
        self.reel_reader = ReelReader(self.fetcher, self.parser, link_type=self.settings.feed_link_type)
        self.metadata_discoverer = MetadataDiscoverer(
            self.fetcher,
            self.parser,
            max_hops=self.settings.max_upscan_hops,
        )
        self.producer = PosterStreamProducer(self.listing_reader, self.reel_reader, self.isolator)

    async def close(self) -> None:
        if self._owns_fetcher and isinstance(self.fetcher, HttpClient):
            await self.fetcher.close()

    async def __aenter__(self) -> Syndicator:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def read_feed(self, feed_location: str, starting_byte: int = 0) -> FeedListing:
        return await self.listing_reader.read(feed_location, starting_byte)

    async def read_reel(self, location: str) -> ReelDocument | None:
        return await self.reel_reader.read(location)

    async def discover_metadata(self, feed_location: str) -> FeedMetaData | None:
        return await self.metadata_discoverer.discover(feed_location)

    def posters(self, feed_location: str) -> AsyncIterator[PosterItem]:
        """Lazy poster stream for ``feed_location``."""
        return self.producer.produce(feed_location)

    async def provider(self, source: str | Sequence[str]) -> FeedProvider:
        """Provider over a feed location or an explicit list of Reel locations."""
        if isinstance(source, str):
            return await FeedProvider.from_feed(source, self.listing_reader, self.reel_reader, self.isolator)
        return FeedProvider(source, self.reel_reader, self.isolator)

    async def require_reel(self, location: str) -> ReelDocument:
        """Like :meth:`read_reel`, but raise NotFoundError instead of returning None."""
        reel = await self.read_reel(location)
        if reel is None:
            raise NotFoundError(f"Reel not found: {location}")
        return reel

    async def require_metadata(self, feed_location: str) -> FeedMetaData:
        """Like :meth:`discover_metadata`, but raise NotFoundError instead of returning None."""
        metadata = await self.discover_metadata(feed_location)
        if metadata is None:
            raise NotFoundError(f"No metadata found for feed: {feed_location}")
        return metadata


__all__ = ["Syndicator"]
