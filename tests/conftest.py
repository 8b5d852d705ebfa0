"""Shared fixtures: an in-memory web of feeds and Reels."""

from __future__ import annotations

import pytest

from reelfeed.fetcher.memory import MemoryFetcher
from reelfeed.isolation import ContentIsolator
from reelfeed.parser.html import SoupDocumentParser
from reelfeed.reader.feed import FeedListingReader
from reelfeed.reader.metadata import MetadataDiscoverer
from reelfeed.reader.reel import ReelReader
from reelfeed.stream import PosterStreamProducer


def make_reel(*sections: str, head: str = "") -> str:
    """Build Reel markup from section bodies."""
    body = "".join(f"<section>{s}</section>" for s in sections)
    return f"<!DOCTYPE html><html><head>{head}</head><body>{body}</body></html>"


@pytest.fixture
def reel_markup():
    """Factory building Reel markup from section bodies."""
    return make_reel


@pytest.fixture
def fetcher() -> MemoryFetcher:
    return MemoryFetcher()


@pytest.fixture
def parser() -> SoupDocumentParser:
    return SoupDocumentParser()


@pytest.fixture
def isolator() -> ContentIsolator:
    return ContentIsolator()


@pytest.fixture
def listing_reader(fetcher: MemoryFetcher) -> FeedListingReader:
    return FeedListingReader(fetcher)


@pytest.fixture
def reel_reader(fetcher: MemoryFetcher, parser: SoupDocumentParser) -> ReelReader:
    return ReelReader(fetcher, parser)


@pytest.fixture
def discoverer(fetcher: MemoryFetcher, parser: SoupDocumentParser) -> MetadataDiscoverer:
    return MetadataDiscoverer(fetcher, parser)


@pytest.fixture
def producer(
    listing_reader: FeedListingReader,
    reel_reader: ReelReader,
    isolator: ContentIsolator,
) -> PosterStreamProducer:
    return PosterStreamProducer(listing_reader, reel_reader, isolator)


@pytest.fixture
def web(fetcher: MemoryFetcher) -> MemoryFetcher:
    """A feed with three Reels; the second one is missing."""
    fetcher.add("https://x/feed.txt", "# posts\nr1/index.html\nr2/index.html\nr3/index.html\n", "text/plain")
    fetcher.add(
        "https://x/r1/index.html",
        make_reel('<h1>One</h1><img src="one.png">', "<p>more</p>", head='<link rel="stylesheet" href="s.css">'),
    )
    fetcher.add("https://x/r3/index.html", make_reel("<h1>Three</h1>"))
    return fetcher
