"""Tests for reelfeed.reader.metadata - upscan metadata discovery."""

from __future__ import annotations

import logging

import pytest

from reelfeed.fetcher.memory import MemoryFetcher
from reelfeed.models.feed import FeedMetaData
from reelfeed.parser.html import SoupDocumentParser
from reelfeed.reader.metadata import MetadataDiscoverer, MetadataMarkers

FEED_URL = "https://x/a/b/feed.txt"


def index(head: str) -> str:
    return f"<html><head>{head}</head><body></body></html>"


# =============================================================================
# Marker precedence
# =============================================================================


class TestMetadataMarkers:
    """Tests for per-level marker collection."""

    def collect(self, markup: str) -> MetadataMarkers:
        markers = MetadataMarkers()
        SoupDocumentParser().scan(markup, markers.visit)
        return markers

    def test_feed_specific_beats_generic(self):
        markers = self.collect(
            index(
                '<meta name="description" content="site"><meta name="feed-description" content="feed">'
                '<link rel="icon" href="site.ico"><link rel="feed-icon" href="feed.png">'
            )
        )

        assert markers.to_metadata("https://x/a/") == FeedMetaData(
            description="feed",
            icon="https://x/a/feed.png",
        )

    def test_generic_fallback(self):
        markers = self.collect(index('<meta name="description" content="site"><link rel="shortcut icon" href="/i.ico">'))

        assert markers.to_metadata("https://x/a/") == FeedMetaData(description="site", icon="https://x/i.ico")

    def test_malformed_icon_ignored(self):
        markers = self.collect(index('<meta name="description" content="site"><link rel="icon" href="http://[oops">'))

        assert markers.to_metadata("https://x/a/") == FeedMetaData(description="site", icon="")

    def test_nothing_found(self):
        assert self.collect(index("<title>t</title>")).to_metadata("https://x/") is None


# =============================================================================
# Upscan
# =============================================================================


class TestMetadataDiscoverer:
    """Tests for MetadataDiscoverer.discover."""

    async def test_nearest_directory_wins(self, fetcher: MemoryFetcher, discoverer: MetadataDiscoverer):
        """If the feed's own directory has metadata, the parent is never consulted."""
        fetcher.add("https://x/a/b/", index('<meta name="description" content="b">'))
        fetcher.add("https://x/a/", index('<meta name="description" content="a">'))

        metadata = await discoverer.discover(FEED_URL)

        assert metadata.description == "b"
        assert fetcher.count("https://x/a/") == 0

    async def test_moves_up_to_parent(self, fetcher: MemoryFetcher, discoverer: MetadataDiscoverer):
        """A directory without metadata defers to its parent."""
        fetcher.add("https://x/a/b/", index("<title>nothing</title>"))
        fetcher.add("https://x/a/", index('<meta name="feed-description" content="a"><link rel="icon" href="a.png">'))

        metadata = await discoverer.discover(FEED_URL)

        assert metadata == FeedMetaData(description="a", icon="https://x/a/a.png")
        assert fetcher.requested == ["https://x/a/b/", "https://x/a/"]

    async def test_first_level_wins_without_merging(self, fetcher: MemoryFetcher, discoverer: MetadataDiscoverer):
        """An icon alone stops the scan; the parent's description is not merged in."""
        fetcher.add("https://x/a/b/", index('<link rel="feed-icon" href="f.png">'))
        fetcher.add("https://x/a/", index('<meta name="description" content="a">'))

        metadata = await discoverer.discover(FEED_URL)

        assert metadata == FeedMetaData(description="", icon="https://x/a/b/f.png")

    async def test_root_reached(self, fetcher: MemoryFetcher, discoverer: MetadataDiscoverer):
        """Scanning stops at the root and reports nothing found."""
        metadata = await discoverer.discover(FEED_URL)

        assert metadata is None
        assert fetcher.requested == ["https://x/a/b/", "https://x/a/", "https://x/"]

    async def test_root_metadata(self, fetcher: MemoryFetcher, discoverer: MetadataDiscoverer):
        fetcher.add("https://x/", index('<meta name="description" content="root">'))

        metadata = await discoverer.discover(FEED_URL)

        assert metadata.description == "root"

    async def test_hop_bound(self, fetcher: MemoryFetcher, parser: SoupDocumentParser, caplog: pytest.LogCaptureFixture):
        """The scan never visits more directories than max_hops."""
        discoverer = MetadataDiscoverer(fetcher, parser, max_hops=2)

        with caplog.at_level(logging.WARNING, logger="reelfeed.reader.metadata"):
            metadata = await discoverer.discover("https://x/a/b/c/d/feed.txt")

        assert metadata is None
        assert fetcher.requested == ["https://x/a/b/c/d/", "https://x/a/b/c/"]
        assert "stopped after 2 hops" in caplog.text

    def test_scan_visits_only_metadata_elements(self, parser: SoupDocumentParser):
        visited = []

        parser.scan(index('<meta name="a"><link rel="b"><title>t</title>') + "<p>x</p>", visited.append)

        assert [e.name for e in visited] == ["meta", "link"]
