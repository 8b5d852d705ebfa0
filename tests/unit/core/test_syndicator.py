"""Tests for reelfeed.core.syndicator - pipeline facade."""

from __future__ import annotations

import pytest

from reelfeed.core.config import Settings
from reelfeed.core.exceptions import NotFoundError
from reelfeed.core.syndicator import Syndicator
from reelfeed.fetcher.memory import MemoryFetcher
from reelfeed.http.client import HttpClient
from reelfeed.protocols.presentation import END_OF_SEQUENCE

FEED_URL = "https://x/feed.txt"


class TestSyndicator:
    """Tests for the Syndicator facade."""

    async def test_posters(self, web: MemoryFetcher):
        async with Syndicator(web) as syndicator:
            items = [item async for item in syndicator.posters(FEED_URL)]

        assert [item.location for item in items] == ["https://x/r1/index.html", "https://x/r3/index.html"]

    async def test_read_feed_and_reel(self, web: MemoryFetcher):
        async with Syndicator(web) as syndicator:
            listing = await syndicator.read_feed(FEED_URL)
            reel = await syndicator.read_reel(listing.items[0])

        assert len(listing.items) == 3
        assert len(reel.sections) == 2

    async def test_provider_from_feed_and_list(self, web: MemoryFetcher):
        async with Syndicator(web) as syndicator:
            from_feed = await syndicator.provider(FEED_URL)
            from_list = await syndicator.provider(["https://x/r3/index.html"])

        assert len(from_feed) == 3
        assert await from_list.poster_at(1) is END_OF_SEQUENCE

    async def test_require_helpers_raise(self, fetcher: MemoryFetcher):
        async with Syndicator(fetcher) as syndicator:
            with pytest.raises(NotFoundError):
                await syndicator.require_reel("https://x/missing.html")
            with pytest.raises(NotFoundError):
                await syndicator.require_metadata(FEED_URL)

    async def test_discover_metadata(self, fetcher: MemoryFetcher):
        fetcher.add("https://x/", '<meta name="description" content="site">')

        async with Syndicator(fetcher) as syndicator:
            metadata = await syndicator.require_metadata(FEED_URL)

        assert metadata.description == "site"

    async def test_settings_flow_to_readers(self, fetcher: MemoryFetcher):
        settings = Settings(feed_media_type="text/uri-list", max_upscan_hops=3)

        syndicator = Syndicator(fetcher, settings=settings)

        assert syndicator.listing_reader.media_type == "text/uri-list"
        assert syndicator.metadata_discoverer.max_hops == 3

    async def test_default_fetcher_is_http_client(self):
        async with Syndicator() as syndicator:
            assert isinstance(syndicator.fetcher, HttpClient)
