"""Tests for reelfeed.provider - demand-driven provider."""

from __future__ import annotations

import asyncio

import pytest

from reelfeed.core.exceptions import ConfigurationError
from reelfeed.fetcher.memory import MemoryFetcher
from reelfeed.isolation import ContentIsolator, ErrorPoster, IsolationScope
from reelfeed.protocols.presentation import END_OF_SEQUENCE, PosterSource, ProviderMode
from reelfeed.provider import FeedProvider
from reelfeed.reader.feed import FeedListingReader
from reelfeed.reader.reel import ReelReader

FEED_URL = "https://x/feed.txt"
LOCATIONS = ["https://x/r1/index.html", "https://x/r2/index.html", "https://x/r3/index.html"]


@pytest.fixture
def provider(web: MemoryFetcher, reel_reader: ReelReader, isolator: ContentIsolator) -> FeedProvider:
    return FeedProvider(LOCATIONS, reel_reader, isolator)


# =============================================================================
# poster_at
# =============================================================================


class TestPosterAt:
    """Tests for FeedProvider.poster_at."""

    async def test_poster_has_first_section_only(self, provider: FeedProvider):
        poster = await provider.poster_at(0)

        assert isinstance(poster, IsolationScope)
        assert len(poster.sections) == 1
        assert poster.select_one("h1").string == "One"

    async def test_past_end_is_end_of_sequence(self, provider: FeedProvider):
        """An index beyond the item count ends the sequence rather than failing."""
        result = await provider.poster_at(3)

        assert result is END_OF_SEQUENCE
        assert not result

    async def test_negative_index_is_end_of_sequence(self, provider: FeedProvider):
        assert await provider.poster_at(-1) is END_OF_SEQUENCE

    async def test_failed_item_is_error_poster(self, provider: FeedProvider):
        """An item that exists but cannot load keeps its position."""
        result = await provider.poster_at(1)

        assert isinstance(result, ErrorPoster)
        assert result.location == "https://x/r2/index.html"
        assert result.is_failure

    async def test_malformed_reference_still_renders(self, fetcher: MemoryFetcher, reel_reader: ReelReader, isolator: ContentIsolator):
        """Both poster and full content survive a link that is not a valid URL."""
        location = "https://x/bad/index.html"
        fetcher.add(location, '<html><body><section><a href="http://[oops">a</a></section><section>b</section></body></html>')
        provider = FeedProvider([location], reel_reader, isolator)

        poster = await provider.poster_at(0)
        full = await provider.fill_at(0)

        assert isinstance(poster, IsolationScope)
        assert isinstance(full, IsolationScope)
        assert len(full.sections) == 2

    async def test_concurrent_requests(self, provider: FeedProvider):
        results = await asyncio.gather(*(provider.poster_at(i) for i in range(5)))

        assert [type(r).__name__ for r in results] == [
            "IsolationScope",
            "ErrorPoster",
            "IsolationScope",
            "EndOfSequence",
            "EndOfSequence",
        ]

    async def test_no_caching(self, web: MemoryFetcher, provider: FeedProvider):
        await provider.poster_at(0)
        await provider.poster_at(0)

        assert web.count("https://x/r1/index.html") == 2


# =============================================================================
# fill_at
# =============================================================================


class TestFillAt:
    """Tests for FeedProvider.fill_at."""

    async def test_fill_has_all_sections(self, provider: FeedProvider):
        scope = await provider.fill_at(0)

        assert len(scope.sections) == 2
        assert [n.name for n in scope.nodes] == ["style", "link", "section", "section"]

    async def test_fill_failure_is_error_poster(self, provider: FeedProvider):
        result = await provider.fill_at(1)

        assert isinstance(result, ErrorPoster)
        assert result.reason == "reel unavailable"

    async def test_fill_out_of_range(self, provider: FeedProvider):
        assert isinstance(await provider.fill_at(10), ErrorPoster)


# =============================================================================
# Construction and modes
# =============================================================================


class TestProviderLifecycle:
    """Tests for construction and mode notifications."""

    async def test_from_feed(self, web: MemoryFetcher, listing_reader: FeedListingReader, reel_reader, isolator):
        provider = await FeedProvider.from_feed(FEED_URL, listing_reader, reel_reader, isolator)

        assert list(provider.locations) == LOCATIONS
        assert len(provider) == 3
        assert await provider.poster_at(3) is END_OF_SEQUENCE

    async def test_from_unusable_feed_is_empty(self, fetcher: MemoryFetcher, listing_reader, reel_reader, isolator):
        provider = await FeedProvider.from_feed(FEED_URL, listing_reader, reel_reader, isolator)

        assert await provider.poster_at(0) is END_OF_SEQUENCE

    def test_implements_poster_source(self, provider: FeedProvider):
        assert isinstance(provider, PosterSource)

    def test_missing_isolator_is_configuration_error(self, reel_reader: ReelReader):
        with pytest.raises(ConfigurationError):
            FeedProvider(LOCATIONS, reel_reader, None)  # type: ignore[arg-type]

    def test_mode_notifications(self, provider: FeedProvider):
        events = []
        unsubscribe = provider.subscribe(lambda mode, index: events.append((mode, index)))

        provider.select(2)
        provider.goto_posters()
        unsubscribe()
        provider.select(0)

        assert events == [(ProviderMode.SELECTED, 2), (ProviderMode.POSTERS, None)]
        assert provider.mode is ProviderMode.SELECTED
        assert provider.selected == 0

    def test_select_out_of_range(self, provider: FeedProvider):
        with pytest.raises(IndexError):
            provider.select(3)
