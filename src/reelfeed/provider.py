"""Demand-driven poster provider.

Adapts an ordered collection of Reel locations to the pull contract of a
virtualized view: ``poster_at(i)`` while scrolling, ``fill_at(i)`` once an
item is selected. Calls for different indices are independent and may run
concurrently; nothing is cached, so every call fetches afresh.

Example:
    >>> provider = FeedProvider(locations, reel_reader, isolator)
    >>> posters = await asyncio.gather(*(provider.poster_at(i) for i in range(4)))
    >>> await provider.poster_at(len(locations)) is END_OF_SEQUENCE
    True
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from reelfeed.core.exceptions import require
from reelfeed.protocols.presentation import END_OF_SEQUENCE, EndOfSequence, ModeListener, ProviderMode

if TYPE_CHECKING:
    from reelfeed.isolation import ContentIsolator, ErrorPoster, IsolationScope
    from reelfeed.reader.feed import FeedListingReader
    from reelfeed.reader.reel import ReelReader

logger = logging.getLogger(__name__)


class FeedProvider:
    """Index-addressable implementation of the PosterSource protocol.

    Args:
        locations: Ordered Reel locations; any sequence works, including a
            lazily indexed one.
        reel_reader: Reads the Reel for an index.
        isolator: Builds poster and full scopes.

    Raises:
        ConfigurationError: If a collaborator is missing.
    """

    def __init__(
        self,
        locations: Sequence[str],
        reel_reader: ReelReader,
        isolator: ContentIsolator,
    ) -> None:
        require(locations, "locations")
        require(reel_reader, "reel_reader")
        require(isolator, "isolator")
        self._locations = locations
        self._reel_reader = reel_reader
        self._isolator = isolator
        self._listeners: list[ModeListener] = []
        self._mode = ProviderMode.POSTERS
        self._selected: int | None = None

    @classmethod
    async def from_feed(
        cls,
        feed_location: str,
        listing_reader: FeedListingReader,
        reel_reader: ReelReader,
        isolator: ContentIsolator,
    ) -> FeedProvider:
        """Build a provider over the items of a feed listing."""
        require(listing_reader, "listing_reader")
        listing = await listing_reader.read(feed_location)
        return cls(list(listing.items), reel_reader, isolator)

    def __len__(self) -> int:
        return len(self._locations)

    @property
    def locations(self) -> Sequence[str]:
        return self._locations

    def location_at(self, index: int) -> str | None:
        """Location at ``index``, or None when out of range."""
        if index < 0 or index >= len(self._locations):
            return None
        return self._locations[index]

    async def poster_at(self, index: int) -> IsolationScope | ErrorPoster | EndOfSequence:
        """Poster for ``index``.

        Returns END_OF_SEQUENCE past the last item, and an ErrorPoster when
        the item exists but could not be loaded.
        """
        location = self.location_at(index)
        if location is None:
            return END_OF_SEQUENCE

        reel = await self._reel_reader.read(location)
        poster = self._isolator.poster(reel) if reel is not None else None
        if poster is None:
            logger.debug(f"Poster unavailable for item {index}: {location}")
            return self._isolator.error_poster(location, "poster unavailable")
        return poster

    async def fill_at(self, index: int) -> IsolationScope | ErrorPoster:
        """Full content for ``index``; an ErrorPoster when it cannot be loaded."""
        location = self.location_at(index)
        if location is None:
            return self._isolator.error_poster("", f"no item at index {index}")

        reel = await self._reel_reader.read(location)
        if reel is None:
            logger.debug(f"Content unavailable for item {index}: {location}")
            return self._isolator.error_poster(location, "reel unavailable")
        return self._isolator.full(reel)

    # Mode notification

    @property
    def mode(self) -> ProviderMode:
        return self._mode

    @property
    def selected(self) -> int | None:
        return self._selected

    def subscribe(self, listener: ModeListener) -> Callable[[], None]:
        """Register ``listener``; call the returned function to remove it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def select(self, index: int) -> None:
        """Switch to the selected-item mode for ``index``."""
        if self.location_at(index) is None:
            raise IndexError(f"no item at index {index}")
        self._mode = ProviderMode.SELECTED
        self._selected = index
        self._notify()

    def goto_posters(self) -> None:
        """Switch back to the poster overview."""
        self._mode = ProviderMode.POSTERS
        self._selected = None
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._mode, self._selected)


__all__ = ["FeedProvider"]
