"""Reel document and stream item models.

Nodes are :class:`bs4.Tag` objects, which pydantic cannot validate, so these
are plain frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from reelfeed.models.feed import FeedDeclaration

if TYPE_CHECKING:
    from bs4 import BeautifulSoup, Tag

    from reelfeed.isolation import IsolationScope


@dataclass(frozen=True)
class ReelDocument:
    """A fetched Reel split into assets, feed declarations and sections.

    ``sections[0]``, when present, is the poster of the Reel.
    """

    location: str
    asset_nodes: tuple[Tag, ...] = ()
    feed_declarations: tuple[FeedDeclaration, ...] = ()
    sections: tuple[Tag, ...] = ()
    document: BeautifulSoup | None = field(default=None, repr=False, compare=False)

    @property
    def poster_section(self) -> Tag | None:
        """The first section, or None for a Reel without content."""
        return self.sections[0] if self.sections else None

    @property
    def visible_feeds(self) -> tuple[FeedDeclaration, ...]:
        """Feed declarations that are not disabled."""
        return tuple(f for f in self.feed_declarations if f.visible)


@dataclass(frozen=True)
class PosterItem:
    """A Reel location paired with its isolated poster."""

    location: str
    poster: IsolationScope
