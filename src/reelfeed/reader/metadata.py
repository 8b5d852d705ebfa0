"""Feed metadata discovery.

Feeds carry no description or icon of their own. Instead, the directory
index documents above the feed are scanned, nearest first ("upscan"):

    https://x/blog/2024/feed.txt
    -> https://x/blog/2024/
    -> https://x/blog/
    -> https://x/

At each level, ``<meta name="feed-description">`` and
``<link rel="feed-icon">`` take precedence over ``<meta name="description">``
and ``<link rel="icon">``. The first level that yields anything wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from reelfeed.core.config import get_settings
from reelfeed.core.exceptions import require
from reelfeed.models.feed import FeedMetaData
from reelfeed.reader.reel import rel_tokens
from reelfeed.url import folder_of, parent_of, try_resolve

if TYPE_CHECKING:
    from bs4 import Tag

    from reelfeed.protocols.fetcher import ContentFetcher
    from reelfeed.protocols.parser import DocumentParser

logger = logging.getLogger(__name__)


@dataclass
class MetadataMarkers:
    """Marker values collected from one directory index document."""

    feed_description: str = ""
    description: str = ""
    feed_icon: str = ""
    icon: str = ""

    def visit(self, element: Tag) -> None:
        if element.name == "meta":
            name = (element.get("name") or "").strip().lower()
            if name == "feed-description":
                self.feed_description = (element.get("content") or "").strip()
            elif name == "description":
                self.description = (element.get("content") or "").strip()

        elif element.name == "link":
            rel = rel_tokens(element)
            if "feed-icon" in rel:
                self.feed_icon = (element.get("href") or "").strip()
            elif "icon" in rel:
                self.icon = (element.get("href") or "").strip()

    def to_metadata(self, folder: str) -> FeedMetaData | None:
        """Metadata for this level, or None when nothing was found."""
        description = self.feed_description or self.description
        icon = self.feed_icon or self.icon
        icon = (try_resolve(icon, folder) or "") if icon else ""
        if not (description or icon):
            return None
        return FeedMetaData(
            description=description,
            icon=icon,
        )


class MetadataDiscoverer:
    """Finds the nearest description and icon for a feed.

    Args:
        fetcher: ContentFetcher used to download directory index documents.
        parser: DocumentParser whose ``scan`` extracts metadata elements.
        max_hops: Upper bound on directories visited (default from settings).
    """

    def __init__(
        self,
        fetcher: ContentFetcher,
        parser: DocumentParser,
        *,
        max_hops: int | None = None,
    ) -> None:
        require(fetcher, "fetcher")
        require(parser, "parser")
        self._fetcher = fetcher
        self._parser = parser
        self.max_hops = max_hops if max_hops is not None else get_settings().max_upscan_hops

    async def discover(self, feed_location: str) -> FeedMetaData | None:
        """Upscan from the feed's directory; None when the root yields nothing."""
        current = folder_of(feed_location)

        for _ in range(self.max_hops):
            metadata = await self.scan_folder(current)
            if metadata is not None:
                return metadata

            parent = parent_of(current)
            if parent == current:
                break

            logger.debug(f"No feed metadata in {current}, moving up to {parent}")
            current = parent
        else:
            logger.warning(f"Metadata discovery for {feed_location} stopped after {self.max_hops} hops")

        return None

    async def scan_folder(self, folder: str) -> FeedMetaData | None:
        """Metadata declared by the index document of a single directory."""
        result = await self._fetcher.fetch(folder)
        if result is None:
            return None

        markers = MetadataMarkers()
        self._parser.scan(result.text, markers.visit)
        return markers.to_metadata(folder)


__all__ = ["MetadataDiscoverer", "MetadataMarkers"]
