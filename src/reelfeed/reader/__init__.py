"""Readers for feeds, Reels and feed metadata."""

from reelfeed.reader.feed import FeedListingReader, parse_feed_text
from reelfeed.reader.metadata import MetadataDiscoverer, MetadataMarkers
from reelfeed.reader.reel import ReelReader, feed_declarations, find_feed_url, is_visible

__all__ = [
    "FeedListingReader",
    "MetadataDiscoverer",
    "MetadataMarkers",
    "ReelReader",
    "feed_declarations",
    "find_feed_url",
    "is_visible",
    "parse_feed_text",
]
