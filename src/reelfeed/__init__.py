"""
reelfeed - Feed resolution and aggregation for HTML Reels.

Reels are self-contained HTML documents. Feeds are plain-text listings of
Reel locations. reelfeed reads feeds incrementally, fetches and sanitizes
Reels, isolates their content for safe embedding, and hands the result to a
presentation layer as a lazy stream or through an index-addressable provider.

Quick Start:
    >>> from reelfeed import Syndicator
    >>> async with Syndicator() as syndicator:
    ...     async for item in syndicator.posters("https://example.com/feed.txt"):
    ...         print(item.location, item.poster.render())

Architecture:
    Fetchers: HttpClient, MemoryFetcher
    Parser: SoupDocumentParser
    Readers: FeedListingReader, ReelReader, MetadataDiscoverer
    Isolation: ContentIsolator, IsolationScope, ErrorPoster
    Consumption: PosterStreamProducer, FeedProvider
"""

# Core
from reelfeed.core.config import Settings, get_settings
from reelfeed.core.exceptions import (
    ConfigurationError,
    FetchError,
    NotFoundError,
    ReelFeedError,
)
from reelfeed.core.syndicator import Syndicator

# Fetchers
from reelfeed.fetcher.memory import MemoryFetcher
from reelfeed.http.client import HttpClient

# Isolation
from reelfeed.isolation import ContentIsolator, ErrorPoster, IsolationScope

# Models
from reelfeed.models.feed import FeedDeclaration, FeedListing, FeedMetaData
from reelfeed.models.fetch import FetchResult
from reelfeed.models.reel import PosterItem, ReelDocument

# Parser
from reelfeed.parser.html import SoupDocumentParser

# Protocols
from reelfeed.protocols import (
    END_OF_SEQUENCE,
    ContentFetcher,
    DocumentParser,
    EndOfSequence,
    PosterSource,
    ProviderMode,
)
from reelfeed.provider import FeedProvider

# Readers
from reelfeed.reader.feed import FeedListingReader
from reelfeed.reader.metadata import MetadataDiscoverer
from reelfeed.reader.reel import ReelReader

# Remote sections
from reelfeed.remote import resolve_remote_sections

# Streaming
from reelfeed.stream import PosterStreamProducer

__version__ = "0.1.0"

__all__ = [
    # Core
    "Settings",
    "get_settings",
    "Syndicator",
    "ReelFeedError",
    "ConfigurationError",
    "FetchError",
    "NotFoundError",
    # Models
    "FeedDeclaration",
    "FeedListing",
    "FeedMetaData",
    "FetchResult",
    "PosterItem",
    "ReelDocument",
    # Protocols
    "ContentFetcher",
    "DocumentParser",
    "PosterSource",
    "ProviderMode",
    "EndOfSequence",
    "END_OF_SEQUENCE",
    # Fetchers
    "HttpClient",
    "MemoryFetcher",
    # Parser
    "SoupDocumentParser",
    # Readers
    "FeedListingReader",
    "ReelReader",
    "MetadataDiscoverer",
    # Isolation
    "ContentIsolator",
    "IsolationScope",
    "ErrorPoster",
    # Consumption
    "PosterStreamProducer",
    "FeedProvider",
    "resolve_remote_sections",
    # Version
    "__version__",
]
