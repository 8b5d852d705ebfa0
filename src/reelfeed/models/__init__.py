"""Value objects passed between pipeline stages."""

from reelfeed.models.base import ReelFeedModel
from reelfeed.models.feed import FeedDeclaration, FeedListing, FeedMetaData
from reelfeed.models.fetch import FetchResult
from reelfeed.models.reel import PosterItem, ReelDocument

__all__ = [
    "FeedDeclaration",
    "FeedListing",
    "FeedMetaData",
    "FetchResult",
    "PosterItem",
    "ReelDocument",
    "ReelFeedModel",
]
