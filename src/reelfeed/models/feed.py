"""Feed-related value objects.

Example:
    >>> from reelfeed.models.feed import FeedListing
    >>> listing = FeedListing(
    ...     source_location="https://example.com/feed.txt",
    ...     items=("https://example.com/a.html",),
    ...     bytes_consumed=7,
    ... )
    >>> listing.resume_from
    7
    >>> listing.is_usable
    True
"""

from __future__ import annotations

from pydantic import Field

from reelfeed.models.base import ReelFeedModel


class FeedDeclaration(ReelFeedModel):
    """A ``<link rel="feed">`` declared inside a Reel.

    Example:
        >>> from reelfeed.models.feed import FeedDeclaration
        >>> decl = FeedDeclaration(href="https://example.com/r/f.txt")
        >>> decl.visible, decl.subscribable
        (True, False)
    """

    href: str = Field(..., min_length=1, description="Absolute location of the feed")
    visible: bool = Field(default=True, description="False when the link carries a disabling flag")
    subscribable: bool = Field(default=False, description="True when the link's type marks a feed")


class FeedListing(ReelFeedModel):
    """Result of one read of a feed resource.

    ``bytes_consumed`` is the number of bytes received by this read, or -1
    when the response was unusable (transport failure or wrong media type).
    """

    source_location: str
    items: tuple[str, ...] = ()
    bytes_consumed: int = -1
    starting_byte: int = Field(default=0, ge=0)

    @property
    def is_usable(self) -> bool:
        """Whether the read produced a usable response."""
        return self.bytes_consumed >= 0

    @property
    def resume_from(self) -> int:
        """Byte offset at which the next incremental read should start."""
        if not self.is_usable:
            return self.starting_byte
        return self.starting_byte + self.bytes_consumed


class FeedMetaData(ReelFeedModel):
    """Description and icon discovered for a feed."""

    description: str = ""
    icon: str = ""
