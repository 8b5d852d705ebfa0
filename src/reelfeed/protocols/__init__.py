"""Protocol definitions - all extension points."""

from reelfeed.protocols.fetcher import ContentFetcher
from reelfeed.protocols.parser import DocumentParser
from reelfeed.protocols.presentation import (
    END_OF_SEQUENCE,
    EndOfSequence,
    ModeListener,
    PosterSource,
    ProviderMode,
)

__all__ = [
    # Transport
    "ContentFetcher",
    # Parsing
    "DocumentParser",
    # Presentation
    "END_OF_SEQUENCE",
    "EndOfSequence",
    "ModeListener",
    "PosterSource",
    "ProviderMode",
]
