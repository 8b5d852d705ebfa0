"""Reel reader.

A Reel is an HTML document whose ``<body>`` holds one or more top-level
``<section>`` elements. The first section is the poster. The ``<head>`` may
declare feeds with ``<link rel="feed">`` next to ordinary stylesheets.

Example:
    >>> import asyncio
    >>> from reelfeed.fetcher import MemoryFetcher
    >>> from reelfeed.parser import SoupDocumentParser
    >>> from reelfeed.reader.reel import ReelReader
    >>> fetcher = MemoryFetcher({
    ...     "https://x/r/index.html": (
    ...         '<html><head><link rel="feed" href="f.txt"></head>'
    ...         "<body><section>1</section><section>2</section></body></html>"
    ...     ),
    ... })
    >>> reel = asyncio.run(ReelReader(fetcher, SoupDocumentParser()).read("https://x/r/index.html"))
    >>> len(reel.sections)
    2
    >>> reel.feed_declarations[0].href
    'https://x/r/f.txt'
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from reelfeed.core.config import get_settings
from reelfeed.core.exceptions import require
from reelfeed.models.feed import FeedDeclaration
from reelfeed.models.reel import ReelDocument
from reelfeed.url import folder_of, try_resolve

if TYPE_CHECKING:
    from bs4 import BeautifulSoup, Tag

    from reelfeed.protocols.fetcher import ContentFetcher
    from reelfeed.protocols.parser import DocumentParser

logger = logging.getLogger(__name__)

FEED_RELATION = "feed"
ASSET_TAGS = ["link", "style"]


def rel_tokens(element: Tag) -> list[str]:
    """Lower-cased tokens of an element's ``rel`` attribute."""
    rel = element.get("rel") or []
    if isinstance(rel, str):
        rel = rel.split()
    return [token.lower() for token in rel]


def is_visible(element: Tag) -> bool:
    """Invert a feed link's ``disabled`` flag.

    Absent, empty, and ``"false"`` all leave the feed visible.

    Example:
        >>> from bs4 import BeautifulSoup
        >>> link = BeautifulSoup('<link rel="feed" disabled="true">', "html.parser").link
        >>> is_visible(link)
        False
    """
    disabled = element.get("disabled")
    if disabled is None:
        return True
    return str(disabled).strip().lower() in ("", "false")


def metadata_region(document: BeautifulSoup) -> Tag:
    return document.head or document


def content_region(document: BeautifulSoup) -> Tag:
    return document.body or document


def feed_declarations(
    document: BeautifulSoup,
    document_url: str,
    link_type: str = "text/feed",
) -> tuple[FeedDeclaration, ...]:
    """Collect the ``<link rel="feed">`` declarations of a document."""
    folder = folder_of(document_url)
    declarations = []

    for element in metadata_region(document).find_all("link"):
        if FEED_RELATION not in rel_tokens(element):
            continue

        raw = (element.get("href") or "").strip()
        href = try_resolve(raw, folder) if raw else None
        if href is None:
            if raw:
                logger.debug(f"Skipping malformed feed declaration {raw!r} in {document_url}")
            continue

        declarations.append(
            FeedDeclaration(
                href=href,
                visible=is_visible(element),
                subscribable=(element.get("type") or "").lower() == link_type.lower(),
            )
        )

    return tuple(declarations)


def find_feed_url(document: BeautifulSoup, document_url: str) -> str:
    """Absolute location of the first feed declared in ``document``, or ``""``."""
    for element in document.find_all("link", href=True):
        if FEED_RELATION in rel_tokens(element) and element["href"].strip():
            href = try_resolve(element["href"], folder_of(document_url))
            if href is not None:
                return href
    return ""


class ReelReader:
    """Fetches Reels and splits them into assets, feeds and sections.

    Args:
        fetcher: ContentFetcher used to download Reels.
        parser: DocumentParser used to parse and sanitize them.
        link_type: Type marker of subscribable feeds (default from settings).
    """

    def __init__(
        self,
        fetcher: ContentFetcher,
        parser: DocumentParser,
        *,
        link_type: str | None = None,
    ) -> None:
        require(fetcher, "fetcher")
        require(parser, "parser")
        self._fetcher = fetcher
        self._parser = parser
        self.link_type = link_type or get_settings().feed_link_type

    async def read_document(self, location: str) -> BeautifulSoup | None:
        """Fetch and parse the document at ``location``."""
        result = await self._fetcher.fetch(location)
        if result is None:
            return None

        document = self._parser.parse(result.text)
        if document is None:
            logger.debug(f"Unparseable document at {location}")
        return document

    async def read(self, location: str) -> ReelDocument | None:
        """Read the Reel at ``location``; None when it cannot be fetched or parsed."""
        document = await self.read_document(location)
        if document is None:
            return None
        return self.decompose(document, location)

    def decompose(self, document: BeautifulSoup, location: str) -> ReelDocument:
        """Split an already parsed Reel into its parts."""
        folder = folder_of(location)
        feeds = feed_declarations(document, location, self.link_type)
        feed_hrefs = {f.href for f in feeds}

        def is_asset(element: Tag) -> bool:
            href = (element.get("href") or "").strip()
            return not href or try_resolve(href, folder) not in feed_hrefs

        assets = tuple(filter(is_asset, metadata_region(document).find_all(ASSET_TAGS)))
        sections = tuple(content_region(document).find_all("section", recursive=False))

        return ReelDocument(
            location=location,
            asset_nodes=assets,
            feed_declarations=feeds,
            sections=sections,
            document=document,
        )


__all__ = [
    "ReelReader",
    "feed_declarations",
    "find_feed_url",
    "is_visible",
    "rel_tokens",
]
