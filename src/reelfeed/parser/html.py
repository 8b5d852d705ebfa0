"""HTML parser and sanitizer for untrusted Reel markup.

Built on BeautifulSoup with the standard library ``html.parser`` builder.
Sanitizing removes executable content so a remote document cannot run code
or redirect reference resolution once embedded:

- ``<script>``, ``<object>``, ``<embed>`` and ``<base>`` elements are dropped
- ``on*`` event handler attributes are dropped
- ``javascript:`` references are dropped

Example:
    >>> from reelfeed.parser.html import SoupDocumentParser
    >>> parser = SoupDocumentParser()
    >>> soup = parser.parse('<body><section onclick="x()"><script>1</script>hi</section></body>')
    >>> str(soup.section)
    '<section>hi</section>'
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from bs4 import BeautifulSoup, SoupStrainer, Tag
from bs4.builder import ParserRejectedMarkup

logger = logging.getLogger(__name__)

UNSAFE_TAGS = ["script", "object", "embed", "base"]
REFERENCE_ATTRIBUTES = ("href", "src", "action", "data-src")
METADATA_TAGS = ["meta", "link"]


def sanitize(soup: BeautifulSoup) -> BeautifulSoup:
    """Strip executable content from ``soup`` in place and return it."""
    for tag in soup.find_all(UNSAFE_TAGS):
        if not tag.decomposed:
            tag.decompose()

    for tag in soup.find_all(True):
        for name in [a for a in tag.attrs if a.lower().startswith("on")]:
            del tag[name]

        for name in REFERENCE_ATTRIBUTES:
            value = tag.get(name)
            if isinstance(value, str) and value.strip().lower().startswith("javascript:"):
                del tag[name]

    return soup


class SoupDocumentParser:
    """DocumentParser implementation backed by BeautifulSoup.

    Args:
        features: BeautifulSoup tree builder to use.
        sanitize: Whether parsed documents are sanitized.
    """

    def __init__(self, *, features: str = "html.parser", sanitize: bool = True) -> None:
        self.features = features
        self.sanitize = sanitize

    def parse(self, markup: str) -> BeautifulSoup | None:
        """Parse ``markup`` into a sanitized tree; None for empty or rejected markup."""
        if not markup or not markup.strip():
            return None

        try:
            soup = BeautifulSoup(markup, self.features)
        except ParserRejectedMarkup as e:
            logger.warning(f"Markup rejected by parser: {e}")
            return None

        return sanitize(soup) if self.sanitize else soup

    def scan(self, markup: str, visitor: Callable[[Tag], None]) -> None:
        """Visit every ``<meta>`` and ``<link>`` element in document order.

        Only metadata elements are built, so no full tree is kept around.
        """
        if not markup:
            return

        try:
            soup = BeautifulSoup(markup, self.features, parse_only=SoupStrainer(METADATA_TAGS))
        except ParserRejectedMarkup as e:
            logger.warning(f"Markup rejected by parser: {e}")
            return

        for element in soup.find_all(True):
            visitor(element)


__all__ = [
    "REFERENCE_ATTRIBUTES",
    "SoupDocumentParser",
    "sanitize",
]
