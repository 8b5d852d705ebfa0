"""Document parser implementations."""

from reelfeed.parser.html import REFERENCE_ATTRIBUTES, SoupDocumentParser, sanitize

__all__ = ["REFERENCE_ATTRIBUTES", "SoupDocumentParser", "sanitize"]
