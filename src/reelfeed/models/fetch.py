"""Transport result returned by content fetchers."""

from __future__ import annotations

import codecs
from collections.abc import Mapping
from dataclasses import dataclass, field

DEFAULT_CHARSET = "utf-8"


def charset_of(content_type: str) -> str:
    """Charset parameter of a Content-Type value, or utf-8.

    Example:
        >>> charset_of("text/plain; charset=ISO-8859-1")
        'iso-8859-1'
        >>> charset_of("text/plain; charset=bogus")
        'utf-8'
    """
    for param in content_type.split(";")[1:]:
        key, _, value = param.partition("=")
        if key.strip().lower() == "charset":
            charset = value.strip().strip('"').lower()
            try:
                codecs.lookup(charset)
            except LookupError:
                return DEFAULT_CHARSET
            return charset
    return DEFAULT_CHARSET


@dataclass(frozen=True)
class FetchResult:
    """Headers and body of a successful fetch.

    ``content`` holds the raw bytes as received, when the fetcher has them;
    byte offsets into a resource are always counted on those bytes.

    Example:
        >>> from reelfeed.models.fetch import FetchResult
        >>> result = FetchResult(
        ...     headers={"Content-Type": "text/plain; charset=utf-8"},
        ...     text="a.html\\n",
        ... )
        >>> result.media_type
        'text/plain'
        >>> result.body
        b'a.html\\n'
    """

    headers: Mapping[str, str] = field(default_factory=dict)
    text: str = ""
    status_code: int = 200
    content: bytes | None = None

    def header(self, name: str, default: str = "") -> str:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default

    @property
    def media_type(self) -> str:
        """Content-Type without parameters, lower-cased."""
        return self.header("content-type").split(";")[0].strip().lower()

    @property
    def charset(self) -> str:
        return charset_of(self.header("content-type"))

    @property
    def body(self) -> bytes:
        """Raw body bytes, re-encoded from ``text`` when none were kept."""
        if self.content is not None:
            return self.content
        return self.text.encode(self.charset, errors="replace")
