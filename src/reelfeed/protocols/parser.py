"""Document parser protocol."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from bs4 import BeautifulSoup, Tag


@runtime_checkable
class DocumentParser(Protocol):
    """Turns untrusted markup into a sanitized node tree."""

    def parse(self, markup: str) -> BeautifulSoup | None:
        """Parse and sanitize ``markup``; None when it cannot be parsed."""
        ...

    def scan(self, markup: str, visitor: Callable[[Tag], None]) -> None:
        """Call ``visitor`` for every metadata element in ``markup``."""
        ...
