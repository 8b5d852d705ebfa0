"""Remote sections.

A page can embed the poster of another Reel with a placeholder section:

    <section src="https://example.com/r/index.html"></section>

:func:`resolve_remote_sections` swaps each placeholder for the isolated
poster of the referenced Reel, or removes it when the Reel cannot be loaded.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from reelfeed.url import try_resolve

if TYPE_CHECKING:
    from bs4 import Tag

    from reelfeed.stream import PosterStreamProducer

logger = logging.getLogger(__name__)

REMOTE_SECTION_SELECTOR = "section[src], section[data-src]"


def remote_section_elements(container: Tag) -> list[Tag]:
    """Placeholder sections under ``container``, in document order.

    Example:
        >>> from bs4 import BeautifulSoup
        >>> soup = BeautifulSoup('<section src="a.html"></section><section></section>', "html.parser")
        >>> len(remote_section_elements(soup))
        1
    """
    return container.select(REMOTE_SECTION_SELECTOR)


def remote_section_source(section: Tag, document_url: str) -> str:
    """Absolute source of a placeholder section, or ``""``.

    Example:
        >>> from bs4 import BeautifulSoup
        >>> section = BeautifulSoup('<section data-src="r/a.html"></section>', "html.parser").section
        >>> remote_section_source(section, "https://x/index.html")
        'https://x/r/a.html'
    """
    src = (section.get("src") or section.get("data-src") or "").strip()
    return (try_resolve(src, document_url) or "") if src else ""


async def resolve_remote_sections(
    container: Tag,
    document_url: str,
    producer: PosterStreamProducer,
) -> int:
    """Replace placeholder sections with posters, one at a time.

    Returns:
        Number of placeholders replaced; the rest were removed.
    """
    replaced = 0

    for section in remote_section_elements(container):
        source = remote_section_source(section, document_url)
        poster = await producer.poster(source) if source else None

        if poster is None:
            logger.debug(f"Removing unresolvable remote section {source or '<empty>'}")
            section.decompose()
            continue

        section.replace_with(poster.element())
        replaced += 1

    return replaced


__all__ = [
    "remote_section_elements",
    "remote_section_source",
    "resolve_remote_sections",
]
