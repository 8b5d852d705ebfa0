"""Content isolation for untrusted Reel fragments.

Nodes taken from a remote Reel are copied into an isolation scope: a host
``<div>`` carrying a declarative shadow root, so the fragment's styles cannot
leak into the embedding page and vice versa. Every reference attribute in the
scope is rewritten to an absolute location, which keeps relative links and
images working once the fragment is shown somewhere else.

Example:
    >>> from bs4 import BeautifulSoup
    >>> from reelfeed.isolation import ContentIsolator
    >>> section = BeautifulSoup('<section><img src="p.png"></section>', "html.parser").section
    >>> scope = ContentIsolator().isolate(section, "https://x/r/index.html")
    >>> scope.select_one("img")["src"]
    'https://x/r/p.png'
    >>> section.img["src"]
    'p.png'
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from bs4 import BeautifulSoup, Tag

from reelfeed.parser.html import REFERENCE_ATTRIBUTES
from reelfeed.url import folder_of, try_resolve

if TYPE_CHECKING:
    from reelfeed.models.reel import ReelDocument

logger = logging.getLogger(__name__)

HEAD_TAGS = ("link", "style")
CONTENT_TAGS = ("section",)

STANDARD_CSS = """\
:host {
    display: block;
    position: relative;
    overflow: hidden;
    contain: content;
}
section {
    position: relative;
    box-sizing: border-box;
    width: 100%;
    min-height: 100%;
}
img, video {
    max-width: 100%;
}
"""

ERROR_POSTER_STYLE = (
    "position: absolute; top: 0; right: 0; bottom: 0; left: 0; "
    "width: fit-content; height: fit-content; margin: auto; "
    "font-size: 10vw; font-weight: 900"
)


class IsolationScope:
    """A self-contained copy of Reel nodes with absolute references.

    The scope owns its nodes: they live in a soup of their own and are never
    shared with the document they were copied from.

    Args:
        head: Stylesheet and link nodes, placed first.
        body: Section nodes, placed after the head nodes.
        base_location: Location of the Reel the nodes came from.
        stylesheet: CSS injected ahead of every other node.
    """

    is_failure: ClassVar[bool] = False

    def __init__(
        self,
        head: Iterable[Tag],
        body: Iterable[Tag],
        base_location: str,
        *,
        stylesheet: str = STANDARD_CSS,
    ) -> None:
        self.base_location = base_location
        self.soup = BeautifulSoup("", "html.parser")
        self.host = self.soup.new_tag("div", attrs={"class": "reel-scope", "data-reel": base_location})
        self.root = self.soup.new_tag("template", attrs={"shadowrootmode": "open"})
        self.host.append(self.root)
        self.soup.append(self.host)

        style = self.soup.new_tag("style")
        style.string = stylesheet
        self.root.append(style)

        for node in [*head, *body]:
            self.root.append(copy.copy(node))

        self.rewrite_references()

    def rewrite_references(self) -> None:
        """Resolve reference attributes against the Reel's directory."""
        folder = folder_of(self.base_location)
        for element in self.root.find_all(True):
            for name in REFERENCE_ATTRIBUTES:
                value = element.get(name)
                if not isinstance(value, str):
                    continue

                resolved = try_resolve(value, folder)
                if resolved is None:
                    logger.debug(f"Dropping malformed {name}={value!r} in {self.base_location}")
                    del element[name]
                else:
                    element[name] = resolved

    @property
    def nodes(self) -> list[Tag]:
        """Top-level nodes inside the shadow root, standard stylesheet first."""
        return [child for child in self.root.children if isinstance(child, Tag)]

    @property
    def sections(self) -> list[Tag]:
        return [node for node in self.nodes if node.name in CONTENT_TAGS]

    def select(self, selector: str) -> list[Tag]:
        """CSS select inside the scope."""
        return self.root.select(selector)

    def select_one(self, selector: str) -> Tag | None:
        return self.root.select_one(selector)

    def element(self) -> Tag:
        """A detached copy of the host element, for insertion into another tree."""
        return copy.copy(self.host)

    def render(self) -> str:
        """HTML of the host element including its shadow root template."""
        return str(self.host)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"IsolationScope(base_location={self.base_location!r}, nodes={len(self.nodes)})"


@dataclass(frozen=True)
class ErrorPoster:
    """Placeholder shown in place of an item that could not be loaded."""

    location: str = ""
    reason: str = ""

    is_failure: ClassVar[bool] = True

    def element(self) -> Tag:
        soup = BeautifulSoup("", "html.parser")
        div = soup.new_tag("div", attrs={"class": "reel-error", "style": ERROR_POSTER_STYLE})
        if self.location:
            div["data-reel"] = self.location
        div.string = "✕"
        return div

    def render(self) -> str:
        return str(self.element())

    def __str__(self) -> str:
        return self.render()


class ContentIsolator:
    """Packages Reel nodes into isolation scopes.

    Example:
        >>> isolator = ContentIsolator()
        >>> scope = isolator.isolate([], "https://x/r/index.html")
        >>> [node.name for node in scope.nodes]
        ['style']
    """

    def __init__(self, stylesheet: str = STANDARD_CSS) -> None:
        self.stylesheet = stylesheet

    def isolate(self, nodes: Tag | Iterable[Tag], base_location: str) -> IsolationScope:
        """Copy ``nodes`` into a new scope rooted at ``base_location``.

        Link and style nodes go first, sections after them. Any other kind
        of node is dropped.
        """
        if isinstance(nodes, Tag):
            nodes = [nodes]

        head: list[Tag] = []
        body: list[Tag] = []
        for node in nodes:
            name = (getattr(node, "name", None) or "").lower()
            if name in HEAD_TAGS:
                head.append(node)
            elif name in CONTENT_TAGS:
                body.append(node)

        return IsolationScope(head, body, base_location, stylesheet=self.stylesheet)

    def poster(self, reel: ReelDocument) -> IsolationScope | None:
        """Assets plus the first section; None for a Reel without sections."""
        if not reel.sections:
            return None
        return self.isolate([*reel.asset_nodes, reel.sections[0]], reel.location)

    def full(self, reel: ReelDocument) -> IsolationScope:
        """Assets plus every section."""
        return self.isolate([*reel.asset_nodes, *reel.sections], reel.location)

    def error_poster(self, location: str = "", reason: str = "") -> ErrorPoster:
        return ErrorPoster(location=location, reason=reason)


__all__ = [
    "STANDARD_CSS",
    "ContentIsolator",
    "ErrorPoster",
    "IsolationScope",
]
