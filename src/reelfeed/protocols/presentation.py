"""Pull contract offered to a presentation layer.

A virtualized view asks for posters by index while scrolling and for the
full content of an item once it is selected. It never talks to the network
itself.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from reelfeed.isolation import ErrorPoster, IsolationScope


class ProviderMode(str, Enum):
    """What the presentation layer is currently showing.

    Example:
        >>> ProviderMode.POSTERS.value
        'posters'
    """

    POSTERS = "posters"
    SELECTED = "selected"


class EndOfSequence:
    """Marker returned once an index lies past the last item.

    Falsy, so ``if not await source.poster_at(i)`` reads naturally.

    Example:
        >>> from reelfeed.protocols.presentation import END_OF_SEQUENCE
        >>> bool(END_OF_SEQUENCE)
        False
    """

    _instance: EndOfSequence | None = None

    def __new__(cls) -> EndOfSequence:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "END_OF_SEQUENCE"


END_OF_SEQUENCE = EndOfSequence()

ModeListener = Callable[[ProviderMode, int | None], None]


@runtime_checkable
class PosterSource(Protocol):
    """Index-addressable poster provider."""

    async def poster_at(self, index: int) -> IsolationScope | ErrorPoster | EndOfSequence:
        """Summary isolation for the item at ``index``."""
        ...

    async def fill_at(self, index: int) -> IsolationScope | ErrorPoster:
        """Full isolation for the item at ``index``."""
        ...

    def subscribe(self, listener: ModeListener) -> Callable[[], None]:
        """Register a mode listener; returns a function that removes it."""
        ...
