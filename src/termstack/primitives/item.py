"""Capability protocols for anything a Container can lay out.

An Item is structural: any object with these methods works, there is no base
class to inherit from. Box implements both protocols and is the usual
starting point for new primitives.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from termstack.screen import Screen


@runtime_checkable
class Item(Protocol):
    """Something that can be sized, placed, drawn and asked about focus."""

    def get_width(self, height: int) -> int:
        """Natural width given the height the item will receive."""
        ...

    def get_height(self, width: int) -> int:
        """Natural height given the width the item will receive."""
        ...

    def set_rect(self, x: int, y: int, width: int, height: int) -> object:
        """Accept the rectangle assigned by the layout."""
        ...

    def draw(self, screen: Screen) -> None:
        """Draw onto the screen inside the assigned rectangle."""
        ...

    def has_focus(self) -> bool:
        """Whether the item currently holds input focus."""
        ...


# Called by a primitive to hand focus to another primitive
FocusDelegate = Callable[[Item], None]


@runtime_checkable
class Focusable(Protocol):
    """An item that can receive and lose input focus."""

    def focus(self, delegate: FocusDelegate) -> None:
        """Take focus, or pass it on through the delegate."""
        ...

    def blur(self) -> None:
        """Give up focus."""
        ...
