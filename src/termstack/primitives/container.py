"""Container primitive: stacks items along one axis.

This module provides:
- ContainerDirection: the axis items are stacked along
- LayoutEntry: one slot in a container (item, fixed size, focus flag)
- Container: lays out and draws its entries every frame

Each entry gets either a fixed number of cells along the layout axis or the
item's natural size, and always the full inner extent across it. Entries are
placed in insertion order until the inner rectangle is used up; the rest are
not drawn that frame. Layout is recomputed on every draw.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from typing import TYPE_CHECKING

from termstack.primitives.box import Box
from termstack.primitives.item import FocusDelegate, Item

if TYPE_CHECKING:
    from termstack.screen import Screen

logger = logging.getLogger(__name__)


class ContainerDirection(str, Enum):
    """Axis along which a container stacks its entries.

    Attributes:
        COLUMN: Entries sit side by side along the horizontal axis
        ROW: Entries sit on top of each other along the vertical axis
    """

    COLUMN = "column"
    ROW = "row"


@dataclass
class LayoutEntry:
    """One slot in a container.

    Attributes:
        item: The item to place, or None for a spacer that only takes space.
            The container does not own the item.
        fixed_size: Cells along the layout axis; negative asks the item for
            its natural size
        attracts_focus: Whether the container hands its focus to this item
    """

    item: Item | None
    fixed_size: int
    attracts_focus: bool = False

    @property
    def is_spacer(self) -> bool:
        """Whether the entry has no item."""
        return self.item is None


class Container(Box):
    """Stacks items one after another using fixed or natural sizes.

    The container is transparent by default so spacer slots leave whatever
    was drawn underneath them. Call set_background_color() to clear the
    area before the items are drawn.

    Example:
        ```python
        container = (
            Container()
            .set_direction(ContainerDirection.ROW)
            .add_item(header, 1)
            .add_item(body, -1, attracts_focus=True)
            .add_spacer(1)
        )
        container.set_rect(0, 0, 80, 24)
        container.draw(canvas)
        ```
    """

    def __init__(
        self,
        direction: ContainerDirection = ContainerDirection.COLUMN,
        *,
        title: str = "",
        border: bool = False,
        border_color: str | None = None,
        background_color: str | None = None,
    ) -> None:
        """Initialize an empty container.

        Args:
            direction: Layout axis (COLUMN by default)
            title: Title shown in the top border
            border: Whether to draw a border
            border_color: Border colour overriding the theme colours
            background_color: Fill colour, or None for transparent
        """
        super().__init__(
            title=title,
            border=border,
            border_color=border_color,
            background_color=background_color,
        )
        self._entries: list[LayoutEntry] = []
        self._direction = direction
        self._full_screen = False

    @property
    def entries(self) -> list[LayoutEntry]:
        """Layout entries in order (read-only copy)."""
        return self._entries.copy()

    @property
    def direction(self) -> ContainerDirection:
        """The current layout axis."""
        return self._direction

    @property
    def full_screen(self) -> bool:
        """Whether the container takes the whole screen when drawn."""
        return self._full_screen

    def __len__(self) -> int:
        return len(self._entries)

    # Configuration

    def set_direction(self, direction: ContainerDirection) -> Container:
        """Set the layout axis used from the next draw on."""
        self._direction = direction
        return self

    def set_full_screen(self, full_screen: bool) -> Container:
        """Use the whole screen instead of the assigned rectangle when set."""
        self._full_screen = full_screen
        return self

    # Entries

    def add_item(self, item: Item | None, fixed_size: int, attracts_focus: bool = False) -> Container:
        """Append an item.

        A None item is ignored; use add_spacer() to reserve empty space.

        Args:
            item: The item to lay out
            fixed_size: Cells along the layout axis, or negative to use the
                item's natural size (get_height for ROW, get_width for COLUMN)
            attracts_focus: Hand the container's focus to this item. Only the
                first such entry is used.

        Returns:
            The container, for chaining
        """
        if item is not None:
            self._entries.append(LayoutEntry(item, fixed_size, attracts_focus))
        return self

    def add_spacer(self, fixed_size: int) -> Container:
        """Append an empty slot that takes fixed_size cells and draws nothing.

        A negative size takes no space.
        """
        self._entries.append(LayoutEntry(None, fixed_size))
        return self

    def remove_item(self, item: Item) -> Container:
        """Remove every entry for the item, keeping the others in order."""
        self._entries = [entry for entry in self._entries if entry.item is not item]
        return self

    def clear(self) -> Container:
        """Remove all entries."""
        self._entries = []
        return self

    def resize_item(self, item: Item, fixed_size: int, proportion: int = 0) -> Container:
        """Set a new fixed size on every entry for the item.

        Args:
            item: The item to resize
            fixed_size: New size, same meaning as in add_item()
            proportion: Accepted for call-site symmetry; has no effect

        Returns:
            The container, for chaining
        """
        for entry in self._entries:
            if entry.item is item:
                entry.fixed_size = fixed_size
        return self

    # Sizing

    def _entry_size(self, entry: LayoutEntry, cross: int) -> int:
        """Requested size of an entry along the layout axis."""
        if entry.fixed_size >= 0:
            return entry.fixed_size
        if entry.item is None:
            return 0
        if self._direction == ContainerDirection.ROW:
            return entry.item.get_height(cross)
        return entry.item.get_width(cross)

    def _natural_extent(self, along_axis: bool, cross: int) -> int:
        """Content size along or across the layout axis, without chrome."""
        if along_axis:
            return sum(max(0, self._entry_size(entry, cross)) for entry in self._entries)
        extents = []
        for entry in self._entries:
            if entry.item is None:
                continue
            # A fixed slot is also the hint for the child's other axis
            hint = entry.fixed_size if entry.fixed_size >= 0 else cross
            if self._direction == ContainerDirection.ROW:
                extents.append(entry.item.get_width(hint))
            else:
                extents.append(entry.item.get_height(hint))
        return max(extents, default=0)

    def get_width(self, height: int) -> int:
        """Natural width when nested inside another container."""
        horizontal, vertical = self.chrome()
        inner = max(0, height - vertical)
        along = self._direction == ContainerDirection.COLUMN
        return horizontal + self._natural_extent(along, inner)

    def get_height(self, width: int) -> int:
        """Natural height when nested inside another container."""
        horizontal, vertical = self.chrome()
        inner = max(0, width - horizontal)
        along = self._direction == ContainerDirection.ROW
        return vertical + self._natural_extent(along, inner)

    # Drawing

    def draw(self, screen: Screen) -> None:
        """Lay out every entry and draw it.

        Focused children are drawn after all the others, in reverse order,
        so that anything the first of them draws, the cursor included,
        stays on top.

        Args:
            screen: Target screen, passed on to every child
        """
        super().draw(screen)

        if self._full_screen:
            width, height = screen.size()
            self.set_rect(0, 0, width, height)

        inner = self.get_inner_rect()
        if self._direction == ContainerDirection.ROW:
            pos, limit = inner.y, inner.bottom
        else:
            pos, limit = inner.x, inner.right

        deferred: list[Item] = []
        for index, entry in enumerate(self._entries):
            item = entry.item
            if item is None:
                if entry.fixed_size >= 0:
                    pos += entry.fixed_size
                continue

            if entry.fixed_size >= 0:
                size = entry.fixed_size
            elif self._direction == ContainerDirection.ROW:
                size = item.get_height(inner.width)
            else:
                size = item.get_width(inner.height)
            if pos + size > limit:
                logger.debug("Entry %d clipped from %d to %d cells", index, size, limit - pos)
                size = limit - pos

            if size > 0:
                if self._direction == ContainerDirection.COLUMN:
                    item.set_rect(pos, inner.y, size, inner.height)
                else:
                    item.set_rect(inner.x, pos, inner.width, size)
                pos += size
                if item.has_focus():
                    deferred.append(item)
                else:
                    item.draw(screen)

            if pos > limit:
                logger.debug("Layout stopped after entry %d of %d", index, len(self._entries))
                break

        # Last in, first out: the first focused child ends up on top
        for item in reversed(deferred):
            item.draw(screen)

    # Focus

    def focus(self, delegate: FocusDelegate) -> None:
        """Hand focus to the first item marked attracts_focus.

        Without such an item the container keeps focus itself.
        """
        for entry in self._entries:
            if entry.item is not None and entry.attracts_focus:
                logger.debug("Delegating focus to %r", entry.item)
                delegate(entry.item)
                return
        super().focus(delegate)

    def has_focus(self) -> bool:
        """Whether any child item holds focus."""
        return any(entry.item is not None and entry.item.has_focus() for entry in self._entries)
