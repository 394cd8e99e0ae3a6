"""Screen protocol and the in-memory Canvas backend.

This module provides:
- Screen: the drawing surface every primitive draws onto
- Cell: one character cell with its rich Style
- Canvas: a cell grid implementing Screen that is also a rich renderable
- print_text: clipped string output onto any Screen

The Canvas never raises for out-of-range writes. Anything outside the grid
is dropped so primitives can draw without bounds checks of their own.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, NamedTuple, Protocol, runtime_checkable

from rich.cells import cell_len
from rich.measure import Measurement
from rich.segment import Segment
from rich.style import Style

from termstack.geometry import Rect
from termstack.themes import DEFAULT_STYLES, Styles

if TYPE_CHECKING:
    from rich.console import Console, ConsoleOptions, RenderResult

# Marks the right half of a double-width character
CONTINUATION = ""

CURSOR_STYLE = Style(reverse=True)


class Cell(NamedTuple):
    """A single screen cell."""

    char: str
    style: Style


BLANK = Cell(" ", Style.null())


@runtime_checkable
class Screen(Protocol):
    """Drawing surface passed to every draw call.

    Attributes:
        styles: Colour configuration primitives draw with
    """

    styles: Styles

    def size(self) -> tuple[int, int]:
        """Return (width, height) in cells."""
        ...

    def set_content(self, x: int, y: int, char: str, style: Style | None = None) -> None:
        """Put a character into a cell."""
        ...

    def get_content(self, x: int, y: int) -> Cell:
        """Return the cell at a position."""
        ...

    def show_cursor(self, x: int, y: int) -> None:
        """Place the visible cursor."""
        ...

    def hide_cursor(self) -> None:
        """Hide the cursor."""
        ...

    def clear(self) -> None:
        """Blank every cell."""
        ...


class Canvas:
    """In-memory cell grid implementing the Screen protocol.

    A Canvas is a rich renderable, so a frame can be printed with a rich
    Console or returned from a Textual widget's render().

    Example:
        ```python
        canvas = Canvas(80, 24)
        container.draw(canvas)
        Console().print(canvas)
        ```
    """

    def __init__(self, width: int, height: int, styles: Styles | None = None) -> None:
        """Initialize a blank canvas.

        Args:
            width: Number of columns
            height: Number of rows
            styles: Colour configuration for primitives drawn onto it
        """
        self._width = max(0, width)
        self._height = max(0, height)
        self.styles = styles or DEFAULT_STYLES
        self._cursor: tuple[int, int] | None = None
        self._cells: list[list[Cell]] = []
        self.clear()

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def cursor(self) -> tuple[int, int] | None:
        """Cursor position, or None when hidden."""
        return self._cursor

    def size(self) -> tuple[int, int]:
        """Return (width, height) in cells."""
        return (self._width, self._height)

    def clear(self) -> None:
        """Blank every cell and hide the cursor."""
        self._cells = [[BLANK] * self._width for _ in range(self._height)]
        self._cursor = None

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _release(self, x: int, y: int) -> None:
        """Blank the other half of a wide character overlapping (x, y)."""
        row = self._cells[y]
        if row[x].char == CONTINUATION and x > 0:
            row[x - 1] = BLANK
        elif cell_len(row[x].char) == 2 and x + 1 < self._width:
            row[x + 1] = BLANK

    def set_content(self, x: int, y: int, char: str, style: Style | None = None) -> None:
        """Put a character into a cell.

        Double-width characters occupy (x, y) and (x + 1, y). A character
        that does not fit, or has no width, is dropped.

        Args:
            x: Column
            y: Row
            char: Single character to place
            style: Style for the cell (null style if omitted)
        """
        if not char or not self._in_bounds(x, y):
            return
        width = cell_len(char)
        if width == 0 or (width == 2 and x + 1 >= self._width):
            return
        style = style or Style.null()
        self._release(x, y)
        self._cells[y][x] = Cell(char, style)
        if width == 2:
            self._release(x + 1, y)
            self._cells[y][x + 1] = Cell(CONTINUATION, style)

    def get_content(self, x: int, y: int) -> Cell:
        """Return the cell at a position (a blank cell when out of range)."""
        if not self._in_bounds(x, y):
            return BLANK
        return self._cells[y][x]

    def fill(self, rect: Rect, char: str = " ", style: Style | None = None) -> None:
        """Fill a rectangle with one character."""
        for y in range(rect.y, rect.bottom):
            for x in range(rect.x, rect.right):
                self.set_content(x, y, char, style)

    def show_cursor(self, x: int, y: int) -> None:
        """Place the visible cursor (ignored when outside the canvas)."""
        if self._in_bounds(x, y):
            self._cursor = (x, y)

    def hide_cursor(self) -> None:
        """Hide the cursor."""
        self._cursor = None

    def lines(self) -> list[str]:
        """Return the plain text of every row."""
        return ["".join(cell.char for cell in row) for row in self._cells]

    def __str__(self) -> str:
        return "\n".join(self.lines())

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        for y, row in enumerate(self._cells):
            # Runs of equally styled cells become one segment
            text: list[str] = []
            current: Style | None = None
            for x, cell in enumerate(row):
                if cell.char == CONTINUATION:
                    continue
                style = cell.style
                if self._cursor == (x, y):
                    style = style + CURSOR_STYLE
                if style != current and text:
                    yield Segment("".join(text), current)
                    text = []
                current = style
                text.append(cell.char)
            if text:
                yield Segment("".join(text), current)
            yield Segment.line()

    def __rich_measure__(self, console: Console, options: ConsoleOptions) -> Measurement:
        return Measurement(self._width, self._width)


def print_text(
    screen: Screen,
    text: str,
    x: int,
    y: int,
    max_width: int,
    style: Style | None = None,
) -> int:
    """Write a string onto a screen, clipped to a width.

    Tabs become a single space; other zero-width characters are skipped.

    Args:
        screen: Target screen
        text: Text to write (a single line)
        x: Starting column
        y: Row
        max_width: Maximum number of cells to use
        style: Style for every written cell

    Returns:
        Number of cells written
    """
    used = 0
    for char in _printable(text):
        width = cell_len(char)
        if used + width > max_width:
            break
        screen.set_content(x + used, y, char, style)
        used += width
    return used


def _printable(text: str) -> Iterable[str]:
    for char in text:
        if char == "\t":
            yield " "
        elif cell_len(char) > 0:
            yield char
