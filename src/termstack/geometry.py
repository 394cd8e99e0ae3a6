"""Rectangle geometry shared by screens and primitives."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in terminal cells.

    Attributes:
        x: Left column
        y: Top row
        width: Number of columns (never negative)
        height: Number of rows (never negative)
    """

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        # Frozen dataclass: clamp through object.__setattr__
        if self.width < 0:
            object.__setattr__(self, "width", 0)
        if self.height < 0:
            object.__setattr__(self, "height", 0)

    @property
    def right(self) -> int:
        """Column just past the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Row just past the bottom edge."""
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        """Whether the rectangle covers no cells."""
        return self.width == 0 or self.height == 0

    def contains(self, x: int, y: int) -> bool:
        """Check whether a cell lies inside the rectangle."""
        return self.x <= x < self.right and self.y <= y < self.bottom

    def inset(self, top: int = 0, bottom: int = 0, left: int = 0, right: int = 0) -> "Rect":
        """Shrink the rectangle by the given margins.

        The result keeps its origin inside the original rectangle and never
        has a negative extent.

        Args:
            top: Rows removed at the top
            bottom: Rows removed at the bottom
            left: Columns removed on the left
            right: Columns removed on the right

        Returns:
            The shrunken rectangle
        """
        return Rect(
            x=self.x + left,
            y=self.y + top,
            width=self.width - left - right,
            height=self.height - top - bottom,
        )

    def as_tuple(self) -> tuple[int, int, int, int]:
        """Return (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)
