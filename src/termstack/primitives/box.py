"""Box primitive: geometry, border, title and background.

Box is the base every other primitive builds on. It stores the rectangle the
layout assigns, knows its inner rectangle (inside border and padding), and
draws its own chrome before subclasses draw their content.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich import box as rich_box
from rich.cells import cell_len
from rich.style import Style

from termstack.geometry import Rect
from termstack.primitives.item import FocusDelegate
from termstack.screen import print_text

if TYPE_CHECKING:
    from termstack.screen import Screen


# Background value that resolves to the screen's primitive background
THEME_BACKGROUND = "theme"


class Box:
    """A rectangle with an optional border, title and background.

    The background is transparent by default: drawing a Box without a
    background colour leaves the cells under it untouched.

    Attributes:
        title: Text shown centred in the top border
    """

    def __init__(
        self,
        *,
        title: str = "",
        border: bool = False,
        border_color: str | None = None,
        background_color: str | None = None,
    ) -> None:
        """Initialize the box.

        Args:
            title: Title shown in the top border (only when bordered)
            border: Whether to draw a border
            border_color: Border colour overriding the theme colours
            background_color: Fill colour, THEME_BACKGROUND for the theme's
                primitive background, or None for transparent
        """
        self._rect = Rect()
        self.title = title
        self._border = border
        self._border_color = border_color
        self._background_color = background_color
        self._padding = (0, 0, 0, 0)
        self._focused = False

    # Geometry

    def get_rect(self) -> Rect:
        """Return the rectangle assigned to the box."""
        return self._rect

    def set_rect(self, x: int, y: int, width: int, height: int) -> Box:
        """Assign the box's rectangle."""
        self._rect = Rect(x, y, width, height)
        return self

    def get_inner_rect(self) -> Rect:
        """Return the rectangle inside the border and padding."""
        top, bottom, left, right = self._padding
        if self._border:
            top, bottom, left, right = top + 1, bottom + 1, left + 1, right + 1
        return self._rect.inset(top=top, bottom=bottom, left=left, right=right)

    def chrome(self) -> tuple[int, int]:
        """Return the (horizontal, vertical) cells taken by border and padding."""
        top, bottom, left, right = self._padding
        border = 2 if self._border else 0
        return (left + right + border, top + bottom + border)

    def get_width(self, height: int) -> int:
        """Natural width: just the border and padding."""
        return self.chrome()[0]

    def get_height(self, width: int) -> int:
        """Natural height: just the border and padding."""
        return self.chrome()[1]

    # Configuration

    def set_border(self, show: bool) -> Box:
        """Show or hide the border."""
        self._border = show
        return self

    def has_border(self) -> bool:
        """Whether the border is drawn."""
        return self._border

    def set_border_color(self, color: str | None) -> Box:
        """Set an explicit border colour, or None to follow the theme."""
        self._border_color = color
        return self

    def get_border_color(self) -> str | None:
        """Return the explicit border colour, if any."""
        return self._border_color

    def set_title(self, title: str) -> Box:
        """Set the title shown in the top border."""
        self.title = title
        return self

    def set_background_color(self, color: str | None) -> Box:
        """Set the fill colour, THEME_BACKGROUND, or None for transparent."""
        self._background_color = color
        return self

    def get_background_color(self) -> str | None:
        """Return the configured fill colour."""
        return self._background_color

    def set_padding(self, top: int, bottom: int, left: int, right: int) -> Box:
        """Set the padding inside the border (negative values count as 0)."""
        self._padding = (max(0, top), max(0, bottom), max(0, left), max(0, right))
        return self

    # Focus

    def focus(self, delegate: FocusDelegate) -> None:
        """Take focus."""
        self._focused = True

    def blur(self) -> None:
        """Give up focus."""
        self._focused = False

    def has_focus(self) -> bool:
        """Whether the box holds focus."""
        return self._focused

    # Drawing

    def _resolve_background(self, screen: Screen) -> str | None:
        if self._background_color == THEME_BACKGROUND:
            return screen.styles.primitive_background
        return self._background_color

    def draw(self, screen: Screen) -> None:
        """Draw background, border and title.

        Args:
            screen: Target screen; its styles supply the theme colours
        """
        rect = self._rect
        if rect.is_empty:
            return

        background = self._resolve_background(screen)
        if background is not None:
            fill = Style(bgcolor=background)
            for y in range(rect.y, rect.bottom):
                for x in range(rect.x, rect.right):
                    screen.set_content(x, y, " ", fill)

        if not self._border or rect.width < 2 or rect.height < 2:
            return

        focused = self.has_focus()
        glyphs = rich_box.DOUBLE if focused else rich_box.SQUARE
        style = screen.styles.border_style(focused, self._border_color)
        if background is not None:
            style = style + Style(bgcolor=background)

        left, right = rect.x, rect.right - 1
        top, bottom = rect.y, rect.bottom - 1
        for x in range(left + 1, right):
            screen.set_content(x, top, glyphs.top, style)
            screen.set_content(x, bottom, glyphs.bottom, style)
        for y in range(top + 1, bottom):
            screen.set_content(left, y, glyphs.mid_left, style)
            screen.set_content(right, y, glyphs.mid_right, style)
        screen.set_content(left, top, glyphs.top_left, style)
        screen.set_content(right, top, glyphs.top_right, style)
        screen.set_content(left, bottom, glyphs.bottom_left, style)
        screen.set_content(right, bottom, glyphs.bottom_right, style)

        if self.title and rect.width > 2:
            available = rect.width - 2
            offset = max(0, (available - cell_len(self.title)) // 2)
            title_style = screen.styles.title_style()
            if background is not None:
                title_style = title_style + Style(bgcolor=background)
            print_text(screen, self.title, left + 1 + offset, top, available - offset, title_style)
