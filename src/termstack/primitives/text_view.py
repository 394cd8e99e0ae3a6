"""TextView primitive: a box showing wrapped, appendable text."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from rich.cells import cell_len
from rich.style import Style

from termstack.primitives.box import Box
from termstack.screen import print_text

if TYPE_CHECKING:
    from termstack.screen import Screen

# A run of leading whitespace, or a word with the whitespace after it
_TOKENS = re.compile(r"\s+|\S+\s*")


def _split_cells(word: str, width: int) -> tuple[str, str]:
    """Split off the longest head of word that fits in width cells.

    The head always holds at least one character.
    """
    used = 0
    for index, char in enumerate(word):
        used += cell_len(char)
        if used > width:
            index = max(index, 1)
            return word[:index], word[index:]
    return word, ""


def wrap_cells(paragraph: str, width: int) -> list[str]:
    """Word-wrap one line of text to a width in terminal cells.

    Words wider than the width are broken. Whitespace at a line break is
    dropped, but whitespace at the very end is kept so a cursor placed
    after the text follows a typed space.
    """
    lines: list[str] = []
    line = ""
    for token in _TOKENS.findall(paragraph):
        word = token.rstrip()
        trailing = token[len(word) :]
        if cell_len(line + word) <= width:
            line += token
            continue
        if line.strip():
            lines.append(line.rstrip())
        while cell_len(word) > width:
            head, word = _split_cells(word, width)
            lines.append(head)
        line = word + trailing
    if cell_len(line) > width:
        text = line.rstrip()
        line = text + " " * (width - cell_len(text))
    lines.append(line)
    return lines


class TextView(Box):
    """A bordered or plain box that shows text.

    Text is word-wrapped to the inner width. When there are more lines than
    rows the view shows the tail, so appended text stays visible. While
    focused, the screen cursor sits after the last character.
    """

    def __init__(
        self,
        text: str = "",
        *,
        title: str = "",
        border: bool = False,
        border_color: str | None = None,
        background_color: str | None = None,
        text_color: str | None = None,
    ) -> None:
        """Initialize the text view.

        Args:
            text: Initial text
            title: Title shown in the top border
            border: Whether to draw a border
            border_color: Border colour overriding the theme colours
            background_color: Fill colour, or None for transparent
            text_color: Text colour overriding the theme's primary text
        """
        super().__init__(
            title=title,
            border=border,
            border_color=border_color,
            background_color=background_color,
        )
        self._text = text
        self._text_color = text_color

    def get_text(self) -> str:
        """Return the full text."""
        return self._text

    def set_text(self, text: str) -> TextView:
        """Replace the text."""
        self._text = text
        return self

    def write(self, text: str) -> int:
        """Append text, returning the number of characters written."""
        self._text += text
        return len(text)

    def clear(self) -> TextView:
        """Remove all text."""
        self._text = ""
        return self

    def wrap(self, width: int) -> list[str]:
        """Split the text into display lines no wider than width cells.

        Empty paragraphs are kept as empty lines; an empty text is one empty
        line.
        """
        if width <= 0:
            return []
        lines: list[str] = []
        for paragraph in self._text.split("\n"):
            lines.extend(wrap_cells(paragraph, width))
        return lines

    def get_height(self, width: int) -> int:
        """Natural height: wrapped line count plus border and padding."""
        horizontal, vertical = self.chrome()
        return vertical + max(1, len(self.wrap(width - horizontal)))

    def get_width(self, height: int) -> int:
        """Natural width: longest line plus border and padding."""
        horizontal, _ = self.chrome()
        longest = max((cell_len(line) for line in self._text.split("\n")), default=0)
        return horizontal + longest

    def draw(self, screen: Screen) -> None:
        """Draw the box and the visible tail of the text."""
        super().draw(screen)
        inner = self.get_inner_rect()
        if inner.is_empty:
            return

        lines = self.wrap(inner.width)
        visible = lines[-inner.height :]
        style = screen.styles.text_style(self._resolve_background(screen))
        if self._text_color is not None:
            style = style + Style(color=self._text_color)

        used = 0
        for row, line in enumerate(visible):
            used = print_text(screen, line, inner.x, inner.y + row, inner.width, style)

        if self.has_focus() and visible:
            column = min(used, inner.width - 1)
            screen.show_cursor(inner.x + column, inner.y + len(visible) - 1)
