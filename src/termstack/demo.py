"""Interactive container demo shared by the CLI and the Textual host.

The layout is a bordered outer container holding a row built from a
one-cell coloured strip, a text view, and a sub-container that centres a
second text view between spacers. More text views can be appended at run
time; exactly one of them is selected, highlighted and focused.
"""

from __future__ import annotations

import logging

from termstack.config import Config
from termstack.primitives import (
    Box,
    Container,
    ContainerDirection,
    Focusable,
    Item,
    TextView,
)
from termstack.screen import Canvas
from termstack.themes import Theme, get_theme_from_config

logger = logging.getLogger(__name__)

INTRO_TEXT = "Type to write into the selected view. Press + to add a view."
HELP_TEXT = "Up and Down select a view, Delete clears it, Escape quits."


class DemoLayout:
    """The demo's containers, text views and selection state.

    Attributes:
        theme: Theme the frames are drawn with
        container: The outer container
        text_views: All text views in selection order
    """

    def __init__(self, config: Config | None = None) -> None:
        """Build the demo layout.

        Args:
            config: Configuration supplying theme and layout settings
        """
        config = config or Config()
        self.theme: Theme = get_theme_from_config(config)
        self._focused: Item | None = None
        self._current = 0

        self.container = Container(
            ContainerDirection(config.layout.direction),
            title="termstack",
            border=config.layout.border,
        )
        self.container.set_full_screen(config.layout.full_screen)

        first = TextView(INTRO_TEXT, title="view 1", border=True)
        second = TextView(HELP_TEXT, title="view 2", border=True)
        self.text_views: list[TextView] = [first, second]

        centred = Container(ContainerDirection.ROW)
        centred.add_spacer(1).add_item(second, -1).add_spacer(1)

        strip = Box(background_color=self.theme.styles.graphics_color)
        row = Container(ContainerDirection.COLUMN)
        row.add_item(strip, 1)
        row.add_item(first, 36, attracts_focus=True)
        row.add_spacer(2)
        row.add_item(centred, 30)

        self.container.add_item(row, -1, attracts_focus=True)
        self.container.focus(self.set_focus)
        self._highlight(0)

    @property
    def current(self) -> TextView:
        """The selected text view."""
        return self.text_views[self._current]

    @property
    def focused(self) -> Item | None:
        """The item holding focus."""
        return self._focused

    def set_focus(self, item: Item) -> None:
        """Move focus to an item, letting containers pass it on."""
        previous = self._focused
        if isinstance(previous, Focusable) and previous is not item:
            previous.blur()
        self._focused = item
        if isinstance(item, Focusable):
            item.focus(self.set_focus)

    def _highlight(self, index: int) -> None:
        self.current.set_border_color(None)
        self._current = index
        self.current.set_border_color(self.theme.styles.highlight_color)

    def select(self, delta: int) -> TextView:
        """Select the view delta steps away, stopping at either end."""
        index = min(max(self._current + delta, 0), len(self.text_views) - 1)
        self._highlight(index)
        self.set_focus(self.current)
        logger.debug("Selected view %d", index + 1)
        return self.current

    def add_view(self) -> TextView:
        """Append a new bordered text view to the outer container."""
        view = TextView(title=f"view {len(self.text_views) + 1}", border=True)
        self.container.add_item(view, -1)
        self.text_views.append(view)
        logger.debug("Added %s", view.title)
        return view

    def write(self, text: str) -> None:
        """Append text to the selected view."""
        self.current.write(text)

    def clear_current(self) -> None:
        """Remove the selected view's text."""
        self.current.clear()

    def render(self, width: int, height: int) -> Canvas:
        """Lay out and draw one frame.

        Args:
            width: Frame width in cells
            height: Frame height in cells

        Returns:
            The drawn canvas
        """
        canvas = Canvas(width, height, self.theme.styles)
        self.container.set_rect(0, 0, width, height)
        self.container.draw(canvas)
        return canvas
