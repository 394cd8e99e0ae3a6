"""Textual application for the interactive container demo.

This module provides:
- TermstackApp: hosts the demo layout and routes keys to it
- run_app: entry point for launching the TUI

Keys (configurable through the keybindings section):
- plus: add a text view
- up / down: select the previous / next text view
- delete: clear the selected view
- enter: start a new line in the selected view
- printable keys: append to the selected view
- escape: quit
"""

from __future__ import annotations

import logging

from textual import events
from textual.app import App, ComposeResult

from termstack import __version__
from termstack.config import Config
from termstack.demo import DemoLayout
from termstack.tui.widgets import ContainerView, StatusLine

logger = logging.getLogger(__name__)


class TermstackApp(App[None]):
    """Textual host for the termstack demo.

    The container is redrawn from scratch every time the view refreshes;
    key handlers only mutate the layout and ask for a refresh.

    Attributes:
        demo: The demo layout being shown
    """

    TITLE = "termstack"
    SUB_TITLE = f"v{__version__}"

    CSS = """
    Screen {
        layout: vertical;
    }
    """

    def __init__(self, config: Config | None = None) -> None:
        """Initialize the application.

        Args:
            config: Optional configuration; defaults are used if omitted
        """
        super().__init__()
        self._config = config or Config()
        self.demo = DemoLayout(self._config)

    def compose(self) -> ComposeResult:
        """Compose the container view and status line."""
        yield ContainerView(self.demo.container, self.demo.theme.styles, id="container-view")
        yield StatusLine(self._status_text(), id="status-line")

    def on_mount(self) -> None:
        """Apply theme colours and focus the container view."""
        styles = self.demo.theme.styles
        self.screen.styles.background = styles.primitive_background
        status = self.query_one(StatusLine)
        status.styles.background = styles.contrast_background
        status.styles.color = styles.secondary_text
        self.query_one(ContainerView).focus()
        logger.info("Demo started with %d views", len(self.demo.text_views))

    def _status_text(self) -> str:
        current = self.demo.current
        return f"{current.title} selected - {len(self.demo.text_views)} views"

    def _redraw(self) -> None:
        self.query_one(ContainerView).refresh()
        self.query_one(StatusLine).update(self._status_text())

    def on_key(self, event: events.Key) -> None:
        """Route a key press to the demo layout."""
        keys = self._config.keybindings

        if event.key == keys.quit:
            self.exit()
            return
        if event.key == keys.add_view:
            self.demo.add_view()
        elif event.key == keys.previous_view:
            self.demo.select(-1)
        elif event.key == keys.next_view:
            self.demo.select(1)
        elif event.key == keys.clear_view:
            self.demo.clear_current()
        elif event.key == keys.newline:
            self.demo.write("\n")
        elif event.is_printable and event.character:
            self.demo.write(event.character)
        else:
            return

        event.stop()
        self._redraw()


def run_app(config: Config | None = None) -> None:
    """Create and run the termstack TUI application.

    Args:
        config: Optional configuration object
    """
    app = TermstackApp(config)
    app.run()
