"""Textual widgets hosting termstack primitives.

This module provides:
- ContainerView: draws a Container into a Canvas the size of the widget
- StatusLine: one-line summary of the demo state
"""

from __future__ import annotations

from typing import ClassVar

from rich.console import RenderableType
from textual.widget import Widget
from textual.widgets import Static

from termstack.primitives import Container
from termstack.screen import Canvas
from termstack.themes import DEFAULT_STYLES, Styles


class ContainerView(Widget):
    """Widget that lays out and draws a Container on every render.

    The container is given the widget's full size each frame, unless it is
    set to full screen, in which case it takes the canvas size itself.
    """

    DEFAULT_CSS: ClassVar[
        str
    ] = """
    ContainerView {
        width: 100%;
        height: 1fr;
    }
    """

    can_focus = True

    def __init__(
        self,
        container: Container,
        styles: Styles | None = None,
        *,
        name: str | None = None,
        id: str | None = None,  # noqa: A002
        classes: str | None = None,
    ) -> None:
        """Initialize the view.

        Args:
            container: The container to draw
            styles: Colours passed to the canvas
            name: Widget name
            id: Widget ID
            classes: CSS classes
        """
        super().__init__(name=name, id=id, classes=classes)
        self._container = container
        self._styles = styles or DEFAULT_STYLES
        self._last_canvas: Canvas | None = None

    @property
    def container(self) -> Container:
        """The hosted container."""
        return self._container

    @property
    def last_canvas(self) -> Canvas | None:
        """The most recently drawn frame."""
        return self._last_canvas

    def render(self) -> RenderableType:
        """Draw the container into a fresh canvas."""
        width, height = self.size.width, self.size.height
        canvas = Canvas(width, height, self._styles)
        self._container.set_rect(0, 0, width, height)
        self._container.draw(canvas)
        self._last_canvas = canvas
        return canvas


class StatusLine(Static):
    """Single line showing which view is selected."""

    DEFAULT_CSS: ClassVar[
        str
    ] = """
    StatusLine {
        dock: bottom;
        height: 1;
        padding: 0 1;
    }
    """
