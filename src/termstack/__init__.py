"""termstack - stacking layout container for terminal user interfaces.

This package provides:
- Container: lays out items along one axis and draws them every frame
- Box and TextView primitives built on an in-memory Canvas screen
- Themes carried into drawing through the screen
- A Textual host and a Typer CLI for the interactive demo
"""

__version__ = "0.1.0"

from termstack.geometry import Rect
from termstack.primitives import (
    Box,
    Container,
    ContainerDirection,
    Focusable,
    Item,
    LayoutEntry,
    TextView,
)
from termstack.screen import Canvas, Screen

__all__ = [
    "__version__",
    "Box",
    "Canvas",
    "Container",
    "ContainerDirection",
    "Focusable",
    "Item",
    "LayoutEntry",
    "Rect",
    "Screen",
    "TextView",
]
