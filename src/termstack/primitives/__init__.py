"""Drawable primitives for termstack.

This module provides:
- Item and Focusable: the capability protocols a Container lays out
- Box: rectangle, border, title and background
- Container: stacks items along one axis
- TextView: wrapped, appendable text
"""

from termstack.primitives.box import THEME_BACKGROUND, Box
from termstack.primitives.container import Container, ContainerDirection, LayoutEntry
from termstack.primitives.item import FocusDelegate, Focusable, Item
from termstack.primitives.text_view import TextView

__all__ = [
    "Box",
    "Container",
    "ContainerDirection",
    "FocusDelegate",
    "Focusable",
    "Item",
    "LayoutEntry",
    "TextView",
    "THEME_BACKGROUND",
]
