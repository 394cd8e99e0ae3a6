"""Base theme definitions for termstack.

This module provides:
- Styles dataclass holding the colours primitives draw with
- Theme dataclass combining styles with metadata

Styles are never read from a process-wide default by primitives. A screen
carries its Styles value and every draw call reads it from there.
"""

from dataclasses import dataclass

from rich.style import Style


@dataclass(frozen=True)
class Styles:
    """Colour definitions used while drawing primitives.

    All colours are rich colour strings (hex like "#1e1e2e" or names like
    "green").

    Attributes:
        primitive_background: Background of opaque primitives
        contrast_background: Background for contrasting areas
        border_color: Border colour for unfocused boxes
        focused_border_color: Border colour for the focused box
        title_color: Colour of box titles
        primary_text: Main text colour
        secondary_text: Muted text colour
        highlight_color: Colour used to mark a selected primitive
        graphics_color: Colour for decorative fills
    """

    primitive_background: str
    contrast_background: str
    border_color: str
    focused_border_color: str
    title_color: str
    primary_text: str
    secondary_text: str
    highlight_color: str
    graphics_color: str

    def text_style(self, background: str | None = None) -> Style:
        """Style for body text, optionally on a background."""
        return Style(color=self.primary_text, bgcolor=background)

    def border_style(self, focused: bool = False, color: str | None = None) -> Style:
        """Style for box borders.

        Args:
            focused: Whether the box holds focus
            color: Explicit border colour overriding the theme

        Returns:
            The rich Style for border glyphs
        """
        if color is not None:
            return Style(color=color)
        return Style(color=self.focused_border_color if focused else self.border_color)

    def title_style(self) -> Style:
        """Style for box titles."""
        return Style(color=self.title_color, bold=True)


@dataclass(frozen=True)
class Theme:
    """A complete theme definition.

    Attributes:
        name: Unique identifier for the theme
        display_name: Human-readable name for display
        description: Brief description of the theme
        styles: Styles instance with colour definitions
        is_dark: Whether this is a dark theme
    """

    name: str
    display_name: str
    description: str
    styles: Styles
    is_dark: bool = True

