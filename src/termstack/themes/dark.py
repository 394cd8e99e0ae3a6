"""Dark theme for termstack.

This is the default theme with a dark background and light text.
Colour scheme inspired by Catppuccin Mocha.
"""

from termstack.themes.base import Styles, Theme

DARK_STYLES = Styles(
    primitive_background="#1e1e2e",
    contrast_background="#313244",
    border_color="#585b70",
    focused_border_color="#89b4fa",
    title_color="#89b4fa",
    primary_text="#cdd6f4",
    secondary_text="#6c7086",
    highlight_color="#f38ba8",
    graphics_color="#a6e3a1",
)

DARK_THEME = Theme(
    name="dark",
    display_name="Dark",
    description="Default dark theme with comfortable contrast",
    styles=DARK_STYLES,
    is_dark=True,
)
