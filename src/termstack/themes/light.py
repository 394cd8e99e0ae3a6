"""Light theme for termstack.

A bright theme for well-lit terminals.
Colour scheme inspired by Catppuccin Latte.
"""

from termstack.themes.base import Styles, Theme

LIGHT_STYLES = Styles(
    primitive_background="#eff1f5",
    contrast_background="#ccd0da",
    border_color="#9ca0b0",
    focused_border_color="#1e66f5",
    title_color="#1e66f5",
    primary_text="#4c4f69",
    secondary_text="#8c8fa1",
    highlight_color="#d20f39",
    graphics_color="#40a02b",
)

LIGHT_THEME = Theme(
    name="light",
    display_name="Light",
    description="Light theme for bright environments",
    styles=LIGHT_STYLES,
    is_dark=False,
)
