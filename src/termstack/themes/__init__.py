"""Theme module for termstack.

This module provides:
- Styles and Theme dataclasses
- Built-in themes (dark, light)
- Theme lookup from configuration

Available themes:
- dark: Default dark theme with comfortable contrast
- light: Light theme for bright environments
"""

from typing import TYPE_CHECKING

from termstack.themes.base import Styles, Theme
from termstack.themes.dark import DARK_STYLES, DARK_THEME
from termstack.themes.light import LIGHT_STYLES, LIGHT_THEME

if TYPE_CHECKING:
    from termstack.config import Config

# Registry of all available themes
_THEMES: dict[str, Theme] = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}

# Default theme name when requested theme is not found
DEFAULT_THEME_NAME = "dark"

# Styles used when a screen is created without explicit styles
DEFAULT_STYLES = DARK_STYLES

# List of available theme names for configuration validation
AVAILABLE_THEMES: list[str] = list(_THEMES.keys())


def get_theme(name: str) -> Theme:
    """Get a theme by name.

    Falls back to the default dark theme if the name is unknown.

    Args:
        name: Name of the theme to retrieve

    Returns:
        Theme object for the requested theme, or dark theme as fallback
    """
    theme = _THEMES.get(name)
    if theme is None:
        return _THEMES[DEFAULT_THEME_NAME]
    return theme


def get_theme_from_config(config: "Config") -> Theme:
    """Get the theme named by config.theme."""
    return get_theme(config.theme)


__all__ = [
    "Styles",
    "Theme",
    "DARK_STYLES",
    "DARK_THEME",
    "LIGHT_STYLES",
    "LIGHT_THEME",
    "get_theme",
    "get_theme_from_config",
    "AVAILABLE_THEMES",
    "DEFAULT_STYLES",
    "DEFAULT_THEME_NAME",
]
