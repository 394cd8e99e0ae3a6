"""Tests for termstack theming system."""

import dataclasses

import pytest
from rich.style import Style

from termstack.config import Config
from termstack.themes import (
    AVAILABLE_THEMES,
    DARK_STYLES,
    DARK_THEME,
    DEFAULT_STYLES,
    DEFAULT_THEME_NAME,
    LIGHT_STYLES,
    LIGHT_THEME,
    Styles,
    Theme,
    get_theme,
    get_theme_from_config,
)


class TestStyles:
    """Tests for the Styles dataclass."""

    def test_styles_immutable(self) -> None:
        """Test that Styles is immutable (frozen)."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            DARK_STYLES.border_color = "#000000"  # type: ignore[misc]

    def test_text_style(self) -> None:
        """Test body text uses the primary text colour."""
        style = DARK_STYLES.text_style()
        assert style.color == Style(color=DARK_STYLES.primary_text).color
        assert style.bgcolor is None

    def test_text_style_with_background(self) -> None:
        """Test a background can be added to the text style."""
        style = DARK_STYLES.text_style("black")
        assert style.bgcolor == Style(bgcolor="black").bgcolor

    def test_border_style(self) -> None:
        """Test border colours for focused and unfocused boxes."""
        assert DARK_STYLES.border_style().color == Style(color=DARK_STYLES.border_color).color
        focused = DARK_STYLES.border_style(focused=True)
        assert focused.color == Style(color=DARK_STYLES.focused_border_color).color

    def test_border_style_explicit_colour(self) -> None:
        """Test an explicit colour wins regardless of focus."""
        assert DARK_STYLES.border_style(True, "red").color == Style(color="red").color

    def test_title_style_bold(self) -> None:
        """Test titles are bold."""
        assert DARK_STYLES.title_style().bold is True


class TestBuiltinThemes:
    """Tests for the built-in themes."""

    @pytest.mark.parametrize("theme", [DARK_THEME, LIGHT_THEME])
    def test_theme_fields(self, theme: Theme) -> None:
        """Test built-in themes are fully defined."""
        assert theme.name
        assert theme.display_name
        assert theme.description
        assert isinstance(theme.styles, Styles)

    @pytest.mark.parametrize("styles", [DARK_STYLES, LIGHT_STYLES])
    def test_colours_parse(self, styles: Styles) -> None:
        """Test every colour is a valid rich colour."""
        for field in dataclasses.fields(styles):
            Style(color=getattr(styles, field.name))

    def test_dark_and_light(self) -> None:
        """Test is_dark matches the theme."""
        assert DARK_THEME.is_dark is True
        assert LIGHT_THEME.is_dark is False

    def test_default_styles_are_dark(self) -> None:
        """Test the default styles belong to the dark theme."""
        assert DEFAULT_STYLES is DARK_STYLES
        assert DEFAULT_THEME_NAME == "dark"


class TestRegistry:
    """Tests for theme lookup."""

    def test_get_theme(self) -> None:
        """Test themes are found by name."""
        assert get_theme("dark") is DARK_THEME
        assert get_theme("light") is LIGHT_THEME

    def test_unknown_theme_falls_back(self) -> None:
        """Test an unknown name returns the dark theme."""
        assert get_theme("no-such-theme") is DARK_THEME

    def test_get_theme_from_config(self) -> None:
        """Test the theme is taken from configuration."""
        assert get_theme_from_config(Config(theme="light")) is LIGHT_THEME
        assert get_theme_from_config(Config()) is DARK_THEME

    def test_available_themes(self) -> None:
        """Test every registered theme is listed by name."""
        assert AVAILABLE_THEMES == ["dark", "light"]
        assert [get_theme(name).name for name in AVAILABLE_THEMES] == AVAILABLE_THEMES
