"""Command-line interface for termstack.

This module provides:
- Typer-based CLI application
- Config file loading with CLI overrides
- `render`: print one frame of the demo layout
- `tui`: run the interactive demo in Textual

Usage:
    termstack render                       # Print one 80x35 frame
    termstack render -d column -W 100      # Different axis and width
    termstack tui                          # Interactive demo
    termstack --version

Examples:
    # Print the demo with the light theme
    termstack render --theme light

    # Use a custom configuration file
    termstack tui --config ~/.config/termstack/custom.yaml
"""

from enum import Enum
from pathlib import Path
from typing import Annotated, Any

from rich.console import Console
import typer

from termstack import __version__
from termstack.config import Config, ConfigError, configure_logging, load_config
from termstack.themes import AVAILABLE_THEMES

app = typer.Typer(
    name="termstack",
    help="Stacking layout container for terminal user interfaces",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


class Direction(str, Enum):
    """Outer container axis."""

    ROW = "row"
    COLUMN = "column"


# One member per registered theme, e.g. Theme.DARK == "dark"
Theme = Enum("Theme", {name.upper(): name for name in AVAILABLE_THEMES}, type=str)


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        console.print(f"termstack version {__version__}")
        raise typer.Exit()


def build_cli_overrides(
    direction: Direction | None = None,
    theme: Theme | None = None,
    width: int | None = None,
    height: int | None = None,
    full_screen: bool | None = None,
    border: bool | None = None,
) -> dict[str, Any]:
    """Build a config override dict from CLI flags.

    Flags left at None are not included, so config file values survive.

    Returns:
        Dictionary of config overrides
    """
    overrides: dict[str, Any] = {}
    if theme is not None:
        overrides["theme"] = theme.value

    layout: dict[str, Any] = {}
    if direction is not None:
        layout["direction"] = direction.value
    if width is not None:
        layout["width"] = width
    if height is not None:
        layout["height"] = height
    if full_screen is not None:
        layout["full_screen"] = full_screen
    if border is not None:
        layout["border"] = border
    if layout:
        overrides["layout"] = layout

    return overrides


def load_cli_config(config: Path | None, overrides: dict[str, Any]) -> Config:
    """Load configuration, turning failures into a clean exit.

    Raises:
        typer.Exit: With code 1 if the config file is missing or invalid
    """
    try:
        cfg = load_config(config_path=str(config) if config else None, cli_overrides=overrides)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    except ConfigError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1) from e
    configure_logging(cfg.logging)
    return cfg


ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to custom config file",
        envvar="TERMSTACK_CONFIG_PATH",
    ),
]

DirectionOption = Annotated[
    Direction | None,
    typer.Option("--direction", "-d", help="Axis of the outer container"),
]

ThemeOption = Annotated[
    Theme | None,
    typer.Option("--theme", "-t", help="Color theme"),
]

WidthOption = Annotated[
    int | None,
    typer.Option("--width", "-W", help="Frame width in cells", min=1, max=1000),
]

HeightOption = Annotated[
    int | None,
    typer.Option("--height", "-H", help="Frame height in cells", min=1, max=1000),
]

BorderOption = Annotated[
    bool | None,
    typer.Option("--border/--no-border", help="Draw the outer border"),
]

VersionOption = Annotated[
    bool | None,
    typer.Option(
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
]


@app.callback()
def main(version: VersionOption = None) -> None:
    """termstack - stack terminal widgets along one axis."""


@app.command("render")
def render_command(
    config: ConfigOption = None,
    direction: DirectionOption = None,
    theme: ThemeOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    border: BorderOption = None,
) -> None:
    """Print one frame of the demo layout."""
    from termstack.demo import DemoLayout

    overrides = build_cli_overrides(
        direction=direction,
        theme=theme,
        width=width,
        height=height,
        border=border,
    )
    cfg = load_cli_config(config, overrides)
    demo = DemoLayout(cfg)
    console.print(demo.render(cfg.layout.width, cfg.layout.height))


@app.command("tui")
def tui_command(
    config: ConfigOption = None,
    direction: DirectionOption = None,
    theme: ThemeOption = None,
    border: BorderOption = None,
    full_screen: Annotated[
        bool,
        typer.Option("--full-screen", help="Let the container take the whole screen"),
    ] = False,
) -> None:
    """Run the interactive demo."""
    overrides = build_cli_overrides(
        direction=direction,
        theme=theme,
        border=border,
        full_screen=full_screen or None,
    )
    cfg = load_cli_config(config, overrides)

    # Import here to avoid loading Textual when not needed
    from termstack.tui import run_app

    run_app(cfg)


def cli_main() -> None:
    """Entry point for the CLI application."""
    app()
