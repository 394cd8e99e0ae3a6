"""Default configuration values for termstack.

This module defines the default configuration used when no config file exists
or when config values are not specified.

Environment Variables:
    TERMSTACK_CONFIG_PATH: Override default config file path
    Any config value can reference environment variables using ${VAR} syntax

Config File Locations (in order of precedence):
    1. Path specified via --config CLI flag
    2. Path specified via TERMSTACK_CONFIG_PATH environment variable
    3. ~/.config/termstack/config.yaml (XDG default)
    4. ~/.termstack/config.yaml (legacy location)
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "theme": "dark",  # Theme name: dark, light
    # Demo layout settings
    "layout": {
        "direction": "row",  # Outer container axis: "row" or "column"
        "full_screen": False,  # Use the whole screen instead of width/height
        "border": True,  # Draw a border around the outer container
        "width": 80,  # Frame width for `termstack render`
        "height": 35,  # Frame height for `termstack render`
    },
    # Keyboard shortcuts for the interactive demo
    "keybindings": {
        "quit": "escape",
        "add_view": "plus",
        "previous_view": "up",
        "next_view": "down",
        "clear_view": "delete",
        "newline": "enter",
    },
    # Logging configuration (for debugging)
    "logging": {
        "enabled": False,
        "level": "INFO",  # DEBUG, INFO, WARNING, ERROR
        "file": "~/.termstack/termstack.log",
    },
}
