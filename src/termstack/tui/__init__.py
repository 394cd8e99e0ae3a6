"""TUI module for termstack.

This module provides:
- TermstackApp: Textual application hosting the demo layout
- ContainerView: widget drawing a Container every render
- run_app: entry point for launching the TUI
"""

from termstack.tui.app import TermstackApp, run_app
from termstack.tui.widgets import ContainerView, StatusLine

__all__ = [
    "ContainerView",
    "StatusLine",
    "TermstackApp",
    "run_app",
]
