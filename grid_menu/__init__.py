"""Keyboard-driven multi-column selection menu for the terminal.

Usage:
    from grid_menu import select_option

    choice, ok = select_option("Please make a choice:", ["A", "B", "C"])
"""

from .base import InputEvent
from .layout import DEFAULT_MAX_ROWS, GridLayout, compute_layout
from .menu import GridMenu, MenuOutcome, MenuResult, select_option
from .navigation import Action, MenuState, Navigator
from .numbered import select_numbered
from .rendering import FrameRenderer, render_frame
from .terminal import ANSI, ESCAPE_TIMEOUT, RawInputReader

__all__ = [
    # Entry points
    "select_option",
    "select_numbered",
    "GridMenu",
    "MenuResult",
    "MenuOutcome",
    # Layout
    "GridLayout",
    "compute_layout",
    "DEFAULT_MAX_ROWS",
    # Rendering
    "FrameRenderer",
    "render_frame",
    # Navigation
    "Navigator",
    "MenuState",
    "Action",
    # Terminal
    "ANSI",
    "RawInputReader",
    "InputEvent",
    "ESCAPE_TIMEOUT",
]
