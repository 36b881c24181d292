"""grid-menu command-line interface.

Usage:
    grid-menu "Please make a choice:" "Selection A" "Selection B" ...
    grid-menu "Select timezone:" --file timezones.txt --max-rows 6

Features:
    - Menu drawn on stderr, selection printed on stdout
    - Arrow keys or h/j/k/l to move, Enter to select, q to cancel
    - --numbered fallback that works with piped input
    - Defaults read from ~/.grid-menu.json
"""

from .app import main, run
from .config import load_cli_config, save_cli_config

__all__ = [
    "main",
    "run",
    "load_cli_config",
    "save_cli_config",
]
