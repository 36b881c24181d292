"""Configuration loading/saving for grid-menu."""

from __future__ import annotations

import json
import os
from typing import Any

from grid_menu import DEFAULT_MAX_ROWS, ESCAPE_TIMEOUT

DEFAULT_CONFIG_PATH = os.path.expanduser("~/.grid-menu.json")


def load_cli_config(path: str = DEFAULT_CONFIG_PATH) -> dict[str, Any]:
    """Load CLI config from disk. Returns empty dict if not found or invalid."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}
    except FileNotFoundError:
        return {}
    except (OSError, ValueError):
        return {}


def save_cli_config(config: dict[str, Any], path: str = DEFAULT_CONFIG_PATH) -> None:
    """Persist CLI config to disk."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=2)


def config_max_rows(config: dict[str, Any]) -> int:
    """``max_rows`` from config, falling back to the default when unusable."""
    value = config.get("max_rows", DEFAULT_MAX_ROWS)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return DEFAULT_MAX_ROWS
    return value


def config_escape_timeout(config: dict[str, Any]) -> float:
    """``escape_timeout`` (seconds) from config, falling back to the default."""
    value = config.get("escape_timeout", ESCAPE_TIMEOUT)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        return ESCAPE_TIMEOUT
    return float(value)
