"""Key event type shared by the input decoder and the navigator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InputEvent:
    """A single decoded keystroke.

    ``key`` is a named key ("Up", "Down", "Right", "Left", "Enter",
    "Escape", "EOF") or the character itself for alphanumeric keys.
    ``key`` is None for bytes that carry no meaning for the menu.
    ``raw`` keeps the bytes that produced the event.
    """

    key: str | None
    char: str | None = None
    raw: bytes = b""
