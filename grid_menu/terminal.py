"""Terminal control for the grid menu.

This module provides:
- ANSI: Centralized terminal escape sequences and width helpers
- RawInputReader: Reads single keystrokes with echo and line buffering off
"""

from __future__ import annotations

import os
import re
import sys
import termios
import tty
from contextlib import contextmanager
from select import select
from typing import Any, Iterator

import wcwidth

from .base import InputEvent

# Bounded wait for the bytes that follow ESC in an arrow-key sequence
ESCAPE_TIMEOUT = 0.0001

ESC = b"\x1b"


class ANSI:
    """Centralized ANSI escape sequences and terminal width helpers.

    Usage:
        from .terminal import ANSI

        # Cursor control (returns escape string)
        stream.write(ANSI.cursor_up(6))

        # Display width, ignoring escape codes
        ANSI.visual_len("\\033[7mhighlighted\\033[27m")  # -> 11
    """

    # Style codes for the highlighted cell
    REVERSE = "\033[7m"  # Inverse/reverse video
    REVERSE_OFF = "\033[27m"

    # Cursor visibility
    HIDE_CURSOR = "\033[?25l"
    SHOW_CURSOR = "\033[?25h"

    CARRIAGE_RETURN = "\r"

    # Pattern to match ANSI escape sequences (for stripping)
    _ANSI_PATTERN = re.compile(r"\033\[[0-9;?]*[A-Za-z]")

    # C0 and C1 control characters, including newline, tab and ESC
    _CONTROL_PATTERN = re.compile(r"[\x00-\x1f\x7f-\x9f]")
    REPLACEMENT_CHAR = "\ufffd"

    @classmethod
    def cursor_up(cls, n: int = 1) -> str:
        """Move cursor up n lines."""
        return f"\033[{n}A" if n > 0 else ""

    @classmethod
    def _get_char_width(cls, char: str) -> int:
        """Get visual width of character (0 for control, 1-2 for normal).

        Uses wcwidth for proper handling of:
        - Wide characters (CJK, emoji): return 2
        - Normal characters: return 1
        - Control characters, combining marks: return 0
        """
        w = wcwidth.wcwidth(char)
        return w if w > 0 else 0

    @classmethod
    def strip_ansi(cls, s: str) -> str:
        """Remove ANSI escape sequences from string."""
        return cls._ANSI_PATTERN.sub("", s)

    @classmethod
    def visual_len(cls, s: str) -> int:
        """Calculate visual length of string, excluding ANSI escape codes.

        Measures the whole string so ZWJ emoji sequences and variation
        selectors count as the single glyph a terminal draws. wcswidth
        gives up (-1) on control characters; those count as 0 each.
        """
        stripped = cls.strip_ansi(s)
        width = wcwidth.wcswidth(stripped)
        if width >= 0:
            return width
        return sum(cls._get_char_width(char) for char in stripped)

    @classmethod
    def printable(cls, s: str) -> str:
        """Replace control characters so ``s`` draws on a single line."""
        return cls._CONTROL_PATTERN.sub(cls.REPLACEMENT_CHAR, s)

    @classmethod
    def pad_to_width(cls, s: str, width: int) -> str:
        """Right-pad with spaces so the visible width is at least ``width``."""
        return s + " " * max(0, width - cls.visual_len(s))

    @classmethod
    def reverse(cls, s: str) -> str:
        """Wrap text in reverse video."""
        return f"{cls.REVERSE}{s}{cls.REVERSE_OFF}"


class RawInputReader:
    """Reads single keystrokes from a terminal file descriptor.

    While started, the terminal delivers bytes immediately and does not echo
    them. Signals stay enabled so Ctrl+C still raises KeyboardInterrupt.
    """

    # Escape sequence mappings (without the ESC prefix)
    SEQUENCES: dict[bytes, str] = {
        b"[A": "Up",
        b"[B": "Down",
        b"[C": "Right",
        b"[D": "Left",
        # SS3 form sent by terminals in application cursor mode
        b"OA": "Up",
        b"OB": "Down",
        b"OC": "Right",
        b"OD": "Left",
    }

    def __init__(
        self, fd: int | None = None, escape_timeout: float = ESCAPE_TIMEOUT
    ) -> None:
        self.fd = sys.stdin.fileno() if fd is None else fd
        self.escape_timeout = escape_timeout
        self.old_settings: list[Any] | None = None

    def start(self) -> None:
        """Disable echo and line buffering, flushing any pending input.

        This method is idempotent - calling it when already started is a no-op.
        """
        if self.old_settings is not None:
            return
        self.old_settings = termios.tcgetattr(self.fd)
        # Flush any pending input to avoid stale keystrokes
        termios.tcflush(self.fd, termios.TCIFLUSH)
        tty.setcbreak(self.fd, termios.TCSANOW)

    def stop(self) -> None:
        """Restore terminal settings."""
        if self.old_settings:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            self.old_settings = None

    @contextmanager
    def raw_mode(self) -> Iterator[RawInputReader]:
        """Keep the terminal in unbuffered, no-echo mode for the block."""
        self.start()
        try:
            yield self
        finally:
            self.stop()

    def read_key(self) -> InputEvent:
        """Block until one key is available and decode it."""
        data = self._read_byte()
        if not data:
            return InputEvent(key="EOF")
        if data in (b"\r", b"\n"):
            return InputEvent(key="Enter", raw=data)
        if data == ESC:
            return self._read_escape_sequence()

        code = data[0]
        ch = chr(code)
        if code < 0x80 and ch.isalnum():
            return InputEvent(key=ch, char=ch, raw=data)
        if code < 0x80 and ch.isprintable():
            return InputEvent(key=None, char=ch, raw=data)
        return InputEvent(key=None, raw=data)

    def _read_escape_sequence(self) -> InputEvent:
        """Collect up to two bytes after ESC, each within the escape timeout."""
        rest = bytearray()
        while len(rest) < 2 and self._has_input(self.escape_timeout):
            b = self._read_byte()
            if not b:
                break
            rest.extend(b)

        raw = ESC + bytes(rest)
        key = self.SEQUENCES.get(bytes(rest))
        if key is not None:
            return InputEvent(key=key, raw=raw)
        if rest and os.environ.get("GRID_MENU_DEBUG_KEYS") == "1":
            sys.stderr.write(f"[debug] unknown escape seq: {raw!r}\n")
            sys.stderr.flush()
        # Lone Escape or a sequence the menu does not use
        return InputEvent(key="Escape", raw=raw)

    def _read_byte(self) -> bytes:
        """Read one byte; an empty result means EOF or a read error."""
        try:
            return os.read(self.fd, 1)
        except OSError:
            return b""

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select([self.fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            return False


def is_interactive(fd: int) -> bool:
    """True if ``fd`` refers to a terminal."""
    try:
        return os.isatty(fd)
    except OSError:
        return False
