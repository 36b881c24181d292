"""Interactive grid selection menu.

Usage:
    from grid_menu import select_option

    timezone, ok = select_option("Select timezone:", ["Europe/Madrid", "UTC"])
    if ok:
        ...

Keys:
    Up/Down/Left/Right or k/j/h/l   move the highlight
    Enter                           select the highlighted option
    q / Q                           cancel
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, TextIO

from .layout import DEFAULT_MAX_ROWS, GridLayout, compute_layout
from .navigation import MenuState, Navigator
from .rendering import FrameRenderer
from .terminal import ANSI, ESCAPE_TIMEOUT, RawInputReader, is_interactive


class MenuOutcome(Enum):
    """How a menu invocation ended."""

    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    EMPTY = "empty"
    NO_INPUT = "no_input"
    NOT_A_TTY = "not_a_tty"
    INTERRUPTED = "interrupted"


@dataclass(frozen=True)
class MenuResult:
    """Result of one menu invocation.

    ``selected`` is the chosen option, unmodified, when ``ok`` is True and
    an empty string otherwise.
    """

    outcome: MenuOutcome
    selected: str = ""
    index: int | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is MenuOutcome.CONFIRMED

    def as_tuple(self) -> tuple[str, bool]:
        return self.selected, self.ok


class GridMenu:
    """Multi-column bordered selection menu driven by the keyboard.

    All state (cursor, first-frame flag) lives on the instance and is
    discarded with it. ``run()`` blocks until the user confirms or cancels
    and never raises for user-driven outcomes.

    Args:
        prompt: Text printed once above the grid.
        options: Option strings; their order defines grid placement.
        max_rows: Maximum rows per column.
        input_fd: File descriptor to read keys from. Defaults to stdin, in
            which case a non-terminal stdin ends the menu with NOT_A_TTY.
            A terminal fd is put in raw mode for the run; a pipe is read
            as is.
        output: Stream the frames are written to. Defaults to stdout.
        escape_timeout: Seconds to wait for each byte after ESC.
    """

    def __init__(
        self,
        prompt: str,
        options: Sequence[str],
        max_rows: int = DEFAULT_MAX_ROWS,
        *,
        input_fd: int | None = None,
        output: TextIO | None = None,
        escape_timeout: float = ESCAPE_TIMEOUT,
    ) -> None:
        if max_rows < 1:
            raise ValueError(f"max_rows must be at least 1, got {max_rows}")
        self.prompt = prompt
        self.options = tuple(options)
        self.max_rows = max_rows
        self.input_fd = input_fd
        self.output = output if output is not None else sys.stdout
        self.escape_timeout = escape_timeout
        self.layout: GridLayout | None = None

    def run(self) -> MenuResult:
        if not self.options:
            return MenuResult(MenuOutcome.EMPTY)

        if self.input_fd is None:
            try:
                fd = sys.stdin.fileno()
            except (AttributeError, ValueError, OSError):
                return MenuResult(MenuOutcome.NOT_A_TTY)
            if not is_interactive(fd):
                return MenuResult(MenuOutcome.NOT_A_TTY)
        else:
            fd = self.input_fd

        reader = RawInputReader(fd, self.escape_timeout)
        try:
            if is_interactive(fd):
                with reader.raw_mode():
                    return self._loop(reader)
            # A caller-supplied pipe has no terminal settings to change
            return self._loop(reader)
        except KeyboardInterrupt:
            return MenuResult(MenuOutcome.INTERRUPTED)

    def _loop(self, reader: RawInputReader) -> MenuResult:
        self.layout = compute_layout(self.options, self.max_rows)
        navigator = Navigator(self.layout)
        renderer = FrameRenderer(self.layout, self.options, self.prompt, self.output)

        self._write(ANSI.HIDE_CURSOR)
        try:
            while True:
                renderer.draw(navigator.cursor)
                event = reader.read_key()
                state = navigator.handle_input(event)
                if state is MenuState.CONFIRMED:
                    index = navigator.cursor
                    return MenuResult(
                        MenuOutcome.CONFIRMED, self.options[index], index
                    )
                if state is MenuState.CANCELLED:
                    if event.key == "EOF":
                        return MenuResult(MenuOutcome.NO_INPUT)
                    return MenuResult(MenuOutcome.CANCELLED)
        finally:
            self._write(ANSI.SHOW_CURSOR)

    def _write(self, s: str) -> None:
        self.output.write(s)
        self.output.flush()


def select_option(
    prompt: str, options: Sequence[str], max_rows: int = DEFAULT_MAX_ROWS
) -> tuple[str, bool]:
    """Show the menu on the current terminal and return ``(selected, ok)``.

    ``ok`` is False for an empty option list, a cancel (q/Q), closed input,
    Ctrl+C or a non-terminal stdin; ``selected`` is then an empty string.
    """
    return GridMenu(prompt, options, max_rows).run().as_tuple()
