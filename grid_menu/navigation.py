"""Cursor state machine for the grid menu.

State Diagram:
    RUNNING ──(Up/Down/Left/Right/other)──► RUNNING
       │
       ├──(Enter)──────► CONFIRMED
       └──(q/Q/EOF)────► CANCELLED

Left and Right wrap with a plain modulo/clamp over the column-major index
space. In a ragged grid (last column partly filled) that can land on a
different row than the one the cursor left from:

    14 options, 4 rows: Right from 10 (col 2, row 2) -> 14 is past the end
    -> 14 % 4 = 2, col 0 row 2. Left from 2 -> -2 -> -2 + 16 = 14 -> clamped
    to 13, col 3 row 1.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .base import InputEvent
from .layout import GridLayout


class MenuState(Enum):
    RUNNING = auto()
    CONFIRMED = auto()
    CANCELLED = auto()


class Action(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    CONFIRM = auto()
    CANCEL = auto()
    NONE = auto()


KEY_ACTIONS: dict[str, Action] = {
    "Up": Action.UP,
    "k": Action.UP,
    "K": Action.UP,
    "Down": Action.DOWN,
    "j": Action.DOWN,
    "J": Action.DOWN,
    "Right": Action.RIGHT,
    "l": Action.RIGHT,
    "L": Action.RIGHT,
    "Left": Action.LEFT,
    "h": Action.LEFT,
    "H": Action.LEFT,
    "Enter": Action.CONFIRM,
    "q": Action.CANCEL,
    "Q": Action.CANCEL,
    # Closed input can never confirm, so treat it as a cancel
    "EOF": Action.CANCEL,
}


def action_for(event: InputEvent) -> Action:
    """Map a decoded key to a menu action."""
    if event.key is None:
        return Action.NONE
    return KEY_ACTIONS.get(event.key, Action.NONE)


@dataclass
class Navigator:
    """Cursor over ``layout.count`` options laid out column-major."""

    layout: GridLayout
    cursor: int = 0
    state: MenuState = MenuState.RUNNING

    @property
    def count(self) -> int:
        return self.layout.count

    def up(self) -> None:
        self.cursor -= 1
        if self.cursor < 0:
            self.cursor = self.count - 1

    def down(self) -> None:
        self.cursor += 1
        if self.cursor >= self.count:
            self.cursor = 0

    def right(self) -> None:
        max_rows = self.layout.max_rows
        self.cursor += max_rows
        if self.cursor >= self.count:
            self.cursor %= max_rows

    def left(self) -> None:
        max_rows = self.layout.max_rows
        self.cursor -= max_rows
        if self.cursor < 0:
            self.cursor += max_rows * self.layout.cols
        if self.cursor >= self.count:
            self.cursor = self.count - 1

    def apply(self, action: Action) -> MenuState:
        """Apply one action and return the resulting state."""
        if self.state is not MenuState.RUNNING:
            return self.state

        if action is Action.UP:
            self.up()
        elif action is Action.DOWN:
            self.down()
        elif action is Action.RIGHT:
            self.right()
        elif action is Action.LEFT:
            self.left()
        elif action is Action.CONFIRM:
            self.state = MenuState.CONFIRMED
        elif action is Action.CANCEL:
            self.state = MenuState.CANCELLED
        return self.state

    def handle_input(self, event: InputEvent) -> MenuState:
        return self.apply(action_for(event))
