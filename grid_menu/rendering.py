"""Frame rendering for the grid menu.

A frame is the bordered grid for one cursor position::

    +------------------------------+
    | > Alpha        Epsilon       |
    |   Beta         Zeta          |
    |   Gamma                      |
    |   Delta                      |
    +------------------------------+

Every frame has exactly ``rows + 2`` lines, which is what lets later frames
overwrite the previous one by moving the cursor up a fixed distance.
"""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from .layout import GridLayout
from .terminal import ANSI

MARKER = " > "
BLANK_MARKER = "   "


def render_border(layout: GridLayout) -> str:
    return "+" + "-" * layout.inner_width + "+"


def render_cell(
    layout: GridLayout, options: Sequence[str], index: int, cursor: int
) -> str:
    """Render one cell; its visible width is always ``layout.cell_width``.

    Control characters in the option are drawn as U+FFFD so a newline or
    tab cannot break the frame.
    """
    if index >= layout.count:
        return " " * layout.cell_width
    text = ANSI.pad_to_width(ANSI.printable(options[index]), layout.content_width)
    if index == cursor:
        return f"{MARKER}{ANSI.reverse(text)} "
    return f"{BLANK_MARKER}{text} "


def render_frame(
    layout: GridLayout, options: Sequence[str], cursor: int
) -> list[str]:
    """Render the full bordered grid as a list of lines (no newlines)."""
    border = render_border(layout)
    lines = [border]
    for row in range(layout.rows):
        cells = [
            render_cell(layout, options, layout.index_at(col, row), cursor)
            for col in range(layout.cols)
        ]
        lines.append("|" + "".join(cells) + "|")
    lines.append(border)
    return lines


class FrameRenderer:
    """Draws frames to a stream, redrawing in place after the first one.

    The first draw prints a blank line, the prompt and the frame. Later
    draws move the cursor up ``layout.lines_per_frame`` lines first so the
    new frame covers the old one without scrolling.
    """

    def __init__(
        self,
        layout: GridLayout,
        options: Sequence[str],
        prompt: str,
        stream: TextIO | None = None,
    ) -> None:
        self.layout = layout
        self.options = options
        self.prompt = prompt
        self.stream = stream if stream is not None else sys.stdout
        self.is_first_frame = True

    def draw(self, cursor: int) -> None:
        parts: list[str] = []
        if self.is_first_frame:
            parts.append(f"\n{self.prompt}\n")
            self.is_first_frame = False
        else:
            parts.append(ANSI.cursor_up(self.layout.lines_per_frame))
            parts.append(ANSI.CARRIAGE_RETURN)
        for line in render_frame(self.layout, self.options, cursor):
            parts.append(line + "\n")
        # One write per frame keeps partial frames off the screen
        self.stream.write("".join(parts))
        self.stream.flush()
