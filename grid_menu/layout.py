"""Grid geometry for the menu.

Options fill the grid column-major: down the first column, then the next.
With ``max_rows=4`` and six options the grid is::

    0  4
    1  5
    2
    3
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .terminal import ANSI

DEFAULT_MAX_ROWS = 4

# " > " before the option and " " after it
CELL_PADDING = 4


@dataclass(frozen=True)
class GridLayout:
    """Derived, read-only geometry for one menu invocation."""

    count: int
    max_rows: int
    rows: int
    cols: int
    content_width: int

    @property
    def cell_width(self) -> int:
        return self.content_width + CELL_PADDING

    @property
    def inner_width(self) -> int:
        return self.cols * self.cell_width

    @property
    def lines_per_frame(self) -> int:
        """Top border, one line per row, bottom border."""
        return self.rows + 2

    def index_at(self, col: int, row: int) -> int:
        """List index shown at grid position (col, row)."""
        return col * self.max_rows + row


def compute_layout(
    options: Sequence[str], max_rows: int = DEFAULT_MAX_ROWS
) -> GridLayout:
    """Compute the grid for ``options``.

    Widths are measured in terminal display columns, so wide and combining
    characters pad correctly.

    Raises:
        ValueError: If ``options`` is empty or ``max_rows`` is below 1.
    """
    if max_rows < 1:
        raise ValueError(f"max_rows must be at least 1, got {max_rows}")
    count = len(options)
    if count == 0:
        raise ValueError("cannot lay out an empty option list")

    return GridLayout(
        count=count,
        max_rows=max_rows,
        rows=min(count, max_rows),
        cols=(count + max_rows - 1) // max_rows,
        content_width=max(ANSI.visual_len(ANSI.printable(opt)) for opt in options),
    )
