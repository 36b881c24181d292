"""Tests for frame rendering in grid_menu/rendering.py.

Covers:
- Frame height is rows + 2 for every cursor position
- Every line has the same visible width
- Highlighted, plain and blank cells
- In-place redraw protocol of FrameRenderer
"""

from __future__ import annotations

import io

import pytest
import wcwidth

from grid_menu.layout import compute_layout
from grid_menu.rendering import FrameRenderer, render_cell, render_frame
from grid_menu.terminal import ANSI

FOURTEEN = [f"Selection {c}" for c in "ABDEFGHIJKLMNO"]


class TestAnsiWidth:
    """Tests for ANSI.visual_len() and padding."""

    def test_visual_len_strips_escape_codes(self) -> None:
        assert ANSI.visual_len("\033[31mred\033[0m") == 3
        assert ANSI.visual_len("\033[7mrev\033[27m") == 3
        assert ANSI.visual_len("plain") == 5

    def test_pad_to_width_uses_display_width(self) -> None:
        """Wide characters get fewer padding spaces."""
        assert ANSI.pad_to_width("ab", 4) == "ab  "
        assert ANSI.pad_to_width("日", 4) == "日  "
        assert ANSI.pad_to_width("toolong", 3) == "toolong"

    def test_visual_len_measures_zwj_sequence_as_one_glyph(self) -> None:
        """A ZWJ family emoji is one double-width glyph, not three."""
        family = "\U0001f468\u200d\U0001f469\u200d\U0001f467"
        assert ANSI.visual_len(family) == wcwidth.wcswidth(family)
        assert ANSI.visual_len(family) == 2
        assert ANSI.visual_len(f"{ANSI.REVERSE}{family}{ANSI.REVERSE_OFF}") == 2

    def test_visual_len_with_control_characters(self) -> None:
        """Control characters count as zero instead of failing the sum."""
        assert ANSI.visual_len("a\nb") == 2

    def test_printable_replaces_control_characters(self) -> None:
        assert ANSI.printable("one\ntwo") == "one\ufffdtwo"
        assert ANSI.printable("a\tb\x1bc\x7f") == "a\ufffdb\ufffdc\ufffd"
        assert ANSI.printable("Selección 日本") == "Selección 日本"


class TestRenderFrame:
    """Tests for render_frame()."""

    @pytest.mark.parametrize("count", [1, 3, 4, 5, 14, 25])
    def test_frame_height_for_every_cursor(self, count: int) -> None:
        """Every frame has exactly rows + 2 lines."""
        options = [f"opt{i}" for i in range(count)]
        layout = compute_layout(options)
        for cursor in range(count):
            assert len(render_frame(layout, options, cursor)) == layout.rows + 2

    def test_all_lines_same_visible_width(self) -> None:
        """Borders and content lines line up."""
        layout = compute_layout(FOURTEEN)
        for cursor in (0, 5, 13):
            lines = render_frame(layout, FOURTEEN, cursor)
            widths = {ANSI.visual_len(line) for line in lines}
            assert widths == {layout.inner_width + 2}

    def test_borders(self) -> None:
        """Top and bottom borders are + and dashes."""
        layout = compute_layout(["Alpha", "Beta", "Gamma"])
        lines = render_frame(layout, ["Alpha", "Beta", "Gamma"], 0)
        expected = "+" + "-" * layout.inner_width + "+"
        assert lines[0] == expected
        assert lines[-1] == expected

    def test_scenario_three_options(self) -> None:
        """Exact output for a small single-column menu."""
        options = ["Alpha", "Beta", "Gamma"]
        layout = compute_layout(options)
        lines = render_frame(layout, options, 1)
        assert lines == [
            "+---------+",
            "|   Alpha |",
            f"| > {ANSI.REVERSE}Beta {ANSI.REVERSE_OFF} |",
            "|   Gamma |",
            "+---------+",
        ]

    def test_column_major_order(self) -> None:
        """The second column starts with the option after max_rows."""
        options = ["a", "b", "c", "d", "e"]
        layout = compute_layout(options, 4)
        lines = render_frame(layout, options, 0)
        plain = [ANSI.strip_ansi(line) for line in lines]
        assert plain[1] == "| > a    e |"
        assert plain[2] == "|   b      |"

    def test_wide_options_keep_alignment(self) -> None:
        """Rows stay aligned when options contain double-width characters."""
        options = ["日本語", "abc", "Selection Ñ", "Selection Ñ"]
        layout = compute_layout(options, 2)
        lines = render_frame(layout, options, 3)
        assert len({ANSI.visual_len(line) for line in lines}) == 1

    @pytest.mark.parametrize("cursor", [0, 1, 2])
    def test_control_characters_stay_on_one_line(self, cursor: int) -> None:
        """Newlines and tabs inside options are drawn as U+FFFD."""
        options = ["one\ntwo", "a\tb", "c"]
        layout = compute_layout(options)
        lines = render_frame(layout, options, cursor)
        assert len(lines) == layout.rows + 2
        for line in lines:
            assert "\n" not in line
            assert "\t" not in line
        assert {ANSI.visual_len(line) for line in lines} == {layout.inner_width + 2}
        assert "one\ufffdtwo" in lines[1]
        assert "a\ufffdb" in lines[2]


class TestRenderCell:
    """Tests for render_cell()."""

    def test_blank_cell_past_end(self) -> None:
        """Indices past the option list render as spaces."""
        options = ["a", "b", "c", "d", "e"]
        layout = compute_layout(options)
        assert render_cell(layout, options, 7, 0) == " " * layout.cell_width

    def test_highlighted_cell(self) -> None:
        """The cursor cell has the marker and reverse video."""
        layout = compute_layout(["abc", "de"])
        cell = render_cell(layout, ["abc", "de"], 1, 1)
        assert cell == f" > {ANSI.REVERSE}de {ANSI.REVERSE_OFF} "
        assert ANSI.visual_len(cell) == layout.cell_width

    def test_plain_cell(self) -> None:
        layout = compute_layout(["abc", "de"])
        cell = render_cell(layout, ["abc", "de"], 1, 0)
        assert cell == "   de  "
        assert len(cell) == layout.cell_width

    def test_option_text_not_modified(self) -> None:
        """Leading and trailing spaces inside options are kept."""
        options = [" padded ", "x"]
        layout = compute_layout(options)
        cell = render_cell(layout, options, 0, 1)
        assert cell == "    padded  "


class TestFrameRenderer:
    """Tests for FrameRenderer.draw() redraw protocol."""

    def test_first_draw_prints_prompt(self) -> None:
        """First frame: blank line, prompt, frame; no cursor movement."""
        options = ["Alpha", "Beta", "Gamma"]
        out = io.StringIO()
        renderer = FrameRenderer(compute_layout(options), options, "Pick one:", out)
        renderer.draw(0)
        text = out.getvalue()
        assert text.startswith("\nPick one:\n+")
        assert "\033[" not in text.split(ANSI.REVERSE)[0]
        assert not renderer.is_first_frame

    def test_later_draws_move_cursor_up(self) -> None:
        """Later frames start by moving up exactly lines_per_frame lines."""
        options = ["Alpha", "Beta", "Gamma"]
        layout = compute_layout(options)
        out = io.StringIO()
        renderer = FrameRenderer(layout, options, "Pick one:", out)
        renderer.draw(0)
        out.seek(0)
        out.truncate()

        renderer.draw(1)
        text = out.getvalue()
        assert text.startswith(f"\033[{layout.lines_per_frame}A")
        assert "Pick one:" not in text

    @pytest.mark.parametrize("frames", [2, 5])
    def test_every_redraw_writes_rows_plus_two_lines(self, frames: int) -> None:
        """Each redraw writes the same number of lines the cursor moves up."""
        layout = compute_layout(FOURTEEN)
        out = io.StringIO()
        renderer = FrameRenderer(layout, FOURTEEN, "Choose:", out)
        renderer.draw(0)
        for cursor in range(1, frames + 1):
            out.seek(0)
            out.truncate()
            renderer.draw(cursor)
            assert out.getvalue().count("\n") == layout.rows + 2

    def test_multiline_option_keeps_frame_height(self) -> None:
        """An option with a newline still gives a rows + 2 line frame."""
        options = ["one\ntwo", "b"]
        layout = compute_layout(options)
        out = io.StringIO()
        renderer = FrameRenderer(layout, options, "Choose:", out)
        renderer.draw(0)
        out.seek(0)
        out.truncate()
        renderer.draw(1)
        assert out.getvalue().count("\n") == layout.rows + 2 == 4
