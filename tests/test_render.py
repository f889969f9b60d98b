"""Tests for list row formatting and the in-place paint protocol."""

from __future__ import annotations

import unittest

from fake_terminal import FakeTerminal
from schemepicker import render
from schemepicker.ansi import DEFAULT_THEME as THEME
from schemepicker.frame import Frame

ITEMS = ["a", "bb", "ccc", "dddd", "e"]
ARROW_OFFSET = 4


def _lines(selected: int, start: int, end: int, items: list[str] = ITEMS, height: int = 3) -> list[str]:
    frame = Frame(start=start, end=end, total=len(items), height=height)
    offset = max(len(item) for item in items)
    return render.format_visible_lines(items, selected, frame, offset, THEME)


class FormatVisibleLinesTests(unittest.TestCase):
    def test_selected_top_of_list_gets_blank_marker_and_down_arrow_below(self) -> None:
        lines = _lines(selected=0, start=0, end=3)

        self.assertEqual(
            lines,
            [
                THEME.highlighted("a    ") + " ",
                "bb",
                "ccc  " + THEME.down_arrow,
            ],
        )

    def test_middle_selection_is_highlighted_without_padding(self) -> None:
        lines = _lines(selected=1, start=0, end=3)
        self.assertEqual(lines[1], THEME.highlighted("bb"))

    def test_selected_bottom_row_with_more_below_keeps_down_arrow(self) -> None:
        lines = _lines(selected=3, start=1, end=4)

        self.assertEqual(
            lines,
            [
                "bb   " + THEME.up_arrow,
                "ccc",
                THEME.highlighted("dddd ") + THEME.down_arrow,
            ],
        )

    def test_selected_last_item_gets_blank_marker(self) -> None:
        lines = _lines(selected=4, start=2, end=5)

        self.assertEqual(
            lines,
            [
                "ccc  " + THEME.up_arrow,
                "dddd",
                THEME.highlighted("e    ") + " ",
            ],
        )

    def test_selected_top_row_with_more_above_keeps_up_arrow(self) -> None:
        lines = _lines(selected=1, start=1, end=4)
        self.assertEqual(lines[0], THEME.highlighted("bb   ") + THEME.up_arrow)

    def test_full_list_window_pads_edges_without_indicators(self) -> None:
        lines = _lines(selected=2, start=0, end=5, height=5)

        self.assertEqual(lines[0], "a     ")
        self.assertEqual(lines[2], THEME.highlighted("ccc"))
        self.assertEqual(lines[4], "e     ")

    def test_single_row_window_uses_bottom_row_formatting(self) -> None:
        lines = _lines(selected=0, start=0, end=1, items=["a", "b"], height=1)
        self.assertEqual(lines, [THEME.highlighted("a ") + THEME.down_arrow])

    def test_indicators_align_in_one_column(self) -> None:
        lines = _lines(selected=2, start=1, end=4)
        self.assertTrue(lines[0].startswith("bb   "))
        self.assertTrue(lines[2].startswith("dddd "))


class PaintProtocolTests(unittest.TestCase):
    def test_reserve_rows_prints_blank_lines_and_moves_back_up(self) -> None:
        terminal = FakeTerminal()
        render.reserve_rows(terminal, 3)
        self.assertEqual(bytes(terminal.output), b"\n\n\n" + b"\x1b[1A" * 3)

    def test_paint_clears_each_row_between_save_and_restore(self) -> None:
        terminal = FakeTerminal()
        render.paint(terminal, ["one", "two"])

        self.assertEqual(
            bytes(terminal.output),
            b"\x1b[s" + b"\x1b[2Kone\n" + b"\x1b[2Ktwo\n" + b"\x1b[u",
        )

    def test_paint_encodes_indicator_glyphs_as_utf8(self) -> None:
        terminal = FakeTerminal()
        render.paint(terminal, [THEME.up_arrow])
        self.assertIn("▲".encode("utf-8"), bytes(terminal.output))


if __name__ == "__main__":
    unittest.main()
