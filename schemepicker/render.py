"""In-place painting of the scrollable list window.

Formats each visible row (selection highlight, scroll indicators aligned in
one column) and repaints the block between a saved and restored cursor
position so successive frames overwrite each other without scrolling.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from . import ansi
from .ansi import ListTheme
from .frame import Frame


class TerminalWriter(Protocol):
    def write(self, data: bytes) -> None: ...

    def execute(self, code: str) -> None: ...


def _pad(item: str, arrow_offset: int) -> str:
    return " " * (arrow_offset - len(item) + 1)


def format_first_line(
    items: Sequence[str],
    selected: int,
    frame: Frame,
    arrow_offset: int,
    theme: ListTheme,
) -> str:
    """Format the top visible row with an up indicator when rows lie above."""
    first = items[frame.start]
    padded = first + _pad(first, arrow_offset)
    if selected == frame.start:
        marker = " " if selected == 0 else theme.up_arrow
        return theme.highlighted(padded) + marker
    if frame.start > 0:
        return padded + theme.up_arrow
    return padded + " "


def format_last_line(
    items: Sequence[str],
    selected: int,
    frame: Frame,
    arrow_offset: int,
    theme: ListTheme,
) -> str:
    """Format the bottom visible row with a down indicator when rows lie below."""
    last = items[frame.end - 1]
    padded = last + _pad(last, arrow_offset)
    if selected + 1 == frame.end:
        marker = theme.down_arrow if selected + 1 < len(items) else " "
        return theme.highlighted(padded) + marker
    if frame.end < len(items):
        return padded + theme.down_arrow
    return padded + " "


def format_visible_lines(
    items: Sequence[str],
    selected: int,
    frame: Frame,
    arrow_offset: int,
    theme: ListTheme = ansi.DEFAULT_THEME,
) -> list[str]:
    """Return the styled text for every row in ``frame``.

    Edge formatting wins over plain selection highlighting, and the bottom row
    wins over the top row when the window is a single row tall.
    """
    lines = {index: items[index] for index in frame.indexes()}
    lines[selected] = theme.highlighted(items[selected])
    lines[frame.start] = format_first_line(items, selected, frame, arrow_offset, theme)
    lines[frame.end - 1] = format_last_line(items, selected, frame, arrow_offset, theme)
    return [lines[index] for index in frame.indexes()]


def reserve_rows(terminal: TerminalWriter, height: int) -> None:
    """Scroll ``height`` blank rows into view and move back to their top."""
    terminal.write(b"\n" * height)
    for _ in range(height):
        terminal.execute(ansi.CURSOR_UP)


def paint(terminal: TerminalWriter, lines: Sequence[str]) -> None:
    """Overwrite the reserved block with ``lines`` and return the cursor to its top."""
    terminal.execute(ansi.CURSOR_SAVE_POSITION)
    for line in lines:
        terminal.execute(ansi.LINE_CLEAR)
        terminal.write(f"{line}\n".encode("utf-8"))
    terminal.execute(ansi.CURSOR_RESTORE_POSITION)
