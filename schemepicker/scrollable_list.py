"""Interactive single-column list selector.

``ScrollableList`` owns the selection index and the visible ``Frame`` and runs
a blocking read/decode/apply/render cycle until the confirm callback raises.
It never changes terminal modes itself; callers bracket ``run`` with
``TerminalController.cbreak_mode``.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from typing import NoReturn, Protocol

from . import render
from .ansi import DEFAULT_THEME, ListTheme
from .errors import EmptyItems, InvalidHeight, SelectedOutsideRange
from .frame import Frame
from .input import InputEvent, decode_input
from .terminal import TerminalController, terminal_rows

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[str], None]


class ListTerminal(Protocol):
    """Terminal operations the list needs from its host."""

    def rows(self) -> int: ...

    def read_input(self, max_bytes: int = 3) -> bytes: ...

    def write(self, data: bytes) -> None: ...

    def execute(self, code: str) -> None: ...


class ScrollableList:
    """Fixed-height window over ``items`` with a movable selection."""

    def __init__(
        self,
        items: Sequence[str],
        selected: int,
        height: int,
        terminal: ListTerminal | None = None,
        theme: ListTheme = DEFAULT_THEME,
    ) -> None:
        """Validate arguments and build the initial window.

        ``height`` is first clamped to the terminal row count. Validation then
        runs in a fixed order: height bounds, empty items, selected index.
        Nothing is assigned until every check has passed.
        """
        rows = terminal_rows() if terminal is None else terminal.rows()

        height = min(height, rows)
        # No height fits an empty list; report that as EmptyItems instead.
        if items and not 1 <= height <= len(items):
            raise InvalidHeight()
        if len(items) == 0:
            raise EmptyItems()
        if selected >= len(items) or selected < 0:
            raise SelectedOutsideRange()

        if terminal is None:
            terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
        self.terminal = terminal
        self.theme = theme
        self.items = list(items)
        self.height = height
        self.selected = selected
        self.arrow_offset = max(len(item) for item in self.items)
        self.frame = Frame.initial(len(self.items), height, selected)
        self.frame.recompute(selected)

    @property
    def selected_item(self) -> str:
        return self.items[self.selected]

    def move_down(self) -> None:
        if self.selected + 1 >= len(self.items):
            return
        self.selected += 1
        self.frame.recompute(self.selected)

    def move_up(self) -> None:
        if self.selected == 0:
            return
        self.selected -= 1
        self.frame.recompute(self.selected)

    def confirm(self, callback: ConfirmCallback) -> None:
        """Call ``callback`` with the selected item; its exceptions propagate."""
        logger.debug("confirmed %r", self.selected_item)
        callback(self.selected_item)

    def handle_event(self, event: InputEvent, callback: ConfirmCallback) -> None:
        if event is InputEvent.CONFIRM:
            self.confirm(callback)
        elif event is InputEvent.MOVE_UP:
            self.move_up()
        elif event is InputEvent.MOVE_DOWN:
            self.move_down()

    def visible_lines(self) -> list[str]:
        return render.format_visible_lines(
            self.items,
            self.selected,
            self.frame,
            self.arrow_offset,
            self.theme,
        )

    def render(self) -> None:
        render.paint(self.terminal, self.visible_lines())

    def run(self, callback: ConfirmCallback) -> NoReturn:
        """Run the blocking input loop.

        There is no quit key: the loop only ends when ``callback`` (or the
        terminal read) raises, or when the process is terminated.
        """
        render.reserve_rows(self.terminal, self.height)
        self.render()

        while True:
            event = decode_input(self.terminal.read_input())
            self.handle_event(event, callback)
            self.render()
