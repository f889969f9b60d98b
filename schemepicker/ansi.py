"""ANSI escape vocabulary and list styling.

Holds the CSI codes used to hide the cursor, anchor repaints, and clear rows.
The palette for the selected line and scroll indicators lives in ``ListTheme``.
"""

from __future__ import annotations

from dataclasses import dataclass

CSI = "\x1b["

CURSOR_INVISIBLE = "?25l"
CURSOR_VISIBLE = "?25h"
CURSOR_SAVE_POSITION = "s"
CURSOR_RESTORE_POSITION = "u"
CURSOR_HOME = "H"
CURSOR_UP = "1A"
LINE_CLEAR = "2K"
SCREEN_CLEAR = "2J"


def csi(code: str) -> str:
    """Return the full control sequence for one CSI ``code``."""
    return f"{CSI}{code}"


def rgb_foreground(red: int, green: int, blue: int) -> str:
    """Return a 24-bit foreground color sequence."""
    return f"{CSI}38;2;{red};{green};{blue}m"


@dataclass(frozen=True)
class ListTheme:
    """Styling applied to the selected row and the scroll indicators."""

    highlight: str
    reset: str
    up_arrow: str
    down_arrow: str

    def highlighted(self, text: str) -> str:
        return f"{self.highlight}{text}{self.reset}"


INDICATOR_COLOR = rgb_foreground(226, 44, 44)
RESET = "\x1b[0m"

DEFAULT_THEME = ListTheme(
    highlight="\x1b[36m",
    reset=RESET,
    up_arrow=f"{INDICATOR_COLOR}▲{RESET}",
    down_arrow=f"{INDICATOR_COLOR}▼{RESET}",
)
