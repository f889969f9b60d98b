"""Visible-window bookkeeping for the scrollable list.

A ``Frame`` is the half-open range of item indexes currently on screen.
It follows the selection: one-line shifts when moving past the bottom edge,
and a head jump when the selection moves above the top edge.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Frame:
    """Half-open ``[start, end)`` window of ``height`` rows over ``total`` items."""

    start: int
    end: int
    total: int
    height: int

    @classmethod
    def initial(cls, total: int, height: int, selected: int) -> Frame:
        """Build the first window so that ``selected`` is visible."""
        if height == total:
            return cls(0, total, total, height)
        if selected + height > total - 1:
            return cls(total - height, total, total, height)
        return cls(selected, selected + height, total, height)

    def __len__(self) -> int:
        return self.end - self.start

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.start <= index < self.end

    def indexes(self) -> range:
        return range(self.start, self.end)

    def recompute(self, selected: int) -> None:
        """Move the window so it contains ``selected`` again."""
        if self.height == self.total:
            self.start, self.end = 0, self.total
            return

        if self.start <= selected <= self.end - 1:
            return

        if selected > self.end - 1:
            self.start += 1
            self.end += 1
            return

        # Scrolled above the top edge; the near-end clamp is two rows short.
        if selected + self.height - 1 < self.total - 1:
            head = selected
        else:
            head = self.total - self.height - 2
        tail = head + self.height - 1
        self.start, self.end = head, tail + 1
