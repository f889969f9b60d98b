"""Public package surface for schemepicker.

Exports ``main`` for programmatic CLI invocation and ``ScrollableList`` for
embedding the list selector in other programs.
"""

from __future__ import annotations

from .errors import CmdError, EmptyItems, InvalidHeight, ListError, SelectedOutsideRange
from .scrollable_list import ScrollableList


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = [
    "CmdError",
    "EmptyItems",
    "InvalidHeight",
    "ListError",
    "ScrollableList",
    "SelectedOutsideRange",
    "main",
]
