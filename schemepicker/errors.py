"""Errors raised by the scrollable list and its confirm callbacks."""

from __future__ import annotations


class ListError(Exception):
    """Base class for scrollable-list failures."""

    message = "Scrollable list error."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class InvalidHeight(ListError):
    message = (
        "Height can't be less than 1, greater than length of items, "
        "nor greater than the window height."
    )


class EmptyItems(ListError):
    message = "Items can't be empty."


class SelectedOutsideRange(ListError):
    message = "Selected index is outside the index range of items."


class CmdError(ListError):
    """Raised by confirm callbacks when acting on the selection fails."""

    message = "There was an error executing command on selection."
