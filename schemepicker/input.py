"""Low-level terminal input decoding.

Reads one chunk of up to three raw bytes from stdin and maps it to a single
list event. Unknown keys, malformed escape sequences, and failed reads all
degrade to ``InputEvent.IGNORE``.
"""

from __future__ import annotations

import enum
import logging
import os

logger = logging.getLogger(__name__)

READ_CHUNK_BYTES = 3

ENTER = 10
ESC = 27
ARROW_UP = 65
ARROW_DOWN = 66
KEY_J = 106
KEY_K = 107


class InputEvent(enum.Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    CONFIRM = "confirm"
    IGNORE = "ignore"


def read_input(fd: int, max_bytes: int = READ_CHUNK_BYTES) -> bytes:
    """Block until at least one byte is available and return up to ``max_bytes``.

    Read errors are logged and reported as an empty chunk.
    """
    try:
        return os.read(fd, max_bytes)
    except OSError as exc:
        logger.debug("input read failed: %s", exc)
        return b""


def decode_input(chunk: bytes) -> InputEvent:
    """Translate one raw input chunk into a list event.

    Only the first byte and, for ``ESC [ X`` arrow sequences, the third byte
    are inspected. The second byte of an escape sequence is not validated.
    """
    if not chunk:
        return InputEvent.IGNORE

    first = chunk[0]
    if first == ENTER:
        return InputEvent.CONFIRM
    if first == ESC:
        if len(chunk) < 3:
            return InputEvent.IGNORE
        if chunk[2] == ARROW_UP:
            return InputEvent.MOVE_UP
        if chunk[2] == ARROW_DOWN:
            return InputEvent.MOVE_DOWN
        return InputEvent.IGNORE
    if first == KEY_J:
        return InputEvent.MOVE_DOWN
    if first == KEY_K:
        return InputEvent.MOVE_UP
    return InputEvent.IGNORE
