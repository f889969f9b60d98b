"""Wiring between the Alacritty config files and the interactive list.

Builds the scheme list, starts on the active scheme, and installs the signal
handlers that own terminal cleanup on interrupt. Confirming an entry rewrites
``alacritty.yml`` immediately; the picker stays open for further choices.
"""

from __future__ import annotations

import logging
import os
import signal
import sys
from collections.abc import Callable
from pathlib import Path
from typing import NoReturn

from . import ansi
from .alacritty import (
    AlacrittyConfig,
    ColorSchemes,
    ConfigError,
    CurrentSchemeError,
    load_alacritty_configs,
)
from .errors import CmdError
from .scrollable_list import ScrollableList
from .terminal import TerminalController

logger = logging.getLogger(__name__)

INTERRUPT_EXIT_STATUS = 1
NOT_A_TERMINAL_MESSAGE = "schemepicker needs an interactive terminal; pass a SCHEME or --list instead."


def initial_selection(config: AlacrittyConfig, names: list[str]) -> int:
    """Return the index of the active scheme, or 0 when it cannot be found."""
    try:
        current = config.current_scheme_name()
    except CurrentSchemeError:
        logger.info("no active scheme found in %s", config.path)
        return 0
    try:
        return names.index(current)
    except ValueError:
        return 0


def make_apply_callback(config: AlacrittyConfig, schemes: ColorSchemes) -> Callable[[str], None]:
    """Return a confirm callback that writes the chosen scheme into ``config``."""

    def apply(name: str) -> None:
        try:
            config.set_scheme(schemes.get_scheme(name))
            config.apply_scheme()
        except (ConfigError, OSError) as exc:
            logger.error("applying scheme %r failed: %s", name, exc)
            raise CmdError() from exc
        logger.info("applied scheme %r", name)

    return apply


def install_signal_handlers(terminal: TerminalController) -> None:
    """Show the cursor and exit on SIGINT; acknowledge SIGWINCH without re-layout."""

    def on_interrupt(signum, frame) -> None:
        terminal.execute(ansi.CURSOR_VISIBLE)
        sys.exit(INTERRUPT_EXIT_STATUS)

    def on_resize(signum, frame) -> None:
        logger.debug("terminal resized; list height is fixed for the session")

    signal.signal(signal.SIGINT, on_interrupt)
    signal.signal(signal.SIGWINCH, on_resize)


def set_scheme(
    name: str,
    config_path: Path | None = None,
    schemes_path: Path | None = None,
) -> None:
    """Switch to ``name`` without starting the interactive list."""
    config, schemes = load_alacritty_configs(config_path, schemes_path)
    config.set_scheme(schemes.get_scheme(name))
    config.apply_scheme()
    logger.info("applied scheme %r", name)


def list_schemes(
    config_path: Path | None = None,
    schemes_path: Path | None = None,
) -> list[str]:
    _config, schemes = load_alacritty_configs(config_path, schemes_path)
    return schemes.available_schemes()


def run_picker(
    height: int,
    config_path: Path | None = None,
    schemes_path: Path | None = None,
    clear_screen: bool = False,
    terminal: TerminalController | None = None,
) -> NoReturn:
    """Open the scheme picker on the controlling terminal.

    Returns only by raising: ``CmdError`` when a scheme cannot be applied, or
    ``SystemExit`` when stdin is not a terminal or from the interrupt handler.
    """
    config, schemes = load_alacritty_configs(config_path, schemes_path)
    names = schemes.available_schemes()
    if terminal is None:
        if not os.isatty(sys.stdin.fileno()):
            raise SystemExit(NOT_A_TERMINAL_MESSAGE)
        terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
    picker = ScrollableList(names, initial_selection(config, names), height, terminal)
    logger.info("picker started with %d schemes, height %d", len(names), picker.height)

    install_signal_handlers(terminal)
    with terminal.cbreak_mode():
        if clear_screen:
            terminal.clear_screen()
        picker.run(make_apply_callback(config, schemes))
