"""Command-line front door for schemepicker.

With a scheme name, switches Alacritty to it and exits. Without one, opens
the interactive picker. Settings supply defaults that flags override.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import settings
from .alacritty import ConfigError
from .app import list_schemes, run_picker, set_scheme
from .errors import ListError
from .log import configure_logging


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schemepicker",
        description="Pick an Alacritty colour scheme from alacritty_color_schemes.yml.",
    )
    parser.add_argument("scheme", nargs="?", default=None, help="Switch to SCHEME and exit.")
    parser.add_argument(
        "--height",
        type=_positive_int,
        default=None,
        help=f"Visible rows in the picker (default: {settings.DEFAULT_HEIGHT}).",
    )
    parser.add_argument("--list", action="store_true", help="Print available schemes and exit.")
    parser.add_argument("--config", type=Path, default=None, help="Path to alacritty.yml.")
    parser.add_argument("--schemes", type=Path, default=None, help="Path to alacritty_color_schemes.yml.")
    parser.add_argument("--clear", action="store_true", help="Clear the screen before drawing the picker.")
    parser.add_argument("--log-file", type=Path, default=None, help="Append log records to this file.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and dispatch to list, switch, or picker mode."""
    args = build_parser().parse_args(argv)

    config_path = args.config or settings.load_alacritty_config_path()
    schemes_path = args.schemes or settings.load_color_schemes_path()

    try:
        configure_logging(args.log_file or settings.load_log_file())
        if args.list:
            for name in list_schemes(config_path, schemes_path):
                sys.stdout.write(f"{name}\n")
            return
        if args.scheme is not None:
            set_scheme(args.scheme, config_path, schemes_path)
            return
        height = args.height if args.height is not None else settings.load_height()
        run_picker(height, config_path, schemes_path, clear_screen=args.clear)
    except (ConfigError, ListError, OSError) as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
