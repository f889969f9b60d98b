"""Tests for picker wiring: starting index, apply callback, signals."""

from __future__ import annotations

import shutil
import signal
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from fake_terminal import FakeTerminal, InputExhausted
from schemepicker import app
from schemepicker.alacritty import AlacrittyConfig, ColorSchemes
from schemepicker.errors import CmdError

ASSETS = Path(__file__).resolve().parent / "assets"
SAMPLE_CONFIG = ASSETS / "sample_alacritty.yml"
SAMPLE_SCHEMES = ASSETS / "sample_alacritty_color_schemes.yml"


class InitialSelectionTests(unittest.TestCase):
    def test_starts_on_active_scheme(self) -> None:
        config = AlacrittyConfig(Path("a.yml"), "scheme: &srcery\n  x: 1\n")
        self.assertEqual(app.initial_selection(config, ["gruvbox", "srcery"]), 1)

    def test_falls_back_to_first_entry(self) -> None:
        unknown = AlacrittyConfig(Path("a.yml"), "scheme: &nord\n  x: 1\n")
        missing = AlacrittyConfig(Path("a.yml"), "colors: *nord\n")
        self.assertEqual(app.initial_selection(unknown, ["gruvbox", "srcery"]), 0)
        self.assertEqual(app.initial_selection(missing, ["gruvbox", "srcery"]), 0)


class ApplyCallbackTests(unittest.TestCase):
    def test_callback_writes_selected_scheme(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "alacritty.yml"
            shutil.copyfile(SAMPLE_CONFIG, target)
            apply = app.make_apply_callback(AlacrittyConfig.load(target), ColorSchemes.load(SAMPLE_SCHEMES))

            apply("srcery")

            self.assertIn("colors: *srcery", target.read_text(encoding="utf-8"))

    def test_write_failure_is_reported_as_cmd_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config = AlacrittyConfig(Path(tmp), SAMPLE_CONFIG.read_text(encoding="utf-8"))
            apply = app.make_apply_callback(config, ColorSchemes.load(SAMPLE_SCHEMES))

            with self.assertRaises(CmdError) as ctx:
                apply("srcery")

        self.assertIsInstance(ctx.exception.__cause__, OSError)

    def test_unknown_scheme_is_reported_as_cmd_error(self) -> None:
        apply = app.make_apply_callback(
            AlacrittyConfig.load(SAMPLE_CONFIG),
            ColorSchemes(SAMPLE_SCHEMES, "schemes:\n  &orphan\n"),
        )
        with self.assertRaises(CmdError):
            apply("orphan")


class SignalHandlerTests(unittest.TestCase):
    def _installed_handlers(self, terminal) -> dict[int, object]:
        with mock.patch("schemepicker.app.signal.signal") as signal_mock:
            app.install_signal_handlers(terminal)
        return {call.args[0]: call.args[1] for call in signal_mock.call_args_list}

    def test_interrupt_shows_cursor_and_exits(self) -> None:
        terminal = FakeTerminal()
        handlers = self._installed_handlers(terminal)

        with self.assertRaises(SystemExit) as ctx:
            handlers[signal.SIGINT](signal.SIGINT, None)

        self.assertEqual(ctx.exception.code, 1)
        self.assertEqual(bytes(terminal.output), b"\x1b[?25h")

    def test_resize_is_acknowledged_without_output(self) -> None:
        terminal = FakeTerminal()
        handlers = self._installed_handlers(terminal)

        handlers[signal.SIGWINCH](signal.SIGWINCH, None)

        self.assertEqual(bytes(terminal.output), b"")


class RunPickerTests(unittest.TestCase):
    def test_picker_applies_confirmed_scheme_inside_cbreak_mode(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "alacritty.yml"
            shutil.copyfile(SAMPLE_CONFIG, target)
            terminal = FakeTerminal([b"j", b"\n"])
            terminal.cbreak_mode = mock.MagicMock()
            terminal.clear_screen = mock.Mock()

            with mock.patch("schemepicker.app.install_signal_handlers") as install_mock:
                with self.assertRaises(InputExhausted):
                    app.run_picker(3, target, SAMPLE_SCHEMES, clear_screen=True, terminal=terminal)

            install_mock.assert_called_once_with(terminal)
            terminal.cbreak_mode.assert_called_once_with()
            terminal.clear_screen.assert_called_once_with()
            self.assertIn("colors: *srcery", target.read_text(encoding="utf-8"))

    def test_set_scheme_switches_without_picker(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "alacritty.yml"
            shutil.copyfile(SAMPLE_CONFIG, target)

            app.set_scheme("solarized_dark", target, SAMPLE_SCHEMES)

            self.assertIn("colors: *solarized_dark", target.read_text(encoding="utf-8"))

    def test_list_schemes(self) -> None:
        self.assertEqual(
            app.list_schemes(SAMPLE_CONFIG, SAMPLE_SCHEMES),
            ["gruvbox", "srcery", "solarized_dark"],
        )


if __name__ == "__main__":
    unittest.main()
