"""CLI wiring tests for ``lazypick.cli.main``.

Covers stdin loading, option handling, output printing and exit statuses
with the terminal and session layers mocked out.
"""

from __future__ import annotations

import io
import sys
import tempfile
import termios
import unittest
from pathlib import Path
from unittest import mock

from lazypick import cli
from lazypick.session import SessionResult
from lazypick.ui_theme import OCEAN_THEME, PLAIN_THEME


def _byte_stream(data: bytes = b"") -> io.TextIOWrapper:
    return io.TextIOWrapper(io.BytesIO(data), encoding="utf-8")


class _FakeController:
    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd

    def size(self) -> tuple[int, int]:
        return (40, 10)

    def write(self, _payload: bytes) -> None:
        pass


class CliMainTests(unittest.TestCase):
    def setUp(self) -> None:
        self.stdout = _byte_stream()
        patches = [
            mock.patch.object(sys, "stdin", _byte_stream(b"a\nb\nc\n")),
            mock.patch.object(sys, "stdout", self.stdout),
            mock.patch("lazypick.cli.open_tty", return_value=42),
            mock.patch("lazypick.cli.os.close"),
            mock.patch("lazypick.cli.TerminalController", _FakeController),
            mock.patch("lazypick.cli.EventSource"),
            mock.patch("lazypick.cli.load_theme_name", return_value=None),
            mock.patch("lazypick.cli.load_default_prompt", return_value=""),
        ]
        for patcher in patches:
            patcher.start()
            self.addCleanup(patcher.stop)

    def output(self) -> bytes:
        self.stdout.flush()
        return self.stdout.buffer.getvalue()

    def test_confirmed_lines_are_printed_and_exit_is_clean(self) -> None:
        with mock.patch(
            "lazypick.cli.run_session",
            return_value=SessionResult(confirmed=True, lines=["b", "c"]),
        ) as run_session:
            cli.main([])

        self.assertEqual(self.output(), b"b\nc\n")
        state = run_session.call_args.args[0]
        self.assertEqual(len(state.choices), 3)
        self.assertEqual(state.choices.get(2), "c")
        self.assertEqual((state.geometry.width, state.geometry.height), (40, 10))
        self.assertFalse(state.geometry.has_prompt)

    def test_abort_exits_non_zero_without_output(self) -> None:
        with mock.patch("lazypick.cli.run_session", return_value=SessionResult(confirmed=False)):
            with self.assertRaises(SystemExit) as ctx:
                cli.main([])

        self.assertEqual(ctx.exception.code, 1)
        self.assertEqual(self.output(), b"")

    def test_undecodable_bytes_pass_through_unchanged(self) -> None:
        def confirm_first(state, **_kwargs):
            return SessionResult(confirmed=True, lines=[state.choices.get(0)])

        with mock.patch.object(sys, "stdin", _byte_stream(b"caf\xe9\nplain\r\n")), mock.patch(
            "lazypick.cli.run_session", side_effect=confirm_first
        ) as run_session:
            cli.main([])

        self.assertEqual(self.output(), b"caf\xe9\n")
        choices = run_session.call_args.args[0].choices
        self.assertEqual(choices.get(0), "caf\udce9")
        self.assertEqual(choices.get(1), "plain")

    def test_prompt_option_reserves_prompt_row(self) -> None:
        with mock.patch(
            "lazypick.cli.run_session",
            return_value=SessionResult(confirmed=True, lines=["a"]),
        ) as run_session:
            cli.main(["-p", "pick> "])

        state = run_session.call_args.args[0]
        self.assertEqual(state.prompt, "pick> ")
        self.assertEqual(state.geometry.top_row, 1)

    def test_config_prompt_used_when_option_absent(self) -> None:
        with mock.patch("lazypick.cli.load_default_prompt", return_value="cfg> "), mock.patch(
            "lazypick.cli.run_session",
            return_value=SessionResult(confirmed=True, lines=[]),
        ) as run_session:
            cli.main([])

        self.assertEqual(run_session.call_args.args[0].prompt, "cfg> ")

    def test_theme_from_option_and_no_color(self) -> None:
        with mock.patch(
            "lazypick.cli.run_session",
            return_value=SessionResult(confirmed=True, lines=[]),
        ) as run_session:
            cli.main(["--theme", "ocean"])
            self.assertIs(run_session.call_args.kwargs["theme"], OCEAN_THEME)
            cli.main(["--theme", "ocean", "--no-color"])
            self.assertIs(run_session.call_args.kwargs["theme"], PLAIN_THEME)

    def test_empty_stdin_runs_session_with_no_choices(self) -> None:
        with mock.patch.object(sys, "stdin", _byte_stream()), mock.patch(
            "lazypick.cli.run_session",
            return_value=SessionResult(confirmed=True, lines=[]),
        ) as run_session:
            cli.main([])

        self.assertEqual(len(run_session.call_args.args[0].choices), 0)
        self.assertEqual(self.output(), b"")

    def test_tty_descriptor_is_closed_after_session(self) -> None:
        with mock.patch(
            "lazypick.cli.run_session",
            return_value=SessionResult(confirmed=True, lines=[]),
        ), mock.patch("lazypick.cli.os.close") as close_mock:
            cli.main([])

        close_mock.assert_called_once_with(42)


class CliFatalStartupTests(unittest.TestCase):
    def setUp(self) -> None:
        patches = [
            mock.patch.object(sys, "stdin", _byte_stream(b"a\n")),
            mock.patch("lazypick.cli.load_theme_name", return_value=None),
            mock.patch("lazypick.cli.load_default_prompt", return_value=""),
        ]
        for patcher in patches:
            patcher.start()
            self.addCleanup(patcher.stop)

    def test_unopenable_log_sink_exits_before_rendering(self) -> None:
        stderr = io.StringIO()
        with tempfile.TemporaryDirectory() as tmp:
            bad_path = str(Path(tmp) / "missing" / "pick.log")
            with mock.patch.object(sys, "stderr", stderr), mock.patch("lazypick.cli.run_session") as run_session:
                with self.assertRaises(SystemExit) as ctx:
                    cli.main(["-l", bad_path])

        self.assertEqual(ctx.exception.code, cli.EXIT_FATAL)
        self.assertIn("cannot open log file", stderr.getvalue())
        run_session.assert_not_called()

    def test_missing_tty_exits_before_rendering(self) -> None:
        with mock.patch("lazypick.cli.open_tty", side_effect=OSError("no tty")), mock.patch(
            "lazypick.cli.run_session"
        ) as run_session:
            with self.assertRaises(SystemExit) as ctx:
                cli.main([])

        self.assertEqual(ctx.exception.code, cli.EXIT_FATAL)
        run_session.assert_not_called()

    def test_non_terminal_tty_exits_and_closes_descriptor(self) -> None:
        with mock.patch("lazypick.cli.open_tty", return_value=7), mock.patch(
            "lazypick.cli.TerminalController", side_effect=termios.error("not a tty")
        ), mock.patch("lazypick.cli.os.close") as close_mock, mock.patch("lazypick.cli.run_session") as run_session:
            with self.assertRaises(SystemExit) as ctx:
                cli.main([])

        self.assertEqual(ctx.exception.code, cli.EXIT_FATAL)
        close_mock.assert_called_once_with(7)
        run_session.assert_not_called()


if __name__ == "__main__":
    unittest.main()
