"""Command-line front door for lazypick.

Reads choices from stdin, runs the interactive session on the controlling
terminal, then prints the chosen lines once the terminal is restored.
"""

from __future__ import annotations

import argparse
import io
import logging
import os
import sys
import termios

from .choices import ChoiceList, read_lines
from .config import load_default_prompt, load_theme_name
from .events import EventSource
from .geometry import Geometry
from .logging_setup import configure_logging
from .screen import CellGrid
from .session import SessionResult, run_session
from .state import SessionState
from .terminal import TerminalController, open_tty
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

EXIT_FATAL = 2
STREAM_ENCODING = "utf-8"
STREAM_ERRORS = "surrogateescape"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazypick",
        description="Pick lines from stdin interactively and print the chosen ones.",
    )
    parser.add_argument(
        "-p",
        "--prompt",
        default=None,
        help="Prompt shown on the first row (default: none, or 'prompt' from config).",
    )
    parser.add_argument(
        "-l",
        "--log",
        metavar="PATH",
        default=None,
        help="Append debug logs to PATH (default: logging disabled).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors; use reverse video for the cursor.")
    return parser


def _read_choices(stdin: io.TextIOWrapper) -> ChoiceList:
    """Load choices from the raw bytes behind ``stdin``.

    Bytes that are not valid UTF-8 decode to lone surrogates so they can be
    written back unchanged by ``_print_lines``.
    """
    stream = io.TextIOWrapper(stdin.buffer, encoding=STREAM_ENCODING, errors=STREAM_ERRORS, newline="\n")
    try:
        return ChoiceList(read_lines(stream))
    finally:
        stream.detach()


def _print_lines(lines: list[str]) -> None:
    sys.stdout.flush()
    out = sys.stdout.buffer
    for line in lines:
        out.write(line.encode(STREAM_ENCODING, STREAM_ERRORS) + b"\n")
    out.flush()


def _run_on_tty(choices: ChoiceList, prompt: str, args: argparse.Namespace) -> SessionResult:
    """Acquire the terminal, run the session and release the tty descriptor."""
    theme = resolve_theme(args.theme or load_theme_name(), no_color=args.no_color)
    try:
        tty_fd = open_tty()
    except OSError as exc:
        logger.error("cannot open terminal: %s", exc)
        raise SystemExit(EXIT_FATAL) from exc
    try:
        try:
            terminal = TerminalController(tty_fd, tty_fd)
        except termios.error as exc:
            logger.error("cannot read terminal attributes: %s", exc)
            raise SystemExit(EXIT_FATAL) from exc
        width, height = terminal.size()
        state = SessionState(
            choices=choices,
            geometry=Geometry(width, height, has_prompt=bool(prompt)),
            prompt=prompt,
        )
        grid = CellGrid(width, height, terminal.write)
        events = EventSource(tty_fd, terminal.size)
        return run_session(
            state,
            terminal=terminal,
            grid=grid,
            next_event=events.next_event,
            theme=theme,
        )
    finally:
        os.close(tty_fd)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, run the chooser and exit with its status.

    Aborting exits with status 1; failing to open the log sink or the terminal
    exits with status 2 before anything is drawn.
    """
    args = build_parser().parse_args(argv)
    try:
        configure_logging(args.log)
    except OSError as exc:
        print(f"lazypick: cannot open log file {args.log}: {exc}", file=sys.stderr)
        raise SystemExit(EXIT_FATAL) from exc

    choices = _read_choices(sys.stdin)
    prompt = args.prompt if args.prompt is not None else load_default_prompt()
    result = _run_on_tty(choices, prompt, args)

    _print_lines(result.lines)
    if result.exit_code:
        raise SystemExit(result.exit_code)


if __name__ == "__main__":
    main()
