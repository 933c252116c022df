"""Interactive chooser session.

Wires the event source, viewport controller, renderer and cell grid into a
single-threaded loop that runs until the user confirms or aborts.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from .events import Abort, Confirm, InputEvent, Resize
from .render import Renderer
from .screen import CellGrid
from .state import SessionState
from .terminal import TerminalController
from .ui_theme import UITheme
from .viewport import Redraw, ViewportController

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ABORTED = 1


@dataclass(frozen=True)
class SessionResult:
    confirmed: bool
    lines: list[str] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        return EXIT_OK if self.confirmed else EXIT_ABORTED


def output_lines(state: SessionState) -> list[str]:
    """Lines to print on confirm: the marked ones, else the one under the cursor."""
    choices = state.choices
    if choices.selected_count > 0:
        return choices.selected_lines()
    if state.is_empty:
        return []
    return [choices.get(state.cursor_index)]


def run_session(
    state: SessionState,
    *,
    terminal: TerminalController,
    grid: CellGrid,
    next_event: Callable[[], InputEvent],
    theme: UITheme,
) -> SessionResult:
    """Run the event loop and return what the user chose.

    The terminal is restored before this returns, on every exit path.
    """
    controller = ViewportController(state)
    renderer = Renderer(grid, theme, controller)
    logger.info(
        "session start: %d choices, terminal %dx%d",
        len(state.choices),
        state.geometry.width,
        state.geometry.height,
    )
    if state.geometry.degenerate:
        logger.warning(
            "terminal %dx%d too small; viewport clamped to one row",
            state.geometry.width,
            state.geometry.height,
        )
    with terminal.raw_mode():
        renderer.apply(Redraw.full_screen())
        grid.flush()
        while True:
            event = next_event()
            if isinstance(event, Abort):
                logger.info("session aborted")
                return SessionResult(confirmed=False)
            if isinstance(event, Confirm):
                break
            redraw = controller.handle(event)
            if isinstance(event, Resize):
                grid.resize(state.geometry.width, state.geometry.height)
            renderer.apply(redraw)
            grid.flush()
    lines = output_lines(state)
    logger.info("session confirmed: %d line(s)", len(lines))
    return SessionResult(confirmed=True, lines=lines)


__all__ = [
    "EXIT_ABORTED",
    "EXIT_OK",
    "SessionResult",
    "output_lines",
    "run_session",
]
