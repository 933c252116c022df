"""Cursor, scroll window and selection state machine.

Each handler mutates ``SessionState`` and returns a ``Redraw`` describing the
smallest screen region that changed. Stepping inside the visible window only
repaints the two rows whose highlight moved; scrolling repaints the window and
resizing repaints everything.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .events import Abort, Confirm, InputEvent, MoveDown, MoveUp, Resize, ToggleSelection
from .state import SessionState

logger = logging.getLogger(__name__)


class RedrawKind(Enum):
    NONE = "none"
    FULL_SCREEN = "full_screen"
    WINDOW = "window"
    ROWS = "rows"
    INDICATOR = "indicator"


@dataclass(frozen=True)
class Redraw:
    """Screen regions to repaint after one event.

    ``rows`` holds screen rows for ``ROWS`` and ``INDICATOR``. ``status``
    additionally requests the position counter on the last line.
    """

    kind: RedrawKind
    rows: tuple[int, ...] = ()
    status: bool = False

    @classmethod
    def nothing(cls) -> Redraw:
        return cls(RedrawKind.NONE)

    @classmethod
    def full_screen(cls) -> Redraw:
        return cls(RedrawKind.FULL_SCREEN, status=True)

    @classmethod
    def window(cls) -> Redraw:
        return cls(RedrawKind.WINDOW, status=True)

    @classmethod
    def cursor_rows(cls, *rows: int) -> Redraw:
        return cls(RedrawKind.ROWS, rows=tuple(rows), status=True)

    @classmethod
    def indicator(cls, row: int) -> Redraw:
        return cls(RedrawKind.INDICATOR, rows=(row,))


class ViewportController:
    def __init__(self, state: SessionState) -> None:
        self.state = state

    def visible_rows(self) -> range:
        """Screen rows currently showing a choice."""
        top = self.state.geometry.top_row
        return range(top, top + self.state.visible_count)

    def index_at_row(self, row: int) -> int:
        """Map a viewport screen row to its list index.

        Rows outside the visible window are a caller bug and raise ``ValueError``.
        """
        if row not in self.visible_rows():
            raise ValueError(f"row {row} is outside the visible window")
        return self.state.view_top_index + (row - self.state.geometry.top_row)

    def move_down(self) -> Redraw:
        state = self.state
        if state.cursor_index >= len(state.choices) - 1:
            return Redraw.nothing()
        old_row = state.cursor_row
        state.cursor_index += 1
        if old_row == state.geometry.bottom_row:
            state.view_top_index += 1
            return Redraw.window()
        return Redraw.cursor_rows(old_row, old_row + 1)

    def move_up(self) -> Redraw:
        state = self.state
        if state.cursor_index <= 0:
            return Redraw.nothing()
        old_row = state.cursor_row
        state.cursor_index -= 1
        if old_row == state.geometry.top_row:
            state.view_top_index -= 1
            return Redraw.window()
        return Redraw.cursor_rows(old_row, old_row - 1)

    def toggle_selection(self) -> Redraw:
        state = self.state
        if state.is_empty:
            return Redraw.nothing()
        state.choices.toggle(state.cursor_index)
        return Redraw.indicator(state.cursor_row)

    def resize(self, width: int, height: int) -> Redraw:
        """Apply new terminal size and pull the cursor back on-screen if it fell off."""
        state = self.state
        geometry = state.geometry
        geometry.on_resize(width, height)
        if geometry.degenerate:
            logger.warning("terminal %dx%d too small; viewport clamped to one row", width, height)
        if not state.is_empty:
            cursor_row = min(geometry.bottom_row, state.cursor_row)
            state.cursor_index = state.view_top_index + (cursor_row - geometry.top_row)
        return Redraw.full_screen()

    def handle(self, event: InputEvent) -> Redraw:
        if isinstance(event, MoveDown):
            redraw = self.move_down()
        elif isinstance(event, MoveUp):
            redraw = self.move_up()
        elif isinstance(event, ToggleSelection):
            redraw = self.toggle_selection()
        elif isinstance(event, Resize):
            redraw = self.resize(event.width, event.height)
        elif isinstance(event, (Confirm, Abort)):
            redraw = Redraw.nothing()
        else:
            raise TypeError(f"unsupported event: {event!r}")
        logger.debug(
            "%s -> %s rows=%s cursor=%d top=%d",
            type(event).__name__,
            redraw.kind.value,
            redraw.rows,
            self.state.cursor_index,
            self.state.view_top_index,
        )
        return redraw


__all__ = ["Redraw", "RedrawKind", "ViewportController"]
