"""Draw chooser rows into a cell grid according to ``Redraw`` instructions.

Row layout: column 0 is the selection indicator, column 1 a padding cell,
and the choice text starts at column 2. Rows are padded to the full width so
a shorter line fully replaces a longer one.
"""

from __future__ import annotations

import logging

from .ansi import char_display_width
from .screen import CellGrid
from .state import SessionState
from .ui_theme import UITheme
from .viewport import Redraw, RedrawKind, ViewportController

logger = logging.getLogger(__name__)

TEXT_COLUMN = 2


class Renderer:
    def __init__(self, grid: CellGrid, theme: UITheme, controller: ViewportController) -> None:
        self.grid = grid
        self.theme = theme
        self.controller = controller

    @property
    def state(self) -> SessionState:
        return self.controller.state

    def draw_text(self, x: int, y: int, text: str, style: str) -> int:
        """Draw ``text`` from column ``x`` and return the column after it."""
        start = x
        for ch in text:
            width = char_display_width(ch, x - start)
            if ch == "\t":
                for _ in range(width):
                    self.grid.set_cell(x, y, " ", style)
                    x += 1
                continue
            if width == 0:
                continue
            self.grid.set_cell(x, y, ch, style)
            x += width
        return x

    def clear_to_end_of_row(self, x: int, y: int, style: str = "") -> None:
        for col in range(max(0, x), self.grid.width):
            self.grid.set_cell(col, y, " ", style)

    def draw_prompt(self) -> None:
        row = self.state.geometry.prompt_row
        if row is None:
            return
        end = self.draw_text(0, row, self.state.prompt, self.theme.prompt)
        self.clear_to_end_of_row(end, row)

    def draw_indicator(self, row: int) -> None:
        index = self.controller.index_at_row(row)
        selected = self.state.choices.is_selected(index)
        style = self.theme.selection_indicator if selected else self.theme.default
        self.grid.set_cell(0, row, " ", style)

    def draw_choice(self, row: int) -> None:
        index = self.controller.index_at_row(row)
        style = self.theme.cursor_line if index == self.state.cursor_index else self.theme.default
        self.draw_indicator(row)
        self.grid.set_cell(1, row, " ", style)
        end = self.draw_text(TEXT_COLUMN, row, self.state.choices.get(index), style)
        self.clear_to_end_of_row(end, row, style)

    def draw_window(self) -> None:
        geometry = self.state.geometry
        visible = self.controller.visible_rows()
        for row in range(geometry.top_row, geometry.top_row + geometry.viewport_height):
            if row in visible:
                self.draw_choice(row)
            else:
                self.clear_to_end_of_row(0, row)

    def status_text(self) -> str:
        total = len(self.state.choices)
        if total == 0:
            return "0/0"
        return f"{self.state.cursor_index + 1}/{total}"

    def draw_status(self) -> None:
        total_text = str(len(self.state.choices))
        row = self.state.geometry.status_row
        width = self.grid.width
        # Widest possible counter is "N/N"; clear that much so a shorter one leaves no residue.
        self.clear_to_end_of_row(width - (len(total_text) * 2 + 1), row)
        text = self.status_text()
        logger.debug("status %s", text)
        self.draw_text(width - len(text), row, text, self.theme.status)

    def draw_all(self) -> None:
        self.grid.clear()
        self.draw_prompt()
        self.draw_window()
        self.draw_status()

    def apply(self, redraw: Redraw) -> None:
        if redraw.kind is RedrawKind.FULL_SCREEN:
            self.draw_all()
            return
        if redraw.kind is RedrawKind.WINDOW:
            self.draw_window()
        elif redraw.kind is RedrawKind.ROWS:
            for row in redraw.rows:
                self.draw_choice(row)
        elif redraw.kind is RedrawKind.INDICATOR:
            for row in redraw.rows:
                self.draw_indicator(row)
        if redraw.status:
            self.draw_status()


__all__ = ["Renderer", "TEXT_COLUMN"]
