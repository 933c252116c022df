"""Double-buffered terminal cell grid.

Drawing code writes cells into a back buffer; ``flush`` compares it with what
was last sent and emits cursor-addressed ANSI runs for changed cells only.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .ansi import char_display_width

RESET_SGR = "\033[0m"
CLEAR_SCREEN = "\033[2J"


@dataclass(frozen=True)
class Cell:
    ch: str = " "
    style: str = ""


BLANK = Cell()
# Right half of a double-width glyph; drawn implicitly by its left neighbor.
CONTINUATION = Cell(ch="")
# Never equal to a real cell, so every position repaints after a sync.
_STALE = Cell(ch="\x00", style="stale")


class CellGrid:
    def __init__(self, width: int, height: int, write: Callable[[bytes], None]) -> None:
        self.write = write
        self.width = max(1, width)
        self.height = max(1, height)
        self._back = self._blank_rows(BLANK)
        self._front = self._blank_rows(_STALE)
        self._needs_clear = True

    def _blank_rows(self, cell: Cell) -> list[list[Cell]]:
        return [[cell] * self.width for _ in range(self.height)]

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def cell(self, x: int, y: int) -> Cell:
        return self._back[y][x]

    def row_text(self, y: int) -> str:
        """Plain text of row ``y`` as it will appear on screen."""
        return "".join(cell.ch for cell in self._back[y])

    def set_cell(self, x: int, y: int, ch: str, style: str = "") -> None:
        """Place ``ch`` at ``(x, y)``; positions outside the grid are dropped."""
        if not (0 <= y < self.height and 0 <= x < self.width):
            return
        row = self._back[y]
        self._release(row, x)
        if char_display_width(ch, x) == 2:
            if x + 1 >= self.width:
                # A wide glyph cannot be split across the right edge.
                row[x] = Cell(" ", style)
                return
            self._release(row, x + 1)
            row[x] = Cell(ch, style)
            row[x + 1] = CONTINUATION
            return
        row[x] = Cell(ch, style)

    def _release(self, row: list[Cell], x: int) -> None:
        """Blank out the other half of any wide glyph covering column ``x``."""
        if row[x] is CONTINUATION:
            if x > 0:
                row[x - 1] = Cell(" ", row[x - 1].style)
        elif x + 1 < self.width and row[x + 1] is CONTINUATION:
            row[x + 1] = Cell(" ", row[x].style)

    def clear(self) -> None:
        self._back = self._blank_rows(BLANK)

    def resize(self, width: int, height: int) -> None:
        """Adopt a new size and force a full repaint on the next flush."""
        self.width = max(1, width)
        self.height = max(1, height)
        self._back = self._blank_rows(BLANK)
        self._front = self._blank_rows(_STALE)
        self._needs_clear = True

    def render_diff(self) -> str:
        out: list[str] = []
        if self._needs_clear:
            out.append(RESET_SGR + CLEAR_SCREEN)
        current_style: str | None = None
        for y in range(self.height):
            back_row = self._back[y]
            front_row = self._front[y]
            cursor_x: int | None = None
            x = 0
            while x < self.width:
                cell = back_row[x]
                if cell == front_row[x] or cell is CONTINUATION:
                    x += 1
                    continue
                if cursor_x != x:
                    out.append(f"\033[{y + 1};{x + 1}H")
                if cell.style != current_style:
                    out.append(RESET_SGR + cell.style)
                    current_style = cell.style
                out.append(cell.ch)
                step = 2 if x + 1 < self.width and back_row[x + 1] is CONTINUATION else 1
                x += step
                cursor_x = x
            self._front[y] = list(back_row)
        if current_style:
            out.append(RESET_SGR)
        self._needs_clear = False
        return "".join(out)

    def flush(self) -> None:
        payload = self.render_diff()
        if payload:
            self.write(payload.encode("utf-8", errors="replace"))


__all__ = ["BLANK", "CONTINUATION", "Cell", "CellGrid"]
