"""Candidate lines and their selection flags.

The line sequence is fixed after load; only the per-line flags change.
``selected_count`` is maintained incrementally on every toggle.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO


class EmptyInputError(ValueError):
    """Raised when a caller requires at least one choice and none were read."""


def read_lines(stream: TextIO) -> list[str]:
    """Read ``stream`` to EOF and return one entry per line without its delimiter."""
    lines: list[str] = []
    for raw in stream:
        if raw.endswith("\n"):
            raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
        lines.append(raw)
    return lines


class ChoiceList:
    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: tuple[str, ...] = ()
        self._selected: list[bool] = []
        self._selected_count = 0
        self.load(lines)

    def load(self, lines: Iterable[str], *, require_lines: bool = False) -> None:
        """Replace contents with ``lines`` and clear every selection flag."""
        loaded = tuple(lines)
        if require_lines and not loaded:
            raise EmptyInputError("no input lines to choose from")
        self._lines = loaded
        self._selected = [False] * len(loaded)
        self._selected_count = 0

    def __len__(self) -> int:
        return len(self._lines)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._lines):
            raise IndexError(f"choice index {index} out of range for {len(self._lines)} choices")

    def get(self, index: int) -> str:
        self._check_index(index)
        return self._lines[index]

    def is_selected(self, index: int) -> bool:
        self._check_index(index)
        return self._selected[index]

    @property
    def selected_count(self) -> int:
        return self._selected_count

    def toggle(self, index: int) -> bool:
        """Flip the flag at ``index`` and return its new value."""
        self._check_index(index)
        flag = not self._selected[index]
        self._selected[index] = flag
        self._selected_count += 1 if flag else -1
        return flag

    def selected_lines(self) -> list[str]:
        """Marked lines in original list order."""
        return [line for line, flag in zip(self._lines, self._selected) if flag]


__all__ = ["ChoiceList", "EmptyInputError", "read_lines"]
