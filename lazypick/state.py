"""Mutable session state shared by the controller and renderer."""

from __future__ import annotations

from dataclasses import dataclass

from .choices import ChoiceList
from .geometry import Geometry


@dataclass
class SessionState:
    choices: ChoiceList
    geometry: Geometry
    prompt: str = ""
    cursor_index: int = 0
    view_top_index: int = 0

    @property
    def is_empty(self) -> bool:
        return len(self.choices) == 0

    @property
    def cursor_row(self) -> int:
        """Screen row showing the cursor line."""
        return self.geometry.top_row + (self.cursor_index - self.view_top_index)

    @property
    def visible_count(self) -> int:
        return max(0, min(len(self.choices) - self.view_top_index, self.geometry.viewport_height))

    def invariant_violations(self) -> list[str]:
        """Describe every broken cursor/viewport invariant; empty when consistent."""
        problems: list[str] = []
        total = len(self.choices)
        if total == 0:
            if self.cursor_index != 0 or self.view_top_index != 0:
                problems.append("empty list must keep cursor and view at 0")
            return problems
        height = self.geometry.viewport_height
        if not 0 <= self.cursor_index < total:
            problems.append(f"cursor_index {self.cursor_index} outside [0, {total - 1}]")
        if not 0 <= self.view_top_index < total:
            problems.append(f"view_top_index {self.view_top_index} outside [0, {total - 1}]")
        if not self.view_top_index <= self.cursor_index <= self.view_top_index + height - 1:
            problems.append(
                f"cursor_index {self.cursor_index} not visible in window "
                f"[{self.view_top_index}, {self.view_top_index + height - 1}]"
            )
        if self.view_top_index + self.visible_count > total:
            problems.append("visible window runs past end of list")
        return problems


__all__ = ["SessionState"]
