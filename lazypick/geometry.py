"""Terminal geometry for the chooser layout.

Rows from the top: an optional prompt line, the choice viewport, and one
status line at the bottom.
"""

from __future__ import annotations

from dataclasses import dataclass

MIN_VIEWPORT_ROWS = 1


def compute_viewport_height(term_height: int, has_prompt: bool) -> int:
    """Return rows left for choices after the prompt and status lines.

    The result may be zero or negative on very short terminals.
    """
    return term_height - (1 if has_prompt else 0) - 1


@dataclass
class Geometry:
    """Current terminal size plus the derived viewport placement."""

    width: int
    height: int
    has_prompt: bool = False

    def __post_init__(self) -> None:
        self.width = max(1, int(self.width))
        self.height = max(1, int(self.height))

    @property
    def prompt_row(self) -> int | None:
        return 0 if self.has_prompt else None

    @property
    def top_row(self) -> int:
        """First screen row of the viewport."""
        return 1 if self.has_prompt else 0

    @property
    def status_row(self) -> int:
        return self.height - 1

    @property
    def degenerate(self) -> bool:
        """Whether the terminal is too short for prompt, status and one choice row."""
        return compute_viewport_height(self.height, self.has_prompt) < MIN_VIEWPORT_ROWS

    @property
    def viewport_height(self) -> int:
        """Number of choice rows, clamped so at least one row always exists.

        On a degenerate terminal the clamped row overlaps the status line.
        """
        return max(MIN_VIEWPORT_ROWS, compute_viewport_height(self.height, self.has_prompt))

    @property
    def bottom_row(self) -> int:
        return self.top_row + self.viewport_height - 1

    def on_resize(self, width: int, height: int) -> None:
        """Store a new terminal size; cursor placement is the controller's job."""
        self.width = max(1, int(width))
        self.height = max(1, int(height))


__all__ = [
    "MIN_VIEWPORT_ROWS",
    "Geometry",
    "compute_viewport_height",
]
