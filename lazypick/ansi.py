"""Display-width measurement for terminal cells.

Column accounting uses East Asian width, not code-point counts, so wide
glyphs stay aligned with the cell grid.
"""

from __future__ import annotations

import unicodedata

TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return total columns ``text`` occupies when drawn from column 0."""
    col = 0
    for ch in text:
        col += char_display_width(ch, col)
    return col
