"""UI theme definitions and selection helpers.

Themes are ANSI SGR palettes for the chooser chrome: cursor line, selection
indicator, prompt and status line.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    default: str
    cursor_line: str
    selection_indicator: str
    prompt: str
    status: str


DEFAULT_THEME = UITheme(
    name="default",
    default="",
    cursor_line="\033[30;47m",
    selection_indicator="\033[30;45m",
    prompt="\033[1m",
    status="\033[2m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    default="",
    cursor_line="\033[38;5;16;48;5;117m",
    selection_indicator="\033[48;5;39m",
    prompt="\033[1;38;5;45m",
    status="\033[2;38;5;110m",
)

# Without color the cursor line falls back to reverse video so it stays visible.
PLAIN_THEME = UITheme(
    name="plain",
    default="",
    cursor_line="\033[7m",
    selection_indicator="\033[7m",
    prompt="",
    status="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
