"""Abstract input events and the key-token decoder that produces them.

The viewport controller only ever sees these variants, never raw key codes.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass
from typing import Union

from .input import read_key

RESIZE_POLL_MS = 120


@dataclass(frozen=True)
class MoveDown:
    pass


@dataclass(frozen=True)
class MoveUp:
    pass


@dataclass(frozen=True)
class ToggleSelection:
    pass


@dataclass(frozen=True)
class Confirm:
    pass


@dataclass(frozen=True)
class Abort:
    pass


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


InputEvent = Union[MoveDown, MoveUp, ToggleSelection, Confirm, Abort, Resize]

_KEY_EVENTS: dict[str, InputEvent] = {
    "j": MoveDown(),
    "DOWN": MoveDown(),
    "k": MoveUp(),
    "UP": MoveUp(),
    " ": ToggleSelection(),
    "ENTER": Confirm(),
    "q": Abort(),
    "ESC": Abort(),
    "CTRL_C": Abort(),
    "EOF": Abort(),
}


def decode_key(key: str) -> InputEvent | None:
    """Map a normalized key token to an event, or ``None`` for unbound keys."""
    return _KEY_EVENTS.get(key)


def _default_size_probe() -> tuple[int, int]:
    term = shutil.get_terminal_size((80, 24))
    return term.columns, term.lines


class EventSource:
    """Blocking producer of ``InputEvent`` values from a raw-mode tty.

    Terminal size is polled between key reads; a change is reported as a
    ``Resize`` on the same sequential stream as key events.
    """

    def __init__(
        self,
        fd: int,
        size_probe: Callable[[], tuple[int, int]] = _default_size_probe,
        *,
        poll_ms: int = RESIZE_POLL_MS,
    ) -> None:
        self.fd = fd
        self.size_probe = size_probe
        self.poll_ms = poll_ms
        self._last_size = size_probe()
        self._skip_next_lf = False

    def _check_resize(self) -> Resize | None:
        size = self.size_probe()
        if size == self._last_size:
            return None
        self._last_size = size
        return Resize(width=size[0], height=size[1])

    def next_event(self) -> InputEvent:
        while True:
            resized = self._check_resize()
            if resized is not None:
                return resized
            key = read_key(self.fd, timeout_ms=self.poll_ms)
            if key == "":
                continue
            if self._skip_next_lf and key == "ENTER_LF":
                self._skip_next_lf = False
                continue
            self._skip_next_lf = key == "ENTER_CR"
            if key in {"ENTER_CR", "ENTER_LF"}:
                key = "ENTER"
            event = decode_key(key)
            if event is not None:
                return event


__all__ = [
    "Abort",
    "Confirm",
    "EventSource",
    "InputEvent",
    "MoveDown",
    "MoveUp",
    "RESIZE_POLL_MS",
    "Resize",
    "ToggleSelection",
    "decode_key",
]
