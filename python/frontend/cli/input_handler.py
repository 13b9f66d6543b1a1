"""Single-keypress input for the terminal frontends.

Keys are read without waiting for Enter and translated into action
strings: the four tile directions plus ``quit``, ``restart`` and
``enter``.  Unix terminals are read through tty/termios, Windows
consoles through msvcrt.
"""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager

from backend.models.board import Direction

_ESC = "\x1b"

# Keys are matched case-insensitively; escape sequences are matched whole.
_ACTIONS: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    f"{_ESC}[A": "up",
    f"{_ESC}[B": "down",
    f"{_ESC}[D": "left",
    f"{_ESC}[C": "right",
    "\xe0H": "up",
    "\xe0P": "down",
    "\xe0K": "left",
    "\xe0M": "right",
    "q": "quit",
    _ESC: "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "\r": "enter",
    "\n": "enter",
}


def to_action(key: str) -> str:
    """Map a raw key (or escape sequence) to its action string.

    Unmapped printable keys come back unchanged, anything else as ``""``.
    """
    action = _ACTIONS.get(key) or _ACTIONS.get(key.lower())
    if action is not None:
        return action
    return key if key.isprintable() else ""


def to_direction(action: str) -> Direction | None:
    """Return the tile direction for a movement action, else ``None``."""
    try:
        return Direction(action)
    except ValueError:
        return None


# -- platform readers ---------------------------------------------------------


@contextmanager
def _raw_stdin() -> Iterator[int]:
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    tty.setraw(fd)
    try:
        yield fd
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _next_char(fd: int, timeout: float | None) -> str | None:
    import select

    ready, _, _ = select.select([fd], [], [], timeout)
    if not ready:
        return None
    # os.read is unbuffered, so select() still sees the rest of a sequence.
    return os.read(fd, 1).decode("utf-8", errors="ignore")


def _read_unix(timeout: float | None) -> str | None:
    with _raw_stdin() as fd:
        key = _next_char(fd, timeout)
        if key != _ESC:
            return key
        if _next_char(fd, 0.1) != "[":
            return _ESC
        return f"{_ESC}[{_next_char(fd, 0.1) or ''}"


def _read_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    deadline = None if timeout is None else time.monotonic() + timeout
    while not msvcrt.kbhit():
        if deadline is not None and time.monotonic() >= deadline:
            return None
        time.sleep(0.02)
    key = msvcrt.getwch()
    if key in ("\x00", "\xe0"):
        key = "\xe0" + msvcrt.getwch()
    return key


_read = _read_windows if os.name == "nt" else _read_unix


# -- public API ---------------------------------------------------------------


def read_key(timeout: float | None = None) -> str | None:
    """Block for one keypress and return its action string.

    With a *timeout* (seconds) returns ``None`` if nothing was pressed.
    """
    key = _read(timeout)
    if key is None:
        return None
    return to_action(key)
