"""Single-keypress reader for the terminal frontend.

Handles arrow keys, WASD, and the puzzle's command keys without requiring
Enter.  Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    # latin-1 keeps the 0x00/0xE0 arrow prefix bytes as single characters.
    return msvcrt.getch().decode("latin-1")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "scramble",
    "x": "solution",
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

# Windows sends a 0x00/0xE0 prefix followed by a scan code for arrows.
_WIN_ARROW_MAP: dict[str, str] = {
    "H": "up",
    "P": "down",
    "M": "right",
    "K": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    action = _KEY_MAP.get(ch.lower()) if ch.isalpha() else _KEY_MAP.get(ch)
    if action is not None:
        return action
    return ch if ch.isprintable() else ""


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  : direction the tile travels
        "scramble"                     : r
        "solution"                     : x (restore the solved picture)
        "quit"                         : q / Ctrl-C / Escape
        "enter"                        : Enter / Return
        "<char>"                       : unmapped printable char
        ""                             : unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            return _ARROW_MAP.get(_getch(), "")
        return "quit"  # bare Escape

    if ch in ("\x00", "\xe0"):
        return _WIN_ARROW_MAP.get(_getch(), "")

    return resolve(ch)
