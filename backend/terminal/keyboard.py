"""
Non-blocking keyboard input for POSIX and Windows terminals.
"""

import logging
import os
import sys
from typing import Optional, TextIO

from .base import InputSource

if os.name == "nt":
    import msvcrt
else:
    import select
    import termios
    import tty

logger = logging.getLogger(__name__)

# Arrow keys arrive as escape sequences on POSIX and as a prefixed scan
# code on Windows; both are folded onto the w/a/s/d bindings.
ARROW_KEYS = {
    "\x1b[A": "w",
    "\x1b[B": "s",
    "\x1b[C": "d",
    "\x1b[D": "a",
    "H": "w",
    "P": "s",
    "M": "d",
    "K": "a",
}

WINDOWS_ARROW_PREFIXES = (b"\x00", b"\xe0")
READ_CHUNK_BYTES = 32


def normalize_key(key: str) -> str:
    """Map arrow-key sequences to their letter binding and lower-case letters."""
    if key.startswith("\x1b"):
        return ARROW_KEYS.get(key, key)
    return key.lower()


class TerminalKeyboard(InputSource):
    """
    Reads single key presses without waiting for Enter.

    Use as a context manager so POSIX terminals are put in cbreak mode
    for the duration of the game and restored afterwards.

    On POSIX the descriptor is read directly with os.read and the bytes
    are queued in _pending, so select() and the reads look at the same
    layer and several keys typed within one frame are all kept.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self._saved_attributes = None
        self._pending = ""

    def __enter__(self):
        if os.name != "nt" and self.stream.isatty():
            fd = self.stream.fileno()
            self._saved_attributes = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._saved_attributes is not None:
            termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self._saved_attributes)
            self._saved_attributes = None

    def _ready(self) -> bool:
        readable, _, _ = select.select([self.stream.fileno()], [], [], 0)
        return bool(readable)

    def _drain(self):
        while self._ready():
            chunk = os.read(self.stream.fileno(), READ_CHUNK_BYTES)
            if not chunk:
                break
            self._pending += chunk.decode(errors="ignore")

    def key_available(self) -> bool:
        if os.name == "nt":
            return msvcrt.kbhit()
        if not self._pending:
            self._drain()
        return bool(self._pending)

    def read_key(self) -> str:
        if os.name == "nt":
            return self._read_key_windows()
        return self._read_key_posix()

    def _read_key_windows(self) -> str:
        ch = msvcrt.getch()
        if ch in WINDOWS_ARROW_PREFIXES:
            return ARROW_KEYS.get(msvcrt.getch().decode(errors="ignore"), "")
        return ch.decode(errors="ignore").lower()

    def _read_key_posix(self) -> str:
        self._drain()
        if not self._pending:
            return ""

        if self._pending.startswith("\x1b["):
            # ESC [ <letter>
            key, self._pending = self._pending[:3], self._pending[3:]
            logger.debug("Read escape sequence %r", key)
        else:
            key, self._pending = self._pending[0], self._pending[1:]
        return normalize_key(key)
