"""Raw-mode terminal keyboard input."""

from __future__ import annotations

import os
import select
import sys
import termios
from enum import IntEnum
from typing import Callable

__all__ = ["Key", "Keyboard", "decode_key"]


class Key(IntEnum):
    """Keys the library recognises."""

    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4
    ESCAPE = 5
    ENTER = 6
    SPACE = 7


_ESCAPE = b"\x1b"

_ARROWS = {b"A": Key.UP, b"B": Key.DOWN, b"C": Key.RIGHT, b"D": Key.LEFT}

_DIRECT = {
    b"\n": Key.ENTER,
    b" ": Key.SPACE,
    b"w": Key.UP,
    b"W": Key.UP,
    b"s": Key.DOWN,
    b"S": Key.DOWN,
    b"a": Key.LEFT,
    b"A": Key.LEFT,
    b"d": Key.RIGHT,
    b"D": Key.RIGHT,
}


def decode_key(read: Callable[[], bytes]) -> Key:
    """Decode one key press, pulling bytes one at a time from read.

    read returns a single byte, or b"" when no input is available.
    """
    first = read()
    if not first:
        return Key.NONE
    if first == _ESCAPE:
        introducer = read()
        if len(introducer) != 1:
            return Key.ESCAPE
        final = read()
        if len(final) != 1:
            return Key.ESCAPE
        if introducer == b"[":
            return _ARROWS.get(final, Key.NONE)
        return Key.NONE
    return _DIRECT.get(first, Key.NONE)


class Keyboard:
    """Reads keys from a terminal; raw mode is active inside a with block."""

    def __init__(self, fd: int | None = None) -> None:
        self.fd = sys.stdin.fileno() if fd is None else fd
        self._saved: list | None = None

    def __enter__(self) -> Keyboard:
        try:
            saved = termios.tcgetattr(self.fd)
        except termios.error as exc:
            raise OSError(f"tcgetattr: {exc}") from exc

        iflag, oflag, cflag, lflag, ispeed, ospeed, cc = saved
        cc = list(cc)
        iflag &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
        oflag &= ~termios.OPOST
        cflag |= termios.CS8
        lflag &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        cc[termios.VMIN] = 0
        cc[termios.VTIME] = 1
        try:
            termios.tcsetattr(
                self.fd,
                termios.TCSAFLUSH,
                [iflag, oflag, cflag, lflag, ispeed, ospeed, cc],
            )
        except termios.error as exc:
            raise OSError(f"tcsetattr: {exc}") from exc
        self._saved = saved
        return self

    def __exit__(self, *args: object) -> None:
        saved, self._saved = self._saved, None
        if saved is None:
            return
        try:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, saved)
        except termios.error as exc:
            raise OSError(f"tcsetattr: {exc}") from exc

    def _read_byte(self) -> bytes:
        return os.read(self.fd, 1)

    def get_key(self) -> Key:
        """Read and decode the next key press, or Key.NONE if there is none."""
        return decode_key(self._read_byte)

    def is_key_pressed(self, key: Key) -> bool:
        """Without waiting, tell whether pending input is the given key.

        Pending input is consumed.
        """
        ready, _, _ = select.select([self.fd], [], [], 0)
        return bool(ready) and self.get_key() == key