"""Single key-press reading with arrow, enter, backspace and escape decoding."""

from __future__ import annotations

import contextlib
import os
import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import BinaryIO, Callable, Iterator, TextIO, Union

ESC = 27


class KeyType(Enum):
    """Kind of key that was pressed."""

    CHARACTER = auto()
    ARROW_UP = auto()
    ARROW_DOWN = auto()
    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()
    ENTER = auto()
    BACKSPACE = auto()
    ESCAPE = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class Key:
    """A key press; ``ch`` is set only for character keys."""

    type: KeyType
    ch: str = ""


_ARROWS = {
    ord("A"): KeyType.ARROW_UP,
    ord("B"): KeyType.ARROW_DOWN,
    ord("C"): KeyType.ARROW_RIGHT,
    ord("D"): KeyType.ARROW_LEFT,
}

_WINDOWS_ARROWS = {
    72: KeyType.ARROW_UP,
    80: KeyType.ARROW_DOWN,
    75: KeyType.ARROW_LEFT,
    77: KeyType.ARROW_RIGHT,
}


def decode_key(data: bytes) -> Key:
    """Decode the bytes of one terminal key press.

    An escape byte alone is Escape; an escape followed by ``[`` and A-D is an
    arrow; any other escape sequence is Unknown.
    """
    if not data:
        raise ValueError("no key data to decode")
    first = data[0]
    if first == ESC:
        if len(data) == 1:
            return Key(KeyType.ESCAPE)
        if len(data) == 2:
            return Key(KeyType.UNKNOWN)
        if data[1] == ord("[") and data[2] in _ARROWS:
            return Key(_ARROWS[data[2]])
        return Key(KeyType.UNKNOWN)
    if first in (10, 13):
        return Key(KeyType.ENTER)
    if first in (127, 8):
        return Key(KeyType.BACKSPACE)
    return Key(KeyType.CHARACTER, chr(first))


def _as_bytes(chunk: Union[bytes, str]) -> bytes:
    if isinstance(chunk, str):
        return chunk.encode("latin-1", errors="replace")
    return chunk


@contextlib.contextmanager
def _raw_mode(fd: int) -> Iterator[None]:
    import termios

    old = termios.tcgetattr(fd)
    new = termios.tcgetattr(fd)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, new)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)


def _read_escape_tail(read_one: Callable[[], bytes]) -> bytes:
    tail = b""
    for _ in range(2):
        byte = read_one()
        if not byte:
            break
        tail += byte
    return tail


def _read_posix(read_one: Callable[[], bytes]) -> Key:
    first = read_one()
    if not first:
        raise EOFError("no key available")
    data = first
    if first[0] == ESC:
        data += _read_escape_tail(read_one)
    return decode_key(data)


def _read_windows() -> Key:
    import msvcrt

    ch = ord(msvcrt.getch())
    if ch in (0, 224):
        return Key(_WINDOWS_ARROWS.get(ord(msvcrt.getch()), KeyType.UNKNOWN))
    if ch == 13:
        return Key(KeyType.ENTER)
    if ch == ESC:
        return Key(KeyType.ESCAPE)
    if ch == 8:
        return Key(KeyType.BACKSPACE)
    return Key(KeyType.CHARACTER, chr(ch))


def read_key(stream: Union[BinaryIO, TextIO, None] = None) -> Key:
    """Read one key press from ``stream`` (the terminal when omitted).

    A terminal is switched to unbuffered, non-echoing mode for the read.
    Raises EOFError when the stream has no more input.
    """
    if stream is None:
        if sys.platform == "win32":
            return _read_windows()
        stream = sys.stdin

    if stream.isatty():
        fd = stream.fileno()
        with _raw_mode(fd):
            return _read_posix(lambda: os.read(fd, 1))
    return _read_posix(lambda: _as_bytes(stream.read(1)))