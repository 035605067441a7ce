"""Bit helpers for 4-bit signal blocks and a terminal clearing helper."""

from __future__ import annotations

import sys
from typing import TextIO

CLEAR_SCREEN = "\033[2J\033[1;1H"

_BYTE_MASK = 0xFF


def get_bit(src: int, pos: int) -> int:
    """Return the bit of ``src`` at ``pos`` as 0 or 1."""
    return (src >> pos) & 1


def set_bit(src: int, pos: int) -> int:
    """Return ``src`` as an unsigned byte with the bit at ``pos`` set."""
    return (src | (1 << pos)) & _BYTE_MASK


def clear_bit(src: int, pos: int) -> int:
    """Return ``src`` as an unsigned byte with the bit at ``pos`` cleared."""
    return (src & ~(1 << pos)) & _BYTE_MASK


def clear_console(stream: TextIO | None = None) -> None:
    """Clear the terminal and move the cursor to the top-left corner."""
    out = sys.stdout if stream is None else stream
    out.write(CLEAR_SCREEN)
    out.flush()