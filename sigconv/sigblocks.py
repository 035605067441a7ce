"""Binary signal input, grouped into 4-bit blocks."""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import TextIO

from .bits import clear_bit, get_bit, set_bit
from .settings import GREEN, MAGENTA_B, RESET, YELLOW_B

BLOCK_BITS = 4
BLOCKS_PER_ROW = 4


class SignalError(ValueError):
    """Raised when a signal cannot be read or contains invalid symbols."""


def _chunk(items, size):
    return [items[start:start + size] for start in range(0, len(items), size)]


def parse_blocks(text: str) -> list[int]:
    """Group a string of '0'/'1' into 4-bit blocks, padded to a multiple of four blocks.

    Trailing characters that do not fill a whole block are dropped with a warning.
    """
    if len(text) % BLOCK_BITS:
        warnings.warn("Size of signal is not a multiple of 4", stacklevel=2)

    whole = len(text) - len(text) % BLOCK_BITS
    blocks = []
    for group in _chunk(text[:whole], BLOCK_BITS):
        value = 0
        for offset, char in enumerate(group):
            pos = BLOCK_BITS - 1 - offset
            if char == "0":
                value = clear_bit(value, pos)
            elif char == "1":
                value = set_bit(value, pos)
            else:
                raise SignalError("only '0' or '1' are allowed in a signal")
        blocks.append(value)

    remainder = len(blocks) % BLOCKS_PER_ROW
    if remainder:
        blocks.extend([0] * (BLOCKS_PER_ROW - remainder))
    return blocks


@dataclass
class Signal:
    """A signal held as a list of 4-bit block values."""

    blocks: list[int] = field(default_factory=list)

    def load_text(self, text: str) -> None:
        """Append the blocks parsed from ``text``, ignoring spaces."""
        self.blocks.extend(parse_blocks(text.replace(" ", "")))

    def read(self, stdin: TextIO, stdout: TextIO) -> None:
        """Replace the signal with one line typed by the user."""
        self.blocks.clear()
        stdout.write(f"{GREEN}---------New Signal---------{RESET}\n")
        stdout.write(f"{YELLOW_B}Enter signal (with 0 or 1): \n")
        stdout.flush()

        line = stdin.readline()
        if line == "\n":
            line = stdin.readline()
        line = line.rstrip("\n")
        stdout.write(f"{GREEN}----------------------------{RESET}\n")
        self.load_text(line)

    def fread(self, path: str = "in.txt") -> None:
        """Append the signal stored in the file at ``path``."""
        try:
            with open(path, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as exc:
            raise SignalError(f"cannot open signal file {path!r}") from exc
        self.load_text(text)

    def format_lines(self) -> list[str]:
        """Return one line per four blocks: start index, tab, then the bit groups."""
        lines = []
        for row, group in enumerate(_chunk(self.blocks, BLOCKS_PER_ROW)):
            if len(group) < BLOCKS_PER_ROW:
                break
            bits = "".join(
                "".join(str(get_bit(block, pos)) for pos in range(BLOCK_BITS - 1, -1, -1)) + " "
                for block in group
            )
            lines.append(f"{row * BLOCKS_PER_ROW}:\t{bits}")
        return lines

    def display(self, stream: TextIO) -> None:
        """Print the signal in rows of four blocks."""
        stream.write(f"{GREEN}---------Signal Out---------{RESET}\n")
        for line in self.format_lines():
            index, bits = line.split("\t", 1)
            stream.write(f"{MAGENTA_B}{index}\t{RESET}{bits}\n")
        stream.write(f"{GREEN}----------------------------{RESET}\n")