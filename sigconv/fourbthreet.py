"""4B3T line coding: 4-bit blocks mapped to ternary triples by running sum."""

from __future__ import annotations

from typing import Sequence

from .converter import ConversionError, Converter, Symbol

# Used while the running sum is positive.
_TABLE_NEGATIVE: tuple[Symbol, ...] = (
    (0, -1, 1),
    (-1, 1, 0),
    (-1, 0, 1),
    (-1, 1, -1),
    (0, -1, -1),
    (0, -1, 0),
    (0, 0, -1),
    (1, -1, -1),
    (0, 1, -1),
    (1, -1, 0),
    (1, 0, -1),
    (-1, 0, 0),
    (-1, 0, -1),
    (-1, -1, 0),
    (-1, -1, 1),
    (-1, -1, -1),
)

# Used while the running sum is zero or negative.
_TABLE_POSITIVE: tuple[Symbol, ...] = (
    (0, -1, 1),
    (-1, 1, 0),
    (-1, 0, 1),
    (1, -1, 1),
    (0, 1, 1),
    (0, 1, 0),
    (0, 0, 1),
    (-1, 1, 1),
    (0, 1, -1),
    (1, -1, 0),
    (1, 0, -1),
    (1, 0, 0),
    (1, 0, 1),
    (1, 1, 0),
    (1, 1, -1),
    (1, 1, 1),
)


def _to_int8(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value & 0x80 else value


class Conv4B3T(Converter):
    """4B3T converter: picks the code table by the sign of the running sum."""

    title = "4B3T convert print: "
    name = "4B3T"
    padded_cells = True
    row_end = "\n\n"
    close_always = False

    def convert(self, start_mode: int, blocks: Sequence[int]) -> list[Symbol]:
        """Encode ``blocks`` starting from the running sum ``start_mode``."""
        self.output = []
        mode = _to_int8(start_mode)
        for block in blocks:
            table = _TABLE_NEGATIVE if mode > 0 else _TABLE_POSITIVE
            if not 0 <= block < len(table):
                sign = "-" if mode > 0 else "+"
                raise ConversionError(
                    f"cannot convert block {block} to 4B3T (mode{sign})"
                )
            symbol = table[block]
            mode = _to_int8(mode + sum(symbol))
            self.output.append(symbol)
        return list(self.output)

    def render(self, symbols: Sequence[Symbol]) -> str:
        """Return the plain listing: four padded triples per row, blank line between rows."""
        return self._render(symbols, colored=False)