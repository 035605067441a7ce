"""FOMOT line coding: 4-bit blocks mapped to ternary triples by running sum."""

from __future__ import annotations

from typing import Sequence

from .converter import ConversionError, Converter, Symbol

# One code table for each running-sum state the code allows.
_TABLES: dict[int, tuple[Symbol, ...]] = {
    -1: (
        (-1, 1, 1),
        (-1, 1, 0),
        (1, -1, 0),
        (1, 0, 0),
        (-1, 0, 1),
        (1, 1, 1),
        (1, 0, 1),
        (1, 0, -1),
        (0, 1, 1),
        (0, 1, 0),
        (1, -1, 1),
        (1, 1, 0),
        (0, 0, 1),
        (0, 1, -1),
        (0, -1, 1),
        (1, 1, -1),
    ),
    0: (
        (-1, 0, 0),
        (-1, 1, 0),
        (1, -1, 0),
        (1, -1, -1),
        (-1, 0, 1),
        (-1, 1, -1),
        (1, 0, 1),
        (1, 0, -1),
        (0, 1, 1),
        (0, -1, 0),
        (1, -1, 1),
        (1, 1, 0),
        (-1, -1, 1),
        (0, 1, -1),
        (0, -1, 1),
        (0, 0, -1),
    ),
    1: (
        (-1, 1, 1),
        (-1, 1, 0),
        (1, -1, 0),
        (1, 0, 0),
        (-1, 0, 1),
        (-1, 1, -1),
        (-1, 0, -1),
        (1, 0, -1),
        (-1, -1, 0),
        (0, 1, 0),
        (1, -1, 1),
        (0, -1, -1),
        (0, 0, 1),
        (0, 1, -1),
        (0, -1, 1),
        (1, 1, -1),
    ),
    2: (
        (-1, 0, 0),
        (-1, 1, 0),
        (1, -1, 0),
        (1, -1, -1),
        (-1, 0, 1),
        (-1, 1, -1),
        (-1, 0, -1),
        (1, 0, -1),
        (-1, -1, 0),
        (0, -1, 0),
        (1, -1, 1),
        (0, -1, -1),
        (-1, -1, 1),
        (0, 1, -1),
        (0, -1, 1),
        (0, 0, -1),
    ),
}


def _to_int8(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value & 0x80 else value


class ConvFOMOT(Converter):
    """FOMOT converter: picks one of four code tables by the running sum."""

    title = "FOMOT convert print: "
    name = "FOMOT"
    padded_cells = True
    row_end = "\n\n"
    close_always = False

    def convert(self, start_mode: int, blocks: Sequence[int]) -> list[Symbol]:
        """Encode ``blocks`` starting from the running sum ``start_mode`` (-1 to 2)."""
        self.output = []
        mode = _to_int8(start_mode)
        for block in blocks:
            table = _TABLES.get(mode)
            if table is None:
                raise ConversionError(f"cannot convert FOMOT: mode {mode} out of range")
            if not 0 <= block < len(table):
                raise ConversionError(f"cannot convert block {block} to FOMOT")
            symbol = table[block]
            mode = _to_int8(mode + sum(symbol))
            self.output.append(symbol)
        return list(self.output)

    def render(self, symbols: Sequence[Symbol]) -> str:
        """Return the plain listing: four padded triples per row, blank line between rows."""
        return self._render(symbols, colored=False)