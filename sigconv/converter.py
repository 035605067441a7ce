"""Common machinery for converting 4-bit blocks into ternary symbols."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence, TextIO

from .settings import BLUE_B, RESET, YELLOW_B

Symbol = tuple[int, int, int]

SYMBOLS_PER_ROW = 4


class ConversionError(RuntimeError):
    """Raised when a signal cannot be converted or written out."""


class Converter(ABC):
    """Base converter: turns blocks into symbols and prints them in rows of four."""

    title = "Base convert print (not override): "
    name = "base"
    padded_cells = False
    row_end = "\n"
    close_always = True

    def __init__(self) -> None:
        self.output: list[Symbol] = []

    @abstractmethod
    def convert(self, start_mode: int, blocks: Sequence[int]) -> list[Symbol]:
        """Convert ``blocks`` starting from ``start_mode`` and store the result in ``output``."""

    def _format_cell(self, value: int) -> str:
        if not self.padded_cells:
            return str(value)
        if value in (0, 1):
            return f" {value} "
        if value == -1:
            return "-1 "
        raise ConversionError(f"cannot print {self.name} symbol value {value}")

    def _render(self, symbols: Sequence[Symbol], colored: bool) -> str:
        bar = f"{BLUE_B}|{RESET}" if colored else "|"
        header = f"{YELLOW_B}{self.title}{RESET}" if colored else self.title
        parts = [header, "\n"]
        for count, symbol in enumerate(symbols, 1):
            parts.append(bar)
            parts.extend(self._format_cell(value) for value in symbol)
            if count % SYMBOLS_PER_ROW == 0:
                parts.append(bar + self.row_end)
        if self.close_always or len(symbols) % SYMBOLS_PER_ROW:
            parts.append(bar + "\n")
        return "".join(parts)

    def render(self, symbols: Sequence[Symbol]) -> str:
        """Return the plain-text listing of ``symbols``."""
        return self._render(symbols, colored=False)

    def convert_to_console(
        self, start_mode: int, blocks: Sequence[int], stream: TextIO
    ) -> list[Symbol]:
        """Convert and print the coloured listing to ``stream``."""
        symbols = self.convert(start_mode, blocks)
        stream.write(self._render(symbols, colored=True))
        stream.flush()
        return symbols

    def convert_to_file(
        self, start_mode: int, blocks: Sequence[int], path: str
    ) -> list[Symbol]:
        """Convert and write the plain listing to the file at ``path``."""
        symbols = self.convert(start_mode, blocks)
        text = self.render(symbols)
        try:
            with open(path, "w", encoding="utf-8") as handle:
                handle.write(text)
        except OSError as exc:
            raise ConversionError(f"cannot open output file {path!r}") from exc
        return symbols