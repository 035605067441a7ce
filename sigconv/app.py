"""Interactive terminal menu for converting binary signals to 4B3T or FOMOT."""

from __future__ import annotations

import argparse
import os
import sys
import warnings
from typing import Callable, TextIO

from .bits import clear_console
from .converter import ConversionError, Converter
from .fomot import ConvFOMOT
from .fourbthreet import Conv4B3T
from .keys import Key, KeyType, read_key
from .settings import (
    GREEN_B,
    MAGENTA_B,
    MAIN_LABEL,
    RED_B,
    RESET,
    TEXT_IN_FILE,
    YELLOW_B,
    BLUE_B,
    Settings,
)
from .sigblocks import Signal, SignalError

RULE = "-----------------------------------------------------"

MENU_ITEMS = (
    ("1", "Convert to 4B3T"),
    ("2", "Convert to FOMOT"),
    ("3", "Switch console/file output"),
    ("4", "Set input path"),
    ("5", "Set output path"),
    ("0", "EXIT"),
)

CONVERT_4B3T = 0
CONVERT_FOMOT = 1
SWITCH_OUTPUT = 2
SET_IN_PATH = 3
SET_OUT_PATH = 4
EXIT = 5

MODES_4B3T = (-2, 3)
MODES_FOMOT = (-1, 2)


class App:
    """Menu-driven signal converter bound to text streams and a key reader."""

    def __init__(
        self,
        settings: Settings | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        key_reader: Callable[[], Key] | None = None,
    ) -> None:
        self.settings = settings if settings is not None else Settings()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        if key_reader is None:
            if stdin is None:
                key_reader = read_key
            else:
                key_reader = lambda: read_key(self.stdin)  # noqa: E731
        self.key_reader = key_reader
        self.signal = Signal()
        self.c4b3t = Conv4B3T()
        self.cfomot = ConvFOMOT()
        self.msg_to_display = ""

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _rule(self) -> None:
        self._write(f"{GREEN_B}{RULE}{RESET}\n")

    def _clear(self) -> None:
        clear_console(self.stdout)

    def _read_token(self) -> str:
        while True:
            line = self.stdin.readline()
            if not line:
                raise EOFError("no more input")
            parts = line.split()
            if parts:
                return parts[0]

    def _describe(self, position: int) -> str:
        in_file_suffix = TEXT_IN_FILE if self.settings.in_file else ""
        if position == EXIT:
            return "Exit from programm"
        if position == CONVERT_4B3T:
            return "Convert signal to 4B3T" + in_file_suffix
        if position == CONVERT_FOMOT:
            return "Convert signal to FOMOT" + in_file_suffix
        if position == SWITCH_OUTPUT:
            return "Switch type of output. Now: " + self.settings.output_label()
        if position == SET_IN_PATH:
            return "Enter path for input file. Now: " + self.settings.path_in
        if position == SET_OUT_PATH:
            return "Enter path for output file. Now: " + self.settings.path_out
        return ""

    def _draw_menu(self, active: int) -> None:
        self._write(f"{GREEN_B}{MAIN_LABEL}\n\n")
        self._rule()
        for position, (number, label) in enumerate(MENU_ITEMS):
            marker = RED_B if position == active else MAGENTA_B
            self._write(f"{marker}\t\t{number}.{YELLOW_B}{label}{RESET}\n")
        self._rule()
        if self.msg_to_display:
            self._write(f"{GREEN_B}{self.msg_to_display}\n")
            self._rule()
        self.stdout.flush()

    def main_menu(self) -> int:
        """Show the menu until the user picks an entry; return its position (5 is exit)."""
        active = 0
        last = len(MENU_ITEMS) - 1
        self._clear()
        while True:
            self._draw_menu(active)
            key = self.key_reader()
            if key.type is KeyType.ARROW_DOWN:
                active = active + 1 if active != last else 0
            elif key.type is KeyType.ARROW_UP:
                active = active - 1 if active != 0 else last
            elif key.type is KeyType.ENTER:
                return active
            elif key.type is KeyType.ESCAPE:
                return EXIT
            self.msg_to_display = self._describe(active)
            self._clear()

    def _ask_start_mode(self, low: int, high: int) -> None:
        self._write(f"{YELLOW_B}Enter start sum from {low} to {high} (default = 0): \n")
        self.stdout.flush()
        token = self._read_token()
        try:
            value = int(token)
        except ValueError:
            return
        if low <= value <= high:
            self.settings.start_mode = value

    def _load_signal(self) -> None:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            if self.settings.in_file:
                self.signal.fread(self.settings.path_in)
            else:
                self.signal.read(self.stdin, self.stdout)
        for warning in caught:
            self._write(f"{YELLOW_B}Warning: {warning.message}{RESET}\n")

    def _convert(
        self,
        converter: Converter,
        modes: tuple[int, int],
        ask_mode: bool,
        to_file: bool,
    ) -> None:
        self._clear()
        try:
            self._load_signal()
            if ask_mode:
                self._ask_start_mode(*modes)
                self._clear()
            self._rule()
            self._write(
                f"{YELLOW_B}Start sum: {BLUE_B}{self.settings.start_mode}{RESET}\n"
            )
            self._rule()
            self.signal.display(self.stdout)
            blocks = list(self.signal.blocks)
            if to_file:
                converter.convert_to_file(
                    self.settings.start_mode, blocks, self.settings.path_out
                )
            else:
                converter.convert_to_console(
                    self.settings.start_mode, blocks, self.stdout
                )
        except (SignalError, ConversionError) as exc:
            self._write(f"{RED_B}Error: {exc}{RESET}\n")

        self._write("\n\n\n")
        self._rule()
        self._write(f"{YELLOW_B}Press any button (not power off!) to continue {RESET}\n")
        self._rule()
        self.stdout.flush()
        self.key_reader()

    def convert_4b3t(self) -> None:
        """Read a signal and write its 4B3T code to the output file."""
        in_file = self.settings.in_file
        self._convert(self.c4b3t, MODES_4B3T, ask_mode=not in_file, to_file=True)

    def convert_fomot(self) -> None:
        """Read a signal and print or write its FOMOT code."""
        in_file = self.settings.in_file
        self._convert(self.cfomot, MODES_FOMOT, ask_mode=True, to_file=in_file)

    def set_in_path(self) -> None:
        """Ask for the input file path; accept it only if it exists."""
        self._clear()
        self._write(f"{YELLOW_B}Write path to input file:  {RESET}\n")
        self.stdout.flush()
        path = self._read_token()
        if os.path.exists(path):
            self.settings.path_in = path
            self.msg_to_display = "Path added successful"
        else:
            self.msg_to_display = "Path not exist"

    def set_out_path(self) -> None:
        """Ask for the output file path, creating its directory if needed."""
        self._clear()
        self._write(f"{YELLOW_B}Write path to output file:  {RESET}\n")
        self.stdout.flush()
        path = self._read_token()
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.settings.path_out = path
        self.msg_to_display = "Path added successful"

    def switch_output(self) -> None:
        """Toggle between console and file output."""
        self.settings.in_file = not self.settings.in_file

    def run(self) -> None:
        """Run the menu loop until the user chooses to exit."""
        self.msg_to_display = self._describe(CONVERT_4B3T)
        actions = {
            CONVERT_4B3T: self.convert_4b3t,
            CONVERT_FOMOT: self.convert_fomot,
            SWITCH_OUTPUT: self.switch_output,
            SET_IN_PATH: self.set_in_path,
            SET_OUT_PATH: self.set_out_path,
        }
        while True:
            action = actions.get(self.main_menu())
            if action is None:
                return
            action()


def main(argv: list[str] | None = None) -> int:
    """Start the interactive converter."""
    parser = argparse.ArgumentParser(
        prog="sigconv",
        description="Convert binary signals to 4B3T or FOMOT line codes.",
    )
    parser.parse_args(argv)
    try:
        App().run()
    except (EOFError, KeyboardInterrupt):
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())