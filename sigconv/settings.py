"""Application settings, labels and terminal colour codes."""

from __future__ import annotations

from dataclasses import dataclass

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
VIOLET = "\033[35m"
MAGENTA = "\033[36m"
WHITE = "\033[37m"

RED_B = "\033[1;31m"
GREEN_B = "\033[1;32m"
YELLOW_B = "\033[1;33m"
BLUE_B = "\033[1;34m"
VIOLET_B = "\033[1;35m"
MAGENTA_B = "\033[1;36m"
WHITE_B = "\033[1;37m"

RESET = "\033[0m"

MAIN_LABEL = r"""*****************************************************
*   _____ _____ _____  _____ ____  _   ___      __  *
*  / ____|_   _/ ____|/ ____/ __ \| \ | \ \    / /  *
* | (___   | || |  __| |   | |  | |  \| |\ \  / /   *
*  \___ \  | || | |_ | |   | |  | | . ` | \ \/ /    *
*  ____) |_| || |__| | |___| |__| | |\  |  \  /     *
* |_____/|_____\_____|\_____\____/|_| \_|   \/      *
*                                             v:1.0 *
*****************************************************"""

TEXT_IN_FILE = "(in file)"
TEXT_IN_CONSOLE = "(in console)"


@dataclass
class Settings:
    """User preferences for a conversion session."""

    path_in: str = "in.txt"
    path_out: str = "out.txt"
    start_mode: int = 0
    in_file: bool = False

    def output_label(self) -> str:
        """Describe where conversion output goes."""
        return TEXT_IN_FILE if self.in_file else TEXT_IN_CONSOLE