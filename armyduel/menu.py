"""Console input and output, and the game's menus."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from .player import Player

_WORD_PATTERN = re.compile(r"\s*(\S+)")


class Console:
    """Reads typed input a word or a line at a time and writes text out.

    A line only partly consumed by word reads keeps its remainder, which the
    next ``read_line`` returns.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._pending: str | None = None

    @property
    def _input(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def _output(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write text as is, without adding a newline."""
        out = self._output
        out.write(text)
        out.flush()

    def _next_line(self) -> str:
        line = self._input.readline()
        if line == "":
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def read_line(self) -> str:
        """Return the rest of the current line, or the next whole line."""
        if self._pending is not None:
            line, self._pending = self._pending, None
            return line
        return self._next_line()

    def read_token(self) -> str:
        """Return the next whitespace-separated word, reading lines as needed."""
        while True:
            if self._pending is None:
                self._pending = self._next_line()
            match = _WORD_PATTERN.match(self._pending)
            if match:
                self._pending = self._pending[match.end():]
                return match.group(1)
            self._pending = None

    def read_int(self) -> int | None:
        """Read a word as an integer; None if it is not one."""
        word = self.read_token()
        try:
            return int(word)
        except ValueError:
            return None


_MAIN_MENU = (
    "=== Main Menu ===\n"
    "1. New Game\n"
    "2. Load Game\n"
    "3. Display Instructions\n"
    "4. Exit\n"
)

_BETWEEN_BATTLES_MENU = (
    "=== Menu ===\n"
    "1. Continue\n"
    "2. Save game\n"
    "3. Display Army\n"
    "4. Restart\n"
    "5. Exit\n"
)

_INSTRUCTIONS = (
    "\n----INSTRUCTIONS----\n"
    "The game is played by the principle best of 5 duels (first to 3 points).\n"
    "Each round gives one point to the winner.\n"
    "A duel is won when the selected enemy units have no hp left.\n"
    "When you press New Game:\n"
    "You have to pick the units and commanders that you will take into battle.\n"
    "Your bot opponent will pick his units automatically\n"
    "Before each round you will have to select commanders to take into battle.\n"
    "You will also be given the chance to add more units to ur regular army every round.\n"
    "\n"
)

_SELECTION_INSTRUCTIONS = (
    "\nTo select commanders for the upcoming battle type 'SELECT BOSS <boss name>'. \n"
    "To select units type 'SELECT <unit name> <unit count>'\n"
    "To advance to the next stage of battle, once you have selected the units type 'START'\n"
    "Type show to see both your selected army for battler and your whole army.\n"
    "\n"
)


class Menu:
    """The main, between-battle and end-of-game screens."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console()

    def _choose(self, text: str, highest: int) -> int:
        while True:
            self.console.write(text)
            choice = self.console.read_int()
            if choice is None:
                self.console.write("Invalid input.\n\n")
            elif 1 <= choice <= highest:
                return choice
            else:
                self.console.write("Wrong number, try again.\n\n")

    def main_menu(self) -> int:
        """Ask until a main-menu option from 1 to 4 is chosen."""
        return self._choose(_MAIN_MENU, 4)

    def between_battles_menu(self) -> int:
        """Ask until a between-battles option from 1 to 5 is chosen."""
        return self._choose(_BETWEEN_BATTLES_MENU, 5)

    def instructions(self) -> None:
        self.console.write(_INSTRUCTIONS)

    def selection_instructions(self) -> None:
        self.console.write(_SELECTION_INSTRUCTIONS)

    def end_game(self, player: Player, bot: Player) -> None:
        """Announce the overall result of the duels."""
        if bot.points > player.points:
            self.console.write("\n\n\n |||===============YOU LOST===============|||")
            self.console.write("\n\n Better luck next time! Thanks for playing!")
        else:
            self.console.write("\n\n\n |||===============YOU WON===============|||")
            self.console.write("\n\n Thanks for playing!")