"""The game loop: menus, battles, saving and loading."""

from __future__ import annotations

import argparse
import random

from .battle import start_battle
from .bot import BotArmyBuilder
from .builder import ArmyBuilder
from .config import STARTING_GOLD
from .menu import Console, Menu
from .player import Player

WINNING_POINTS = 3
"""Points a side needs to win the whole game."""


class Game:
    """A best-of-five series of duels between the player and the bot."""

    def __init__(
        self, console: Console | None = None, rng: random.Random | None = None
    ) -> None:
        self.console = console if console is not None else Console()
        self.player = Player()
        self.bot = Player()
        self.bot_builder = BotArmyBuilder(self.bot, rng)
        self.army_builder = ArmyBuilder(self.console)
        self.menu = Menu(self.console)

    def start(self) -> None:
        """Show the main menu and act on the choice."""
        while True:
            choice = self.menu.main_menu()
            if choice == 1:
                self.army_builder.pick_alive_commanders(self.player)
                self.bot_builder.pick_commanders()
                self.bot_builder.build_army()
                self.start_battle()
                return
            if choice == 2:
                self.load_game()
                self.between_battles_menu()
                return
            if choice == 3:
                self.menu.instructions()
                continue
            self.console.write("Thanks for playing!")
            return

    def start_battle(self) -> None:
        """Fight one duel, then continue the series or show the results."""
        start_battle(self.player, self.bot)
        if self.player.points < WINNING_POINTS and self.bot.points < WINNING_POINTS:
            self.between_battles_menu()
        else:
            self.show_results()

    def between_battles_menu(self) -> None:
        """Show the score, rebuild the bot's army and offer the next steps."""
        self.console.write("\n\n Current score: \n")
        self.console.write(f"Player points: {self.player.points}\n")
        self.console.write(f"Opponent points: {self.bot.points}\n")
        self.bot_builder.build_army()

        while True:
            choice = self.menu.between_battles_menu()
            if choice == 1:
                self.army_builder.pick_alive_units(self.player)
                self.start_battle()
                return
            if choice == 2:
                self.save_game()
                continue
            if choice == 3:
                self.console.write(self.bot.army.describe())
                self.console.write(self.bot.army.describe_selected())
                self.console.write(self.player.army.describe())
                self.console.write(self.player.army.describe_selected())
                continue
            if choice == 4:
                self.reset()
            self.console.write("Thanks for playing!")
            return

    def save_game(self) -> None:
        """Ask for a file name prefix and save both players under it."""
        self.console.write("Enter filename to save: ")
        prefix = self.console.read_token()
        try:
            self.player.save(f"{prefix}_p1.txt")
            self.bot.save(f"{prefix}_bot.txt")
        except OSError as exc:
            self.console.write(f"Failed to open file for saving: {exc.filename}\n")
            return
        self.console.write("Game saved successfully!\n")

    def load_game(self) -> None:
        """Ask for a file name prefix and load both players from it."""
        self.console.write("Enter filename to load: ")
        prefix = self.console.read_token()
        try:
            self.player.load(f"{prefix}_p1.txt")
            self.bot.load(f"{prefix}_bot.txt")
        except OSError as exc:
            self.console.write(f"Failed to open file for loading: {exc.filename}\n")
            return
        except ValueError as exc:
            self.console.write(f"Failed to load game: {exc}\n")
            return
        self.console.write("Game loaded successfully!\n")

    def show_results(self) -> None:
        """Show both armies and announce who won the series."""
        self.console.write(self.player.army.describe())
        self.console.write(self.bot.army.describe())
        self.menu.end_game(self.player, self.bot)

    def reset(self) -> None:
        """Wipe both sides back to a fresh game and return to the main menu."""
        for side in (self.player, self.bot):
            side.army.clear_commanders()
            side.army.clear_units()
            side.gold = STARTING_GOLD
            side.points = 0
        self.start()


def main(argv: list[str] | None = None) -> int:
    """Run the game on the terminal."""
    parser = argparse.ArgumentParser(
        prog="armyduel", description="Turn-based army duels against a bot."
    )
    parser.parse_args(argv)
    try:
        Game().start()
    except (EOFError, KeyboardInterrupt):
        pass
    return 0