"""Interactive recruiting and battle selection for the human player."""

from __future__ import annotations

import re

from .config import (
    CommanderType,
    UnitType,
    commander_type,
    is_valid_commander,
    is_valid_unit,
    unit_cost,
    unit_type,
)
from .menu import Console, Menu
from .player import Player
from .recruiting import (
    try_add_commander,
    try_add_selected_commander,
    try_add_unit,
    try_select_units,
)
from .text import capitalize_only_first, split_words, to_lower
from .units import (
    Archer,
    BladeDancer,
    Commander,
    Healer,
    Infantry,
    Knight,
    Paladin,
    UndeadHunter,
    Unit,
    Wizard,
)

_COMMANDER_CHOICES: dict[int, type[Commander]] = {
    1: BladeDancer,
    2: UndeadHunter,
    3: Paladin,
}

_UNIT_CHOICES: dict[int, type[Unit]] = {
    1: Knight,
    2: Archer,
    3: Infantry,
    4: Healer,
    5: Wizard,
}

_SELECTABLE_UNITS: dict[UnitType, type[Unit]] = {
    UnitType.INFANTRY: Infantry,
    UnitType.ARCHER: Archer,
    UnitType.KNIGHT: Knight,
    UnitType.HEALER: Healer,
    UnitType.WIZARD: Wizard,
}

_SELECTABLE_COMMANDERS: dict[CommanderType, type[Commander]] = {
    CommanderType.PALADIN: Paladin,
    CommanderType.BLADE_DANCER: BladeDancer,
    CommanderType.UNDEAD_HUNTER: UndeadHunter,
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class ArmyBuilder:
    """Lets the player recruit an army and choose who fights."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console()
        self.menu = Menu(self.console)

    def _ask(self, text: str, highest: int) -> int:
        while True:
            self.console.write(text)
            choice = self.console.read_int()
            if choice is None:
                self.console.write("Invalid input.\n\n")
            elif 1 <= choice <= highest:
                self.console.write("\n")
                return choice
            else:
                self.console.write("Invalid option.\n\n")

    def pick_alive_commanders(self, player: Player) -> None:
        """Recruit commanders, then go on to recruiting units."""
        self.console.write(
            "\nYou have to pick up to 5 commanders that will serve you in battle.\n"
        )
        while True:
            choice = self.commander_picker(player.army.commanders_left_to_add)
            if choice in _COMMANDER_CHOICES:
                if not try_add_commander(player, _COMMANDER_CHOICES[choice]):
                    self.console.write("Your list of commanders is already full\n")
            elif choice == 4:
                self.console.write(player.army.describe())
            else:
                self.pick_alive_units(player)
                return

    def pick_alive_units(self, player: Player) -> None:
        """Buy units, then go on to selecting the army for battle."""
        self.console.write(
            "\nYou have to pick up to 10 units that will serve you in battle.\n"
        )
        while True:
            choice = self.unit_picker(player.army.units_left_to_add, player.gold)
            if choice in _UNIT_CHOICES:
                unit_class = _UNIT_CHOICES[choice]
                full = player.army.units_left_to_add <= 0
                affordable = player.gold >= unit_cost(unit_class.__name__)
                if not try_add_unit(player, unit_class) and full and affordable:
                    self.console.write("Your list of units is already full\n")
            elif choice == 6:
                self.console.write(player.army.describe())
            else:
                self.select_army(player)
                return

    def unit_picker(self, units_left: int, gold: int) -> int:
        """Ask until a unit menu option from 1 to 7 is chosen."""
        lines = [
            f"{units_left} Units left to pick\n",
            f"{gold} Gold available.\n\n",
            "\n=== PICK UNITS FOR YOUR ARMY ===\n\n",
        ]
        lines += [
            f"{number}. {cls.__name__} - {unit_cost(cls.__name__)} gold\n"
            for number, cls in _UNIT_CHOICES.items()
        ]
        lines += ["6. Show current army\n", "7. Go to army selection\n\n"]
        return self._ask("".join(lines), 7)

    def commander_picker(self, commanders_left: int) -> int:
        """Ask until a commander menu option from 1 to 5 is chosen."""
        lines = [
            f"{commanders_left} Commanders left to pick\n",
            "\n=== PICK COMMANDERS FOR YOUR ARMY ===\n",
        ]
        lines += [
            f"{number}. {cls.__name__}\n"
            for number, cls in _COMMANDER_CHOICES.items()
        ]
        lines += ["4. Show current army\n", "5. Go to picking units\n\n"]
        return self._ask("".join(lines), 5)

    def select_army(self, player: Player) -> None:
        """Read SELECT, SHOW and START commands until the battle starts."""
        self.menu.selection_instructions()
        self.console.read_line()

        while True:
            words = split_words(to_lower(self.console.read_line()))
            if not words:
                self.console.write("Empty input. Try again.\n")
                continue

            if words[0] == "select":
                if len(words) >= 3 and words[1] == "boss":
                    if is_valid_commander(words[2]):
                        self.select_commanders(player, words[2])
                elif len(words) >= 3:
                    count_text = words[2]
                    count = _leading_int(count_text)
                    if count <= 0:
                        self.console.write(f"Invalid unit count: {count_text}\n")
                        continue
                    unit_name = capitalize_only_first(words[1])
                    if is_valid_unit(unit_name):
                        self.select_units(player, unit_name, count)
                    else:
                        self.console.write("Incomplete SELECT command.\n")
            elif words == ["start"]:
                break
            elif words == ["show"]:
                self.console.write(player.army.describe_selected())
                self.console.write(player.army.describe())
            else:
                self.console.write("Incorrect input, try again.\n")

        self.console.write("GAME HAS STARTED.\n")

    def select_units(self, player: Player, unit_name: str, count: int) -> int:
        """Select up to count units of the named kind; return how many were."""
        kind = unit_type(unit_name)
        if kind is None:
            self.console.write(f"Unknown unit type: {unit_name}\n")
            return 0
        return try_select_units(player, _SELECTABLE_UNITS[kind], count)

    def select_commanders(self, player: Player, commander_name: str) -> bool:
        """Select one commander of the named kind; return whether one was."""
        kind = commander_type(commander_name)
        commander_class = _SELECTABLE_COMMANDERS.get(kind) if kind else None
        if commander_class is None:
            self.console.write(f"Unknown commander type: {commander_name}\n")
            return False
        return try_add_selected_commander(player, commander_class)