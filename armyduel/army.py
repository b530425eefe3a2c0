"""An army: recruited units and commanders, plus those picked for battle."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from .config import MAX_COMMANDER_UNITS, MAX_NORMAL_UNITS
from .units import Commander, Unit


class ArmyFullError(Exception):
    """Raised when no more units or commanders fit in the army."""


def _section(title: str, members: Iterable[Unit]) -> str:
    lines = "".join(f"{member.describe()}\n" for member in members)
    return f"\n--- {title} ---\n{lines}"


class Army:
    """Owns recruited units and commanders and tracks the battle selection."""

    def __init__(self) -> None:
        self.units: list[Unit] = []
        self.commanders: list[Commander] = []
        self.temp_units: list[Unit] = []
        self.selected_units: list[Unit] = []
        self.selected_commanders: list[Commander] = []
        self.units_left_to_add = MAX_NORMAL_UNITS
        self.commanders_left_to_add = MAX_COMMANDER_UNITS

    def __repr__(self) -> str:
        return (
            f"<Army units={len(self.units)} commanders={len(self.commanders)} "
            f"selected={len(self.selected_units)}+{len(self.selected_commanders)}>"
        )

    def add_unit(self, unit: Unit) -> None:
        """Recruit a unit; raise ArmyFullError if there is no room left."""
        if self.units_left_to_add <= 0:
            raise ArmyFullError("Your list of units is already full")
        self.units.append(unit)
        self.units_left_to_add -= 1

    def add_commander(self, commander: Commander) -> None:
        """Recruit a commander; raise ArmyFullError if there is no room left."""
        if self.commanders_left_to_add <= 0:
            raise ArmyFullError("Your list of commanders is already full")
        self.commanders.append(commander)
        self.commanders_left_to_add -= 1

    def remove_unit(self, index: int) -> None:
        """Drop the unit at index if there is one; a slot is freed either way."""
        if 0 <= index < len(self.units):
            del self.units[index]
        self.units_left_to_add += 1

    def remove_commander(self, index: int) -> None:
        """Drop the commander at index if there is one."""
        if 0 <= index < len(self.commanders):
            del self.commanders[index]

    def add_to_selected_units(self, unit: Unit) -> None:
        self.selected_units.append(unit)

    def remove_from_selected_units(self, index: int) -> None:
        if 0 <= index < len(self.selected_units):
            del self.selected_units[index]

    def add_temporary_unit(self, unit: Unit) -> None:
        """Add a summoned unit that fights only in the current battle."""
        self.selected_units.append(unit)
        self.temp_units.append(unit)

    def clear_temp_units(self) -> None:
        """Remove summoned units from the selection and forget them."""
        temp_ids = {id(unit) for unit in self.temp_units}
        self.selected_units = [
            unit for unit in self.selected_units if id(unit) not in temp_ids
        ]
        self.temp_units.clear()

    def clear_selected(self) -> None:
        self.selected_units.clear()
        self.selected_commanders.clear()

    def remove_dead(self) -> None:
        """Drop dead members everywhere and free their slots."""
        self.selected_units = [u for u in self.selected_units if not u.is_dead()]
        self.selected_commanders = [
            c for c in self.selected_commanders if not c.is_dead()
        ]

        alive_units = [u for u in self.units if not u.is_dead()]
        self.units_left_to_add += len(self.units) - len(alive_units)
        self.units = alive_units

        alive_commanders = [c for c in self.commanders if not c.is_dead()]
        self.commanders_left_to_add += len(self.commanders) - len(alive_commanders)
        self.commanders = alive_commanders

    def clear_commanders(self) -> None:
        self.selected_commanders.clear()
        self.commanders.clear()
        self.commanders_left_to_add = MAX_COMMANDER_UNITS

    def clear_units(self) -> None:
        self.selected_units.clear()
        self.units.clear()
        self.units_left_to_add = MAX_NORMAL_UNITS

    def describe(self) -> str:
        """Listing of every recruited unit and commander."""
        return (
            _section("Units", self.units)
            + _section("Commanders", self.commanders)
            + "\n\n"
        )

    def describe_selected(self) -> str:
        """Listing of the units and commanders picked for battle."""
        return (
            _section("Selected Units", self.selected_units)
            + _section("Selected Commanders", self.selected_commanders)
            + "\n\n"
        )

    def print_army(self) -> None:
        """Write the full army listing to standard output."""
        listing = self.describe()
        out = sys.stdout
        out.write(listing)
        out.flush()

    def print_selected_army(self) -> None:
        """Write the battle selection listing to standard output."""
        listing = self.describe_selected()
        out = sys.stdout
        out.write(listing)
        out.flush()