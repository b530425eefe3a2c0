"""Random army building for the computer opponent."""

from __future__ import annotations

import random

from .config import unit_cost
from .player import Player
from .recruiting import (
    try_add_commander,
    try_add_selected_commander,
    try_add_unit,
    try_select_unit,
)
from .units import (
    Dibuk,
    Ghost,
    Ghoul,
    Lich,
    LordOfTerror,
    Necromancer,
    Revenant,
    Skeleton,
)

_UNIT_CHOICES = (Skeleton, Ghost, Ghoul, Revenant, Dibuk, Necromancer)
_UNIT_NAMES = ("Skeleton", "Ghost", "Ghoul", "Revenant", "Dibuk", "Necromancer")
_COMMANDER_CHOICES = (LordOfTerror, Lich)


class BotArmyBuilder:
    """Recruits and selects the bot's army at random."""

    def __init__(self, player: Player, rng: random.Random | None = None) -> None:
        self.player = player
        self.rng = rng if rng is not None else random.Random()

    def build_army(self) -> None:
        """Spend gold on units, then pick the force for the next battle."""
        self.pick_units()
        self.select_army()
        print("\nBot Army building complete.")

    def pick_units(self) -> None:
        """Buy random units until the army is full or nothing is affordable."""
        army = self.player.army
        costs = [unit_cost(name) for name in _UNIT_NAMES]
        while army.units_left_to_add > 0:
            gold = self.player.gold
            choice = self.rng.randint(1, len(_UNIT_CHOICES)) - 1
            if gold >= costs[choice]:
                try_add_unit(self.player, _UNIT_CHOICES[choice])
            if all(gold < cost for cost in costs):
                break

    def pick_commanders(self) -> None:
        """Fill every free commander slot with a random commander."""
        while self.player.army.commanders_left_to_add > 0:
            choice = self.rng.randint(1, len(_COMMANDER_CHOICES)) - 1
            try_add_commander(self.player, _COMMANDER_CHOICES[choice])

    def _available(self, members, selected, kinds) -> int:
        return sum(
            1 for m in members if isinstance(m, kinds) and m not in selected
        )

    def select_army(self) -> None:
        """Select a random number of commanders and units for battle."""
        army = self.player.army

        total_commanders = len(army.commanders)
        if total_commanders == 0:
            print("No commanders to select from.")
            return
        wanted = self.rng.randint(1, total_commanders)
        wanted = min(
            wanted,
            self._available(
                army.commanders, army.selected_commanders, _COMMANDER_CHOICES
            ),
        )
        selected = 0
        while selected < wanted:
            choice = self.rng.randint(1, len(_COMMANDER_CHOICES)) - 1
            if try_add_selected_commander(self.player, _COMMANDER_CHOICES[choice]):
                selected += 1

        total_units = len(army.units)
        if total_units == 0:
            print("Not enough units to select from.")
            return
        wanted = self.rng.randint(1, total_units)
        wanted = min(
            wanted,
            self._available(army.units, army.selected_units, _UNIT_CHOICES),
        )
        selected = 0
        while selected < wanted:
            choice = self.rng.randint(1, len(_UNIT_CHOICES)) - 1
            if try_select_unit(self.player, _UNIT_CHOICES[choice]):
                selected += 1