"""A player: gold, points and an army, with saving and loading."""

from __future__ import annotations

import os
from collections.abc import Iterator

from .army import Army, ArmyFullError
from .config import STARTING_GOLD, CommanderType, commander_type
from .text import to_lower
from .units import BladeDancer, Commander, Lich, LordOfTerror, Paladin, UndeadHunter

_COMMANDER_CLASSES: dict[CommanderType, type[Commander]] = {
    CommanderType.PALADIN: Paladin,
    CommanderType.BLADE_DANCER: BladeDancer,
    CommanderType.UNDEAD_HUNTER: UndeadHunter,
    CommanderType.LICH: Lich,
    CommanderType.LORD_OF_TERROR: LordOfTerror,
}


class NotEnoughGoldError(Exception):
    """Raised when a purchase costs more gold than the player has."""


def _tokens(lines: Iterator[str], count: int) -> list[str]:
    found: list[str] = []
    try:
        while len(found) < count:
            found.extend(next(lines).split())
    except StopIteration:
        raise ValueError("truncated save file") from None
    return found[:count]


class Player:
    """Someone taking part in the duels."""

    def __init__(self) -> None:
        self.gold = STARTING_GOLD
        self.points = 0
        self.army = Army()

    def __repr__(self) -> str:
        return f"<Player gold={self.gold} points={self.points} {self.army!r}>"

    def spend_gold(self, amount: int) -> None:
        """Pay the amount, or raise NotEnoughGoldError."""
        if amount > self.gold:
            raise NotEnoughGoldError("Not enough gold!")
        self.gold -= amount

    def add_gold(self, amount: int) -> None:
        self.gold += amount

    def add_point(self) -> None:
        self.points += 1

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write gold, points and commanders to a text file."""
        lines = [str(self.gold), str(self.points), str(len(self.army.commanders))]
        for commander in self.army.commanders:
            lines += [
                commander.name,
                f"{commander.hp:g}",
                str(commander.mana),
                str(commander.armor_value),
            ]
        with open(path, "w", encoding="utf-8") as out:
            out.write("\n".join(lines) + "\n")
        print(f"Game saved to {os.fspath(path)}")

    def load(self, path: str | os.PathLike[str]) -> None:
        """Read gold, points and commanders written by save.

        Loaded commanders are added to those already recruited.
        """
        with open(path, encoding="utf-8") as src:
            lines = iter(src.read().splitlines())

        gold, points, count = _tokens(lines, 3)
        self.gold = int(gold)
        self.points = int(points)
        self.army.clear_selected()

        for _ in range(int(count)):
            try:
                name = next(lines).strip()
            except StopIteration:
                raise ValueError("truncated save file") from None
            hp, mana, armor = _tokens(lines, 3)

            kind = commander_type(to_lower(name))
            if kind is None:
                continue
            commander = _COMMANDER_CLASSES[kind]()
            try:
                self.army.add_commander(commander)
            except ArmyFullError:
                continue
            commander.hp = int(float(hp))
            commander.mana = int(mana)
            commander.armor_value = int(armor)

        print(f"Game loaded from {os.fspath(path)}")