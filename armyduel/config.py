"""Game constants and lookups of unit and commander kinds."""

from __future__ import annotations

from enum import Enum

STARTING_GOLD = 2000
BONUS_GOLD_PER_DUEL = 1000
MAX_NORMAL_UNITS = 10
MAX_COMMANDER_UNITS = 5
BONUS_MANA_PER_HIT = 75

UNAVAILABLE_COST = 2**31 - 1
"""Cost reported for a name that cannot be bought."""

_UNIT_COSTS = {
    "Infantry": 250,
    "Archer": 300,
    "Knight": 700,
    "Healer": 150,
    "Wizard": 400,
    "Skeleton": 100,
    "Ghoul": 250,
    "Necromancer": 400,
    "Zombie": 300,
    "Dibbuk": 300,
    "Revenant": 300,
    "Ghost": 500,
}

_VALID_COMMANDERS = frozenset({"paladin", "bladedancer", "undeadhunter"})


class CommanderType(Enum):
    """Kinds of commander, keyed by lower-case name."""

    PALADIN = 0
    BLADE_DANCER = 1
    UNDEAD_HUNTER = 2
    LICH = 3
    LORD_OF_TERROR = 4


class UnitType(Enum):
    """Kinds of unit the player can select for battle."""

    INFANTRY = 0
    ARCHER = 1
    KNIGHT = 2
    HEALER = 3
    WIZARD = 4


_COMMANDER_TYPES = {
    "paladin": CommanderType.PALADIN,
    "bladedancer": CommanderType.BLADE_DANCER,
    "undeadhunter": CommanderType.UNDEAD_HUNTER,
    "lich": CommanderType.LICH,
    "lordofterror": CommanderType.LORD_OF_TERROR,
}

_UNIT_TYPES = {
    "Infantry": UnitType.INFANTRY,
    "Archer": UnitType.ARCHER,
    "Knight": UnitType.KNIGHT,
    "Healer": UnitType.HEALER,
    "Wizard": UnitType.WIZARD,
}


def unit_cost(name: str) -> int:
    """Gold cost of a unit, or UNAVAILABLE_COST for an unknown name."""
    return _UNIT_COSTS.get(name, UNAVAILABLE_COST)


def is_valid_unit(name: str) -> bool:
    """Whether the name is a unit that has a price."""
    return unit_cost(name) != UNAVAILABLE_COST


def is_valid_commander(name: str) -> bool:
    """Whether the lower-case name is a commander the player may pick."""
    return name in _VALID_COMMANDERS


def commander_type(name: str) -> CommanderType | None:
    """Commander kind for a lower-case name, or None if unknown."""
    return _COMMANDER_TYPES.get(name)


def unit_type(name: str) -> UnitType | None:
    """Unit kind for a capitalised name, or None if unknown."""
    return _UNIT_TYPES.get(name)