"""Buying units and commanders and picking them for battle."""

from __future__ import annotations

from .army import ArmyFullError
from .player import NotEnoughGoldError, Player
from .units import Commander, Unit


def try_add_unit(player: Player, unit_class: type[Unit]) -> bool:
    """Buy and recruit one unit; return whether the purchase went through.

    Gold is paid before the unit is added, so a full army still costs gold.
    """
    unit = unit_class()
    try:
        player.spend_gold(unit.cost)
        player.army.add_unit(unit)
    except (NotEnoughGoldError, ArmyFullError):
        return False
    return True


def try_add_commander(player: Player, commander_class: type[Commander]) -> bool:
    """Recruit one commander; return whether there was room for it."""
    try:
        player.army.add_commander(commander_class())
    except ArmyFullError:
        return False
    return True


def try_select_units(player: Player, unit_class: type[Unit], count: int) -> int:
    """Select up to count unselected units of a kind; return how many were."""
    army = player.army
    added = 0
    for unit in army.units:
        if added >= count:
            break
        if isinstance(unit, unit_class) and unit not in army.selected_units:
            army.selected_units.append(unit)
            added += 1
    return added


def try_select_unit(player: Player, unit_class: type[Unit]) -> bool:
    """Select one unselected unit of a kind; return whether one was found."""
    return try_select_units(player, unit_class, 1) == 1


def try_add_selected_commander(
    player: Player, commander_class: type[Commander]
) -> bool:
    """Select one unselected commander of a kind; return whether one was found."""
    army = player.army
    for commander in army.commanders:
        if isinstance(commander, commander_class) and (
            commander not in army.selected_commanders
        ):
            army.selected_commanders.append(commander)
            return True
    return False