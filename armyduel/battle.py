"""One duel between two players' selected forces."""

from __future__ import annotations

from .config import BONUS_GOLD_PER_DUEL, BONUS_MANA_PER_HIT
from .player import Player


def start_battle(player: Player, bot: Player) -> None:
    """Fight rounds until one side's selection is wiped out, then settle up."""
    print("\n\n----BATTLE BEGINS----\n\n", end="")

    while not is_defeated(player) and not is_defeated(bot):
        basic_attack_commanders(bot, player)
        basic_attack_units(bot, player)

        basic_attack_commanders(player, bot)
        basic_attack_units(player, bot)
        on_support_commanders(player)
        on_support_units(player)
        special_ability_units(player, bot)
        special_ability_commanders(player, bot)

        on_support_commanders(bot)
        on_support_units(bot)
        special_ability_units(bot, player)
        special_ability_commanders(bot, player)

        add_mana_to_all(player, bot)

    after_battle(player, bot)


def _strike_all(attacker, defender: Player) -> None:
    for target in defender.army.selected_units:
        if not target.is_dead():
            attacker.attack(target)
    for target in defender.army.selected_commanders:
        if not target.is_dead():
            attacker.attack(target)


def basic_attack_commanders(attacker: Player, defender: Player) -> None:
    """Every living selected commander strikes every living enemy."""
    for commander in attacker.army.selected_commanders:
        if not commander.is_dead():
            _strike_all(commander, defender)


def basic_attack_units(attacker: Player, defender: Player) -> None:
    """Every living selected unit strikes every living enemy."""
    for unit in attacker.army.selected_units:
        if not unit.is_dead():
            _strike_all(unit, defender)


def special_ability_commanders(ally: Player, enemy: Player) -> None:
    """Living selected commanders use their abilities."""
    for commander in list(ally.army.selected_commanders):
        if not commander.is_dead():
            commander.use_ability(ally, enemy)


def special_ability_units(ally: Player, enemy: Player) -> None:
    """Living selected units use their special abilities.

    Units summoned during this pass do not act until the next round.
    """
    for unit in list(ally.army.selected_units):
        if not unit.is_dead():
            unit.special_ability(ally, enemy)


def on_support_commanders(ally: Player) -> None:
    """Living commanders support every other selected member, dead or alive."""
    army = ally.army
    for supporter in army.selected_commanders:
        if supporter.is_dead():
            continue
        for target in army.selected_commanders:
            if target is not supporter:
                supporter.on_support(target)
        for target in army.selected_units:
            if target is not supporter:
                supporter.on_support(target)


def on_support_units(ally: Player) -> None:
    """Living units support every other living selected member."""
    army = ally.army
    for supporter in army.selected_units:
        if supporter.is_dead():
            continue
        for target in army.selected_commanders:
            if target is not supporter and not target.is_dead():
                supporter.on_support(target)
        for target in army.selected_units:
            if target is not supporter and not target.is_dead():
                supporter.on_support(target)


def add_mana_to_all(player: Player, bot: Player) -> None:
    """Give every living selected member on both sides the per-round mana."""
    for side in (player, bot):
        for member in [*side.army.selected_units, *side.army.selected_commanders]:
            if not member.is_dead():
                member.add_mana(BONUS_MANA_PER_HIT)


def is_defeated(player: Player) -> bool:
    """Whether no selected unit or commander of the player is alive."""
    army = player.army
    return all(
        member.is_dead()
        for member in [*army.selected_units, *army.selected_commanders]
    )


def after_battle(player: Player, bot: Player) -> None:
    """Award the point, drop summons and the dead, and pay both sides."""
    print("\n\n\n", end="")
    bot.army.print_selected_army()
    player.army.print_selected_army()
    print("\n\n\n", end="")

    if is_defeated(player):
        print("Bot wins a point!")
        bot.add_point()
    elif is_defeated(bot):
        print("Player wins a point!")
        player.add_point()
    else:
        print("Battle ended with no clear winner.")

    bot.army.clear_temp_units()
    player.army.clear_temp_units()
    bot.army.clear_selected()
    bot.army.remove_dead()
    player.army.clear_selected()
    player.army.remove_dead()
    player.add_gold(BONUS_GOLD_PER_DUEL)
    bot.add_gold(BONUS_GOLD_PER_DUEL)