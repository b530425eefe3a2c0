from armyduel import battle
from armyduel.config import BONUS_GOLD_PER_DUEL, BONUS_MANA_PER_HIT, STARTING_GOLD
from armyduel.player import Player
from armyduel.units import (
    Healer,
    Infantry,
    Knight,
    LordOfTerror,
    Necromancer,
    Paladin,
    Zombie,
)


def _recruit(player, *members):
    for member in members:
        if isinstance(member, (Paladin, LordOfTerror)):
            player.army.add_commander(member)
            player.army.selected_commanders.append(member)
        else:
            player.army.add_unit(member)
            player.army.selected_units.append(member)
    return members


def test_empty_selection_is_defeated():
    assert battle.is_defeated(Player()) is True


def test_living_member_is_not_defeated():
    player = Player()
    _recruit(player, Knight())
    assert battle.is_defeated(player) is False


def test_only_dead_members_is_defeated():
    player = Player()
    (knight,) = _recruit(player, Knight())
    knight.hp = 0
    assert battle.is_defeated(player) is True


def test_basic_attack_units_matches_direct_damage():
    attacker, defender = Player(), Player()
    (knight,) = _recruit(attacker, Knight())
    (target,) = _recruit(defender, Infantry())
    reference = Infantry()
    reference.take_damage(knight.attack_power)

    battle.basic_attack_units(attacker, defender)

    assert target.hp == reference.hp
    assert target.armor_value == reference.armor_value


def test_dead_attacker_does_not_strike():
    attacker, defender = Player(), Player()
    (knight,) = _recruit(attacker, Knight())
    knight.hp = 0
    (target,) = _recruit(defender, Infantry())

    battle.basic_attack_units(attacker, defender)

    assert target.hp == target.max_hp


def test_commander_attacks_units_and_commanders():
    attacker, defender = Player(), Player()
    _recruit(attacker, Paladin())
    unit, commander = _recruit(defender, Zombie(), LordOfTerror())

    battle.basic_attack_commanders(attacker, defender)

    assert unit.hp < unit.max_hp
    assert commander.hp < commander.max_hp


def test_on_support_units_heals_damaged_ally():
    player = Player()
    healer, knight = _recruit(player, Healer(), Knight())
    knight.hp = knight.max_hp - 200
    mana_before = healer.mana

    battle.on_support_units(player)

    assert knight.hp == knight.max_hp - 100
    assert healer.mana < mana_before


def test_healer_does_not_heal_itself():
    player = Player()
    (healer,) = _recruit(player, Healer())
    healer.hp = healer.max_hp - 200

    battle.on_support_units(player)

    assert healer.hp == healer.max_hp - 200


def test_on_support_commanders_revives_dead_unit():
    player = Player()
    _paladin, knight = _recruit(player, Paladin(), Knight())
    knight.hp = 0

    battle.on_support_commanders(player)

    assert knight.hp == knight.max_hp


def test_add_mana_to_all_skips_dead():
    player, bot = Player(), Player()
    (healer,) = _recruit(player, Healer())
    healer.mana = 0
    (necro,) = _recruit(bot, Necromancer())
    necro.mana = 0
    necro.hp = 0

    battle.add_mana_to_all(player, bot)

    assert healer.mana == BONUS_MANA_PER_HIT
    assert necro.mana == 0


def test_lord_of_terror_summons_temporary_units():
    player, bot = Player(), Player()
    (lord,) = _recruit(player, LordOfTerror())

    battle.special_ability_commanders(player, bot)

    temps = player.army.temp_units
    assert len(temps) > 0
    assert all(unit in player.army.selected_units for unit in temps)
    assert lord.mana < 400


def test_after_battle_clears_temporary_units_and_pays():
    player, bot = Player(), Player()
    _recruit(player, LordOfTerror())
    battle.special_ability_commanders(player, bot)

    battle.after_battle(player, bot)

    assert player.army.temp_units == []
    assert player.army.selected_units == []
    assert player.gold == STARTING_GOLD + BONUS_GOLD_PER_DUEL
    assert bot.gold == STARTING_GOLD + BONUS_GOLD_PER_DUEL
    assert (player.points, bot.points) == (1, 0)


def test_after_battle_both_empty_gives_bot_point():
    player, bot = Player(), Player()
    battle.after_battle(player, bot)
    assert (player.points, bot.points) == (0, 1)


def test_after_battle_no_winner(capsys):
    player, bot = Player(), Player()
    _recruit(player, Knight())
    _recruit(bot, Zombie())

    battle.after_battle(player, bot)

    assert (player.points, bot.points) == (0, 0)
    assert "no clear winner" in capsys.readouterr().out


def test_start_battle_knight_beats_zombie():
    player, bot = Player(), Player()
    (knight,) = _recruit(player, Knight())
    _recruit(bot, Zombie())

    battle.start_battle(player, bot)

    assert (player.points, bot.points) == (1, 0)
    assert player.army.units == [knight]
    assert bot.army.units == []
    assert bot.army.units_left_to_add == 10
    assert player.army.selected_units == []
    assert bot.gold == STARTING_GOLD + BONUS_GOLD_PER_DUEL