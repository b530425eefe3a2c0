import random

import pytest

from armyduel.bot import BotArmyBuilder
from armyduel.config import MAX_COMMANDER_UNITS, MAX_NORMAL_UNITS, STARTING_GOLD
from armyduel.player import Player
from armyduel.units import (
    Dibuk,
    Ghost,
    Ghoul,
    Lich,
    LordOfTerror,
    Necromancer,
    Revenant,
    Skeleton,
)

UNDEAD_UNITS = (Skeleton, Ghost, Ghoul, Revenant, Dibuk, Necromancer)


def _builder(seed, gold=STARTING_GOLD):
    player = Player()
    player.gold = gold
    return player, BotArmyBuilder(player, random.Random(seed))


@pytest.mark.parametrize("seed", range(8))
def test_pick_units_spends_gold_consistently(seed):
    player, builder = _builder(seed)
    builder.pick_units()
    army = player.army

    assert player.gold >= 0
    assert len(army.units) + army.units_left_to_add == MAX_NORMAL_UNITS
    assert STARTING_GOLD - player.gold == sum(u.cost for u in army.units)
    assert all(isinstance(u, UNDEAD_UNITS) for u in army.units)
    assert not any(isinstance(u, Dibuk) for u in army.units)


def test_pick_units_with_no_gold_buys_nothing():
    player, builder = _builder(0, gold=50)
    builder.pick_units()
    assert player.army.units == []
    assert player.gold == 50


@pytest.mark.parametrize("seed", range(5))
def test_pick_commanders_fills_every_slot(seed):
    player, builder = _builder(seed)
    builder.pick_commanders()
    commanders = player.army.commanders
    assert len(commanders) == MAX_COMMANDER_UNITS
    assert player.army.commanders_left_to_add == 0
    assert all(isinstance(c, (Lich, LordOfTerror)) for c in commanders)


def test_select_army_without_commanders_selects_nothing(capsys):
    player, builder = _builder(1)
    builder.pick_units()
    builder.select_army()
    assert player.army.selected_units == []
    assert player.army.selected_commanders == []
    assert "No commanders to select from." in capsys.readouterr().out


def test_select_army_without_units_selects_only_commanders(capsys):
    player, builder = _builder(2)
    builder.pick_commanders()
    builder.select_army()
    assert 1 <= len(player.army.selected_commanders) <= MAX_COMMANDER_UNITS
    assert player.army.selected_units == []
    assert "Not enough units to select from." in capsys.readouterr().out


@pytest.mark.parametrize("seed", range(8))
def test_select_army_picks_distinct_recruited_members(seed):
    player, builder = _builder(seed)
    builder.pick_commanders()
    builder.pick_units()
    builder.select_army()
    army = player.army

    assert 1 <= len(army.selected_commanders) <= len(army.commanders)
    assert 1 <= len(army.selected_units) <= len(army.units)
    assert all(c in army.commanders for c in army.selected_commanders)
    assert all(u in army.units for u in army.selected_units)
    assert len({id(c) for c in army.selected_commanders}) == len(
        army.selected_commanders
    )
    assert len({id(u) for u in army.selected_units}) == len(army.selected_units)


def test_build_army_recruits_selects_and_reports(capsys):
    player, builder = _builder(3)
    builder.pick_commanders()
    builder.build_army()
    assert len(player.army.units) > 0
    assert len(player.army.selected_units) > 0
    assert "Bot Army building complete." in capsys.readouterr().out


def test_same_seed_gives_same_army():
    first, builder_a = _builder(42)
    second, builder_b = _builder(42)
    builder_a.pick_units()
    builder_b.pick_units()
    assert [u.name for u in first.army.units] == [u.name for u in second.army.units]
    assert first.gold == second.gold