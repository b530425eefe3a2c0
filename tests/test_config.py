import pytest

from armyduel import config
from armyduel.config import (
    CommanderType,
    UnitType,
    commander_type,
    is_valid_commander,
    is_valid_unit,
    unit_cost,
    unit_type,
)


@pytest.mark.parametrize(
    "name, cost",
    [
        ("Infantry", 250),
        ("Archer", 300),
        ("Knight", 700),
        ("Healer", 150),
        ("Wizard", 400),
        ("Skeleton", 100),
        ("Ghoul", 250),
        ("Necromancer", 400),
        ("Zombie", 300),
        ("Revenant", 300),
        ("Ghost", 500),
    ],
)
def test_unit_cost_known(name, cost):
    assert unit_cost(name) == cost
    assert is_valid_unit(name)


@pytest.mark.parametrize("name", ["Paladin", "knight", "", "Dibuk"])
def test_unit_cost_unknown(name):
    assert unit_cost(name) == config.UNAVAILABLE_COST
    assert not is_valid_unit(name)


@pytest.mark.parametrize(
    "name", ["Infantry", "Archer", "Knight", "Healer", "Wizard"]
)
def test_starting_gold_buys_any_player_unit(name):
    assert config.STARTING_GOLD == 2000
    assert unit_cost(name) <= config.STARTING_GOLD


@pytest.mark.parametrize("name", ["paladin", "bladedancer", "undeadhunter"])
def test_valid_commanders(name):
    assert is_valid_commander(name)


@pytest.mark.parametrize("name", ["Paladin", "lich", "lordofterror", ""])
def test_invalid_commanders(name):
    assert not is_valid_commander(name)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("paladin", CommanderType.PALADIN),
        ("bladedancer", CommanderType.BLADE_DANCER),
        ("undeadhunter", CommanderType.UNDEAD_HUNTER),
        ("lich", CommanderType.LICH),
        ("lordofterror", CommanderType.LORD_OF_TERROR),
    ],
)
def test_commander_type(name, expected):
    assert commander_type(name) is expected


def test_commander_type_unknown():
    assert commander_type("Paladin") is None


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Infantry", UnitType.INFANTRY),
        ("Archer", UnitType.ARCHER),
        ("Knight", UnitType.KNIGHT),
        ("Healer", UnitType.HEALER),
        ("Wizard", UnitType.WIZARD),
    ],
)
def test_unit_type(name, expected):
    assert unit_type(name) is expected


@pytest.mark.parametrize("name", ["knight", "Skeleton", ""])
def test_unit_type_unknown(name):
    assert unit_type(name) is None