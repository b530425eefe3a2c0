"""Units and commanders that fight in battles."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from .config import unit_cost

if TYPE_CHECKING:
    from .player import Player


class ArmorType(Enum):
    """Armor classes; each scales damage taken while armor lasts."""

    UNARMORED = 1.0
    LEATHER = 0.75
    MEDIUM = 0.5
    HEAVY = 0.25

    @property
    def multiplier(self) -> float:
        return self.value


class Unit:
    """A fighting unit with health, mana and armor."""

    def __init__(
        self,
        name: str,
        hp: float,
        attack: int,
        mana: int,
        armor_value: int,
        armor_type: ArmorType,
    ) -> None:
        self.name = name
        self.max_hp = float(hp)
        self._hp = float(hp)
        self.attack_power = attack
        self.mana = mana
        self.max_mana = mana
        self.armor_value = armor_value
        self.armor_type = armor_type
        self.cost = unit_cost(name)

    @property
    def hp(self) -> float:
        return self._hp

    @hp.setter
    def hp(self, value: float) -> None:
        self._hp = max(0.0, min(float(value), self.max_hp))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.describe()}>"

    def attack(self, target: Unit) -> None:
        """Strike a target, then apply any on-attack effect."""
        if self.is_dead():
            return
        target.take_damage(self.attack_power)
        self.on_attack(target)

    def take_damage(self, amount: float) -> None:
        """Lose health; armor reduces damage and wears down by one per hit."""
        if self.armor_value > 0:
            self.hp = self._hp - amount * self.armor_multiplier()
            self.armor_value -= 1
        else:
            self.hp = self._hp - amount

    def heal(self, amount: float) -> None:
        """Restore health up to the maximum; the dead cannot be healed."""
        if self.is_dead():
            return
        self.hp = self._hp + amount

    def add_mana(self, amount: int) -> None:
        """Gain mana up to the maximum; the dead gain nothing."""
        if self.is_dead():
            return
        self.mana = min(self.mana + amount, self.max_mana)

    def revive(self, amount: float) -> None:
        """Bring a dead unit back with the given health."""
        if self.is_dead():
            self.hp = amount

    def on_attack(self, enemy: Unit) -> None:
        """Extra effect after a basic attack."""

    def on_support(self, friendly: Unit) -> None:
        """Effect applied to an ally each round."""

    def special_ability(self, ally: Player, enemy: Player) -> None:
        """Round ability acting on both sides."""

    def is_dead(self) -> bool:
        return self._hp <= 0

    def armor_multiplier(self) -> float:
        return self.armor_type.multiplier

    def describe(self) -> str:
        """One-line summary of name, health, mana and armor."""
        return (
            f"{self.name} - {self._hp:g} hp | {self.mana} mana | "
            f"{self.armor_value} armor value."
        )


class Commander(Unit):
    """A powerful unit that never costs gold."""

    def __init__(
        self,
        name: str,
        hp: float,
        attack: int,
        mana: int,
        armor_value: int,
        armor_type: ArmorType,
    ) -> None:
        super().__init__(name, hp, attack, mana, armor_value, armor_type)
        self.cost = 0

    def use_ability(self, ally: Player, enemy: Player) -> None:
        """Commander ability used each round."""


class Archer(Unit):
    def __init__(self) -> None:
        super().__init__("Archer", 535, 10, 0, 3, ArmorType.MEDIUM)


class Infantry(Unit):
    def __init__(self) -> None:
        super().__init__("Infantry", 420, 7, 0, 8, ArmorType.MEDIUM)


class Knight(Unit):
    def __init__(self) -> None:
        super().__init__("Knight", 835, 45, 0, 10, ArmorType.HEAVY)


class Healer(Unit):
    def __init__(self) -> None:
        super().__init__("Healer", 290, 2, 200, 6, ArmorType.MEDIUM)

    def on_support(self, friendly: Unit) -> None:
        if (
            self.mana >= 100
            and not friendly.is_dead()
            and friendly.hp < friendly.max_hp - 50
        ):
            friendly.heal(100)
            print(f"Healer healed 100HP to {friendly.name}")
            self.mana -= 100


class Wizard(Unit):
    def __init__(self) -> None:
        super().__init__("Wizard", 325, 35, 200, 3, ArmorType.LEATHER)

    def on_attack(self, enemy: Unit) -> None:
        if self.mana >= 200:
            self.mana -= 200
            enemy.take_damage(self.attack_power * 2)
            damage = self.attack_power * 2 * self.armor_multiplier()
            print(f"\nWizard attacks {enemy.name} for {damage:g} damage.")


class Skeleton(Unit):
    def __init__(self) -> None:
        super().__init__("Skeleton", 500, 5, 0, 8, ArmorType.MEDIUM)


class Ghost(Unit):
    def __init__(self) -> None:
        super().__init__("Ghost", 1, 0, 0, 0, ArmorType.UNARMORED)

    def on_support(self, friendly: Unit) -> None:
        if friendly.hp < friendly.max_hp - 250:
            friendly.heal(300)
            print(f"\nA ghost gave his life to heal a {friendly.name}")
            self.take_damage(2)


class Ghoul(Unit):
    def __init__(self) -> None:
        super().__init__("Ghoul", 400, 12, 0, 6, ArmorType.HEAVY)


class Zombie(Unit):
    def __init__(self) -> None:
        super().__init__("Zombie", 250, 15, 0, 0, ArmorType.UNARMORED)


class Revenant(Unit):
    def __init__(self) -> None:
        super().__init__("Revenant", 600, 15, 0, 0, ArmorType.UNARMORED)


class Dibuk(Unit):
    def __init__(self) -> None:
        super().__init__("Dibuk", 250, 15, 300, 0, ArmorType.UNARMORED)

    def on_attack(self, enemy: Unit) -> None:
        if self.mana >= 150:
            self.mana -= 150
            enemy.take_damage(self.hp * 0.30)
            self.hp = self.hp * 0.8


class Necromancer(Unit):
    def __init__(self) -> None:
        super().__init__("Necromancer", 300, 4, 200, 4, ArmorType.LEATHER)

    def special_ability(self, ally: Player, enemy: Player) -> None:
        if self.mana != 200:
            return
        dead = sum(1 for unit in enemy.army.selected_units if unit.is_dead())
        if dead >= 3:
            for _ in range(3):
                ally.army.add_temporary_unit(Skeleton())
            self.mana -= 200
            print("A necromancer summoned 3 skeletons !")


class Paladin(Commander):
    def __init__(self) -> None:
        super().__init__("Paladin", 5000, 250, 3000, 20, ArmorType.HEAVY)

    def on_support(self, friendly: Unit) -> None:
        if friendly.is_dead() and self.mana >= 500:
            friendly.revive(friendly.max_hp)
            print(f"Paladin revived a {friendly.name}")
            self.mana -= 500


class BladeDancer(Commander):
    def __init__(self) -> None:
        super().__init__("BladeDancer", 4000, 300, 0, 25, ArmorType.MEDIUM)


class UndeadHunter(Commander):
    def __init__(self) -> None:
        super().__init__("UndeadHunter", 2000, 75, 1500, 17, ArmorType.HEAVY)

    def use_ability(self, ally: Player, enemy: Player) -> None:
        if self.mana < 1000:
            return
        for target in enemy.army.selected_commanders:
            if not target.is_dead() and self.mana >= 1500:
                target.take_damage(target.max_hp * target.max_hp)
                print(f"UndeadHunter has demolished a {target.name}")
                self.mana -= 1500


class Lich(Commander):
    def __init__(self) -> None:
        super().__init__("Lich", 1500, 100, 1000, 15, ArmorType.HEAVY)

    def on_support(self, friendly: Unit) -> None:
        if friendly.is_dead() and self.mana >= 1000:
            friendly.revive(friendly.max_hp)
            print(f"\nLich revived a {friendly.name}")
            self.mana -= 1000


class LordOfTerror(Commander):
    def __init__(self) -> None:
        super().__init__("LordOfTerror", 3000, 200, 2000, 20, ArmorType.HEAVY)

    def use_ability(self, ally: Player, enemy: Player) -> None:
        while self.mana >= 400:
            if self.mana >= 500:
                ally.army.add_temporary_unit(Ghoul())
                print("The Lord Of Terror has summoned a GHOUL!")
                self.mana -= 500
            ally.army.add_temporary_unit(Necromancer())
            print("The Lord Of Terror has summoned a NECROMANCER!")
            self.mana -= 400


class DeadKnight(Commander):
    def __init__(self) -> None:
        super().__init__("DeadKnight", 2500, 150, 1000, 15, ArmorType.HEAVY)

    def on_support(self, friendly: Unit) -> None:
        if (
            self.mana >= 400
            and not friendly.is_dead()
            and friendly.hp < friendly.max_hp - 150
        ):
            friendly.heal(250)
            print(f"Healer healed 100HP to {friendly.name}")
            self.mana -= 400