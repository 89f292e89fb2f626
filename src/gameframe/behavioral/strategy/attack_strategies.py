"""
attack_strategies.py: Strategy pattern for base attack damage.

A strategy turns (attacker, range) into a non-negative base damage. It reads
creature state but never mutates it and never notifies anyone; applying the
archetype modifier, reporting and dealing the damage is the creature's job.

Base damage comes from the equipped weapon, or the creature's unarmed damage
when it holds nothing. Both shipped variants apply the same x1.5 bonus
(truncated to int) under different conditions:

    MeleeAttackStrategy   current HP below half of max HP (integer division)
    RangedAttackStrategy  range of 20 or more
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gameframe.domain.creature import Creature

__all__ = [
    "BONUS_MULTIPLIER",
    "LONG_RANGE_THRESHOLD",
    "AttackStrategy",
    "MeleeAttackStrategy",
    "RangedAttackStrategy",
]

BONUS_MULTIPLIER = 1.5
LONG_RANGE_THRESHOLD = 20


class AttackStrategy(ABC):
    """
    Interchangeable base-damage algorithm.
    """

    @abstractmethod
    def attack(self, attacker: "Creature", attack_range: int) -> int:
        """
        Computes base damage before archetype modifiers.

        :param attacker: The creature performing the attack.
        :param attack_range: Distance to the target (already clamped to >= 0).
        :return: Non-negative base damage.
        """
        raise NotImplementedError

    @staticmethod
    def base_damage(attacker: "Creature") -> int:
        """
        :param attacker: The creature performing the attack.
        :return: Weapon damage if armed; otherwise the creature's unarmed damage.
        """
        weapon = attacker.equipped_weapon
        if weapon is not None:
            return weapon.get_damage()
        return attacker.base_auto_attack_damage

    @staticmethod
    def with_bonus(damage: int) -> int:
        return int(damage * BONUS_MULTIPLIER)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MeleeAttackStrategy(AttackStrategy):
    """
    Berserker: x1.5 while the attacker is below half health. Range is ignored.
    """

    def attack(self, attacker: "Creature", attack_range: int) -> int:
        damage = self.base_damage(attacker)
        if attacker.current_hp < attacker.max_hp // 2:
            damage = self.with_bonus(damage)
        return damage


class RangedAttackStrategy(AttackStrategy):
    """
    Marksman: x1.5 at range 20 and beyond. Attacker health is ignored.
    """

    def attack(self, attacker: "Creature", attack_range: int) -> int:
        damage = self.base_damage(attacker)
        if attack_range >= LONG_RANGE_THRESHOLD:
            damage = self.with_bonus(damage)
        return damage
