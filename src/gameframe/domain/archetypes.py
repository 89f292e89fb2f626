from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Union

from gameframe.behavioral.strategy.attack_strategies import (
    AttackStrategy,
    MeleeAttackStrategy,
    RangedAttackStrategy,
)

if TYPE_CHECKING:
    from gameframe.domain.creature import Creature

__all__ = [
    "DamageModifier",
    "UnknownArchetypeError",
    "no_modifier",
    "warrior_modifier",
    "mage_modifier",
    "ArchetypeProfile",
    "Archetype",
]

# ==========================
# Module: archetypes
# Purpose: Tagged archetype variants. Each one fixes a max HP, a default attack
#          strategy and a damage modifier applied after the strategy result.
# ==========================

DamageModifier = Callable[["Creature", int], int]

WARRIOR_LOW_HP_THRESHOLD = 50
MAGE_HIGH_HP_THRESHOLD = 80
MODIFIER_BONUS = 10


class UnknownArchetypeError(LookupError):
    """
    Raised when a value cannot be resolved to an :class:`Archetype`.
    """


def no_modifier(creature: "Creature", base_damage: int) -> int:
    """Default modifier: damage passes through unchanged."""
    return base_damage


def warrior_modifier(creature: "Creature", base_damage: int) -> int:
    """
    +10 while the warrior is below 50 HP.

    The threshold is an absolute HP value, independent of max HP and of the
    melee strategy's half-health bonus; both can apply to the same attack.
    """
    if creature.current_hp < WARRIOR_LOW_HP_THRESHOLD:
        return base_damage + MODIFIER_BONUS
    return base_damage


def mage_modifier(creature: "Creature", base_damage: int) -> int:
    """
    +10 while the mage is above 80 HP (absolute, not a share of max HP).
    """
    if creature.current_hp > MAGE_HIGH_HP_THRESHOLD:
        return base_damage + MODIFIER_BONUS
    return base_damage


@dataclass(frozen=True)
class ArchetypeProfile:
    """
    What an archetype fixes at creature construction.

    :param max_hp: Maximum hit points.
    :param strategy_factory: Builds the default attack strategy.
    :param modifier: Post-strategy damage adjustment.
    """
    max_hp: int
    strategy_factory: Callable[[], AttackStrategy]
    modifier: DamageModifier

    def new_strategy(self) -> AttackStrategy:
        return self.strategy_factory()


class Archetype(Enum):
    """
    The three creature variants.
    """
    WARRIOR = "warrior"
    MAGE = "mage"
    HUNTER = "hunter"

    @property
    def profile(self) -> ArchetypeProfile:
        return _PROFILES[self]

    @property
    def max_hp(self) -> int:
        return self.profile.max_hp

    @property
    def display_name(self) -> str:
        return self.value.title()

    @classmethod
    def parse(cls, value: Union["Archetype", str]) -> "Archetype":
        """
        Resolves an archetype from itself or a case-insensitive name.

        :param value: Archetype member or its name (e.g. "Warrior").
        :return: Matching archetype.
        :raises UnknownArchetypeError: If nothing matches.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value == wanted:
                    return member
        raise UnknownArchetypeError(f"Unknown archetype: {value!r}")


_PROFILES = {
    Archetype.WARRIOR: ArchetypeProfile(1000, MeleeAttackStrategy, warrior_modifier),
    Archetype.MAGE: ArchetypeProfile(800, RangedAttackStrategy, mage_modifier),
    Archetype.HUNTER: ArchetypeProfile(900, RangedAttackStrategy, no_modifier),
}
