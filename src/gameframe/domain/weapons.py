from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Optional

from gameframe.domain.world import WorldObject

__all__ = [
    "WeaponType",
    "Weapon",
    "AttackItem",
    "combine_weapons",
]

logger = logging.getLogger(__name__)

# ==========================
# Module: weapons
# Purpose: Weapon capability consumed by attack strategies, plus the concrete
#          AttackItem with clamped stats and dual-wield combination.
# ==========================


class WeaponType(Enum):
    """Weapon category tag."""
    SWORD = auto()
    AXE = auto()
    MACE = auto()
    STAFF = auto()
    WAND = auto()
    BOW = auto()
    GUN = auto()
    DAGGER = auto()
    UNARMED = auto()


class Weapon(ABC):
    """
    What a creature needs from whatever it holds.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        :return: Weapon name.
        """

    @abstractmethod
    def get_damage(self) -> int:
        """
        :return: Damage rating (>= 0).
        """

    @abstractmethod
    def get_range(self) -> int:
        """
        :return: Range rating (>= 0).
        """


class AttackItem(WorldObject, Weapon):
    """
    Concrete weapon. Damage, range and value are clamped to >= 0 whenever set.

    :param name: Weapon name; empty falls back to "Unknown Weapon".
    :param weapon_type: Category tag.
    :param damage: Damage rating.
    :param range: Range rating.
    """

    def __init__(self, name: str, weapon_type: WeaponType, damage: int, range: int) -> None:
        super().__init__(name=name or "Unknown Weapon")
        self._weapon_type = weapon_type
        self._hit = 0
        self._range = 0
        self._value = 0
        self.hit = damage
        self.range = range
        logger.debug("AttackItem created: %s (ID: %d) Type: %s, Damage: %d, Range: %d",
                     self.name, self.id, weapon_type.name, self._hit, self._range)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def weapon_type(self) -> WeaponType:
        return self._weapon_type

    def _changed(self, stat: str, old_value: int, new_value: int) -> None:
        if old_value != new_value:
            logger.debug("AttackItem %s (ID: %d) %s: %d -> %d", self.name, self.id, stat, old_value, new_value)

    @property
    def hit(self) -> int:
        return self._hit

    @hit.setter
    def hit(self, value: int) -> None:
        old_value, self._hit = self._hit, max(0, value)
        self._changed("Hit", old_value, self._hit)

    @property
    def range(self) -> int:
        return self._range

    @range.setter
    def range(self, value: int) -> None:
        old_value, self._range = self._range, max(0, value)
        self._changed("Range", old_value, self._range)

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        old_value, self._value = self._value, max(0, value)
        self._changed("Value", old_value, self._value)

    def get_damage(self) -> int:
        return self._hit

    def get_range(self) -> int:
        return self._range

    def __add__(self, other: object) -> "AttackItem":
        if other is None:
            return self
        if not isinstance(other, AttackItem):
            return NotImplemented
        return combine_weapons(self, other)

    def __radd__(self, other: object) -> "AttackItem":
        # Only reached for `None + weapon`.
        if other is None:
            return self
        return NotImplemented

    def __str__(self) -> str:
        safe_name = self.name or "Unnamed"
        return f"[AttackItem: {safe_name}] Damage: {self.hit} - Range: {self.range}"


def combine_weapons(left: Optional[AttackItem], right: Optional[AttackItem]) -> AttackItem:
    """
    Dual-wield combination of two weapons.

    Damage and value add up, the longer range wins and the left operand decides
    the category. A missing side yields the other operand unchanged; two
    missing sides yield empty hands.

    :param left: Main-hand weapon.
    :param right: Off-hand weapon.
    :return: New combined weapon, or one of the operands as described above.
    """
    if left is None and right is None:
        return AttackItem("Empty Hands", WeaponType.UNARMED, 0, 0)
    if left is None:
        return right
    if right is None:
        return left

    combined = AttackItem(
        f"{left.name or 'Unknown'} & {right.name or 'Unknown'}",
        left.weapon_type,
        left.hit + right.hit,
        max(left.range, right.range),
    )
    combined.removable = left.removable or right.removable
    combined.value = left.value + right.value
    return combined
