from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum, auto

from gameframe.domain.world import WorldObject

__all__ = [
    "ArmorSlot",
    "ArmorMaterial",
    "DefenceItem",
    "GameItem",
    "ArmorPiece",
]

logger = logging.getLogger(__name__)

# ==========================
# Module: defence_items
# Purpose: Armor leaves and the two capability views they satisfy:
#          DefenceItem (name + defense, what decorators wrap) and
#          GameItem (name + total value + item count, what aggregates hold).
# ==========================


class ArmorSlot(Enum):
    """Where a piece of armor is worn."""
    HEAD = auto()
    SHOULDERS = auto()
    CHEST = auto()
    HANDS = auto()
    LEGS = auto()
    FEET = auto()


class ArmorMaterial(Enum):
    """What a piece of armor is made of."""
    LEATHER = auto()
    PLATE = auto()
    CLOTH = auto()


class DefenceItem(ABC):
    """
    Narrow view: anything that presents a name and a defense rating.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        :return: Presented item name.
        """

    @property
    @abstractmethod
    def defense(self) -> int:
        """
        :return: Presented defense rating (never negative).
        """


class GameItem(ABC):
    """
    Broad view: anything an :class:`EquippedArmorSet` can aggregate.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        :return: Item name.
        """

    @abstractmethod
    def get_total_value(self) -> int:
        """
        :return: Summed defense contribution of this item (recursive for aggregates).
        """

    @abstractmethod
    def get_item_count(self) -> int:
        """
        :return: Number of leaf items this item represents.
        """


class ArmorPiece(WorldObject, DefenceItem, GameItem):
    """
    Concrete armor leaf satisfying both capability views.

    :param name: Armor name; empty falls back to "Unknown Armor".
    :param slot: Equip slot, fixed after construction.
    :param material: Armor material, fixed after construction.
    :param defense: Defense rating, clamped to >= 0 on every assignment.
    """

    def __init__(self, name: str, slot: ArmorSlot, material: ArmorMaterial, defense: int) -> None:
        super().__init__(name=name or "Unknown Armor")
        self._slot = slot
        self._material = material
        self._defense = 0
        self.defense = defense
        logger.debug("ArmorPiece created: %s (ID: %d) Slot: %s, Material: %s, Defense: %d",
                     self.name, self.id, slot.name, material.name, self._defense)

    # WorldObject keeps `name` as a plain attribute; re-expose it as the
    # property both capability views declare.
    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def slot(self) -> ArmorSlot:
        return self._slot

    @property
    def material(self) -> ArmorMaterial:
        return self._material

    @property
    def defense(self) -> int:
        return self._defense

    @defense.setter
    def defense(self, value: int) -> None:
        old_value = self._defense
        self._defense = max(0, value)
        if old_value != self._defense:
            logger.debug("ArmorPiece %s (ID: %d) Defense: %d -> %d",
                         self.name, self.id, old_value, self._defense)

    def get_total_value(self) -> int:
        return self._defense

    def get_item_count(self) -> int:
        return 1

    def __str__(self) -> str:
        safe_name = self.name or "Unnamed"
        return (f"[ArmorPiece: {safe_name}] Slot: {self.slot.name.title()} - "
                f"Material: {self.material.name.title()} - Defense: {self.defense}")
