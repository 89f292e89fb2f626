from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional, Union

from gameframe.domain.archetypes import Archetype
from gameframe.domain.weapons import AttackItem, WeaponType
from gameframe.structural.armor.defence_items import ArmorMaterial, ArmorPiece, ArmorSlot

__all__ = [
    "ItemFactory",
    "WarriorItemFactory",
    "MageItemFactory",
    "HunterItemFactory",
    "item_factory_for",
]

# ==========================
# Module: item_factories
# Purpose: Abstract Factory producing a matching weapon + armor family per
#          archetype (plate for warriors, cloth for mages, leather for hunters).
# ==========================


class ItemFactory(ABC):
    """
    Produces one archetype's equipment family.

    Subclasses only declare their weapon category, armor material and default
    stats; every ``create_*`` call accepts overrides.
    """

    @property
    @abstractmethod
    def weapon_type(self) -> WeaponType:
        """Category of every weapon this family makes."""

    @property
    @abstractmethod
    def material(self) -> ArmorMaterial:
        """Material of every armor piece this family makes."""

    @property
    @abstractmethod
    def weapon_damage(self) -> int:
        """Default weapon damage."""

    @property
    @abstractmethod
    def weapon_range(self) -> int:
        """Default weapon range."""

    @property
    @abstractmethod
    def defaults(self) -> Dict[ArmorSlot, int]:
        """Default defense per armor slot."""

    def create_weapon(self, name: str, damage: Optional[int] = None, range: Optional[int] = None) -> AttackItem:
        """
        :param name: Weapon name.
        :param damage: Damage override (factory default when omitted).
        :param range: Range override (factory default when omitted).
        :return: New weapon of this family's category.
        """
        return AttackItem(
            name,
            self.weapon_type,
            self.weapon_damage if damage is None else damage,
            self.weapon_range if range is None else range,
        )

    def _armor(self, name: str, slot: ArmorSlot, defense: Optional[int] = None) -> ArmorPiece:
        return ArmorPiece(name, slot, self.material, self.defaults[slot] if defense is None else defense)

    def create_helmet(self, name: str, defense: Optional[int] = None) -> ArmorPiece:
        return self._armor(name, ArmorSlot.HEAD, defense)

    def create_shoulder_armor(self, name: str, defense: Optional[int] = None) -> ArmorPiece:
        return self._armor(name, ArmorSlot.SHOULDERS, defense)

    def create_chest_armor(self, name: str, defense: Optional[int] = None) -> ArmorPiece:
        return self._armor(name, ArmorSlot.CHEST, defense)

    def create_hand_armor(self, name: str, defense: Optional[int] = None) -> ArmorPiece:
        return self._armor(name, ArmorSlot.HANDS, defense)

    def create_leg_armor(self, name: str, defense: Optional[int] = None) -> ArmorPiece:
        return self._armor(name, ArmorSlot.LEGS, defense)

    def create_feet_armor(self, name: str, defense: Optional[int] = None) -> ArmorPiece:
        return self._armor(name, ArmorSlot.FEET, defense)


class WarriorItemFactory(ItemFactory):
    """Heavy plate and a hard-hitting short-range sword."""
    weapon_type = WeaponType.SWORD
    material = ArmorMaterial.PLATE
    weapon_damage = 90
    weapon_range = 2
    defaults = {
        ArmorSlot.HEAD: 10,
        ArmorSlot.SHOULDERS: 8,
        ArmorSlot.CHEST: 20,
        ArmorSlot.HANDS: 6,
        ArmorSlot.LEGS: 12,
        ArmorSlot.FEET: 7,
    }


class MageItemFactory(ItemFactory):
    """Light cloth and a long-range staff."""
    weapon_type = WeaponType.STAFF
    material = ArmorMaterial.CLOTH
    weapon_damage = 76
    weapon_range = 30
    defaults = {
        ArmorSlot.HEAD: 5,
        ArmorSlot.SHOULDERS: 4,
        ArmorSlot.CHEST: 12,
        ArmorSlot.HANDS: 3,
        ArmorSlot.LEGS: 8,
        ArmorSlot.FEET: 4,
    }


class HunterItemFactory(ItemFactory):
    """Balanced leather and a long-range gun."""
    weapon_type = WeaponType.GUN
    material = ArmorMaterial.LEATHER
    weapon_damage = 60
    weapon_range = 30
    defaults = {
        ArmorSlot.HEAD: 7,
        ArmorSlot.SHOULDERS: 6,
        ArmorSlot.CHEST: 15,
        ArmorSlot.HANDS: 5,
        ArmorSlot.LEGS: 10,
        ArmorSlot.FEET: 6,
    }


_FACTORIES = {
    Archetype.WARRIOR: WarriorItemFactory,
    Archetype.MAGE: MageItemFactory,
    Archetype.HUNTER: HunterItemFactory,
}


def item_factory_for(archetype: Union[Archetype, str]) -> ItemFactory:
    """
    :param archetype: Archetype (or its name).
    :return: A fresh factory for that archetype's equipment family.
    :raises UnknownArchetypeError: If the archetype cannot be resolved.
    """
    return _FACTORIES[Archetype.parse(archetype)]()
