from __future__ import annotations

import logging
from typing import Union

from gameframe.creational.factory.item_factories import item_factory_for
from gameframe.domain.archetypes import Archetype, UnknownArchetypeError
from gameframe.domain.creature import Creature

__all__ = [
    "DEFAULT_WEAPON_NAMES",
    "create_creature",
    "equip_default_armor",
]

logger = logging.getLogger(__name__)

# ==========================
# Module: creature_factory
# Purpose: Factory Method turning an archetype selection into a ready-to-fight,
#          armed creature. Unknown selections are the only error path.
# ==========================

DEFAULT_WEAPON_NAMES = {
    Archetype.WARRIOR: "Great Sword",
    Archetype.MAGE: "Staff of Magic",
    Archetype.HUNTER: "Hunting Rifle",
}


def create_creature(archetype: Union[Archetype, str], name: str) -> Creature:
    """
    Builds a creature of the given archetype holding its signature weapon.

    :param archetype: Archetype member or its (case-insensitive) name.
    :param name: Display name.
    :return: Armed creature without armor.
    :raises UnknownArchetypeError: If the archetype cannot be resolved.
    """
    try:
        resolved = Archetype.parse(archetype)
    except UnknownArchetypeError:
        logger.error("Cannot create creature %r: unknown archetype %r", name, archetype)
        raise

    creature = Creature.from_archetype(resolved, name)
    creature.equip_weapon(item_factory_for(resolved).create_weapon(DEFAULT_WEAPON_NAMES[resolved]))
    return creature


def equip_default_armor(creature: Creature) -> bool:
    """
    Adds a helmet, chest and leg piece from the creature's archetype family.

    :param creature: Creature to dress.
    :return: False for a creature without archetype (nothing is added); True otherwise.
    """
    if creature.archetype is None:
        return False
    factory = item_factory_for(creature.archetype)
    for piece in (
        factory.create_helmet("Helmet"),
        factory.create_chest_armor("Chest Armor"),
        factory.create_leg_armor("Leg Armor"),
    ):
        creature.equipped_armor.add(piece)
    return True
