from __future__ import annotations

import logging
from typing import List, Optional

from gameframe.structural.armor.defence_items import GameItem

__all__ = [
    "EquippedArmorSet",
]

logger = logging.getLogger(__name__)

# ==========================
# Module: equipped_armor_set
# Purpose: Composite over GameItems. Leaves contribute their own value and a
#          count of one; nested sets contribute their recursive totals.
# ==========================


class EquippedArmorSet(GameItem):
    """
    Ordered, identity-unique collection of GameItems.

    Ownership only points downwards (set -> children), so a child never holds
    its parent and the recursive folds terminate without cycle detection.

    :param name: Display name of the set.
    """

    def __init__(self, name: str = "Equipped Armor") -> None:
        self._name = name
        self._items: List[GameItem] = []

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    def _index_of(self, item: GameItem) -> int:
        for index, existing in enumerate(self._items):
            if existing is item:
                return index
        return -1

    def __contains__(self, item: object) -> bool:
        return any(existing is item for existing in self._items)

    def add(self, item: Optional[GameItem]) -> None:
        """
        Appends an item; ``None`` and items already present are ignored.

        :param item: Leaf, bridged decorator or nested set.
        """
        if item is None or item in self:
            return
        self._items.append(item)
        logger.debug("%s: item added: %s-%s (ID: %s)",
                     self._name, type(item).__name__, item.name, getattr(item, "id", "N/A"))

    def remove(self, item: Optional[GameItem]) -> bool:
        """
        Removes an item if present.

        :param item: Item to remove (matched by identity).
        :return: True if the item was removed; False otherwise.
        """
        if item is None:
            return False
        index = self._index_of(item)
        if index < 0:
            return False
        del self._items[index]
        logger.debug("%s: item removed: %s-%s (ID: %s)",
                     self._name, type(item).__name__, item.name, getattr(item, "id", "N/A"))
        return True

    def get_all_items(self) -> List[GameItem]:
        """
        :return: Copy of the direct children in insertion order.
        """
        return list(self._items)

    def get_total_value(self) -> int:
        return sum(item.get_total_value() for item in self._items)

    def get_item_count(self) -> int:
        return sum(item.get_item_count() for item in self._items)

    def __repr__(self) -> str:
        return (f"EquippedArmorSet(name={self._name!r}, items={len(self._items)}, "
                f"total_value={self.get_total_value()})")
