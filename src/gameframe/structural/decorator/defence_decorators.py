"""
defence_decorators.py: Decorator pattern over the narrow DefenceItem view.

A decorator wraps exactly one DefenceItem (a leaf or another decorator) and
presents an adjusted name and defense. The presented values are computed from
the wrapped item on every read; the wrapped item is never modified, so
upgrading the underlying armor is immediately visible through every layer.

Decorators are deliberately *not* GameItems. To put a decorated piece into an
EquippedArmorSet, bridge it with :class:`AggregableDefence`.
"""

from __future__ import annotations

from gameframe.structural.armor.defence_items import DefenceItem, GameItem

__all__ = [
    "BOOST_AMOUNT",
    "WEAKEN_AMOUNT",
    "DefenceItemDecorator",
    "BoostDefenceDecorator",
    "WeakenDefenceDecorator",
    "AggregableDefence",
]

BOOST_AMOUNT = 5
WEAKEN_AMOUNT = 3


class DefenceItemDecorator(DefenceItem):
    """
    Transparent base decorator: forwards name and defense unchanged.

    :param item: The wrapped defense item.
    """

    def __init__(self, item: DefenceItem) -> None:
        self._wrapped_item = item

    @property
    def wrapped_item(self) -> DefenceItem:
        """
        :return: The item one layer down.
        """
        return self._wrapped_item

    @property
    def name(self) -> str:
        return self._wrapped_item.name

    @property
    def defense(self) -> int:
        return self._wrapped_item.defense


class BoostDefenceDecorator(DefenceItemDecorator):
    """
    Adds a flat +5 to the wrapped defense.
    """

    @property
    def name(self) -> str:
        return f"{self._wrapped_item.name} (Boosted)"

    @property
    def defense(self) -> int:
        return max(0, self._wrapped_item.defense + BOOST_AMOUNT)


class WeakenDefenceDecorator(DefenceItemDecorator):
    """
    Subtracts a flat 3 from the wrapped defense, floored at 0.
    """

    @property
    def name(self) -> str:
        return f"{self._wrapped_item.name} (Weakened)"

    @property
    def defense(self) -> int:
        return max(0, self._wrapped_item.defense - WEAKEN_AMOUNT)


class AggregableDefence(GameItem):
    """
    Adapter presenting any DefenceItem through the GameItem view.

    Contributes its current defense as value and counts as one item.

    :param item: The defense item (typically a decorator chain) to bridge.
    """

    def __init__(self, item: DefenceItem) -> None:
        self._item = item

    @property
    def item(self) -> DefenceItem:
        return self._item

    @property
    def name(self) -> str:
        return self._item.name

    def get_total_value(self) -> int:
        return self._item.defense

    def get_item_count(self) -> int:
        return 1
