"""
creature.py: The combat entity and its attack protocol.

A Creature composes every other piece of the engine:

    * a health state machine (0 <= current_hp <= max_hp, death fires once),
    * an optional weapon and an always-present EquippedArmorSet,
    * a swappable AttackStrategy and a fixed archetype damage modifier,
    * an ObserverRegistry reporting damage-done, hit and died events.

Attack flow (all synchronous, nothing is scheduled):

    attacker.perform_attack(target, range)
        -> strategy.attack(attacker, range)      base damage
        -> modifier(attacker, base)              archetype adjustment, floored at 0
        -> attacker observers: on_damage_done
        -> target.take_damage(final)
               -> armor total absorbs what it can
               -> target observers: on_creature_hit   (before HP changes)
               -> current_hp -= actual                (may fire on_creature_died)

Nothing here raises on normal input. Out-of-range numbers are clamped and
missing arguments are treated as no-ops.
"""

from __future__ import annotations

import itertools
import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from gameframe.behavioral.observer.creature_observers import CreatureObserver, ObserverRegistry
from gameframe.behavioral.strategy.attack_strategies import AttackStrategy
from gameframe.domain.archetypes import Archetype, DamageModifier, no_modifier
from gameframe.domain.weapons import Weapon
from gameframe.structural.composite.equipped_armor_set import EquippedArmorSet

__all__ = [
    "DEFAULT_MAX_HP",
    "UNARMED_DAMAGE",
    "ATTACK_ACTION",
    "Attackable",
    "Creature",
]

logger = logging.getLogger(__name__)

DEFAULT_MAX_HP = 100
UNARMED_DAMAGE = 16
ATTACK_ACTION = "Attack"


class Attackable(ABC):
    """
    Anything that can be the target of an attack.
    """

    @property
    @abstractmethod
    def is_alive(self) -> bool:
        """
        :return: True while the object can still be damaged meaningfully.
        """

    @abstractmethod
    def take_damage(self, damage: int) -> None:
        """
        Applies incoming damage.

        :param damage: Incoming damage; negative values count as 0.
        """


class Creature(Attackable):
    """
    Combat entity with health, equipment, behaviour slots and observers.

    Without an archetype the creature has no attack strategy (its attacks are
    skipped until one is set) and no damage modifier.

    :param name: Display name; empty falls back to "Unknown".
    :param max_hp: Maximum HP, fixed for life; values <= 0 become 100.
    :param archetype: Optional variant fixing the default strategy and modifier.
    """

    _ids = itertools.count(1)

    def __init__(self, name: str, max_hp: int, archetype: Optional[Archetype] = None) -> None:
        self._id = next(Creature._ids)
        self.name = name
        if max_hp <= 0:
            max_hp = DEFAULT_MAX_HP
        self._max_hp = max_hp
        self._hp = max_hp
        self._base_auto_attack_damage = UNARMED_DAMAGE

        self._archetype = archetype
        self._modifier: DamageModifier = archetype.profile.modifier if archetype else no_modifier
        self._attack_strategy: Optional[AttackStrategy] = archetype.profile.new_strategy() if archetype else None

        self._observers = ObserverRegistry()
        self._equipped_weapon: Optional[Weapon] = None
        self._equipped_armor = EquippedArmorSet("Equipped Armor")
        self.x = 0
        self.y = 0
        logger.debug("%s created: %s (ID: %d) MaxHP: %d", self.kind, self.name, self.id, self._max_hp)

    @classmethod
    def from_archetype(cls, archetype: Archetype, name: str) -> "Creature":
        """
        Builds a creature with the archetype's max HP, strategy and modifier.

        :param archetype: Variant to build.
        :param name: Display name.
        :return: New, unequipped creature.
        """
        return cls(name, archetype.max_hp, archetype)

    # ---------- Identity ----------

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value or "Unknown"

    @property
    def archetype(self) -> Optional[Archetype]:
        return self._archetype

    @property
    def kind(self) -> str:
        """
        :return: Archetype display name, or "Creature" for a plain creature.
        """
        return self._archetype.display_name if self._archetype else "Creature"

    # ---------- Health ----------

    @property
    def max_hp(self) -> int:
        return self._max_hp

    @property
    def current_hp(self) -> int:
        """
        Current HP. Assignments clamp into [0, max_hp]; a positive-to-zero
        transition notifies death exactly once.
        """
        return self._hp

    @current_hp.setter
    def current_hp(self, value: int) -> None:
        old_value = self._hp
        self._hp = min(max(value, 0), self._max_hp)
        if self._hp <= 0 < old_value:
            logger.debug("%s (ID: %d) died", self.name, self.id)
            self._observers.notify_died(self)

    @property
    def is_alive(self) -> bool:
        return self._hp > 0

    @property
    def base_auto_attack_damage(self) -> int:
        """
        :return: Damage used by strategies when no weapon is equipped.
        """
        return self._base_auto_attack_damage

    # ---------- Equipment ----------

    @property
    def equipped_weapon(self) -> Optional[Weapon]:
        return self._equipped_weapon

    @property
    def equipped_armor(self) -> EquippedArmorSet:
        return self._equipped_armor

    def equip_weapon(self, weapon: Optional[Weapon]) -> bool:
        """
        Replaces the held weapon.

        :param weapon: Weapon to hold.
        :return: False if ``weapon`` is None (nothing changes); True otherwise.
        """
        if weapon is None:
            return False
        old_name = self._equipped_weapon.name if self._equipped_weapon is not None else "None"
        self._equipped_weapon = weapon
        logger.debug("%s %s (ID: %d) weapon equipped: %s -> %s",
                     self.kind, self.name, self.id, old_name, weapon.name)
        return True

    # ---------- Behaviour ----------

    @property
    def attack_strategy(self) -> Optional[AttackStrategy]:
        return self._attack_strategy

    def set_attack_strategy(self, strategy: Optional[AttackStrategy]) -> None:
        """
        Swaps the attack algorithm; ``None`` leaves the current one in place.

        :param strategy: New strategy.
        """
        if strategy is None:
            return
        self._attack_strategy = strategy

    def apply_attack_modifiers(self, base_damage: int) -> int:
        """
        :param base_damage: Strategy result.
        :return: Damage after this creature's archetype modifier.
        """
        return self._modifier(self, base_damage)

    # ---------- Observers ----------

    def attach(self, observer: Optional[CreatureObserver]) -> None:
        self._observers.attach(observer)

    def detach(self, observer: Optional[CreatureObserver]) -> None:
        self._observers.detach(observer)

    @property
    def observers(self) -> Tuple[CreatureObserver, ...]:
        return self._observers.snapshot()

    # ---------- Combat ----------

    def perform_attack(self, target: Optional[Attackable], attack_range: int = 0) -> None:
        """
        Attacks ``target`` using the current strategy and modifier.

        Skipped silently when this creature is dead or has no strategy, or
        when the target is missing or already dead.

        :param target: Object to attack.
        :param attack_range: Distance to the target; negative counts as 0.
        """
        if not self.is_alive or self._attack_strategy is None or target is None or not target.is_alive:
            return

        attack_range = max(0, attack_range)
        base_damage = self._attack_strategy.attack(self, attack_range)
        final_damage = max(0, self.apply_attack_modifiers(base_damage))

        self._observers.notify_damage_done(self, ATTACK_ACTION, target, final_damage)
        target.take_damage(final_damage)

    def take_damage(self, damage: int) -> None:
        """
        Reduces incoming damage by total armor defense and applies the rest.

        Observers hear about the hit before HP changes.

        :param damage: Incoming damage; negative values count as 0.
        """
        damage = max(0, damage)
        total_defense = self._equipped_armor.get_total_value()
        damage_mitigated = min(damage, total_defense)
        actual_damage = max(damage - total_defense, 0)

        self._observers.notify_hit(self, ATTACK_ACTION, actual_damage, damage_mitigated)
        self.current_hp -= actual_damage

    def __str__(self) -> str:
        weapon_info = "Unarmed"
        if self._equipped_weapon is not None:
            weapon_info = self._equipped_weapon.name or "Unnamed Weapon"
        status = "Alive" if self.is_alive else "Dead"
        return (f"[{self.kind}: {self.name}] ID: {self.id} - HP: {self._hp}/{self._max_hp} - "
                f"Status: {status} - Weapon: {weapon_info} - "
                f"Armor: {self._equipped_armor.get_item_count()} pieces "
                f"({self._equipped_armor.get_total_value()} defense) - Position: ({self.x}, {self.y})")

    def __repr__(self) -> str:
        return f"Creature(id={self.id}, name={self.name!r}, hp={self._hp}/{self._max_hp}, kind={self.kind!r})"
