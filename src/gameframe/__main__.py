"""
Console demo: three archetypes fight one round each.

    python -m gameframe
"""

from __future__ import annotations

from gameframe.behavioral.observer.creature_observers import CombatLogger, CreatureObserver
from gameframe.config import get_settings
from gameframe.creational.factory.creature_factory import create_creature, equip_default_armor
from gameframe.domain.archetypes import Archetype
from gameframe.domain.world import World
from gameframe.logging_config import configure_logging


class ConsoleObserver(CreatureObserver):
    """Prints combat events as plain sentences."""

    def on_damage_done(self, attacker, action, target, damage):
        target_name = getattr(target, "name", type(target).__name__)
        print(f"{attacker.name} attacks {target_name} for {damage} damage")

    def on_creature_hit(self, creature, action, damage_taken, damage_mitigated):
        if damage_mitigated > 0:
            print(f"{creature.name} takes {damage_taken} damage (blocked {damage_mitigated})")
        else:
            print(f"{creature.name} takes {damage_taken} damage")

    def on_creature_died(self, creature):
        print(f"{creature.name} has died!")


def _header(title: str) -> None:
    print(f"\n=== {title} ===")


def main() -> None:
    settings = get_settings()
    configure_logging()

    world = World.from_settings(settings)
    print(f"World '{world.name}' created ({world.max_x}x{world.max_y})")

    warrior = create_creature(Archetype.WARRIOR, "Thorin")
    mage = create_creature(Archetype.MAGE, "Gandalf")
    hunter = create_creature(Archetype.HUNTER, "Legolas")

    console = ConsoleObserver()
    combat_log = CombatLogger(log_file=str(settings.combat_log_file) if settings.combat_log_file else None)
    for creature in (warrior, mage, hunter):
        equip_default_armor(creature)
        creature.attach(console)
        creature.attach(combat_log)
        world.add_creature(creature)

    _header("Creatures")
    for creature in world.get_creatures():
        print(creature)

    _header("Combat")
    warrior.perform_attack(mage, attack_range=1)
    print(mage)
    mage.perform_attack(hunter, attack_range=25)
    print(hunter)
    hunter.perform_attack(warrior, attack_range=15)
    print(warrior)

    weapon = warrior.equipped_weapon
    print(f"Upgrading {weapon.name}: {weapon.hit} -> 40 damage")
    weapon.hit = 40

    _header("Final State")
    for creature in world.get_creatures():
        print(creature)

    combat_log.close()


if __name__ == "__main__":
    main()
