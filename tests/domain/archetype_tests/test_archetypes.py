import pytest
from gameframe.behavioral.strategy.attack_strategies import MeleeAttackStrategy, RangedAttackStrategy
from gameframe.domain.archetypes import Archetype, UnknownArchetypeError
from gameframe.domain.creature import Creature


@pytest.mark.unit
@pytest.mark.parametrize("archetype, max_hp, strategy", [
    (Archetype.WARRIOR, 1000, MeleeAttackStrategy),
    (Archetype.MAGE, 800, RangedAttackStrategy),
    (Archetype.HUNTER, 900, RangedAttackStrategy),
])
def test_archetype_fixes_hp_and_strategy(archetype, max_hp, strategy):
    creature = Creature.from_archetype(archetype, "X")
    assert creature.max_hp == max_hp == creature.current_hp
    assert type(creature.attack_strategy) is strategy
    assert creature.archetype is archetype


@pytest.mark.unit
def test_each_creature_gets_its_own_strategy_instance():
    a = Creature.from_archetype(Archetype.MAGE, "A")
    b = Creature.from_archetype(Archetype.MAGE, "B")
    assert a.attack_strategy is not b.attack_strategy


@pytest.mark.unit
def test_warrior_modifier_uses_absolute_threshold():
    warrior = Creature.from_archetype(Archetype.WARRIOR, "Bob")
    warrior.current_hp = 50
    assert warrior.apply_attack_modifiers(30) == 30
    warrior.current_hp = 49
    assert warrior.apply_attack_modifiers(30) == 40


@pytest.mark.unit
def test_mage_modifier_uses_absolute_threshold():
    mage = Creature.from_archetype(Archetype.MAGE, "Alice")
    assert mage.apply_attack_modifiers(30) == 40
    mage.current_hp = 81
    assert mage.apply_attack_modifiers(30) == 40
    mage.current_hp = 80
    assert mage.apply_attack_modifiers(30) == 30


@pytest.mark.unit
def test_hunter_and_plain_creature_have_no_modifier():
    hunter = Creature.from_archetype(Archetype.HUNTER, "Robin")
    hunter.current_hp = 10
    assert hunter.apply_attack_modifiers(30) == 30
    assert Creature("Plain", 100).apply_attack_modifiers(30) == 30


@pytest.mark.unit
def test_parse_by_name():
    assert Archetype.parse("Warrior") is Archetype.WARRIOR
    assert Archetype.parse(" HUNTER ") is Archetype.HUNTER
    assert Archetype.parse(Archetype.MAGE) is Archetype.MAGE
    with pytest.raises(UnknownArchetypeError):
        Archetype.parse("Paladin")
    with pytest.raises(UnknownArchetypeError):
        Archetype.parse(3)
