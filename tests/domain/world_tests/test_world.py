import pytest
from gameframe.config import GameSettings
from gameframe.domain.creature import Creature
from gameframe.domain.weapons import AttackItem, WeaponType
from gameframe.domain.world import World, WorldObject


@pytest.mark.unit
def test_bounds_and_name_defaults():
    world = World(-10, 50, "")
    assert (world.max_x, world.max_y, world.name) == (0, 50, "Basic World")
    assert str(world) == "{Name=Basic World, MaxX = 0, MaxY = 50}"


@pytest.mark.unit
def test_only_removable_objects_leave_the_world():
    world = World(10, 10)
    rock = WorldObject("Rock")
    chest = WorldObject("Chest", removable=True)
    world.add_world_object(rock)
    world.add_world_object(chest)
    world.add_world_object(None)
    world.remove_world_object(rock)
    world.remove_world_object(chest)
    assert world.get_world_objects() == [rock]


@pytest.mark.unit
def test_weapons_are_world_objects():
    world = World(10, 10)
    sword = AttackItem("Sword", WeaponType.SWORD, 30, 1)
    world.add_world_object(sword)
    assert world.get_world_objects() == [sword]


@pytest.mark.unit
def test_creature_roster():
    world = World(10, 10)
    bob, alice = Creature("Bob", 10), Creature("Alice", 10)
    world.add_creature(bob)
    world.add_creature(alice)
    world.add_creature(None)
    world.remove_creature(bob)
    world.remove_creature(bob)
    roster = world.get_creatures()
    roster.clear()
    assert world.get_creatures() == [alice]


@pytest.mark.unit
def test_world_from_settings():
    world = World.from_settings(GameSettings(world_max_x=40, world_max_y=30, world_name="Arena"))
    assert (world.max_x, world.max_y, world.name) == (40, 30, "Arena")
