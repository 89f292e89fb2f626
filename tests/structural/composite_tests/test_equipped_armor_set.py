import pytest
from gameframe.structural.armor.defence_items import ArmorMaterial, ArmorPiece, ArmorSlot
from gameframe.structural.composite.equipped_armor_set import EquippedArmorSet


def piece(name, defense, slot=ArmorSlot.CHEST):
    return ArmorPiece(name, slot, ArmorMaterial.PLATE, defense)


@pytest.mark.unit
def test_nested_totals_recurse_through_children():
    outer = EquippedArmorSet("Outer")
    outer.add(piece("Helmet", 10, ArmorSlot.HEAD))
    outer.add(piece("Chest", 20))
    inner = EquippedArmorSet("Inner")
    inner.add(piece("Legs", 30, ArmorSlot.LEGS))
    outer.add(inner)
    assert outer.get_total_value() == 60
    assert outer.get_item_count() == 3


@pytest.mark.unit
def test_add_ignores_none_and_duplicates():
    armor = EquippedArmorSet()
    helmet = piece("Helmet", 10, ArmorSlot.HEAD)
    armor.add(None)
    armor.add(helmet)
    armor.add(helmet)
    assert armor.get_all_items() == [helmet]
    assert armor.get_item_count() == 1


@pytest.mark.unit
def test_duplicate_check_is_by_identity():
    armor = EquippedArmorSet()
    first = piece("Chest", 20)
    twin = piece("Chest", 20)
    armor.add(first)
    armor.add(twin)
    assert armor.get_item_count() == 2 and armor.get_total_value() == 40


@pytest.mark.unit
def test_remove_reports_success():
    armor = EquippedArmorSet()
    helmet = piece("Helmet", 10, ArmorSlot.HEAD)
    armor.add(helmet)
    assert armor.remove(helmet) is True
    assert armor.remove(helmet) is False
    assert armor.remove(None) is False
    assert armor.get_total_value() == 0 and armor.get_item_count() == 0


@pytest.mark.unit
def test_get_all_items_returns_a_copy_in_insertion_order():
    armor = EquippedArmorSet()
    a, b = piece("A", 1), piece("B", 2)
    armor.add(a)
    armor.add(b)
    items = armor.get_all_items()
    items.clear()
    assert armor.get_all_items() == [a, b]


@pytest.mark.unit
def test_leaf_changes_show_up_in_totals():
    armor = EquippedArmorSet()
    chest = piece("Chest", 20)
    armor.add(chest)
    chest.defense = 25
    assert armor.get_total_value() == 25
