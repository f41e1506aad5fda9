import pytest
from unittest.mock import MagicMock

from item_forge.core.events import InventoryEvent
from item_forge.inventory.exceptions import InvalidItemError
from item_forge.inventory.items import Item, Rarity
from item_forge.inventory.manager import Inventory

SWORD = Item("Sword", Rarity.COMMON)
SHIELD = Item("Shield", Rarity.GREAT)


def test_new_inventory_is_empty(inventory):
    assert inventory.is_empty()
    assert len(inventory) == 0
    assert str(inventory) == "Inventory is empty."


def test_seeded_inventory_adds_single_counts():
    inv = Inventory(SWORD, SWORD, SHIELD)
    assert inv.count_of(SWORD) == 2
    assert inv.count_of(SHIELD) == 1


def test_add_accumulates(inventory):
    inventory.add_item(SWORD, 2)
    inventory.add_item(SWORD, 5)
    assert inventory.count_of(SWORD) == 7
    assert inventory.has_item(SWORD, 7)
    assert not inventory.has_item(SWORD, 8)


def test_sub_levels_stack_separately(inventory):
    inventory.add_item(Item("Sword", Rarity.EPIC, 0))
    inventory.add_item(Item("Sword", Rarity.EPIC, 1))
    assert len(inventory) == 2


@pytest.mark.parametrize("count", [0, -1, -10])
def test_add_non_positive_count_rejected(inventory, count):
    with pytest.raises(InvalidItemError):
        inventory.add_item(SWORD, count)
    assert inventory.is_empty()


def test_add_none_rejected(inventory):
    with pytest.raises(InvalidItemError):
        inventory.add_item(None)
    assert inventory.is_empty()


def test_add_non_item_rejected(inventory):
    with pytest.raises(InvalidItemError):
        inventory.add_item("Sword")


@pytest.mark.parametrize("count", [1, 3, 250])
def test_add_then_remove_round_trip(inventory, count):
    inventory.add_item(SWORD, count)
    assert inventory.remove_item(SWORD, count)
    assert inventory.count_of(SWORD) == 0
    assert inventory.is_empty()


def test_remove_partial(inventory):
    inventory.add_item(SWORD, 5)
    assert inventory.remove_item(SWORD, 2)
    assert inventory.count_of(SWORD) == 3


def test_remove_missing_returns_false(inventory):
    inventory.add_item(SHIELD)
    assert inventory.remove_item(SWORD) is False
    assert list(inventory.stacks()) == [(SHIELD, 1)]


def test_remove_more_than_held_returns_false(inventory):
    inventory.add_item(SWORD, 2)
    assert inventory.remove_item(SWORD, 3) is False
    assert inventory.count_of(SWORD) == 2


def test_remove_invalid_arguments(inventory):
    inventory.add_item(SWORD)
    with pytest.raises(InvalidItemError):
        inventory.remove_item(None)
    with pytest.raises(InvalidItemError):
        inventory.remove_item(SWORD, 0)
    assert inventory.count_of(SWORD) == 1


def test_stacks_in_ladder_order(inventory):
    legendary = Item("Crown", Rarity.LEGENDARY)
    inventory.add_item(legendary)
    inventory.add_item(SHIELD, 2)
    inventory.add_item(SWORD, 3)

    assert list(inventory.stacks()) == [(SWORD, 3), (SHIELD, 2), (legendary, 1)]
    assert list(inventory.stacks(Rarity.GREAT)) == [(SHIELD, 2)]
    assert list(inventory.stacks(Rarity.EPIC)) == []


def test_display_form(inventory):
    inventory.add_item(SWORD, 3)
    inventory.add_item(Item("Spear", Rarity.EPIC, 2), 2)

    assert str(inventory) == (
        "\n--- COMMON ITEMS ---\n"
        "3x COMMON Sword\n"
        "\n--- EPIC ITEMS ---\n"
        "2x EPIC 2 Spear\n"
    )


def test_display_prints(inventory, capsys):
    inventory.add_item(SWORD)
    inventory.display()
    assert "1x COMMON Sword" in capsys.readouterr().out


def test_events_published(event_bus):
    added = MagicMock()
    removed = MagicMock()
    event_bus.subscribe(InventoryEvent.ITEM_ADDED, added)
    event_bus.subscribe(InventoryEvent.ITEM_REMOVED, removed)

    inv = Inventory(event_bus=event_bus)
    inv.add_item(SWORD, 2)
    inv.remove_item(SWORD, 1)
    # Failed removal publishes nothing
    inv.remove_item(SWORD, 5)

    assert added.call_count == 1
    assert added.call_args[0][0]["count"] == 2
    assert removed.call_count == 1
    assert removed.call_args[0][0]["item"] == SWORD
