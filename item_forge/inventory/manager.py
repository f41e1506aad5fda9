"""
Inventory manager - rarity stacks and the upgrade ladder.

Items are grouped by rarity, and within a rarity by exact value
(name, rarity, sub_level) with a positive count. The upgrade ladder:

    COMMON --3--> GREAT --3--> RARE --3--> EPIC
    EPIC   --1 + any EPIC--> EPIC 1 --1 + any EPIC--> EPIC 2
    EPIC 2 --3--> LEGENDARY
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterator, Optional

from item_forge.config import InventoryConfig
from item_forge.core.events import EventBus, InventoryEvent
from item_forge.inventory.exceptions import InsufficientItemsError, InvalidItemError
from item_forge.inventory.items import Item, Rarity
from item_forge.save.csv_store import load_inventory, save_inventory

logger = logging.getLogger(__name__)

MAX_EPIC_SUB_LEVEL = 2


class Inventory:
    """
    Item container with per-rarity stacks.

    Stacks never hold zero or negative counts; a stack that reaches
    zero is deleted. Stack order within a rarity follows insertion
    order and is not part of the contract.

    Usage:
        inventory = Inventory()
        inventory.add_item(Item("Iron Sword", Rarity.COMMON), 3)
        inventory.upgrade_item(Item("Iron Sword", Rarity.COMMON))
        inventory.save_to_file("saves/inventory.csv")
    """

    def __init__(
        self,
        *items: Item,
        config: Optional[InventoryConfig] = None,
        event_bus: Optional[EventBus] = None,
    ):
        self.config = config or InventoryConfig()
        self.event_bus = event_bus
        self._stacks: dict[Rarity, dict[Item, int]] = {rarity: {} for rarity in Rarity}

        for item in items:
            self.add_item(item)

    # Stack operations

    def add_item(self, item: Item, count: int = 1) -> None:
        """
        Add items to their stack, creating it if needed.

        Raises:
            InvalidItemError: item is None or count is not positive
        """
        if item is None:
            raise InvalidItemError("Cannot add a null item to inventory.")
        if count <= 0:
            raise InvalidItemError("Cannot add a non-positive count of items.")

        self._put(item, count)
        self._publish(InventoryEvent.ITEM_ADDED, item=item, count=count)

    def remove_item(self, item: Item, count: int = 1) -> bool:
        """
        Remove items from a stack.

        Returns:
            False (and changes nothing) if the stack is missing or holds
            fewer than count; True otherwise.

        Raises:
            InvalidItemError: item is None or count is not positive
        """
        if item is None:
            raise InvalidItemError("Cannot remove a null item.")
        if count <= 0:
            raise InvalidItemError("Cannot remove a non-positive count of items.")

        if not self._take(item, count):
            return False

        self._publish(InventoryEvent.ITEM_REMOVED, item=item, count=count)
        return True

    def count_of(self, item: Item) -> int:
        """Count of an exact item (0 if absent)."""
        return self._stacks_for(item).get(item, 0)

    def has_item(self, item: Item, quantity: int = 1) -> bool:
        """Check if inventory holds at least quantity of an item."""
        return self.count_of(item) >= quantity

    def is_empty(self) -> bool:
        return not any(self._stacks.values())

    def stacks(self, rarity: Optional[Rarity] = None) -> Iterator[tuple[Item, int]]:
        """
        Iterate over stacks.

        Yields:
            (item, count) pairs for one rarity, or for every rarity in
            ladder order when rarity is None
        """
        rarities = list(Rarity) if rarity is None else [rarity]
        for r in rarities:
            yield from list(self._stacks[r].items())

    def __len__(self) -> int:
        return sum(len(stacks) for stacks in self._stacks.values())

    # Upgrades

    def upgrade_item(self, item: Item) -> bool:
        """
        Upgrade an item one step along the ladder.

        Returns:
            True on a successful upgrade, False if the item cannot go
            any higher (LEGENDARY)

        Raises:
            InvalidItemError: item is None
            InsufficientItemsError: not enough stock for the upgrade
        """
        if self.count_of(item) < 1:
            raise InsufficientItemsError(
                f"Cannot upgrade. {item.name} is not available in sufficient quantity."
            )

        rarity = item.rarity
        if rarity is Rarity.LEGENDARY:
            return False

        if rarity is Rarity.EPIC:
            if 0 <= item.sub_level < MAX_EPIC_SUB_LEVEL:
                return self._refine_epic(item)
            if item.sub_level == MAX_EPIC_SUB_LEVEL:
                return self._merge_up(item, item.promoted(Rarity.LEGENDARY))
            return False

        if rarity in (Rarity.COMMON, Rarity.GREAT, Rarity.RARE):
            return self._merge_up(item, item.promoted(rarity.next()))

        raise InvalidItemError(f"Unknown rarity: {rarity}")

    def _merge_up(self, item: Item, result: Item) -> bool:
        """Consume merge_cost identical items to produce one result."""
        cost = self.config.merge_cost
        if self.count_of(item) < cost:
            raise InsufficientItemsError(
                f"Not enough {_label(item)} items to upgrade {item.name} to {_label(result)}."
            )

        self._take(item, cost)
        self._put(result)
        self._on_upgraded(item, result)
        return True

    def _refine_epic(self, item: Item) -> bool:
        """
        Consume the item plus a donor EPIC to raise its sub-level.

        When the donor is a spare copy of the item itself, the spare is
        the only unit spent; the other copy stays in the stack.
        """
        result = item.promoted(Rarity.EPIC, item.sub_level + 1)
        donor = self._find_epic_donor(item)
        if donor is None:
            raise InsufficientItemsError(
                f"Not enough EPIC items to upgrade {item.name} to {_label(result)}."
            )

        self._take(item)
        if donor != item:
            self._take(donor)
        self._put(result)
        self._on_upgraded(item, result, donor=donor)
        return True

    def _find_epic_donor(self, target: Item) -> Optional[Item]:
        """
        First EPIC stack that can be spent alongside target.

        target itself qualifies only with a spare copy, since one copy
        is the item being upgraded.
        """
        for candidate, count in self._stacks[Rarity.EPIC].items():
            if count <= 0:
                continue
            if candidate == target:
                if count > 1:
                    return candidate
                continue
            return candidate
        return None

    def _on_upgraded(self, item: Item, result: Item, donor: Optional[Item] = None) -> None:
        logger.info(f"Upgraded {item.name} from {_label(item)} to {_label(result)}.")
        self._publish(InventoryEvent.ITEM_UPGRADED, source=item, result=result, donor=donor)

    # Persistence

    def save_to_file(self, path: str | Path) -> int:
        """Write every stack as CSV. Returns the number of rows written."""
        rows = save_inventory(self, path)
        self._publish(InventoryEvent.INVENTORY_SAVED, path=Path(path), rows=rows)
        return rows

    def load_from_file(self, path: str | Path) -> int:
        """
        Add the stacks in a CSV file to this inventory.

        Malformed lines are skipped. Returns the number of rows loaded.
        """
        rows = load_inventory(self, path)
        self._publish(InventoryEvent.INVENTORY_LOADED, path=Path(path), rows=rows)
        return rows

    # Display

    def display(self) -> None:
        print(self)

    def __str__(self) -> str:
        if self.is_empty():
            return "Inventory is empty."

        lines = []
        for rarity in Rarity:
            stacks = self._stacks[rarity]
            if not stacks:
                continue
            lines.append("")
            lines.append(f"--- {rarity.name} ITEMS ---")
            for item, count in stacks.items():
                lines.append(f"{count}x {item}")
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Inventory(stacks={len(self)})"

    # Internals

    def _put(self, item: Item, count: int = 1) -> None:
        stacks = self._stacks_for(item)
        stacks[item] = stacks.get(item, 0) + count

    def _take(self, item: Item, count: int = 1) -> bool:
        """Decrement a stack, deleting it at zero. False if too few."""
        stacks = self._stacks_for(item)
        current = stacks.get(item, 0)
        if current < count:
            return False

        if current == count:
            del stacks[item]
        else:
            stacks[item] = current - count
        return True

    def _stacks_for(self, item: Item) -> dict[Item, int]:
        """Stack mapping for the item's rarity."""
        if not isinstance(item, Item):
            raise InvalidItemError(f"Not an item: {item!r}")
        return self._stacks[item.rarity]

    def _publish(self, event_type: InventoryEvent, **data: Any) -> None:
        if self.event_bus:
            self.event_bus.publish(event_type, inventory=self, **data)


def _label(item: Item) -> str:
    """Ladder position, e.g. "COMMON" or "EPIC 2"."""
    if item.is_epic and item.sub_level > 0:
        return f"{item.rarity.name} {item.sub_level}"
    return item.rarity.name
