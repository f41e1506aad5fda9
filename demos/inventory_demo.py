"""
Inventory Demo

Demonstrates:
- Adding stacks of items at several rarities
- Saving to CSV and loading into a fresh inventory
- Upgrading three COMMON items into one GREAT
- Random loot from a seeded generator

Run: python -m demos.inventory_demo [save_path]
"""

import logging
import random
import sys
from pathlib import Path

from item_forge import (
    Inventory,
    InventoryError,
    Item,
    ItemGenerator,
    Rarity,
)
from item_forge.core import EventBus, InventoryEvent

DEFAULT_SAVE_PATH = Path("saves/inventory.csv")


def on_upgrade(event):
    print(f"  * {event['source']} -> {event['result']}")


def main(save_path: Path = DEFAULT_SAVE_PATH) -> int:
    logging.basicConfig(level=logging.INFO)
    save_path.parent.mkdir(parents=True, exist_ok=True)

    event_bus = EventBus()
    event_bus.subscribe(InventoryEvent.ITEM_UPGRADED, on_upgrade)

    try:
        inventory = Inventory(event_bus=event_bus)
        fangs = Item("BloodHound's fangs", Rarity.COMMON)
        inventory.add_item(fangs, 3)
        inventory.add_item(Item("Dead's poker", Rarity.RARE), 2)
        inventory.add_item(Item("Guts greatsword", Rarity.EPIC, 0), 1)

        inventory.save_to_file(save_path)
        print(f"Inventory saved to {save_path}")

        inventory = Inventory(event_bus=event_bus)
        inventory.load_from_file(save_path)
        print(f"Inventory loaded from {save_path}")

        inventory.upgrade_item(fangs)
        inventory.display()

        generator = ItemGenerator(rng=random.Random(7))
        for item in generator.generate_many(5):
            inventory.add_item(item)
        print("After random loot:")
        inventory.display()

    except (InventoryError, OSError) as e:
        print(e)
        return 1

    return 0


if __name__ == "__main__":
    args = sys.argv[1:]
    sys.exit(main(Path(args[0]) if args else DEFAULT_SAVE_PATH))
