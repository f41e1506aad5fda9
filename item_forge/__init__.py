"""
item-forge: a rarity-ladder game inventory.

Provides:
- Items classified by rarity (COMMON through LEGENDARY)
- Countable stacks with an upgrade state machine
- CSV persistence
- Weighted random item generation
"""

# Import order matters: item_forge.config imports item_forge.inventory.items
from item_forge.inventory import (
    Inventory,
    InventoryError,
    InvalidItemError,
    InsufficientItemsError,
    Item,
    ItemGenerator,
    Rarity,
)
from item_forge.config import InventoryConfig

__version__ = "0.1.0"

__all__ = [
    "Inventory",
    "InventoryConfig",
    "InventoryError",
    "InvalidItemError",
    "InsufficientItemsError",
    "Item",
    "ItemGenerator",
    "Rarity",
]
