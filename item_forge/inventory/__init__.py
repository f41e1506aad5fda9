"""
Inventory module - items, stacks and upgrades.

Provides:
- Item values and the rarity ladder
- Inventory stacks with add/remove/upgrade
- Random item generation
- Inventory errors
"""

from item_forge.inventory.items import Item, Rarity
from item_forge.inventory.exceptions import (
    InventoryError,
    InvalidItemError,
    InsufficientItemsError,
)
from item_forge.inventory.generator import ItemGenerator
from item_forge.inventory.manager import Inventory

__all__ = [
    "Item",
    "Rarity",
    "InventoryError",
    "InvalidItemError",
    "InsufficientItemsError",
    "ItemGenerator",
    "Inventory",
]
