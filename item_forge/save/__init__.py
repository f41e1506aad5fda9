"""
Save module - inventory persistence.

Provides:
- CSV save/load of inventory stacks
- Tolerant loading (malformed lines are skipped)
"""

from item_forge.save.csv_store import (
    StackRecord,
    iter_records,
    load_inventory,
    save_inventory,
)

__all__ = [
    "StackRecord",
    "iter_records",
    "load_inventory",
    "save_inventory",
]
