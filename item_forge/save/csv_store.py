"""
CSV persistence for inventories.

One stack per line, no header:

    RARITY,ITEM_NAME,EPIC_SUBLEVEL,QUANTITY

For example:

    COMMON,Iron Sword,0,3
    GREAT,Steel Shield,0,1
    EPIC,Dragon Spear,2,2

Names are written as-is; a name containing a comma will not load back.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Optional

from item_forge.inventory.items import Item, Rarity

if TYPE_CHECKING:
    from item_forge.inventory.manager import Inventory

logger = logging.getLogger(__name__)

FIELD_COUNT = 4

# Optional sign, ASCII digits only, 32-bit range
INT_PATTERN = re.compile(r"[+-]?[0-9]+")
INT_MIN, INT_MAX = -(2 ** 31), 2 ** 31 - 1


def parse_int(token: str) -> Optional[int]:
    """Parse a signed decimal integer field, or None if it is not one."""
    if not INT_PATTERN.fullmatch(token):
        return None
    value = int(token)
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value


@dataclass(frozen=True)
class StackRecord:
    """One saved stack."""
    rarity: Rarity
    name: str
    sub_level: int
    quantity: int

    @classmethod
    def from_stack(cls, item: Item, quantity: int) -> StackRecord:
        return cls(item.rarity, item.name, item.sub_level, quantity)

    @classmethod
    def from_line(cls, line: str) -> Optional[StackRecord]:
        """
        Parse a CSV line.

        Trailing empty fields are dropped before counting, so a stray
        trailing comma still yields four fields.

        Returns:
            The record, or None if the line is blank or malformed
        """
        if not line.strip():
            return None

        parts = line.split(",")
        while parts and parts[-1] == "":
            parts.pop()
        if len(parts) != FIELD_COUNT:
            return None

        rarity_token, name, sub_level, quantity = (p.strip() for p in parts)
        try:
            rarity = Rarity[rarity_token]
        except KeyError:
            return None

        sub_level_value = parse_int(sub_level)
        quantity_value = parse_int(quantity)
        if sub_level_value is None or quantity_value is None:
            return None
        return cls(rarity, name, sub_level_value, quantity_value)

    def to_item(self) -> Item:
        return Item(self.name, self.rarity, self.sub_level)

    def to_line(self) -> str:
        return f"{self.rarity.name},{self.name},{self.sub_level},{self.quantity}"


def iter_records(path: str | Path) -> Iterator[StackRecord]:
    """Yield the well-formed records of a CSV file, skipping the rest."""
    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            record = StackRecord.from_line(line.rstrip("\r\n"))
            if record is None:
                if line.strip():
                    logger.debug(f"Skipping malformed line {line_no} in {path}: {line.rstrip()!r}")
                continue
            yield record


def save_inventory(inventory: Inventory, path: str | Path) -> int:
    """
    Write every stack of an inventory to a CSV file.

    Returns:
        Number of rows written
    """
    rows = 0
    with open(path, "w", encoding="utf-8", newline="") as f:
        for item, quantity in inventory.stacks():
            f.write(StackRecord.from_stack(item, quantity).to_line() + "\n")
            rows += 1

    logger.info(f"Saved {rows} stacks to {path}")
    return rows


def load_inventory(inventory: Inventory, path: str | Path) -> int:
    """
    Add every record in a CSV file to an inventory.

    Loading accumulates onto whatever the inventory already holds.

    Returns:
        Number of rows loaded

    Raises:
        OSError: the file cannot be read
        InvalidItemError: a row has a non-positive quantity
    """
    rows = 0
    for record in iter_records(path):
        inventory.add_item(record.to_item(), record.quantity)
        rows += 1

    logger.info(f"Loaded {rows} stacks from {path}")
    return rows
