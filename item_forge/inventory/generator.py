"""
Random item generation.

The random source is injected so drops can be reproduced from a seed.
"""

from __future__ import annotations

import random
from typing import Optional

from item_forge.config import InventoryConfig
from item_forge.inventory.items import Item, Rarity


class ItemGenerator:
    """
    Produces random items from the configured rarity weights and name pool.

    Usage:
        generator = ItemGenerator(rng=random.Random(42))
        loot = generator.generate_many(10)
    """

    def __init__(
        self,
        config: Optional[InventoryConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or InventoryConfig()
        self.rng = rng or random.Random()

    def roll_rarity(self) -> Rarity:
        """Pick a rarity with one uniform draw against cumulative weights."""
        value = self.rng.random()
        cumulative = 0.0
        for rarity in Rarity:
            cumulative += self.config.rarity_weights.get(rarity, 0.0)
            if value < cumulative:
                return rarity
        # Float rounding can leave value just above the final threshold
        return [r for r in Rarity if self.config.rarity_weights.get(r, 0.0) > 0][-1]

    def generate(self) -> Item:
        """Generate one item (sub-level 0)."""
        name = self.rng.choice(self.config.item_names)
        return Item(name, self.roll_rarity())

    def generate_many(self, count: int) -> list[Item]:
        return [self.generate() for _ in range(count)]
