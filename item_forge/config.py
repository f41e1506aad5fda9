"""
Inventory configuration.

Defaults reproduce the standard ladder: three identical items merge into
one of the next rarity, and random drops follow a 50/25/15/8/2 split.

Usage:
    config = InventoryConfig.load("game/data/inventory_config.json")
    inventory = Inventory(config=config)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from item_forge.inventory.items import Rarity

logger = logging.getLogger(__name__)

DEFAULT_ITEM_NAMES = (
    "Iron Sword",
    "Steel Shield",
    "Magic Wand",
    "Dragon Armor",
    "Silver Dagger",
)

DEFAULT_RARITY_WEIGHTS = {
    Rarity.COMMON: 0.50,
    Rarity.GREAT: 0.25,
    Rarity.RARE: 0.15,
    Rarity.EPIC: 0.08,
    Rarity.LEGENDARY: 0.02,
}


@dataclass
class InventoryConfig:
    """Complete inventory configuration."""
    # Identical items consumed by a COMMON/GREAT/RARE/EPIC 2 upgrade
    merge_cost: int = 3

    # Random generation
    item_names: tuple[str, ...] = DEFAULT_ITEM_NAMES
    rarity_weights: dict[Rarity, float] = field(
        default_factory=lambda: dict(DEFAULT_RARITY_WEIGHTS)
    )

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Raise ValueError if the configuration cannot be used."""
        if self.merge_cost < 1:
            raise ValueError(f"merge_cost must be at least 1, got {self.merge_cost}")
        if not self.item_names:
            raise ValueError("item_names must not be empty")
        if any(weight < 0 for weight in self.rarity_weights.values()):
            raise ValueError("rarity weights must not be negative")
        total = sum(self.rarity_weights.values())
        if abs(total - 1.0) > 1e-9:
            raise ValueError(f"rarity weights must sum to 1.0, got {total}")

    @classmethod
    def load(cls, path: str | Path) -> InventoryConfig:
        """
        Load configuration from a JSON file.

        Expected format (every key optional):
        {
            "merge_cost": 3,
            "item_names": ["Iron Sword", "Steel Shield"],
            "rarity_weights": {"COMMON": 0.5, "GREAT": 0.25, ...}
        }

        A missing file yields the defaults.
        """
        config_file = Path(path)
        if not config_file.exists():
            logger.info(f"Config file not found, using defaults: {config_file}")
            return cls()

        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)

        kwargs = {}
        if "merge_cost" in data:
            kwargs["merge_cost"] = int(data["merge_cost"])
        if "item_names" in data:
            kwargs["item_names"] = tuple(data["item_names"])
        if "rarity_weights" in data:
            try:
                kwargs["rarity_weights"] = {
                    Rarity[name.upper()]: float(weight)
                    for name, weight in data["rarity_weights"].items()
                }
            except KeyError as e:
                raise ValueError(f"Unknown rarity in config: {e.args[0]}") from e

        return cls(**kwargs)
