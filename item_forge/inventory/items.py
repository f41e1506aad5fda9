"""
Item system - rarities and item values.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional

from item_forge.core.component import Component


class Rarity(Enum):
    """
    Item rarity levels.

    Declaration order is the upgrade path, COMMON through LEGENDARY.
    """
    COMMON = auto()
    GREAT = auto()
    RARE = auto()
    EPIC = auto()
    LEGENDARY = auto()

    def next(self) -> Optional[Rarity]:
        """The rarity one step up the ladder, or None at the top."""
        ladder = list(Rarity)
        index = ladder.index(self) + 1
        return ladder[index] if index < len(ladder) else None


class Item(Component):
    """
    A named item at a rarity.

    Two items stack together only when name, rarity and sub_level all
    match. sub_level tracks EPIC refinement (0, 1 or 2) and should stay
    0 for every other rarity; this is not enforced.

    Attributes:
        name: Display name (e.g. "Iron Sword")
        rarity: Position on the upgrade ladder
        sub_level: EPIC upgrade count
    """
    name: str
    rarity: Rarity
    sub_level: int = 0

    def __init__(
        self,
        name: str,
        rarity: Rarity,
        sub_level: int = 0,
        **data,
    ):
        super().__init__(name=name, rarity=rarity, sub_level=sub_level, **data)

    @property
    def is_epic(self) -> bool:
        return self.rarity is Rarity.EPIC

    def promoted(self, rarity: Rarity, sub_level: int = 0) -> Item:
        """Same-named item at another rarity."""
        return self.evolve(rarity=rarity, sub_level=sub_level)

    def __str__(self) -> str:
        if self.is_epic and self.sub_level > 0:
            return f"{self.rarity.name} {self.sub_level} {self.name}"
        return f"{self.rarity.name} {self.name}"
