"""
Component base class for immutable value types.

Components are frozen Pydantic models. Freezing gives every component
structural equality and a stable hash, so instances can be used directly
as dictionary keys (e.g. inventory stacks).

Usage:
    class Item(Component):
        name: str
        rarity: Rarity
        sub_level: int = 0

    sword = Item(name="Sword", rarity=Rarity.COMMON)
    better = sword.evolve(rarity=Rarity.GREAT)
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

C = TypeVar("C", bound="Component")


class Component(BaseModel):
    """
    Base class for all value components.

    Components use Pydantic for:
    - Type validation on construction
    - Immutability (frozen models are hashable)
    - Structural equality over all fields

    Instances are never mutated. To change a field, build a new
    instance with evolve().
    """

    model_config = ConfigDict(
        # Hashable, no attribute assignment
        frozen=True,
        extra='forbid',
    )

    def evolve(self: C, **changes: Any) -> C:
        """Return a validated copy with the given fields replaced."""
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)
