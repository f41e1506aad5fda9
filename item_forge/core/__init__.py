"""
Core module.

Exports:
- Component: Frozen value-type base
- EventBus, Event, InventoryEvent: Event system
"""

from item_forge.core.component import Component
from item_forge.core.events import EventBus, Event, EventHandler, InventoryEvent

__all__ = [
    "Component",
    "EventBus",
    "Event",
    "EventHandler",
    "InventoryEvent",
]
