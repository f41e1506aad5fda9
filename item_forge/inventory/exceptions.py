"""
Inventory errors.

InvalidItemError signals caller misuse (missing item, bad count).
InsufficientItemsError signals a failed upgrade for lack of stock.
Both share InventoryError so a driver can catch them together.
"""


class InventoryError(Exception):
    """Base class for inventory errors."""

    default_message = "Inventory error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return self.args[0]


class InvalidItemError(InventoryError):
    """Item is missing or a count is not positive."""

    default_message = "Invalid Item"


class InsufficientItemsError(InventoryError):
    """Not enough items in stock to perform an upgrade."""

    default_message = "Insufficient Items"
