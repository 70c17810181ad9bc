"""Item entity."""

from dataclasses import dataclass

MIN_QUANTITY = 0
MAX_QUANTITY = 255  # Quantities are stored as an unsigned 8-bit count


def is_valid_quantity(quantity: int) -> bool:
    """Checks that a quantity is an integer within the storable range."""
    return isinstance(quantity, int) and not isinstance(quantity, bool) and MIN_QUANTITY <= quantity <= MAX_QUANTITY


@dataclass
class Item:
    """Represents one stock-keeping unit held in the catalog."""

    name: str
    quantity: int

    def __post_init__(self) -> None:
        """Post-initialization for validation."""
        if not self.name:
            raise ValueError("Item name cannot be empty.")
        self._check_quantity(self.quantity)

    def change_quantity(self, quantity: int) -> None:
        """Replaces the quantity in place."""
        self._check_quantity(quantity)
        self.quantity = quantity

    @staticmethod
    def _check_quantity(quantity: int) -> None:
        if not is_valid_quantity(quantity):
            raise ValueError(f"Quantity must be an integer between {MIN_QUANTITY} and {MAX_QUANTITY}, got {quantity!r}.")
