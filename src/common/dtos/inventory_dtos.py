"""Data Transfer Objects for the inventory catalog."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


@dataclass(frozen=True)
class ItemDTO:
    """DTO for a single item's name and quantity, detached from the catalog."""

    name: str
    quantity: int


class UpdateOutcome(Enum):
    """Result of a quantity update."""

    UPDATED = "updated"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class InventoryListingDTO:
    """Snapshot of the catalog contents at the time it was listed.

    Iterating yields the items lazily and can be repeated. Callers are expected
    to check ``is_empty`` before iterating, so an empty catalog is reported
    explicitly instead of producing no output.
    """

    items: tuple[ItemDTO, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def __iter__(self) -> Iterator[ItemDTO]:
        return (item for item in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def as_dict(self) -> dict[str, int]:
        """Returns the listing as a name -> quantity mapping."""
        return {item.name: item.quantity for item in self.items}
