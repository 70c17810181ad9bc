# src/inventory_domain/domain/repositories/item_repository.py
"""Item repository interface."""
from abc import ABC, abstractmethod
from typing import Optional

from src.inventory_domain.domain.entities.item import Item


class IItemRepository(ABC):

    @abstractmethod
    def save_item(self, item: Item) -> None:
        """Saves an item under its name, replacing any item already stored under that name."""
        pass

    @abstractmethod
    def get_item_by_name(self, name: str) -> Optional[Item]:
        """Retrieves the stored item for a name, or None if absent."""
        pass

    @abstractmethod
    def get_all_items(self) -> list[Item]:
        """Retrieves all stored items."""
        pass

    @abstractmethod
    def count_items(self) -> int:
        """Returns the number of stored items."""
        pass
