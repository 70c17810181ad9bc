# src/inventory_domain/infrastructure/persistence/in_memory_item_repository.py
"""In-memory implementation of the Item repository."""

import logging
from typing import Optional

from src.inventory_domain.domain.entities.item import Item
from src.inventory_domain.domain.repositories.item_repository import IItemRepository

logger = logging.getLogger(__name__)


class InMemoryItemRepository(IItemRepository):
    """Dict-backed item store. Contents live only as long as the process."""

    def __init__(self) -> None:
        """Initializes the repository with an empty mapping."""
        self._items: dict[str, Item] = {}

    def save_item(self, item: Item) -> None:
        replaced = item.name in self._items
        self._items[item.name] = item
        logger.debug(f"{'Replaced' if replaced else 'Inserted'} item '{item.name}' (quantity {item.quantity})")

    def get_item_by_name(self, name: str) -> Optional[Item]:
        return self._items.get(name)

    def get_all_items(self) -> list[Item]:
        return list(self._items.values())

    def count_items(self) -> int:
        return len(self._items)
