# src/inventory_domain/application/catalog_service.py
"""Application service for the inventory catalog."""

import logging
from typing import Optional

from src.common.dtos.inventory_dtos import InventoryListingDTO, ItemDTO, UpdateOutcome
from src.inventory_domain.domain.entities.item import Item
from src.inventory_domain.domain.repositories.item_repository import IItemRepository

logger = logging.getLogger(__name__)


class CatalogApplicationService:
    """Adds, updates and lists catalog items on top of an item repository."""

    def __init__(self, item_repo: IItemRepository) -> None:
        """Initializes the CatalogApplicationService."""
        self.item_repo = item_repo

    @staticmethod
    def _to_dto(item: Item) -> ItemDTO:
        return ItemDTO(name=item.name, quantity=item.quantity)

    def upsert(self, name: str, quantity: int) -> ItemDTO:
        """
        Stores an item with the given quantity.

        An existing item with the same name is replaced, not restocked: the
        quantity afterwards is exactly ``quantity``.
        """
        item = Item(name=name, quantity=quantity)
        self.item_repo.save_item(item)
        logger.info(f"added an item {name} and quantity {quantity}")
        return self._to_dto(item)

    def update_quantity(self, name: str, quantity: int) -> UpdateOutcome:
        """
        Sets the quantity of an existing item.

        Returns UpdateOutcome.NOT_FOUND and leaves the catalog untouched when no
        item has that name; an update never creates an item.
        """
        item = self.item_repo.get_item_by_name(name)
        if item is None:
            logger.info(f"No item named '{name}' in the collection, nothing updated.")
            return UpdateOutcome.NOT_FOUND

        item.change_quantity(quantity)
        logger.info(f"Updated item: {name} and quantity {quantity}")
        return UpdateOutcome.UPDATED

    def list_all(self) -> InventoryListingDTO:
        """Returns a snapshot of every item currently in the catalog."""
        items = tuple(self._to_dto(item) for item in self.item_repo.get_all_items())
        logger.debug(f"Listing {len(items)} items.")
        return InventoryListingDTO(items=items)

    def get_item(self, name: str) -> Optional[ItemDTO]:
        """Returns the item stored under a name, or None."""
        item = self.item_repo.get_item_by_name(name)
        return self._to_dto(item) if item is not None else None

    def count_items(self) -> int:
        return self.item_repo.count_items()
