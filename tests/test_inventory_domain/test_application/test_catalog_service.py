"""Tests for the Catalog Application Service."""

from unittest.mock import Mock

import pytest

from src.common.dtos.inventory_dtos import InventoryListingDTO, ItemDTO, UpdateOutcome
from src.inventory_domain.application.catalog_service import CatalogApplicationService
from src.inventory_domain.domain.entities.item import Item
from src.inventory_domain.domain.repositories.item_repository import IItemRepository


class TestCatalogServiceWithMockRepository:
    def setup_method(self) -> None:
        """Setup test dependencies."""
        self.mock_repo = Mock(spec=IItemRepository)
        self.service = CatalogApplicationService(self.mock_repo)

    def test_upsert_saves_new_item(self) -> None:
        result = self.service.upsert("Apple", 5)

        self.mock_repo.save_item.assert_called_once_with(Item(name="Apple", quantity=5))
        assert result == ItemDTO(name="Apple", quantity=5)

    def test_upsert_does_not_read_existing_item(self) -> None:
        self.service.upsert("Apple", 2)

        self.mock_repo.get_item_by_name.assert_not_called()

    def test_update_quantity_missing_item_reports_not_found(self) -> None:
        self.mock_repo.get_item_by_name.return_value = None

        outcome = self.service.update_quantity("Banana", 1)

        assert outcome is UpdateOutcome.NOT_FOUND
        self.mock_repo.get_item_by_name.assert_called_once_with("Banana")
        self.mock_repo.save_item.assert_not_called()

    def test_update_quantity_mutates_stored_item(self) -> None:
        stored = Item(name="Apple", quantity=5)
        self.mock_repo.get_item_by_name.return_value = stored

        outcome = self.service.update_quantity("Apple", 8)

        assert outcome is UpdateOutcome.UPDATED
        assert stored.quantity == 8
        self.mock_repo.save_item.assert_not_called()

    def test_list_all_empty(self) -> None:
        self.mock_repo.get_all_items.return_value = []

        listing = self.service.list_all()

        assert isinstance(listing, InventoryListingDTO)
        assert listing.is_empty
        assert list(listing) == []


def test_upsert_twice_keeps_last_quantity(catalog_service) -> None:
    catalog_service.upsert("Apple", 5)
    catalog_service.upsert("Apple", 9)

    assert catalog_service.count_items() == 1
    assert catalog_service.get_item("Apple") == ItemDTO(name="Apple", quantity=9)


def test_update_missing_name_leaves_size_unchanged(catalog_service) -> None:
    catalog_service.upsert("Apple", 5)

    outcome = catalog_service.update_quantity("Banana", 1)

    assert outcome is UpdateOutcome.NOT_FOUND
    assert catalog_service.count_items() == 1
    assert catalog_service.get_item("Banana") is None


def test_update_changes_only_target_record(catalog_service) -> None:
    catalog_service.upsert("Apple", 5)
    catalog_service.upsert("Pear", 3)

    catalog_service.update_quantity("Apple", 7)

    assert catalog_service.list_all().as_dict() == {"Apple": 7, "Pear": 3}


def test_list_all_after_one_upsert(catalog_service) -> None:
    assert catalog_service.list_all().is_empty

    catalog_service.upsert("Apple", 5)
    listing = catalog_service.list_all()

    assert not listing.is_empty
    assert list(listing) == [ItemDTO(name="Apple", quantity=5)]


def test_list_all_is_repeatable(catalog_service) -> None:
    catalog_service.upsert("Apple", 5)
    catalog_service.upsert("Pear", 3)

    first = catalog_service.list_all()
    second = catalog_service.list_all()

    assert set(first) == set(second)
    # Iterating the same listing again starts over
    assert list(first) == list(first)
    assert len(first) == 2


def test_listing_is_a_snapshot(catalog_service) -> None:
    catalog_service.upsert("Apple", 5)
    listing = catalog_service.list_all()

    catalog_service.update_quantity("Apple", 8)

    assert listing.as_dict() == {"Apple": 5}
    assert catalog_service.list_all().as_dict() == {"Apple": 8}


def test_upsert_out_of_range_quantity_raises(catalog_service) -> None:
    with pytest.raises(ValueError):
        catalog_service.upsert("Apple", 256)
    assert catalog_service.count_items() == 0


def test_apple_banana_scenario(catalog_service) -> None:
    catalog_service.upsert("Apple", 5)
    assert catalog_service.list_all().as_dict() == {"Apple": 5}

    assert catalog_service.update_quantity("Apple", 8) is UpdateOutcome.UPDATED
    assert catalog_service.list_all().as_dict() == {"Apple": 8}

    assert catalog_service.update_quantity("Banana", 1) is UpdateOutcome.NOT_FOUND
    assert catalog_service.list_all().as_dict() == {"Apple": 8}

    catalog_service.upsert("Apple", 2)
    assert catalog_service.list_all().as_dict() == {"Apple": 2}
