# src/inventory_domain/presentation/command_loop.py
"""Interactive menu loop driving the inventory catalog."""

import logging
from enum import Enum
from typing import Callable

from src.common.config.settings import settings
from src.common.dtos.inventory_dtos import UpdateOutcome
from src.common.exceptions.custom_exceptions import InvalidItemInputError, InvalidSelectionError
from src.inventory_domain.application.catalog_service import CatalogApplicationService
from src.inventory_domain.domain.entities.item import MAX_QUANTITY, MIN_QUANTITY, is_valid_quantity

logger = logging.getLogger(__name__)

MENU_LINES = (
    "1. Add an item",
    "2. Update an item",
    "3. List an item",
    "4. Exit",
)
CHOICE_PROMPT = "Enter your choice: "
NAME_PROMPT = "Item name: "
QUANTITY_PROMPT = "Quantity: "

CHOICE_ADD = 1
CHOICE_UPDATE = 2
CHOICE_LIST = 3
CHOICE_EXIT = 4
MAX_CHOICE = 255  # Selections are read as an unsigned 8-bit value

# Values used in demo mode instead of prompting
DEMO_ITEM_NAME = "Apple"
DEMO_ADD_QUANTITY = 5
DEMO_UPDATE_QUANTITY = 8


class LoopState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class CommandLoop:
    """
    Reads menu selections and dispatches them to the catalog until exit is chosen.

    Input and output are injected as callables (``input``/``print`` by default)
    so the loop can be driven from tests without a terminal.
    """

    def __init__(
        self,
        catalog_service: CatalogApplicationService,
        input_fn: Callable[[str], str] | None = None,
        output_fn: Callable[[str], None] | None = None,
        demo_mode: bool | None = None,
        strict_input: bool | None = None,
    ) -> None:
        self.catalog_service = catalog_service
        self.input_fn = input_fn if input_fn is not None else input
        self.output_fn = output_fn if output_fn is not None else print
        self.demo_mode = settings.DEMO_MODE if demo_mode is None else demo_mode
        self.strict_input = settings.STRICT_MENU_INPUT if strict_input is None else strict_input
        self.state = LoopState.RUNNING

    def run(self) -> None:
        """Runs until the exit action is chosen or input is exhausted."""
        logger.debug("Command loop started.")
        while self.state is LoopState.RUNNING:
            self.step()
        logger.debug("Command loop terminated.")

    def step(self) -> LoopState:
        """Shows the menu, reads one selection and performs it."""
        for line in MENU_LINES:
            self.output_fn(line)

        try:
            raw_choice = self.input_fn(CHOICE_PROMPT)
        except EOFError:
            logger.info("Input closed, leaving the command loop.")
            self.state = LoopState.TERMINATED
            return self.state

        choice = self._parse_choice(raw_choice)

        if choice == CHOICE_ADD:
            self._handle_add()
        elif choice == CHOICE_UPDATE:
            self._handle_update()
        elif choice == CHOICE_LIST:
            self._handle_list()
        elif choice == CHOICE_EXIT:
            self.state = LoopState.TERMINATED
        else:
            self.output_fn("failed to recognize the choice")

        return self.state

    def _parse_choice(self, raw_choice: str) -> int | None:
        """Parses a selection; None means it should be treated as unrecognized."""
        try:
            choice = int(raw_choice.strip())
        except ValueError as e:
            if self.strict_input:
                logger.error(f"Menu selection {raw_choice!r} is not an integer.")
                raise InvalidSelectionError(raw_choice, original_exception=e)
            logger.debug(f"Ignoring non-numeric menu selection {raw_choice!r}.")
            return None

        if self.strict_input and not 0 <= choice <= MAX_CHOICE:
            logger.error(f"Menu selection {raw_choice!r} is outside 0-{MAX_CHOICE}.")
            raise InvalidSelectionError(raw_choice, message=f"selection must be between 0 and {MAX_CHOICE}")
        return choice

    def _read_item_input(self) -> tuple[str, int]:
        """Prompts for an item name and quantity."""
        name = self.input_fn(NAME_PROMPT).strip()
        if not name:
            raise InvalidItemInputError("Item name cannot be empty")

        raw_quantity = self.input_fn(QUANTITY_PROMPT).strip()
        try:
            quantity = int(raw_quantity)
        except ValueError as e:
            raise InvalidItemInputError(f"Quantity {raw_quantity!r} is not a whole number", original_exception=e)
        if not is_valid_quantity(quantity):
            raise InvalidItemInputError(f"Quantity must be between {MIN_QUANTITY} and {MAX_QUANTITY}")
        return name, quantity

    def _item_values(self, demo_quantity: int) -> tuple[str, int] | None:
        if self.demo_mode:
            return DEMO_ITEM_NAME, demo_quantity
        try:
            return self._read_item_input()
        except EOFError:
            self.state = LoopState.TERMINATED
            return None
        except InvalidItemInputError as e:
            logger.info(f"Rejected item input: {e}")
            self.output_fn(str(e))
            return None

    def _handle_add(self) -> None:
        values = self._item_values(DEMO_ADD_QUANTITY)
        if values is None:
            return
        name, quantity = values
        self.catalog_service.upsert(name, quantity)
        self.output_fn(f"added an item {name} and quantity {quantity}")

    def _handle_update(self) -> None:
        values = self._item_values(DEMO_UPDATE_QUANTITY)
        if values is None:
            return
        name, quantity = values
        outcome = self.catalog_service.update_quantity(name, quantity)
        if outcome is UpdateOutcome.UPDATED:
            self.output_fn(f"Updated item: {name} and quantity {quantity}")
        else:
            self.output_fn("NO item in the collection")

    def _handle_list(self) -> None:
        listing = self.catalog_service.list_all()
        if listing.is_empty:
            self.output_fn("There are no items in the list")
            return
        for item in sorted(listing, key=lambda i: i.name):
            self.output_fn(f"Added item: {item.name} and quantity: {item.quantity}")
