"""Main application entry point for the interactive inventory catalog."""

import logging
import sys

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import ApplicationError
from src.common.logger_config import setup_logging
from src.common.utils.date_utils import format_timestamp, now_in_timezone
from src.inventory_domain.application.catalog_service import CatalogApplicationService
from src.inventory_domain.infrastructure.persistence.in_memory_item_repository import InMemoryItemRepository
from src.inventory_domain.presentation.command_loop import CommandLoop

logger = logging.getLogger(__name__)


def setup_dependencies() -> CatalogApplicationService:
    """Initializes and wires up catalog dependencies."""
    item_repository = InMemoryItemRepository()
    return CatalogApplicationService(item_repo=item_repository)


def run_inventory_session() -> int:
    """Runs one interactive session and returns the process exit status."""
    started_at = format_timestamp(now_in_timezone(settings.APP_TIMEZONE))
    logger.info(f"Inventory session started at {started_at} (demo mode: {settings.DEMO_MODE})")

    catalog_service = setup_dependencies()
    command_loop = CommandLoop(catalog_service=catalog_service)

    try:
        command_loop.run()
    except ApplicationError as e:
        logger.error(f"Inventory session aborted: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print()
        logger.info("Interrupted by user.")

    finished_at = format_timestamp(now_in_timezone(settings.APP_TIMEZONE))
    logger.info(f"Inventory session finished at {finished_at} with {catalog_service.count_items()} items in the catalog")
    return 0


def main() -> None:
    setup_logging()
    sys.exit(run_inventory_session())


if __name__ == "__main__":
    main()
