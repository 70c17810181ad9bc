# tests/conftest.py
import pytest

from src.common.config.settings import settings
from src.inventory_domain.application.catalog_service import CatalogApplicationService
from src.inventory_domain.infrastructure.persistence.in_memory_item_repository import InMemoryItemRepository
from src.inventory_domain.presentation.command_loop import CommandLoop


class ScriptedInput:
    """Input source that replays fixed lines and raises EOFError once they run out."""

    def __init__(self, lines: list[str]) -> None:
        self.lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture(autouse=True)
def mock_settings_loop_flags(mocker) -> None:
    """Pins the command loop flags so a local .env cannot change test behaviour."""
    mocker.patch.object(settings, "DEMO_MODE", False)
    mocker.patch.object(settings, "STRICT_MENU_INPUT", False)


@pytest.fixture
def item_repository() -> InMemoryItemRepository:
    return InMemoryItemRepository()


@pytest.fixture
def catalog_service(item_repository) -> CatalogApplicationService:
    """CatalogApplicationService over a fresh in-memory repository."""
    return CatalogApplicationService(item_repo=item_repository)


@pytest.fixture
def make_command_loop(catalog_service):
    """Factory building a CommandLoop fed by scripted lines; returns (loop, scripted_input, output_lines)."""

    def _make(lines: list[str], demo_mode: bool = False, strict_input: bool = False):
        scripted_input = ScriptedInput(lines)
        output_lines: list[str] = []
        loop = CommandLoop(
            catalog_service=catalog_service,
            input_fn=scripted_input,
            output_fn=output_lines.append,
            demo_mode=demo_mode,
            strict_input=strict_input,
        )
        return loop, scripted_input, output_lines

    return _make
