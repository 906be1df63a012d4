"""Playwright fixtures for the live Kanban board E2E tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from playwright.sync_api import Page

from config import Config, get_config
from shared.live_board import live_board_url
from tests.e2e.pages.board_page import BoardPage
from tests.e2e.pages.task_modal import TaskModal


@pytest.fixture(scope="session")
def settings() -> type[Config]:
    """Configuration class for this run, chosen by KANBAN_ENV."""
    return get_config()


@pytest.fixture(scope="session")
def live_server(settings: type[Config]) -> Generator[str, None, None]:
    """
    Return the URL of the deployed board.

    The suite is skipped when the board cannot be reached, unless
    KANBAN_REQUIRE_LIVE is set.
    """
    yield from live_board_url(
        settings.BASE_URL,
        require_live=settings.REQUIRE_LIVE,
        timeout=settings.REACHABILITY_TIMEOUT_S,
    )


@pytest.fixture(scope="session")
def browser_context_args(settings: type[Config]):
    return {
        "viewport": settings.VIEWPORT,
        "ignore_https_errors": True,
    }


@pytest.fixture
def board_page(page: Page, live_server: str, settings: type[Config]) -> BoardPage:
    """Board page object, navigated and settled."""
    board = BoardPage(page, live_server, settings)
    board.navigate()
    return board


@pytest.fixture
def task_modal(page: Page, live_server: str, settings: type[Config]) -> TaskModal:
    return TaskModal(page, live_server, settings)
