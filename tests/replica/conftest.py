"""
Fixtures for the replica board suite.

The replica is a static page that reproduces the live board's DOM shape
(columns, cards, modal, status dropdown, delete confirmation) and applies
changes synchronously. Boards are described in Python and loaded into the
page, so each test controls exactly which fixtures exist.
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from playwright.sync_api import Browser, Page, Playwright
from playwright.sync_api import Error as PlaywrightError

from config import Config, ReplicaConfig
from tests.e2e.pages.board_page import BoardPage
from tests.e2e.pages.task_modal import TaskModal

REPLICA_HTML = Path(__file__).with_name("board.html")


@pytest.fixture(scope="session")
def settings() -> type[Config]:
    return ReplicaConfig


@pytest.fixture(scope="session")
def browser(playwright: Playwright) -> Generator[Browser, None, None]:
    """Launch Chromium, skipping the suite when no browser build is installed."""
    try:
        browser = playwright.chromium.launch(headless=True)
    except PlaywrightError as exc:
        pytest.skip(f"Chromium is not installed for Playwright: {exc.message}")
    yield browser
    browser.close()


@pytest.fixture(scope="session")
def browser_context_args(settings: type[Config]):
    return {"viewport": settings.VIEWPORT}


@pytest.fixture
def load_board(page: Page, settings: type[Config]) -> Callable[[list[dict[str, Any]]], BoardPage]:
    """
    Factory fixture that renders a board and returns its page object.

    Example:
        def test_something(load_board):
            board = load_board([{"name": "Todo", "tasks": []}])
    """

    def _load(columns: list[dict[str, Any]]) -> BoardPage:
        page.set_content(REPLICA_HTML.read_text(encoding="utf-8"))
        page.evaluate("columns => window.kanban.load(columns)", columns)
        board = BoardPage(page, settings.BASE_URL, settings)
        return board.wait_until_ready()

    return _load


@pytest.fixture
def task_modal(page: Page, settings: type[Config]) -> TaskModal:
    return TaskModal(page, settings.BASE_URL, settings)

