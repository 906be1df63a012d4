"""
Page Object Model (POM) classes for the Kanban board.

This package contains page objects that encapsulate the board's structural
locators and interactions. The POM pattern provides:
- Separation of test logic from page details
- Reusable page interactions shared by the live and replica suites
- Maintainable test code (changes to UI only require updates in one place)
"""

from tests.e2e.pages.base_page import BasePage
from tests.e2e.pages.board_page import BoardPage
from tests.e2e.pages.task_modal import TaskModal

__all__ = ["BasePage", "BoardPage", "TaskModal"]
