"""
E2E test package for the Kanban board.

This package contains Playwright-based browser tests and demonstrates:
- Page Object Model (POM) pattern
- Structural locator strategies for markup without test ids
- Runtime fixture discovery against shared, changing data
- User flow testing with verified outcomes
"""
