"""
Test suite for the Kanban board harness.

This package contains:
- unit/: Snapshot, fixture selection, verifier and lifecycle tests (no browser)
- replica/: Page objects and flows against a static replica of the board
- e2e/: Playwright scenarios against the deployed board
"""
