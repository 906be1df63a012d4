"""
Error taxonomy for board scenarios.

Only ``RequiredElementMissing`` and ``PostconditionMismatch`` are meant to
reach the test runner as failures. ``PreconditionNotMet`` is turned into a
skip by the test layer, and optional probe failures never surface at all
(see :func:`shared.eventual.probe`).
"""

from __future__ import annotations

from typing import Any


class KanbanHarnessError(Exception):
    """Base class for harness errors."""


class PreconditionNotMet(KanbanHarnessError):
    """The live board does not currently hold a card the scenario can use."""

    def __init__(self, reason: str, board_summary: str = ""):
        self.reason = reason
        self.board_summary = board_summary
        message = reason if not board_summary else f"{reason}\n{board_summary}"
        super().__init__(message)


class RequiredElementMissing(KanbanHarnessError):
    """A mandatory element never resolved within its timeout."""

    def __init__(self, step: str, attempt: int = 1, detail: str = ""):
        self.step = step
        self.attempt = attempt
        self.detail = detail
        message = f"{step} failed on attempt {attempt}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ModalDidNotOpen(RequiredElementMissing):
    """Clicking a card did not produce the task modal."""

    def __init__(self, card_title: str, attempt: int = 1, detail: str = ""):
        self.card_title = card_title
        super().__init__(
            f"modal did not open for card {card_title!r}", attempt, detail
        )


class IllegalModalTransition(KanbanHarnessError):
    """The interaction driver attempted a transition its state forbids."""

    def __init__(self, current: Any, target: Any):
        self.current = current
        self.target = target
        super().__init__(f"cannot move modal from {current} to {target}")


class PostconditionMismatch(AssertionError):
    """A verified outcome differs from what the scenario expected."""

    def __init__(self, check: str, expected: Any, actual: Any):
        self.check = check
        self.expected = expected
        self.actual = actual
        super().__init__(f"{check}: expected {expected!r}, got {actual!r}")
