"""Lifecycle of the task modal while a scenario drives it."""

from __future__ import annotations

import logging
from enum import Enum

from shared.errors import IllegalModalTransition

logger = logging.getLogger(__name__)


class ModalState(str, Enum):
    """States the task modal moves through during one interaction."""

    CLOSED = "closed"
    OPENING = "opening"
    OPEN = "open"
    MUTATING = "mutating"
    CLOSING = "closing"


ALLOWED_TRANSITIONS: dict[ModalState, frozenset[ModalState]] = {
    ModalState.CLOSED: frozenset({ModalState.OPENING}),
    # A failed open falls straight back to closed
    ModalState.OPENING: frozenset({ModalState.OPEN, ModalState.CLOSED}),
    # Closing from OPEN abandons a fixture whose precondition failed
    ModalState.OPEN: frozenset({ModalState.MUTATING, ModalState.CLOSING}),
    # Deletion closes the modal itself
    ModalState.MUTATING: frozenset({ModalState.OPEN, ModalState.CLOSING, ModalState.CLOSED}),
    ModalState.CLOSING: frozenset({ModalState.CLOSED}),
}


class ModalLifecycle:
    """
    Tracks the modal state and rejects out-of-order interactions.

    Attributes:
        state: Current state, initially CLOSED.
        history: Every state entered, oldest first.
    """

    def __init__(self) -> None:
        self.state = ModalState.CLOSED
        self.history: list[ModalState] = [ModalState.CLOSED]

    def can_move_to(self, target: ModalState) -> bool:
        return target in ALLOWED_TRANSITIONS[self.state]

    def move_to(self, target: ModalState) -> None:
        """
        Enter ``target``.

        Raises:
            IllegalModalTransition: If the current state does not allow it.
        """
        if not self.can_move_to(target):
            raise IllegalModalTransition(self.state.value, target.value)
        logger.debug("Modal %s -> %s", self.state.value, target.value)
        self.state = target
        self.history.append(target)

    def require(self, *states: ModalState) -> None:
        """Raise unless the modal is in one of ``states``."""
        if self.state not in states:
            expected = "/".join(state.value for state in states)
            raise IllegalModalTransition(self.state.value, expected)

    @property
    def is_open(self) -> bool:
        return self.state in (ModalState.OPEN, ModalState.MUTATING)
