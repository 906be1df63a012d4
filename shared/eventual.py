"""Helpers for querying a UI that settles asynchronously."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TypeVar

from playwright.sync_api import Error as PlaywrightError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _sleep_ms(milliseconds: int) -> None:
    time.sleep(milliseconds / 1000)


def probe(read: Callable[[], T], default: T, *, description: str = "") -> T:
    """
    Run an optional DOM query, treating any Playwright failure as ``default``.

    Use this for visibility, checked-state and text reads while scanning.
    Required lookups must not go through here; they should raise.

    Args:
        read: Zero-argument callable performing the query.
        default: Value returned when the query raises.
        description: Label included in the debug log on failure.

    Returns:
        The query result, or ``default``.
    """
    try:
        return read()
    except PlaywrightError as exc:
        logger.debug("Optional probe %s failed: %s", description or read, exc)
        return default


def find_first(
    attempt: Callable[[int], T | None],
    *,
    attempts: int = 3,
    backoff_ms: int = 2000,
    wait_ms: Callable[[int], None] = _sleep_ms,
) -> T | None:
    """
    Return the first non-None result of ``attempt`` within a bounded number of attempts.

    The wait before attempt ``n`` (1-based, n > 1) is ``backoff_ms * (n - 1)``
    so later attempts give a still-loading page more time.

    Args:
        attempt: Callable receiving the 1-based attempt number.
        attempts: Maximum number of calls.
        backoff_ms: Base backoff in milliseconds.
        wait_ms: Sleep function taking milliseconds. Page objects pass
            ``page.wait_for_timeout`` so Playwright keeps processing events.

    Returns:
        The first non-None result, or None when every attempt came back empty.
    """
    if attempts < 1:
        raise ValueError("attempts must be at least 1")

    for number in range(1, attempts + 1):
        if number > 1:
            delay = backoff_ms * (number - 1)
            logger.debug("Attempt %d/%d after %d ms", number, attempts, delay)
            wait_ms(delay)
        result = attempt(number)
        if result is not None:
            return result
    return None
