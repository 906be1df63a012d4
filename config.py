"""
Harness configuration module.

This module defines configuration classes for the environments the board
tests run in (live, ci, replica). Values are loaded from environment
variables with sensible defaults. Timeouts and settle delays are in
milliseconds, matching Playwright's own units.
"""

import os


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back to ``default``."""
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return default
    return int(value)


class Config:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get(
        "KANBAN_BASE_URL", "https://kanban-566d8.firebaseapp.com/"
    )
    VIEWPORT: dict = {"width": 1280, "height": 720}

    # Required waits: exceeding one of these fails the scenario
    BOARD_READY_TIMEOUT_MS: int = _env_int("KANBAN_BOARD_READY_TIMEOUT_MS", 10000)
    MODAL_TIMEOUT_MS: int = _env_int("KANBAN_MODAL_TIMEOUT_MS", 5000)
    DROPDOWN_TIMEOUT_MS: int = 3000
    CONFIRM_TIMEOUT_MS: int = 2000
    OPTION_TIMEOUT_MS: int = 5000

    # Optional waits: exceeding one of these is logged and ignored
    CLOSE_TIMEOUT_MS: int = 3000
    PROBE_TIMEOUT_MS: int = 1000

    # Settle delays after mutations (the board exposes no completion event)
    PAGE_SETTLE_MS: int = 1000
    MODAL_SETTLE_MS: int = 500
    SUBTASK_SETTLE_MS: int = 2000
    SUBTASK_RETRY_SETTLE_MS: int = 5000
    MENU_SETTLE_MS: int = 400
    OPTION_SETTLE_MS: int = 300
    STATUS_SETTLE_MS: int = 1500
    CLOSE_GRACE_MS: int = 2000
    EMPTY_COLUMN_SETTLE_MS: int = 500

    # Fixture discovery
    FIXTURE_ATTEMPTS: int = _env_int("KANBAN_FIXTURE_ATTEMPTS", 3)
    FIXTURE_BACKOFF_MS: int = 2000
    MAX_OPEN_ATTEMPTS: int = _env_int("KANBAN_MAX_OPEN_ATTEMPTS", 10)

    # Live target
    REQUIRE_LIVE: bool = os.environ.get("KANBAN_REQUIRE_LIVE", "") not in ("", "0")
    REACHABILITY_TIMEOUT_S: int = 30


class LiveConfig(Config):
    """Configuration for running against the deployed board."""


class CIConfig(Config):
    """CI configuration: the same target with more patient waits."""

    BOARD_READY_TIMEOUT_MS: int = _env_int("KANBAN_BOARD_READY_TIMEOUT_MS", 20000)
    MODAL_TIMEOUT_MS: int = _env_int("KANBAN_MODAL_TIMEOUT_MS", 10000)
    REACHABILITY_TIMEOUT_S: int = 60


class ReplicaConfig(Config):
    """
    Configuration for the static replica board used by the replica suite.

    The replica applies every change synchronously and renders the whole
    board on load, so settle delays and the card wait can be short.
    """

    BASE_URL: str = "about:blank"
    BOARD_READY_TIMEOUT_MS: int = 2000
    OPTION_TIMEOUT_MS: int = 1000
    PAGE_SETTLE_MS: int = 50
    MODAL_SETTLE_MS: int = 50
    SUBTASK_SETTLE_MS: int = 100
    SUBTASK_RETRY_SETTLE_MS: int = 200
    MENU_SETTLE_MS: int = 50
    OPTION_SETTLE_MS: int = 50
    STATUS_SETTLE_MS: int = 100
    CLOSE_GRACE_MS: int = 100
    EMPTY_COLUMN_SETTLE_MS: int = 0
    FIXTURE_BACKOFF_MS: int = 100


# Configuration mapping for easy access
config = {
    "live": LiveConfig,
    "ci": CIConfig,
    "replica": ReplicaConfig,
    "default": LiveConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (live, ci, replica).
             If None, uses KANBAN_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("KANBAN_ENV", "live")
    return config.get(env, config["default"])
