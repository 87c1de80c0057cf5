"""Shared fixtures for resultkit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import Any

import pytest

from resultkit._logging import add_log_hook, clear_log_hooks, configure_logging
from resultkit.config import reset_settings


@pytest.fixture
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Start every test from environment-free settings."""
    for name in ('RESULTKIT_LOG_LEVEL', 'RESULTKIT_JSON_LOGS', 'RESULTKIT_CLONE_MAX_DEPTH'):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def log_events() -> Generator[list[dict[str, Any]]]:
    """Capture resultkit log events at DEBUG level through a log hook."""
    root = logging.getLogger()
    saved_level = root.level
    saved_handlers = list(root.handlers)

    events: list[dict[str, Any]] = []
    configure_logging(level='DEBUG', json_output=True)
    add_log_hook(events.append)
    yield events

    clear_log_hooks()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def calls() -> list[Any]:
    """A list that spies append to, to check what ran and in what order."""
    return []
