"""Pytest configuration and shared fixtures for patmatch tests."""

from __future__ import annotations

from typing import Any

import pytest

from patmatch.runtime import add_log_hook, clear_log_hooks, init


@pytest.fixture(autouse=True)
def reset_runtime(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test with an uninitialized runtime and no log hooks."""
    monkeypatch.setattr("patmatch.runtime._config._config", None)
    monkeypatch.delenv("PATMATCH_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PATMATCH_TRACE", raising=False)
    clear_log_hooks()
    yield
    clear_log_hooks()


@pytest.fixture
def trace_events() -> list[dict[str, Any]]:
    """Enable engine tracing and collect every match.* event."""
    events: list[dict[str, Any]] = []

    def capture(event_dict: dict[str, Any]) -> None:
        if str(event_dict.get("event", "")).startswith("match."):
            events.append(event_dict)

    init(log_level="DEBUG", trace=True)
    add_log_hook(capture)
    return events


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from patmatch import Some

    return Some(10)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from patmatch import Err

    return Err("boom")
