"""Tests for runtime configuration, logging hooks and engine tracing."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

import pytest

from patmatch import Nothing, Ok, Some, compile, match
from patmatch.errors import ExhaustedError, InvalidPatternError
from patmatch.runtime import (
    MatchConfig,
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_config,
    get_logger,
    init,
    is_tracing,
    remove_log_hook,
)


class TestMatchConfig:
    """Tests for the MatchConfig dataclass."""

    def test_default_values(self) -> None:
        config = MatchConfig()
        assert config.log_level is None
        assert config.trace is False
        assert config.json_output is True

    def test_config_is_frozen(self) -> None:
        config = MatchConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.trace = True  # type: ignore[misc]


class TestInit:
    """Tests for init() and get_config()."""

    def test_get_config_before_init_raises(self) -> None:
        with pytest.raises(RuntimeError, match="not initialized"):
            get_config()

    def test_init_defaults(self) -> None:
        config = init()
        assert config == MatchConfig()
        assert get_config() is config
        assert is_tracing() is False

    def test_init_explicit(self) -> None:
        config = init(log_level="DEBUG", trace=True, json_output=False)
        assert config.log_level == "DEBUG"
        assert config.trace is True
        assert config.json_output is False
        assert is_tracing() is True

    def test_not_tracing_before_init(self) -> None:
        assert is_tracing() is False

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_trace_from_env(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("PATMATCH_TRACE", value)
        assert init().trace is True

    @pytest.mark.parametrize("value", ["0", "false", "no", "off", ""])
    def test_trace_off_from_env(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("PATMATCH_TRACE", value)
        assert init().trace is False

    def test_unknown_trace_value_warns(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("PATMATCH_TRACE", "maybe")
        with caplog.at_level("WARNING"):
            assert init().trace is False
        assert "PATMATCH_TRACE" in caplog.text

    def test_explicit_trace_overrides_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PATMATCH_TRACE", "1")
        assert init(trace=False).trace is False

    def test_log_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PATMATCH_LOG_LEVEL", "warning")
        assert init().log_level == "WARNING"

    def test_engine_works_without_init(self) -> None:
        assert match(Some(1), {"Some": lambda n: n}) == 1


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self) -> None:
        received: list[dict[str, Any]] = []

        configure_logging(level="DEBUG", json_output=True)
        add_log_hook(received.append)

        get_logger("test").info("Test message", extra_field="extra_value")

        entries = [e for e in received if e.get("event") == "Test message"]
        assert len(entries) == 1
        assert entries[0]["extra_field"] == "extra_value"

    def test_remove_hook(self) -> None:
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append("called")

        configure_logging(level="DEBUG", json_output=True)
        add_log_hook(hook)
        logger = get_logger("test")
        logger.info("First")
        assert len(calls) == 1

        remove_log_hook(hook)
        logger.info("Second")
        assert len(calls) == 1

    def test_clear_hooks(self) -> None:
        calls: list[str] = []
        configure_logging(level="DEBUG", json_output=True)
        add_log_hook(lambda _e: calls.append("a"))
        add_log_hook(lambda _e: calls.append("b"))

        logger = get_logger("test")
        logger.info("First")
        assert calls == ["a", "b"]

        clear_log_hooks()
        logger.info("Second")
        assert calls == ["a", "b"]

    def test_hook_exception_does_not_break_logging(self) -> None:
        calls: list[str] = []

        def bad_hook(event_dict: dict[str, Any]) -> None:
            raise RuntimeError("Hook failed")

        configure_logging(level="DEBUG", json_output=False)
        add_log_hook(bad_hook)
        add_log_hook(lambda _e: calls.append("good"))

        get_logger("test").info("Test")
        assert calls == ["good"]


class TestLoggerNamespace:
    """patmatch logs live under their own stdlib namespace."""

    def test_names_are_qualified(self) -> None:
        received: list[dict[str, Any]] = []
        configure_logging(level="DEBUG")
        add_log_hook(received.append)

        get_logger("engine").info("a")
        get_logger("patmatch.engine").info("b")
        get_logger().info("c")

        names = [e["logger"] for e in received]
        assert names == ["patmatch.engine", "patmatch.engine", "patmatch"]

    def test_root_logger_untouched(self) -> None:
        root_handlers = list(logging.getLogger().handlers)
        configure_logging(level="DEBUG")
        assert logging.getLogger().handlers == root_handlers
        assert logging.getLogger("patmatch").level == logging.DEBUG

    def test_reconfigure_replaces_handler(self) -> None:
        configure_logging(level="DEBUG")
        configure_logging(level="WARNING", json_output=False)
        ns = logging.getLogger("patmatch")
        assert len(ns.handlers) == 1
        assert ns.level == logging.WARNING

    def test_non_trace_events_have_no_stage(self) -> None:
        received: list[dict[str, Any]] = []
        configure_logging(level="DEBUG")
        add_log_hook(received.append)

        get_logger("test").info("matched nothing")
        assert "stage" not in received[-1]


class TestTracing:
    """The engine emits match.* events only while tracing is enabled."""

    def test_events_carry_stage(self, trace_events: list[dict[str, Any]]) -> None:
        with pytest.raises(ExhaustedError):
            match(Some(1), [(1, "one")])
        assert [e["stage"] for e in trace_events][-2:] == ["branch", "exhausted"]
        assert all(e["logger"].startswith("patmatch.") for e in trace_events)

    def test_branch_events(self, trace_events: list[dict[str, Any]]) -> None:
        assert match(2, [(1, "one"), (2, "two")]) == "two"
        branches = [e for e in trace_events if e["event"] == "match.branch"]
        assert [(e["index"], e["matched"]) for e in branches] == [(0, False), (1, True)]

    def test_default_event(self, trace_events: list[dict[str, Any]]) -> None:
        assert match(3, [(1, "one"), lambda: "other"]) == "other"
        defaults = [e for e in trace_events if e["event"] == "match.default"]
        assert defaults[-1]["source"] == "terminal"

    def test_arm_events(self, trace_events: list[dict[str, Any]]) -> None:
        match(Ok(Nothing), {"Ok": {"Some": lambda n: n}, "_": lambda: "outer"})
        arms = [e for e in trace_events if e["event"] == "match.arm"]
        assert [(e["discriminant"], e["arm"]) for e in arms] == [
            ("Ok", "KeyedPattern"),
            ("Nothing", "missing"),
        ]
        defaults = [e for e in trace_events if e["event"] == "match.default"]
        assert defaults[-1]["source"] == "keyed"

    def test_exhausted_event(self, trace_events: list[dict[str, Any]]) -> None:
        with pytest.raises(ExhaustedError):
            match(5, [(1, "one")])
        assert any(
            e["event"] == "match.exhausted" and e["candidate"] == "5" for e in trace_events
        )

    def test_invalid_pattern_event(self, trace_events: list[dict[str, Any]]) -> None:
        with pytest.raises(InvalidPatternError):
            match(5, {"Some": str})
        assert any(e["event"] == "match.invalid_pattern" for e in trace_events)

    def test_compiled_event(self, trace_events: list[dict[str, Any]]) -> None:
        compile([(1, "one")])
        compiled = [e for e in trace_events if e["event"] == "match.compiled"]
        assert compiled[-1]["kind"] == "OrderedPattern"

    def test_silent_when_tracing_off(self) -> None:
        received: list[dict[str, Any]] = []
        init(log_level="DEBUG", trace=False)
        add_log_hook(received.append)

        match(2, [(1, "one"), (2, "two")])
        with pytest.raises(ExhaustedError):
            match(3, [(1, "one")])

        assert not [e for e in received if str(e.get("event", "")).startswith("match.")]
