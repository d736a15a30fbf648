"""Runtime configuration: MatchConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from patmatch.runtime._logging import configure_logging

__all__ = [
    "MatchConfig",
    "get_config",
    "init",
    "is_tracing",
]

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"", "0", "false", "no", "off"})


@dataclass(frozen=True)
class MatchConfig:
    """Configuration for patmatch.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        trace: Emit a debug event for every branch, arm and default the
            engine visits.
        json_output: Render log output as JSON rather than console text.
    """

    log_level: str | None = None
    trace: bool = False
    json_output: bool = True


# Global configuration (set by init())
_config: MatchConfig | None = None


def _detect_log_level() -> str | None:
    """Read PATMATCH_LOG_LEVEL, returning None when unset or empty."""
    level = os.environ.get("PATMATCH_LOG_LEVEL", "").strip()
    return level.upper() or None


def _detect_trace() -> bool:
    """Read PATMATCH_TRACE ("1", "true", "yes", "on" enable tracing)."""
    value = os.environ.get("PATMATCH_TRACE", "").strip().lower()
    if value in _TRUTHY:
        return True
    if value not in _FALSY:
        logging.warning("Unknown PATMATCH_TRACE value '%s', tracing disabled", value)
    return False


def init(
    log_level: str | None = None,
    trace: bool | None = None,
    *,
    json_output: bool = True,
) -> MatchConfig:
    """Initialize patmatch with the given configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            PATMATCH_LOG_LEVEL if None; stays silent if that is unset too.
        trace: Enable engine trace events. Read from PATMATCH_TRACE if None.
        json_output: Render logs as JSON (True) or console text (False).

    Returns:
        The MatchConfig that was set.

    Example:
        ```python
        from patmatch.runtime import init

        init(log_level="DEBUG", trace=True)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_trace = trace if trace is not None else _detect_trace()

    _config = MatchConfig(
        log_level=resolved_level,
        trace=resolved_trace,
        json_output=json_output,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_output)

    return _config


def get_config() -> MatchConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = "patmatch not initialized. Call patmatch.runtime.init() first."
        raise RuntimeError(msg)
    return _config


def is_tracing() -> bool:
    """Return True if engine trace events are enabled."""
    return _config is not None and _config.trace
