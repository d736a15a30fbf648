"""Structured logging for patmatch.

All loggers handed out by :func:`get_logger` live under the ``patmatch``
stdlib namespace, and :func:`configure_logging` only installs a handler on
that namespace, so enabling engine traces never touches the host
application's root logger. Engine events are named ``match.<stage>``; the
stage is copied into the event dict so hooks and renderers can filter on it.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    "LOGGER_NAMESPACE",
    "add_log_hook",
    "clear_log_hooks",
    "configure_logging",
    "get_logger",
    "remove_log_hook",
]

LOGGER_NAMESPACE = "patmatch"
_TRACE_PREFIX = "match."

type LogHook = Callable[[dict[str, Any]], None]

_handler: logging.Handler | None = None
_log_hooks: list[LogHook] = []


def _qualify(name: str | None) -> str:
    if not name or name == LOGGER_NAMESPACE:
        return LOGGER_NAMESPACE
    if name.startswith(LOGGER_NAMESPACE + "."):
        return name
    return f"{LOGGER_NAMESPACE}.{name}"


def _add_match_stage(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Tag ``match.*`` events with the engine stage that emitted them."""
    event = event_dict.get("event")
    if isinstance(event, str) and event.startswith(_TRACE_PREFIX):
        event_dict.setdefault("stage", event.removeprefix(_TRACE_PREFIX))
    return event_dict


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in tuple(_log_hooks):
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: BLE001
            pass  # a broken hook must not break dispatch
    return event_dict


def _processors() -> list[Any]:
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _add_match_stage,
        _run_hooks,
    ]


def configure_logging(
    level: str = "INFO",
    *,
    json_output: bool = True,
) -> None:
    """Route patmatch logs through structlog to stderr.

    Calling this again replaces the previous handler instead of stacking a
    second one.

    Args:
        level: Logging level for the ``patmatch`` namespace. Trace events
            from the engine are emitted at DEBUG.
        json_output: If True, emit JSON lines. If False, use console output.
    """
    import structlog

    global _handler  # noqa: PLW0603

    structlog.configure(
        processors=[
            *_processors(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger(LOGGER_NAMESPACE)
    if _handler is not None:
        root.removeHandler(_handler)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.propagate = False
    _handler = handler


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger under the ``patmatch`` namespace.

    ``get_logger("engine")`` and ``get_logger("patmatch.engine")`` name the
    same logger; ``None`` gives the namespace root.
    """
    import structlog

    return structlog.get_logger(_qualify(name))


def add_log_hook(hook: LogHook) -> None:
    """Call ``hook`` with a copy of every patmatch event dict.

    Hooks run after the stage tag is added, so a trace collector can simply
    check ``event_dict.get("stage")``.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()
