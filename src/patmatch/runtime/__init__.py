"""Runtime configuration and logging for patmatch."""

from patmatch.runtime._config import MatchConfig, get_config, init, is_tracing
from patmatch.runtime._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

__all__ = [
    "MatchConfig",
    "add_log_hook",
    "clear_log_hooks",
    "configure_logging",
    "get_config",
    "get_logger",
    "init",
    "is_tracing",
    "remove_log_hook",
]
