"""patmatch: Option and Result types with structural pattern matching.

Flat imports (preferred):
    from patmatch import Option, Some, Nothing, Result, Ok, Err
    from patmatch import match, compile, Fn, _

Submodule imports (for organization):
    from patmatch.types import Option, Result, Variant
    from patmatch.engine import Matcher, matches
    from patmatch.runtime import init
"""

# Types
from patmatch.types import (
    Err,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    Some,
    Variant,
    is_variant,
    to_option,
)

# Markers
from patmatch.markers import Default, Fn, _

# Engine
from patmatch.engine import (
    Matcher,
    compile,
    err_is,
    match,
    matches,
    ok_is,
    some_is,
    try_match,
)

# Errors
from patmatch.errors import (
    Exhausted,
    ExhaustedError,
    InvalidPattern,
    InvalidPatternError,
    MatchError,
    WrappedFunctionCalled,
    WrappedFunctionCalledError,
)

# Runtime
from patmatch.runtime import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_config,
    get_logger,
    init,
    remove_log_hook,
)

__all__ = [
    "Default",
    "Err",
    "Exhausted",
    "ExhaustedError",
    "Fn",
    "InvalidPattern",
    "InvalidPatternError",
    "MatchError",
    "Matcher",
    "Nothing",
    "NothingType",
    "Ok",
    "Option",
    "Result",
    "Some",
    "Variant",
    "WrappedFunctionCalled",
    "WrappedFunctionCalledError",
    "_",
    "add_log_hook",
    "clear_log_hooks",
    "compile",
    "configure_logging",
    "err_is",
    "get_config",
    "get_logger",
    "init",
    "is_variant",
    "match",
    "matches",
    "ok_is",
    "remove_log_hook",
    "some_is",
    "to_option",
    "try_match",
]
