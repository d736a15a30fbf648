"""Pattern-matching engine: conditions, dispatch and compilation."""

from patmatch.engine.api import match, try_match
from patmatch.engine.compiler import Matcher, compile, compile_pattern
from patmatch.engine.conditions import compile_condition, matches
from patmatch.engine.dispatch import dispatch_keyed, dispatch_ordered, route
from patmatch.engine.patterns import Branch, KeyedPattern, OrderedPattern, Pattern
from patmatch.engine.predicates import err_is, ok_is, some_is

__all__ = [
    "Branch",
    "KeyedPattern",
    "Matcher",
    "OrderedPattern",
    "Pattern",
    "compile",
    "compile_condition",
    "compile_pattern",
    "dispatch_keyed",
    "dispatch_ordered",
    "err_is",
    "match",
    "matches",
    "ok_is",
    "route",
    "some_is",
    "try_match",
]
