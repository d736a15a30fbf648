"""Pattern compilation: turn caller-written patterns into reusable matchers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from patmatch.engine.conditions import compile_condition
from patmatch.engine.dispatch import route
from patmatch.engine.patterns import Branch, KeyedPattern, OrderedPattern, Pattern
from patmatch.errors import InvalidPatternError
from patmatch.markers import DefaultType, Fn
from patmatch.runtime._config import is_tracing
from patmatch.runtime._logging import get_logger

__all__ = ["Matcher", "compile", "compile_pattern"]

logger = get_logger(__name__)


def _invalid(reason: str) -> InvalidPatternError:
    if is_tracing():
        logger.debug("match.invalid_pattern", reason=reason)
    return InvalidPatternError(reason)


def _compile_result(result: object) -> tuple[Any, bool]:
    if isinstance(result, Fn):
        return result.func, False
    return result, callable(result)


def _compile_ordered(pattern: list[Any] | tuple[Any, ...]) -> OrderedPattern:
    branches: list[Branch] = []
    for position, entry in enumerate(pattern):
        # A bare callable ends the scan; anything after it is unreachable.
        if callable(entry):
            return OrderedPattern(tuple(branches), entry)
        if not isinstance(entry, list | tuple) or len(entry) != 2:  # noqa: PLR2004
            raise _invalid(f"branch {position} must be a (condition, result) pair, got {entry!r}")
        condition, result = entry
        value, call = _compile_result(result)
        branches.append(Branch(compile_condition(condition), value, call))
    return OrderedPattern(tuple(branches))


def _compile_arm(key: str, arm: object) -> Callable[..., Any] | Pattern:
    if isinstance(arm, Matcher):
        return arm.pattern
    if isinstance(arm, Mapping | list | tuple):
        return compile_pattern(arm)
    if callable(arm):
        return arm
    raise _invalid(f"arm {key!r} must be a callable or a nested pattern, got {arm!r}")


def _compile_keyed(pattern: Mapping[Any, Any]) -> KeyedPattern:
    arms: dict[str, Callable[..., Any] | Pattern] = {}
    fallback: Callable[[], Any] | None = None
    for key, arm in pattern.items():
        if arm is None:
            continue
        if isinstance(key, DefaultType) or key == "_":
            if not callable(arm):
                raise _invalid(f"default '_' must be a zero-argument callable, got {arm!r}")
            fallback = arm
        elif isinstance(key, str):
            arms[key] = _compile_arm(key, arm)
        else:
            raise _invalid(f"keyed pattern keys must be variant names, got {key!r}")
    return KeyedPattern(arms, fallback)


def compile_pattern(pattern: object) -> Pattern:
    """Compile an ordered (list/tuple) or keyed (mapping) pattern.

    Raises:
        InvalidPatternError: If the pattern has any other shape, or one of
            its branches or arms is malformed.
    """
    if isinstance(pattern, OrderedPattern | KeyedPattern):
        return pattern
    if isinstance(pattern, Matcher):
        return pattern.pattern
    if isinstance(pattern, Mapping):
        return _compile_keyed(pattern)
    if isinstance(pattern, list | tuple):
        return _compile_ordered(pattern)
    raise _invalid(f"expected a list, tuple or mapping pattern, got {type(pattern).__name__}")


class Matcher:
    """A pattern compiled once and applied to many candidates.

    Calling a Matcher behaves exactly like ``match(candidate, pattern)``.
    Used as an arm inside a keyed pattern it behaves like the nested pattern
    itself, so an enclosing ``_`` still applies when it has no match.
    """

    __slots__ = ("pattern",)

    def __init__(self, pattern: Pattern) -> None:
        self.pattern = pattern

    def __call__(self, candidate: object) -> Any:
        return route(candidate, self.pattern)

    def __repr__(self) -> str:
        return f"Matcher({self.pattern!r})"


def compile(pattern: object) -> Matcher:  # noqa: A001
    """Bind a pattern once and return a reusable matcher.

    Example:
        ```python
        describe = compile([(1, "one"), (lambda n: n > 20, ">20"), lambda: "default"])
        describe(1)   # 'one'
        describe(30)  # '>20'
        describe(5)   # 'default'
        ```
    """
    compiled = compile_pattern(pattern)
    if is_tracing():
        logger.debug("match.compiled", kind=type(compiled).__name__)
    return Matcher(compiled)
