"""Ordered-branch and keyed-variant dispatch over compiled patterns."""

from __future__ import annotations

import reprlib
from collections.abc import Callable
from typing import Any

from patmatch.engine.patterns import KeyedPattern, OrderedPattern, Pattern
from patmatch.errors import ExhaustedError, InvalidPatternError
from patmatch.runtime._config import is_tracing
from patmatch.runtime._logging import get_logger
from patmatch.types.variant import Variant, is_variant

__all__ = ["dispatch_keyed", "dispatch_ordered", "route"]

logger = get_logger(__name__)

type Fallback = Callable[[], Any] | None


def _exhausted(candidate: object) -> ExhaustedError:
    described = reprlib.repr(candidate)
    if is_tracing():
        logger.debug("match.exhausted", candidate=described)
    return ExhaustedError(described)


def _use_default(default: Callable[[], Any], source: str) -> Any:
    if is_tracing():
        logger.debug("match.default", source=source)
    return default()


def dispatch_ordered(candidate: object, pattern: OrderedPattern, default: Fallback = None) -> Any:
    """Return the result of the first branch whose condition matches candidate.

    Branches are tested strictly in order and nothing after the first match
    is evaluated. If none match, the pattern's own terminal fallback is
    called, then ``default``; with neither, ExhaustedError is raised.
    """
    trace = is_tracing()
    for index, branch in enumerate(pattern.branches):
        matched = branch.condition.test(candidate)
        if trace:
            logger.debug("match.branch", index=index, matched=matched)
        if matched:
            return branch.resolve(candidate)

    if pattern.fallback is not None:
        return _use_default(pattern.fallback, "terminal")
    if default is not None:
        return _use_default(default, "inherited")
    raise _exhausted(candidate)


def dispatch_keyed(container: Variant, pattern: KeyedPattern, inherited: Fallback = None) -> Any:
    """Dispatch on the container's discriminant.

    A plain-function arm is called with the unwrapped value (or with no
    arguments for a value-less variant). A nested pattern arm is routed
    against the unwrapped value; its default is its own ``_``, else this
    level's ``_``, else ``inherited``, so the closest enclosing default wins.
    """
    default = pattern.fallback if pattern.fallback is not None else inherited
    tag = container.discriminant()
    arm = pattern.arms.get(tag)

    if is_tracing():
        kind = "missing" if arm is None else type(arm).__name__
        logger.debug("match.arm", discriminant=tag, arm=kind)

    if arm is None:
        if default is None:
            raise _exhausted(container)
        return _use_default(default, "keyed")

    if isinstance(arm, OrderedPattern | KeyedPattern):
        return route(container.unwrap_unchecked(), arm, default)
    if container.carries_value():
        return arm(container.unwrap_unchecked())
    return arm()


def route(candidate: object, pattern: Pattern, default: Fallback = None) -> Any:
    """Forward candidate to the dispatcher matching the pattern's kind.

    Raises:
        InvalidPatternError: If the pattern is neither ordered nor keyed, or
            a keyed pattern is applied to something that is not a container.
    """
    if isinstance(pattern, OrderedPattern):
        return dispatch_ordered(candidate, pattern, default)
    if isinstance(pattern, KeyedPattern):
        if not is_variant(candidate):
            reason = f"keyed pattern applied to non-container {type(candidate).__name__}"
            if is_tracing():
                logger.debug("match.invalid_pattern", reason=reason)
            raise InvalidPatternError(reason)
        return dispatch_keyed(candidate, pattern, default)
    reason = f"expected an ordered or keyed pattern, got {type(pattern).__name__}"
    if is_tracing():
        logger.debug("match.invalid_pattern", reason=reason)
    raise InvalidPatternError(reason)
