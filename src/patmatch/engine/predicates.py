"""Predicate helpers for testing container contents inside ordered patterns."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from patmatch.types.option import Some
from patmatch.types.result import Err, Ok

__all__ = ["err_is", "ok_is", "some_is"]


def some_is[T](f: Callable[[T], object]) -> Callable[[Any], bool]:
    """Return a predicate that is true for Some(value) when f(value) is truthy.

    Example:
        ```python
        match(player, [(some_is(lambda p: p.age >= 18), True), lambda: False])
        ```
    """
    return lambda opt: isinstance(opt, Some) and bool(f(opt.value))


def ok_is[T](f: Callable[[T], object]) -> Callable[[Any], bool]:
    """Return a predicate that is true for Ok(value) when f(value) is truthy."""
    return lambda res: isinstance(res, Ok) and bool(f(res.value))


def err_is[E](f: Callable[[E], object]) -> Callable[[Any], bool]:
    """Return a predicate that is true for Err(error) when f(error) is truthy."""
    return lambda res: isinstance(res, Err) and bool(f(res.error))
