"""Marker values understood by the matching engine: Default (``_``) and Fn.

``Default`` stands for "any value" wherever a condition is expected, and
raises ExhaustedError when it ends up being called as a fallback.

``Fn`` marks a function as data: a wrapped function is compared by identity
when used as a condition and returned as-is when used as a result, instead
of being called.

Example:
    ```python
    from patmatch import Fn, _, match

    match([3, 6, 9, 12], [([_, 6, _, 12], "_ 6 _ 12"), lambda: "other"])
    # '_ 6 _ 12'

    match(len, [(Fn(len), Fn(len)), lambda: None]) is len
    # True
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn

import msgspec

from patmatch.errors import ExhaustedError, WrappedFunctionCalledError

__all__ = ["Default", "DefaultType", "Fn", "_"]


class DefaultType(msgspec.Struct, frozen=True, gc=False):
    """Wildcard marker. Use the `Default` (or `_`) singleton."""

    def __call__(self, *_args: Any, **_kwargs: Any) -> NoReturn:
        raise ExhaustedError()

    def __repr__(self) -> str:
        return "_"


Default: DefaultType = DefaultType()
"""Matches any value; raises ExhaustedError when called."""

_ = Default


class Fn[F: Callable[..., Any]](msgspec.Struct, frozen=True, gc=False):
    """Treat a function as a value inside a pattern.

    As a condition, ``Fn(f)`` matches only a candidate that *is* ``f``.
    As a result, ``Fn(f)`` yields ``f`` itself rather than ``f(candidate)``.

    Examples:
        >>> wrapped = Fn(print)
        >>> wrapped.func is print
        True
        >>> wrapped()
        Traceback (most recent call last):
        ...
        patmatch.errors.WrappedFunctionCalledError: ...
    """

    func: F

    def __call__(self, *_args: Any, **_kwargs: Any) -> NoReturn:
        raise WrappedFunctionCalledError(getattr(self.func, "__name__", None))
