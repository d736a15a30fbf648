"""Compiled pattern structures: ordered branch lists and keyed variant maps."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import msgspec

from patmatch.engine.conditions import Condition

__all__ = ["Branch", "KeyedPattern", "OrderedPattern", "Pattern"]


class Branch(msgspec.Struct, frozen=True):
    """A compiled ``(condition, result)`` pair.

    ``call`` is True when the result is a plain callable to be invoked with
    the candidate; for literals and Fn-wrapped functions it is False and
    ``result`` is returned as-is.
    """

    condition: Condition
    result: Any
    call: bool = False

    def resolve(self, candidate: object) -> Any:
        if self.call:
            return self.result(candidate)
        return self.result


class OrderedPattern(msgspec.Struct, frozen=True):
    """Branches tried in order, with an optional terminal fallback."""

    branches: tuple[Branch, ...]
    fallback: Callable[[], Any] | None = None


class KeyedPattern(msgspec.Struct, frozen=True):
    """Arms selected by container discriminant, with an optional ``_`` fallback."""

    arms: dict[str, Callable[..., Any] | OrderedPattern | KeyedPattern]
    fallback: Callable[[], Any] | None = None


type Pattern = OrderedPattern | KeyedPattern
