"""Condition nodes and the recursive condition evaluator.

A condition written by the caller (a literal, a predicate, a partial dict or
list, a container, ``_`` or ``Fn(f)``) is compiled once into a tree of nodes.
Each node knows how to ``test`` a candidate, so evaluating a compiled
pattern never has to probe the shape of the condition again.

Compilation carries an ``evaluate`` flag. It starts out True and is switched
off for everything below a container condition: there, plain callables and
classes are compared by identity instead of being called.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

import msgspec

from patmatch.markers import DefaultType, Fn
from patmatch.types.variant import Variant, is_variant

__all__ = [
    "WILDCARD",
    "Condition",
    "Equals",
    "Identity",
    "InstanceOf",
    "Predicate",
    "RecordShape",
    "SequenceShape",
    "VariantShape",
    "Wildcard",
    "compile_condition",
    "matches",
]

_MISSING = object()
_SCALARS = (str, bytes, bytearray, int, float, complex, type(None))


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray)


def _is_record(value: object) -> bool:
    """Object-like but not array-like: mappings and ordinary instances."""
    return not isinstance(value, _SCALARS) and not _is_sequence(value)


class Wildcard(msgspec.Struct, frozen=True, gc=False):
    """Compiled form of ``_``."""

    def test(self, candidate: object) -> bool:  # noqa: ARG002
        return True


WILDCARD = Wildcard()


class Equals(msgspec.Struct, frozen=True):
    """Primitive or plain value, compared with ``is`` then ``==``.

    Booleans only equal booleans, so ``True`` never matches ``1``.
    """

    value: Any

    def test(self, candidate: object) -> bool:
        if candidate is self.value:
            return True
        if isinstance(self.value, bool) is not isinstance(candidate, bool):
            return False
        return bool(self.value == candidate)


class Identity(msgspec.Struct, frozen=True):
    """Function treated as data: matches only the very same object."""

    target: Any

    def test(self, candidate: object) -> bool:
        return candidate is self.target


class Predicate(msgspec.Struct, frozen=True):
    """Plain callable, matched on a truthy return."""

    func: Callable[[Any], object]

    def test(self, candidate: object) -> bool:
        return candidate is self.func or bool(self.func(candidate))


class InstanceOf(msgspec.Struct, frozen=True):
    """Class condition, matched with isinstance."""

    cls: type

    def test(self, candidate: object) -> bool:
        return candidate is self.cls or isinstance(candidate, self.cls)


class RecordShape(msgspec.Struct, frozen=True):
    """Partial mapping condition.

    Matches a Mapping candidate key by key, or any other record-like object
    attribute by attribute. Every key of the condition must be present in
    the candidate; extra candidate keys are ignored.
    """

    source: Mapping[Any, Any]
    fields: tuple[tuple[Any, Condition], ...]

    def test(self, candidate: object) -> bool:
        if candidate is self.source:
            return True
        if isinstance(candidate, Mapping):
            for key, condition in self.fields:
                if key not in candidate or not condition.test(candidate[key]):
                    return False
            return True
        if not _is_record(candidate):
            return False
        for key, condition in self.fields:
            if not isinstance(key, str):
                return False
            value = getattr(candidate, key, _MISSING)
            if value is _MISSING or not condition.test(value):
                return False
        return True


class SequenceShape(msgspec.Struct, frozen=True):
    """Partial list/tuple condition, compared index by index."""

    source: Sequence[Any]
    items: tuple[Condition, ...]

    def test(self, candidate: object) -> bool:
        if candidate is self.source:
            return True
        if not _is_sequence(candidate) or len(candidate) < len(self.items):
            return False
        return all(
            condition.test(value)
            for condition, value in zip(self.items, candidate, strict=False)
        )


class VariantShape(msgspec.Struct, frozen=True):
    """Container condition such as ``Some(5)`` or ``Err(_)``."""

    source: Variant
    inner: Condition

    def test(self, candidate: object) -> bool:
        if candidate is self.source:
            return True
        return self.source.shares_variant_with(candidate) and self.inner.test(
            candidate.unwrap_unchecked()  # type: ignore[attr-defined]
        )


type Condition = (
    Wildcard
    | Equals
    | Identity
    | Predicate
    | InstanceOf
    | RecordShape
    | SequenceShape
    | VariantShape
)


def compile_condition(condition: object, evaluate: bool = True) -> Condition:  # noqa: FBT001, FBT002, PLR0911
    """Compile a caller-written condition into a node tree.

    Args:
        condition: The condition as written in a pattern.
        evaluate: Whether callables and classes may be called. False below
            a container condition.

    Returns:
        The compiled Condition node.
    """
    if isinstance(condition, DefaultType):
        return WILDCARD
    if isinstance(condition, Fn):
        return Identity(condition.func)
    if is_variant(condition):
        return VariantShape(condition, compile_condition(condition.unwrap_unchecked(), evaluate=False))
    if isinstance(condition, type):
        return InstanceOf(condition) if evaluate else Identity(condition)
    if isinstance(condition, Mapping):
        return RecordShape(
            condition,
            tuple((key, compile_condition(value, evaluate)) for key, value in condition.items()),
        )
    if isinstance(condition, list | tuple):
        return SequenceShape(condition, tuple(compile_condition(item, evaluate) for item in condition))
    if callable(condition):
        return Predicate(condition) if evaluate else Identity(condition)
    return Equals(condition)


def matches(condition: object, candidate: object, evaluate_predicates: bool = True) -> bool:  # noqa: FBT001, FBT002
    """Return True if candidate satisfies condition.

    Examples:
        >>> matches({"a": 1}, {"a": 1, "b": 2})
        True
        >>> matches([1], {0: 1})
        False
        >>> from patmatch import Some
        >>> matches(Some(lambda n: n > 0), Some(5))
        False
    """
    return compile_condition(condition, evaluate_predicates).test(candidate)
