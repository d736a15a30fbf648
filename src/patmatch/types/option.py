"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

if TYPE_CHECKING:
    from patmatch.types.result import Err, Ok

__all__ = ["Nothing", "NothingType", "Option", "Some", "to_option"]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some is matched by the "Some" arm of a keyed pattern, and can be used as
    a condition in an ordered pattern, where its wrapped value is compared
    against the candidate's wrapped value.

    Examples:
        >>> Some(42).unwrap()
        42
        >>> Some(2).map(lambda x: x * 2)
        Some(value=4)
        >>> Some(5).discriminant()
        'Some'
    """

    value: T

    def discriminant(self) -> str:
        return "Some"

    def unwrap_unchecked(self) -> T:
        return self.value

    def shares_variant_with(self, other: object) -> bool:
        return isinstance(other, Some)

    def carries_value(self) -> bool:
        return True

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the fallback."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply f to the contained value and wrap the result in Some."""
        return Some(f(self.value))

    def and_then[U](
        self, f: Callable[[T], Some[U] | NothingType]
    ) -> Some[U] | NothingType:
        """Apply an Option-returning function to the contained value."""
        return f(self.value)

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if predicate(value) holds, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def ok_or[E](self, _err: E) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from patmatch.types.result import Ok

        return Ok(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    Use the `Nothing` singleton rather than instantiating this class. A
    plain function in the "Nothing" arm of a keyed pattern is called with
    no arguments.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def discriminant(self) -> str:
        return "Nothing"

    def unwrap_unchecked(self) -> None:
        return None

    def shares_variant_with(self, other: object) -> bool:
        return isinstance(other, NothingType)

    def carries_value(self) -> bool:
        return False

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Nothing has no value.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError("Called unwrap on Nothing")

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            RuntimeError: Always, with the custom message.
        """
        raise RuntimeError(msg)

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def or_else[T](
        self, f: Callable[[], Some[T] | NothingType]
    ) -> Some[T] | NothingType:
        """Return the Option produced by f."""
        return f()

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err)."""
        from patmatch.types.result import Err

        return Err(err)


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def to_option[T](value: T | None) -> Some[T] | NothingType:
    """Wrap value in Some, or return Nothing if it is None.

    Examples:
        >>> to_option(3)
        Some(value=3)
        >>> to_option(None) is Nothing
        True
    """
    if value is None:
        return Nothing
    return Some(value)
