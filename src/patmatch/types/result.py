"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

if TYPE_CHECKING:
    from patmatch.types.option import NothingType, Some

__all__ = ["Err", "Ok", "Result"]


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Ok(42).unwrap()
        42
        >>> Ok(2).map(lambda x: x * 2)
        Ok(value=4)
    """

    value: T

    def discriminant(self) -> str:
        return "Ok"

    def unwrap_unchecked(self) -> T:
        return self.value

    def shares_variant_with(self, other: object) -> bool:
        return isinstance(other, Ok)

    def carries_value(self) -> bool:
        return True

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value without calling the fallback."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply f to the contained value and wrap the result in Ok."""
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[object], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a Result-returning function to the contained value."""
        return f(self.value)

    def or_else[F](self, _f: Callable[[object], Ok[T] | Err[F]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def ok(self) -> Some[T]:
        """Convert to Option, returning Some(value)."""
        from patmatch.types.option import Some

        return Some(self.value)

    def err(self) -> NothingType:
        """Convert to Option, returning Nothing."""
        from patmatch.types.option import Nothing

        return Nothing


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    A plain function in the "Err" arm of a keyed pattern receives the error.

    Examples:
        >>> Err("boom").is_err()
        True
        >>> Err("boom").unwrap_or(0)
        0
    """

    error: E

    def discriminant(self) -> str:
        return "Err"

    def unwrap_unchecked(self) -> E:
        return self.error

    def shares_variant_with(self, other: object) -> bool:
        return isinstance(other, Err)

    def carries_value(self) -> bool:
        return True

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Err has no Ok value.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError(f"Called unwrap on Err: {self.error!r}")

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
        raise RuntimeError(f"{msg}: {self.error!r}")

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply f to the contained error."""
        return Err(f(self.error))

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error."""
        return f(self.error)

    def ok(self) -> NothingType:
        """Convert to Option, returning Nothing."""
        from patmatch.types.option import Nothing

        return Nothing

    def err(self) -> Some[E]:
        """Convert to Option, returning Some(error)."""
        from patmatch.types.option import Some

        return Some(self.error)


type Result[T, E = Exception] = Ok[T] | Err[E]
