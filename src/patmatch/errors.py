"""Match error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    "Exhausted",
    "ExhaustedError",
    "InvalidPattern",
    "InvalidPatternError",
    "MatchError",
    "WrappedFunctionCalled",
    "WrappedFunctionCalledError",
]


class MatchError(Exception):
    """Base class for every error raised by the matching engine."""


# --- Exhaustion ---


class Exhausted(msgspec.Struct, frozen=True, gc=False):
    """No branch matched - struct variant for Result[T, Exhausted]."""

    candidate: str | None = None

    def to_exception(self) -> ExhaustedError:
        """Convert to exception for raise-based code."""
        return ExhaustedError(self.candidate)


class ExhaustedError(MatchError):
    """No branch or arm matched and no default was available - exception variant."""

    def __init__(self, candidate: str | None = None) -> None:
        self.candidate = candidate
        msg = "Match failed, patterns exhausted and no default present"
        if candidate is not None:
            msg = f"{msg} (candidate: {candidate})"
        super().__init__(msg)

    def to_struct(self) -> Exhausted:
        """Convert to struct for Result-based code."""
        return Exhausted(self.candidate)


# --- Pattern shape ---


class InvalidPattern(msgspec.Struct, frozen=True, gc=False):
    """Pattern has an unsupported shape - struct variant."""

    reason: str

    def to_exception(self) -> InvalidPatternError:
        """Convert to exception for raise-based code."""
        return InvalidPatternError(self.reason)


class InvalidPatternError(MatchError):
    """Pattern has an unsupported shape - exception variant."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid pattern: {reason}")

    def to_struct(self) -> InvalidPattern:
        """Convert to struct for Result-based code."""
        return InvalidPattern(self.reason)


# --- Fn misuse ---


class WrappedFunctionCalled(msgspec.Struct, frozen=True, gc=False):
    """An Fn marker was called directly - struct variant."""

    name: str | None = None

    def to_exception(self) -> WrappedFunctionCalledError:
        """Convert to exception for raise-based code."""
        return WrappedFunctionCalledError(self.name)


class WrappedFunctionCalledError(MatchError):
    """An Fn marker was called directly - exception variant."""

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        msg = "Fn-wrapped function called directly"
        if name:
            msg = f"{msg}: '{name}' is a value, not a callable"
        super().__init__(msg)

    def to_struct(self) -> WrappedFunctionCalled:
        """Convert to struct for Result-based code."""
        return WrappedFunctionCalled(self.name)
