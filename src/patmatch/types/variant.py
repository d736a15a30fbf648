"""Capability protocol shared by every two-variant container."""

from __future__ import annotations

from typing import Protocol, TypeIs, runtime_checkable

__all__ = ["Variant", "is_variant"]


@runtime_checkable
class Variant(Protocol):
    """What the matching engine needs from a two-variant container.

    Option and Result implement it. Any other container that provides these
    four methods can be matched with a keyed pattern or used as a condition.
    """

    def discriminant(self) -> str:
        """Return the name of the variant, e.g. "Some" or "Err"."""
        ...

    def unwrap_unchecked(self) -> object:
        """Return the wrapped value without a presence check."""
        ...

    def shares_variant_with(self, other: object) -> bool:
        """Return True if other is a container of the same variant."""
        ...

    def carries_value(self) -> bool:
        """Return False for value-less variants such as Nothing."""
        ...


def is_variant(value: object) -> TypeIs[Variant]:
    """Return True if value is a two-variant container."""
    # Classes satisfy the protocol structurally; only instances are containers.
    return not isinstance(value, type) and isinstance(value, Variant)
