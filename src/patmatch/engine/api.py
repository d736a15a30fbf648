"""Public matching entry points: match and try_match."""

from __future__ import annotations

from typing import Any

from patmatch.engine.compiler import compile_pattern
from patmatch.engine.dispatch import route
from patmatch.errors import Exhausted, ExhaustedError, InvalidPattern, InvalidPatternError
from patmatch.types.result import Err, Ok

__all__ = ["match", "try_match"]


def match(candidate: object, pattern: object) -> Any:
    """Decide what to return for candidate according to pattern.

    Whichever form is used, every branch should return the same type, and
    as soon as a branch matches no other branch is checked.

    Keyed (mapped) matching works on Option and Result. Arms may be
    functions or nested patterns, and a ``_`` arm is a fallback shared
    with every nested level that does not declare its own:

        >>> from patmatch import Ok, Some, Nothing
        >>> match(Some(10), {"Some": lambda n: n + 1, "Nothing": lambda: 0})
        11
        >>> nested = {"Ok": {"Some": lambda n: f"num {n}"}, "_": lambda: "nothing"}
        >>> match(Ok(Some(10)), nested), match(Ok(Nothing), nested)
        ('num 10', 'nothing')

    Ordered (chained) matching works on any value. Each branch is a
    ``(condition, result)`` pair tested in sequence, and a bare callable at
    the end is the default:

    * plain values are compared with ``is``/``==``, and a bool only equals
      a bool;
    * ``_`` matches anything;
    * a class condition is an ``isinstance`` check, not a call, so
      ``(bool, ...)`` matches booleans rather than truthy values;
    * dicts and lists match key by key (index by index), ignoring extra
      keys in the candidate;
    * callable conditions are called with the candidate, callable results
      are called with the candidate; wrap a function in ``Fn`` to compare
      or return it instead;
    * Option and Result conditions compare their wrapped values, without
      calling any function inside them.

        >>> match(5, [(5, "five"), (lambda n: n > 100, "big"), lambda: "other"])
        'five'
        >>> from patmatch import Default
        >>> match([3, 6, 9, 12], [([1], "1"), ([Default, 6, Default, 12], "_ 6 _ 12"), lambda: "other"])
        '_ 6 _ 12'
        >>> match("yes", [(bool, "a bool"), (str, "a str")])
        'a str'

    Raises:
        ExhaustedError: If nothing matched and no default was given.
        InvalidPatternError: If the pattern is malformed, or a keyed pattern
            is applied to a value that is not a container.
    """
    return route(candidate, compile_pattern(pattern))


def try_match(candidate: object, pattern: object) -> Ok[Any] | Err[Exhausted | InvalidPattern]:
    """Like match, but return engine failures as Err instead of raising.

    Examples:
        >>> try_match(1, [(1, "one")])
        Ok(value='one')
        >>> try_match(2, [(1, "one")])
        Err(error=Exhausted(candidate='2'))
    """
    try:
        return Ok(match(candidate, pattern))
    except (ExhaustedError, InvalidPatternError) as exc:
        return Err(exc.to_struct())
