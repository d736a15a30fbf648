"""Benchmarks for match() and compiled matchers.

Run with: uv run pytest benchmarks/bench_match.py --benchmark-only -v
"""

from patmatch import Err, Nothing, Ok, Some, compile, match

NUMBERS = [
    (1, "1"),
    (2, "2"),
    (3, "3"),
    (lambda n: n < 5000, "<5000"),
    lambda: "default",
]

NESTED = {
    "Ok": {
        "Some": {
            "Ok": lambda n: n,
            "_": lambda: -1,
        },
    },
    "_": lambda: 0,
}


def native(i):
    if i == 1:
        return "1"
    if i == 2:
        return "2"
    if i == 3:
        return "3"
    if i < 5000:
        return "<5000"
    return "default"


# =============================================================================
# Ordered matching
# =============================================================================


class TestOrderedMatch:
    """Benchmark ordered matching against an if/else chain."""

    def test_native(self, benchmark):
        """Baseline: plain if/else."""
        benchmark(native, 4000)

    def test_match(self, benchmark):
        """match() compiles the pattern on every call."""
        benchmark(match, 4000, NUMBERS)

    def test_compiled(self, benchmark):
        """A Matcher compiled once up front."""
        benchmark(compile(NUMBERS), 4000)


# =============================================================================
# Keyed matching
# =============================================================================


class TestKeyedMatch:
    """Benchmark keyed matching on Option and Result."""

    def test_option(self, benchmark):
        benchmark(match, Some(1), {"Some": lambda n: n, "Nothing": lambda: 0})

    def test_nested(self, benchmark):
        benchmark(match, Ok(Some(Ok(1))), NESTED)

    def test_nested_compiled(self, benchmark):
        benchmark(compile(NESTED), Ok(Some(Err(1))))

    def test_nested_default(self, benchmark):
        benchmark(compile(NESTED), Ok(Nothing))


# =============================================================================
# Container conditions
# =============================================================================


class TestContainerConditions:
    """Benchmark ordered matching with nested container conditions."""

    def test_chained_containers(self, benchmark):
        matcher = compile(
            [
                (Ok(Some(Ok(1))), "ok some ok"),
                (Ok(Some(Err("err"))), "ok some err"),
                (Ok(Nothing), "ok none"),
                (Err(1), "err"),
                lambda: "default",
            ]
        )
        benchmark(matcher, Err(1))
