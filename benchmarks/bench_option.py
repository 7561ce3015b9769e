"""Benchmarks for Option type.

Run with: uv run pytest benchmarks/bench_option.py --benchmark-only -v
"""

from klaw_option import Nothing, Some, from_nullable

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestOptionCreation:
    """Benchmark Option creation."""

    def test_some_creation(self, benchmark):
        """Benchmark Some creation."""
        benchmark(Some, 42)

    def test_from_nullable_value(self, benchmark):
        """Benchmark from_nullable with a value."""
        benchmark(from_nullable, 42)

    def test_from_nullable_none(self, benchmark):
        """Benchmark from_nullable with None (singleton, no allocation)."""
        benchmark(from_nullable, None)


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestOptionMethods:
    """Benchmark Option method calls."""

    def test_some_map(self, benchmark):
        """Benchmark Some.map."""
        some = Some(5)
        benchmark(some.map, lambda x: x * 2)

    def test_nothing_map(self, benchmark):
        """Benchmark Nothing.map."""
        benchmark(Nothing.map, lambda x: x * 2)

    def test_some_and_then(self, benchmark):
        """Benchmark Some.and_then (derived: map + flatten)."""
        some = Some(5)
        benchmark(some.and_then, lambda x: Some(x * 2))

    def test_some_map_or(self, benchmark):
        """Benchmark Some.map_or (derived: map + unwrap_or)."""
        some = Some(5)
        benchmark(some.map_or, 0, lambda x: x * 2)

    def test_some_unwrap_or(self, benchmark):
        """Benchmark Some.unwrap_or."""
        some = Some(5)
        benchmark(some.unwrap_or, 0)

    def test_nothing_unwrap_or(self, benchmark):
        """Benchmark Nothing.unwrap_or."""
        benchmark(Nothing.unwrap_or, 0)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestOptionChaining:
    """Benchmark chained Option operations."""

    def test_some_chain_3(self, benchmark):
        """Benchmark 3-step chain on Some."""

        def chain():
            return Some(5).map(lambda x: x + 1).map(lambda x: x * 2).and_then(lambda x: Some(x - 1))

        benchmark(chain)

    def test_nothing_chain_3(self, benchmark):
        """Benchmark 3-step chain on Nothing (should short-circuit)."""

        def chain():
            return Nothing.map(lambda x: x + 1).map(lambda x: x * 2).and_then(lambda x: Some(x - 1))

        benchmark(chain)

    def test_some_zip(self, benchmark):
        """Benchmark Some.zip."""
        some1 = Some(1)
        some2 = Some(2)
        benchmark(some1.zip, some2)


# =============================================================================
# Pattern matching benchmarks
# =============================================================================


class TestOptionPatternMatching:
    """Benchmark structural matching against the match() method."""

    def test_match_statement(self, benchmark):
        """Benchmark a match statement on Some."""
        some = Some(42)

        def match_it():
            match some:
                case Some(v):
                    return v
                case _:
                    return None

        benchmark(match_it)

    def test_match_method(self, benchmark):
        """Benchmark Some.match(some=..., none=...)."""
        some = Some(42)

        def match_it():
            return some.match(some=lambda v: v, none=lambda: None)

        benchmark(match_it)


# =============================================================================
# Memory benchmarks
# =============================================================================


class TestOptionMemory:
    """Rough memory comparison."""

    def test_create_1000_some(self, benchmark):
        """Create 1000 Some objects."""

        def create():
            return [Some(i) for i in range(1000)]

        benchmark(create)
