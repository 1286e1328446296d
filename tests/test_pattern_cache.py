"""Tests for the compiled-pattern LRU cache."""

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from chronopattern.runtime import DEFAULT_COMPILER, CompiledPattern, Compiler, PatternCache


class CountingCompiler(Compiler):
    """Compiler that counts compile() calls."""

    __slots__ = ("calls",)

    def __init__(self) -> None:
        super().__init__()
        self.calls = 0

    def compile(self, pattern: str) -> CompiledPattern:
        self.calls += 1
        return super().compile(pattern)


class TestPatternCache:
    """Test PatternCache behavior."""

    def test_hit_returns_same_instance(self) -> None:
        """Cache hits return the stored CompiledPattern."""
        cache = PatternCache(max_size=4)
        first = cache.get_or_compile("yyyy-MM-dd", DEFAULT_COMPILER)
        assert cache.get_or_compile("yyyy-MM-dd", DEFAULT_COMPILER) is first
        assert "yyyy-MM-dd" in cache
        assert len(cache) == 1

    def test_compiles_once(self) -> None:
        """A pattern is compiled only on the first request."""
        compiler = CountingCompiler()
        cache = PatternCache()
        for _ in range(5):
            cache.get_or_compile("HH:mm", compiler)
        assert compiler.calls == 1

    def test_lru_eviction(self, caplog: pytest.LogCaptureFixture) -> None:
        """The least recently used pattern is evicted first."""
        cache = PatternCache(max_size=2)
        cache.get_or_compile("a", DEFAULT_COMPILER)
        cache.get_or_compile("b", DEFAULT_COMPILER)
        cache.get_or_compile("a", DEFAULT_COMPILER)  # b is now least recent
        with caplog.at_level(logging.DEBUG, logger="chronopattern.runtime.cache"):
            cache.get_or_compile("c", DEFAULT_COMPILER)

        assert "b" not in cache
        assert "a" in cache
        assert "c" in cache
        assert "Evicted compiled pattern 'b'" in caplog.text

    def test_info(self) -> None:
        """info() reports size, limits and hit statistics."""
        cache = PatternCache(max_size=3)
        cache.get_or_compile("d", DEFAULT_COMPILER)
        cache.get_or_compile("d", DEFAULT_COMPILER)
        cache.get_or_compile("M", DEFAULT_COMPILER)
        assert cache.info() == {
            "size": 2,
            "max_size": 3,
            "hits": 1,
            "misses": 2,
            "patterns": ("d", "M"),
        }

    def test_clear(self) -> None:
        """clear() drops entries and statistics."""
        cache = PatternCache()
        cache.get_or_compile("d", DEFAULT_COMPILER)
        cache.clear()
        assert len(cache) == 0
        assert cache.info()["misses"] == 0

    @pytest.mark.parametrize("size", [0, -1])
    def test_invalid_size(self, size: int) -> None:
        """max_size must be positive."""
        with pytest.raises(ValueError, match="max_size must be positive"):
            PatternCache(max_size=size)

    def test_concurrent_access(self) -> None:
        """Concurrent requests for one pattern all get the same instance."""
        cache = PatternCache(max_size=8)
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(
                executor.map(lambda _: cache.get_or_compile("EEEE d", DEFAULT_COMPILER), range(64))
            )
        assert all(result is results[0] for result in results)
        assert len(cache) == 1

    def test_lost_insert_race_refreshes_entry(self) -> None:
        """A pattern stored by another thread mid-compile is returned and marked recent."""
        cache = PatternCache(max_size=2)
        cache.get_or_compile("a", DEFAULT_COMPILER)
        stored: list[CompiledPattern] = []

        class InterleavedCompiler(Compiler):
            """Stores the pattern and touches 'a' while compiling, as a second thread would."""

            __slots__ = ()

            def compile(self, pattern: str) -> CompiledPattern:
                stored.append(cache.get_or_compile(pattern, DEFAULT_COMPILER))
                cache.get_or_compile("a", DEFAULT_COMPILER)
                return super().compile(pattern)

        result = cache.get_or_compile("b", InterleavedCompiler())
        assert result is stored[0]

        cache.get_or_compile("c", DEFAULT_COMPILER)
        assert "b" in cache
        assert "a" not in cache
