"""Thread-safe LRU cache of compiled patterns.

Compiling is cheap but not free, and formatters for the same pattern are
often created per request. The cache maps pattern strings to their
CompiledPattern so each distinct pattern is tokenized and compiled once.

Architecture:
    - OrderedDict provides LRU ordering with O(1) move/evict
    - RLock guards every access
    - Compilation happens outside the lock; a concurrent insert of the
      same pattern keeps the first stored instance (double-check)

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from threading import RLock
from typing import TYPE_CHECKING

from chronopattern.constants import DEFAULT_PATTERN_CACHE_SIZE

if TYPE_CHECKING:
    from .compiler import CompiledPattern, Compiler

__all__ = ["PatternCache"]

logger = logging.getLogger(__name__)


class PatternCache:
    """Bounded, thread-safe LRU cache from pattern string to CompiledPattern.

    A cache is only valid for one token catalog: callers that use several
    compilers with different catalogs must keep one cache per compiler.

    Example:
        >>> from chronopattern.runtime.compiler import DEFAULT_COMPILER
        >>> cache = PatternCache(max_size=2)
        >>> first = cache.get_or_compile("HH:mm", DEFAULT_COMPILER)
        >>> cache.get_or_compile("HH:mm", DEFAULT_COMPILER) is first
        True
    """

    __slots__ = ("_entries", "_hits", "_lock", "_max_size", "_misses")

    def __init__(self, max_size: int = DEFAULT_PATTERN_CACHE_SIZE) -> None:
        """Initialize cache.

        Args:
            max_size: Maximum number of compiled patterns retained.

        Raises:
            ValueError: If max_size is not positive.
        """
        if max_size <= 0:
            msg = "max_size must be positive"
            raise ValueError(msg)
        self._max_size = max_size
        self._entries: OrderedDict[str, CompiledPattern] = OrderedDict()
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, pattern: object) -> bool:
        with self._lock:
            return pattern in self._entries

    @property
    def max_size(self) -> int:
        """Maximum number of retained entries."""
        return self._max_size

    def get_or_compile(self, pattern: str, compiler: Compiler) -> CompiledPattern:
        """Return the cached compilation of pattern, compiling on a miss.

        Args:
            pattern: Pattern string
            compiler: Compiler used on a cache miss

        Returns:
            CompiledPattern for pattern (the same instance on every hit).
        """
        with self._lock:
            cached = self._entries.get(pattern)
            if cached is not None:
                self._entries.move_to_end(pattern)
                self._hits += 1
                return cached
            self._misses += 1

        compiled = compiler.compile(pattern)

        with self._lock:
            existing = self._entries.get(pattern)
            if existing is not None:
                self._entries.move_to_end(pattern)
                return existing
            if len(self._entries) >= self._max_size:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted compiled pattern %r from cache", evicted)
            self._entries[pattern] = compiled
            return compiled

    def clear(self) -> None:
        """Drop every entry and reset statistics."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def info(self) -> dict[str, int | tuple[str, ...]]:
        """Get cache statistics.

        Returns:
            Dictionary with:
            - size: Current number of entries
            - max_size: Maximum number of entries
            - hits: Lookups served from the cache
            - misses: Lookups that compiled
            - patterns: Cached pattern strings, least recently used first
        """
        with self._lock:
            return {
                "size": len(self._entries),
                "max_size": self._max_size,
                "hits": self._hits,
                "misses": self._misses,
                "patterns": tuple(self._entries),
            }
