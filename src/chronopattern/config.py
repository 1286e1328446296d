"""Formatter configuration.

Provides a single frozen dataclass that encapsulates the knobs of the
formatter facade: which locale acts as the fallback and how many compiled
patterns are retained.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from chronopattern.constants import (
    DEFAULT_LOCALE,
    DEFAULT_PATTERN_CACHE_SIZE,
    MAX_PATTERN_CACHE_SIZE,
)

__all__ = ["FormatterConfig"]


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Immutable configuration for DateTimeFormatter.

    All fields have sensible defaults; ``FormatterConfig()`` with no
    arguments produces a usable configuration.

    Attributes:
        default_locale: Locale used when a requested locale is not
            registered (default: "en").
        pattern_cache_size: Maximum number of compiled patterns retained
            by the shared pattern cache (default: 256).
        cache_patterns: If False, every formatter compiles its pattern
            afresh instead of consulting the cache (default: True).

    Example:
        >>> from chronopattern import DateTimeFormatter
        >>> from chronopattern.config import FormatterConfig
        >>> config = FormatterConfig(default_locale="de", pattern_cache_size=32)
        >>> formatter = DateTimeFormatter("dd.MM.yyyy", config=config)
        >>> formatter.default_locale
        'de'
    """

    default_locale: str = DEFAULT_LOCALE
    pattern_cache_size: int = DEFAULT_PATTERN_CACHE_SIZE
    cache_patterns: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If default_locale is empty, or pattern_cache_size is
                not positive or exceeds MAX_PATTERN_CACHE_SIZE.
        """
        if not self.default_locale:
            msg = "default_locale must be a non-empty locale code"
            raise ValueError(msg)
        if self.pattern_cache_size <= 0:
            msg = "pattern_cache_size must be positive"
            raise ValueError(msg)
        if self.pattern_cache_size > MAX_PATTERN_CACHE_SIZE:
            msg = (
                f"pattern_cache_size must not exceed {MAX_PATTERN_CACHE_SIZE}, "
                f"got {self.pattern_cache_size}"
            )
            raise ValueError(msg)
