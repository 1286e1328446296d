"""DateTimeFormatter: the public formatting facade.

Combines the pieces of the engine:
- Pattern compilation through a shared, bounded PatternCache
- Locale selection through a LocaleRegistry (process-wide by default)
- Rendering of datetime, date or DateValue inputs

Example:
    >>> from datetime import datetime
    >>> from chronopattern import DateTimeFormatter, LocaleRegistry
    >>> registry = LocaleRegistry()
    >>> _ = registry.register("en", {"months.short.11": "Nov"})
    >>> formatter = DateTimeFormatter("MMM d, yyyy", registry=registry)
    >>> formatter.format(datetime(2018, 11, 1))
    'Nov 1, 2018'

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from enum import StrEnum
from typing import TYPE_CHECKING

from chronopattern.config import FormatterConfig
from chronopattern.locale_utils import normalize_locale
from chronopattern.localization import LocaleRegistry
from chronopattern.runtime import DEFAULT_COMPILER, PatternCache

if TYPE_CHECKING:
    from collections.abc import Mapping

    from chronopattern.localization import LocaleMessages
    from chronopattern.runtime import CompiledPattern

__all__ = [
    "DateTimeFormatter",
    "StandardPattern",
    "default_registry",
    "format_datetime",
]

logger = logging.getLogger(__name__)


class StandardPattern(StrEnum):
    """Commonly used patterns.

    Members are strings, so they can be passed anywhere a pattern is
    accepted.
    """

    DEFAULT = "yyyy-MM-dd HH:mm:ss"

    DATE_SHORT = "M/d/yy"
    DATE_MEDIUM = "MMM d, yyyy"
    DATE_LONG = "MMMM d, yyyy"
    DATE_FULL = "EEEE, MMMM d, yyyy"
    ISO_DATE = "yyyy-MM-dd"

    TIME_SHORT = "h:mm a"
    TIME_MEDIUM = "h:mm:ss a"
    TIME_LONG = "h:mm:ss a Z"
    ISO_TIME = "HH:mm:ss"

    ISO_DATE_TIME = "yyyy-MM-dd'T'HH:mm:ss"
    # HTTP Expires / Set-Cookie date (RFC 7231 IMF-fixdate with numeric zone)
    EXPIRES_HEADER_FORMAT = "EEE, dd MMM yyyy HH:mm:ss Z"


_DEFAULT_REGISTRY = LocaleRegistry()

# One cache per configured size; formatters sharing a size share a cache.
_pattern_caches: dict[int, PatternCache] = {}
_pattern_caches_lock = threading.Lock()


def default_registry() -> LocaleRegistry:
    """Process-wide registry used by formatters created without one."""
    return _DEFAULT_REGISTRY


def _pattern_cache(max_size: int) -> PatternCache:
    with _pattern_caches_lock:
        cache = _pattern_caches.get(max_size)
        if cache is None:
            cache = PatternCache(max_size)
            _pattern_caches[max_size] = cache
        return cache


class DateTimeFormatter:
    """Formats date values with one pattern.

    The pattern is compiled once at construction; format() only walks the
    compiled nodes. The formatter's default locale is fixed at construction:
    the requested locale if it is registered at that moment, otherwise the
    configured default locale.

    Attributes:
        pattern: Source pattern string
        compiled: The compiled node sequence
        default_locale: Locale used when format() is called without one

    Thread Safety:
        Immutable after construction; format() may be called concurrently.
    """

    __slots__ = ("_compiled", "_config", "_default_locale", "_registry")

    def __init__(
        self,
        pattern: str = StandardPattern.DEFAULT,
        locale: str | None = None,
        *,
        registry: LocaleRegistry | None = None,
        config: FormatterConfig | None = None,
    ) -> None:
        """Initialize formatter.

        Args:
            pattern: Pattern string or StandardPattern member
            locale: Preferred locale (BCP-47 or POSIX)
            registry: Locale registry (default: the process-wide registry)
            config: Formatter configuration (default: FormatterConfig())
        """
        self._config = config if config is not None else FormatterConfig()
        self._registry = registry if registry is not None else _DEFAULT_REGISTRY

        pattern = str(pattern)
        if self._config.cache_patterns:
            cache = _pattern_cache(self._config.pattern_cache_size)
            self._compiled = cache.get_or_compile(pattern, DEFAULT_COMPILER)
        else:
            self._compiled = DEFAULT_COMPILER.compile(pattern)

        self._default_locale = self._registry.verified_locale(
            locale, self._config.default_locale
        )
        if locale and self._default_locale != normalize_locale(locale):
            logger.debug(
                "Formatter locale '%s' not registered, defaulting to '%s'",
                locale,
                self._default_locale,
            )

    @classmethod
    def register_locale_messages(
        cls, locale: str, messages: Mapping[str, str]
    ) -> LocaleMessages:
        """Register locale messages on the process-wide registry.

        Formatters created afterwards (and formatters whose locale falls
        back to this one) pick the messages up.
        """
        return _DEFAULT_REGISTRY.register(locale, messages)

    @property
    def pattern(self) -> str:
        """Source pattern string."""
        return self._compiled.pattern

    @property
    def compiled(self) -> CompiledPattern:
        """Compiled node sequence."""
        return self._compiled

    @property
    def default_locale(self) -> str:
        """Locale used when format() is called without one."""
        return self._default_locale

    def format(self, value: object, locale: str | None = None) -> str:
        """Format a date value.

        Args:
            value: datetime, date or DateValue
            locale: Locale for this call; falls back to default_locale when
                not registered.

        Returns:
            The formatted string.

        Raises:
            TypeError: If value is not a supported date value.
            MessageLookupError: If the locale lacks a month/weekday key
                the pattern needs.
            LocaleNotRegisteredError: If the pattern needs names and no
                usable locale is registered.
        """
        messages = self._registry.resolve(locale or self._default_locale, self._default_locale)
        return self._compiled.render(value, messages)

    def __repr__(self) -> str:
        return (
            f"DateTimeFormatter(pattern={self.pattern!r}, "
            f"default_locale={self._default_locale!r})"
        )


def format_datetime(
    value: object,
    pattern: str = StandardPattern.DEFAULT,
    locale: str | None = None,
) -> str:
    """Format a date value in one call, using the process-wide registry.

    Example:
        >>> from datetime import datetime
        >>> format_datetime(datetime(2018, 11, 1, 9, 5, 7))
        '2018-11-01 09:05:07'
    """
    return DateTimeFormatter(pattern, locale).format(value)
