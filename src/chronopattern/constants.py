"""Shared constants for chronopattern.

Centralizes configuration constants used across the syntax, runtime and
localization packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Locale defaults: locale used when a requested locale is not registered
- Cache limits: memory bounds for the compiled-pattern cache
- Message keys: shapes of the locale message keys consulted by name tokens

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    # Cache limits
    "DEFAULT_PATTERN_CACHE_SIZE",
    "MAX_PATTERN_CACHE_SIZE",
    # Message keys
    "MONTHS_FULL",
    "MONTHS_SHORT",
    "WEEKDAYS_FULL",
    "WEEKDAYS_SHORT",
    "REQUIRED_MESSAGE_KEYS",
    # Literal markers
    "QUOTE",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale consulted when the requested locale has no registered messages.
DEFAULT_LOCALE: str = "en"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Compiled patterns are tiny (a tuple of shared node objects), so a generous
# default costs little. Applications rarely use more than a few dozen patterns.
DEFAULT_PATTERN_CACHE_SIZE: int = 256

# Upper bound accepted by FormatterConfig.pattern_cache_size.
MAX_PATTERN_CACHE_SIZE: int = 65536

# ============================================================================
# MESSAGE KEYS
# ============================================================================
#
# Month keys are 1-based (1 = January). Weekday keys follow ISO-8601
# numbering (1 = Monday, 7 = Sunday), matching day_of_week().

MONTHS_FULL: str = "months.full"
MONTHS_SHORT: str = "months.short"
WEEKDAYS_FULL: str = "weekdays.full"
WEEKDAYS_SHORT: str = "weekdays.short"

REQUIRED_MESSAGE_KEYS: tuple[str, ...] = (
    *(f"{MONTHS_FULL}.{n}" for n in range(1, 13)),
    *(f"{MONTHS_SHORT}.{n}" for n in range(1, 13)),
    *(f"{WEEKDAYS_FULL}.{n}" for n in range(1, 8)),
    *(f"{WEEKDAYS_SHORT}.{n}" for n in range(1, 8)),
)

# ============================================================================
# LITERAL MARKERS
# ============================================================================

# Delimits literal text in patterns; doubled it stands for itself.
QUOTE: str = "'"
