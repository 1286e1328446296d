"""chronopattern - pattern-driven, locale-aware date/time formatting.

Compiles pattern strings such as "EEE, dd MMM yyyy HH:mm:ss Z" into
reusable node sequences and renders datetime values with them. Month and
weekday names come from per-locale message tables, either supplied by hand
or built from CLDR data through Babel.

Public API:
    DateTimeFormatter - Pattern formatter with locale fallback
    StandardPattern - Commonly used patterns
    format_datetime - One-shot formatting shortcut
    compile_pattern - Compile a pattern with the default token catalog
    render - Render a compiled pattern
    LocaleMessages - Month/weekday names for one locale
    LocaleRegistry - Thread-safe locale -> messages registry
    FormatterConfig - Formatter configuration

Exceptions:
    ChronoPatternError - Base exception class
    LocaleLookupError - Locale message lookup failures
    MessageLookupError - Missing month/weekday message key
    LocaleNotRegisteredError - No messages for the requested or default locale

Submodules:
    chronopattern.syntax - Pattern tokenizer and serializer
    chronopattern.runtime - Token catalog, nodes, compiler, pattern cache
    chronopattern.core - DateValue protocol and ISO-8601 calendar math
    chronopattern.diagnostics - Error types and diagnostics
"""

from .config import FormatterConfig
from .core import DateTimeAccessor, DateValue
from .diagnostics import (
    ChronoPatternError,
    LocaleLookupError,
    LocaleNotRegisteredError,
    MessageLookupError,
)
from .formatter import DateTimeFormatter, StandardPattern, format_datetime
from .localization import LocaleMessages, LocaleRegistry
from .runtime import CompiledPattern, compile_pattern, render

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("chronopattern")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ChronoPatternError",
    "CompiledPattern",
    "DateTimeAccessor",
    "DateTimeFormatter",
    "DateValue",
    "FormatterConfig",
    "LocaleLookupError",
    "LocaleMessages",
    "LocaleNotRegisteredError",
    "LocaleRegistry",
    "MessageLookupError",
    "StandardPattern",
    "__version__",
    "compile_pattern",
    "format_datetime",
    "render",
]
