"""Locale messages and the locale registry.

Exports:
    LocaleMessages: Immutable month/weekday name mapping for one locale
    UnregisteredLocaleMessages: Stand-in raising on every name lookup
    LocaleRegistry: Thread-safe locale -> messages mapping with fallback

Python 3.13+. Uses Babel for CLDR names.
"""

# messages must load before registry (registry -> runtime -> messages)
from .messages import LocaleMessages, UnregisteredLocaleMessages
from .registry import LocaleRegistry

__all__ = ["LocaleMessages", "LocaleRegistry", "UnregisteredLocaleMessages"]
