"""Process-wide registry of locale messages with default-locale fallback.

Registration is additive: registering a locale again replaces its messages,
and nothing is ever removed. Reads (resolve, get, verified_locale) take the
shared side of a readers-writer lock, registrations the exclusive side, so
late registrations are safe even while other threads format.

Fallback chain used by resolve():
    requested locale -> default locale -> UnregisteredLocaleMessages

The last step never fails by itself; it fails when a month or weekday name
is actually requested, with LocaleNotRegisteredError.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from chronopattern.constants import DEFAULT_LOCALE
from chronopattern.locale_utils import normalize_locale
from chronopattern.runtime.rwlock import RWLock

from .messages import LocaleMessages, UnregisteredLocaleMessages

__all__ = ["LocaleRegistry"]

logger = logging.getLogger(__name__)


class LocaleRegistry:
    """Thread-safe mapping from locale code to LocaleMessages.

    Locale codes are normalized ("en-US" and "en_US" are the same key).

    Example:
        >>> registry = LocaleRegistry(default_locale="en")
        >>> _ = registry.register("en", {"months.full.7": "July"})
        >>> registry.resolve("fr").lookup("months.full.7")  # falls back to en
        'July'
    """

    __slots__ = ("_default_locale", "_lock", "_messages")

    def __init__(self, default_locale: str = DEFAULT_LOCALE) -> None:
        """Initialize an empty registry.

        Args:
            default_locale: Locale consulted when a requested locale is not
                registered.

        Raises:
            ValueError: If default_locale is empty.
        """
        if not default_locale:
            msg = "default_locale must be a non-empty locale code"
            raise ValueError(msg)
        self._default_locale = normalize_locale(default_locale)
        self._messages: dict[str, LocaleMessages] = {}
        self._lock = RWLock()

    @property
    def default_locale(self) -> str:
        """Normalized default locale code."""
        return self._default_locale

    def __contains__(self, locale_code: object) -> bool:
        if not isinstance(locale_code, str):
            return False
        with self._lock.read():
            return normalize_locale(locale_code) in self._messages

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._messages)

    def locales(self) -> tuple[str, ...]:
        """Registered locale codes, in registration order."""
        with self._lock.read():
            return tuple(self._messages)

    def register(self, locale_code: str, messages: Mapping[str, str]) -> LocaleMessages:
        """Register (or replace) the messages of a locale.

        Args:
            locale_code: BCP-47 or POSIX locale code
            messages: LocaleMessages or any str -> str mapping

        Returns:
            The stored LocaleMessages.

        Raises:
            ValueError: If locale_code is empty.
        """
        key = normalize_locale(locale_code)
        if not key:
            msg = "locale_code must be a non-empty locale code"
            raise ValueError(msg)
        if not isinstance(messages, LocaleMessages) or messages.locale_code != key:
            messages = LocaleMessages(messages, locale_code=key)

        missing = messages.missing_keys()
        if missing:
            logger.warning(
                "Locale '%s' registered without %d message keys (first: %s)",
                key,
                len(missing),
                missing[0],
            )

        with self._lock.write():
            replaced = key in self._messages
            self._messages[key] = messages
        logger.info(
            "%s locale messages for '%s' (%d keys)",
            "Replaced" if replaced else "Registered",
            key,
            len(messages),
        )
        return messages

    def register_cldr(self, locale_code: str) -> LocaleMessages:
        """Register the CLDR month and weekday names of a locale.

        Raises:
            ValueError: If Babel does not know the locale.
        """
        return self.register(locale_code, LocaleMessages.from_babel(locale_code))

    def get(self, locale_code: str) -> LocaleMessages | None:
        """Messages registered for exactly this locale, or None."""
        with self._lock.read():
            return self._messages.get(normalize_locale(locale_code))

    def verified_locale(self, locale_code: str | None, default: str | None = None) -> str:
        """Return locale_code if registered, else the fallback locale code.

        Args:
            locale_code: Requested locale (None means "use the fallback")
            default: Fallback locale; the registry default if None

        Returns:
            Normalized code of the locale that will actually be consulted
            (the fallback is returned even when it is not registered).
        """
        fallback = normalize_locale(default) if default else self._default_locale
        if locale_code:
            key = normalize_locale(locale_code)
            with self._lock.read():
                if key in self._messages:
                    return key
        return fallback

    def resolve(self, locale_code: str | None = None, default: str | None = None) -> LocaleMessages:
        """Messages for locale_code, falling back to the default locale.

        Args:
            locale_code: Requested locale (None means "use the fallback")
            default: Fallback locale; the registry default if None

        Returns:
            Registered LocaleMessages, or UnregisteredLocaleMessages when
            neither locale is registered.
        """
        fallback = normalize_locale(default) if default else self._default_locale
        requested = normalize_locale(locale_code) if locale_code else None

        with self._lock.read():
            if requested is not None:
                found = self._messages.get(requested)
                if found is not None:
                    return found
            found = self._messages.get(fallback)

        if found is not None:
            if requested is not None:
                logger.debug("Locale '%s' not registered, using '%s'", requested, fallback)
            return found
        logger.debug("Neither '%s' nor default '%s' is registered", requested, fallback)
        return UnregisteredLocaleMessages(requested, fallback)
