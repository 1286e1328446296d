"""Locale messages: month and weekday display names for one locale.

LocaleMessages is an immutable mapping from message key to display text.
The keys consulted by the token catalog are:

    months.full.<1..12>     January ... December
    months.short.<1..12>    Jan ... Dec
    weekdays.full.<1..7>    Monday ... Sunday (ISO numbering)
    weekdays.short.<1..7>   Mon ... Sun

Messages can be supplied by hand or built from Babel's CLDR data with
LocaleMessages.from_babel().

Python 3.13+. Uses Babel for CLDR names.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from babel import UnknownLocaleError

from chronopattern.constants import (
    MONTHS_FULL,
    MONTHS_SHORT,
    REQUIRED_MESSAGE_KEYS,
    WEEKDAYS_FULL,
    WEEKDAYS_SHORT,
)
from chronopattern.diagnostics import (
    ErrorTemplate,
    LocaleNotRegisteredError,
    MessageLookupError,
)
from chronopattern.locale_utils import get_babel_locale, normalize_locale

__all__ = ["LocaleMessages", "UnregisteredLocaleMessages"]

logger = logging.getLogger(__name__)


class LocaleMessages(Mapping[str, str]):
    """Immutable message key -> display text mapping for one locale.

    Examples:
        >>> messages = LocaleMessages({"months.full.7": "July"}, locale_code="en")
        >>> messages.lookup("months.full.7")
        'July'
        >>> "months.short.7" in messages
        False

    Thread Safety:
        Immutable after construction; safe to share between threads.
    """

    __slots__ = ("_locale_code", "_messages")

    def __init__(self, messages: Mapping[str, str], *, locale_code: str = "") -> None:
        """Initialize LocaleMessages.

        Args:
            messages: Key -> text mapping (copied)
            locale_code: Locale the messages belong to, used in diagnostics

        Raises:
            TypeError: If a key or value is not a string.
        """
        copied = dict(messages)
        for key, text in copied.items():
            if not isinstance(key, str) or not isinstance(text, str):
                msg = (
                    "Locale messages must map str to str, got "
                    f"{type(key).__name__} -> {type(text).__name__}"
                )
                raise TypeError(msg)
        self._messages: Mapping[str, str] = MappingProxyType(copied)
        self._locale_code = locale_code

    @classmethod
    def from_babel(cls, locale_code: str) -> LocaleMessages:
        """Build the full key set from Babel's CLDR data.

        Uses the format-context wide and abbreviated names, the forms CLDR
        intends for names embedded in a date ("7. Juli 2018").

        Args:
            locale_code: BCP-47 or POSIX locale code (e.g. "de-AT", "lv_LV")

        Returns:
            LocaleMessages defining every required key.

        Raises:
            ValueError: If Babel does not know the locale or cannot parse
                the code.
        """
        try:
            babel_locale = get_babel_locale(locale_code)
        except UnknownLocaleError as e:
            logger.warning("Unknown CLDR locale '%s': %s", locale_code, e)
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        except ValueError as e:
            logger.warning("Invalid locale format '%s': %s", locale_code, e)
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None

        months = babel_locale.months["format"]
        days = babel_locale.days["format"]
        messages: dict[str, str] = {}
        for month in range(1, 13):
            messages[f"{MONTHS_FULL}.{month}"] = str(months["wide"][month])
            messages[f"{MONTHS_SHORT}.{month}"] = str(months["abbreviated"][month])
        # CLDR day indexes run 0 (Monday) to 6 (Sunday)
        for weekday in range(1, 8):
            messages[f"{WEEKDAYS_FULL}.{weekday}"] = str(days["wide"][weekday - 1])
            messages[f"{WEEKDAYS_SHORT}.{weekday}"] = str(days["abbreviated"][weekday - 1])
        return cls(messages, locale_code=normalize_locale(locale_code))

    @property
    def locale_code(self) -> str:
        """Locale the messages belong to ("" if not given)."""
        return self._locale_code

    def __getitem__(self, key: str) -> str:
        return self._messages[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"LocaleMessages(locale_code={self._locale_code!r}, keys={len(self._messages)})"

    def lookup(self, key: str) -> str:
        """Return the display text for key.

        Raises:
            MessageLookupError: If the key is not defined.
        """
        try:
            return self._messages[key]
        except KeyError:
            diagnostic = ErrorTemplate.message_key_not_found(key, self._locale_code)
            raise MessageLookupError(
                diagnostic, message_key=key, locale_code=self._locale_code
            ) from None

    def missing_keys(self) -> tuple[str, ...]:
        """Required month/weekday keys that are not defined, in canonical order."""
        return tuple(key for key in REQUIRED_MESSAGE_KEYS if key not in self._messages)


class UnregisteredLocaleMessages(LocaleMessages):
    """Stand-in returned when neither the requested nor the default locale exists.

    Patterns without name tokens render normally against it. Any name
    lookup raises LocaleNotRegisteredError instead of producing text.
    """

    __slots__ = ("_requested",)

    def __init__(self, requested: str | None, default_locale: str) -> None:
        super().__init__({}, locale_code=default_locale)
        self._requested = requested

    @property
    def requested_locale(self) -> str | None:
        """Locale originally requested, if any."""
        return self._requested

    def lookup(self, key: str) -> str:
        diagnostic = ErrorTemplate.locale_not_registered(
            self._requested, self._locale_code, message_key=key
        )
        raise LocaleNotRegisteredError(diagnostic, locale_code=self._locale_code)
