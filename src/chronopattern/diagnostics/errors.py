"""Exception hierarchy with structured diagnostics.

Pattern problems never raise: unknown letters and unterminated quotes are
formatted leniently. The only failures surfaced at format time are locale
lookups that cannot be satisfied, and those always raise rather than emit
placeholder text.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ChronoPatternError",
    "LocaleLookupError",
    "LocaleNotRegisteredError",
    "MessageLookupError",
]


class ChronoPatternError(Exception):
    """Base exception for all chronopattern errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ChronoPatternError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LocaleLookupError(ChronoPatternError):
    """A locale-dependent token could not obtain its display text.

    Raised while rendering month (MMM, MMMM) or weekday (E...) names.
    """


class MessageLookupError(LocaleLookupError):
    """Message key missing from the resolved locale messages.

    Attributes:
        message_key: The key that was looked up
        locale_code: Locale whose messages were consulted
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        message_key: str = "",
        locale_code: str = "",
    ) -> None:
        """Initialize MessageLookupError.

        Args:
            message: Error message string OR Diagnostic object
            message_key: The key that was looked up
            locale_code: Locale whose messages were consulted
        """
        super().__init__(message)
        self.message_key = message_key
        self.locale_code = locale_code


class LocaleNotRegisteredError(LocaleLookupError):
    """Neither the requested locale nor the default locale is registered.

    Attributes:
        locale_code: The default locale that was missing
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        """Initialize LocaleNotRegisteredError.

        Args:
            message: Error message string OR Diagnostic object
            locale_code: The default locale that was missing
        """
        super().__init__(message)
        self.locale_code = locale_code
