"""Diagnostic codes and data structures.

Defines error codes, categories, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for chronopattern errors.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        LOCALE: Locale resolution failure (nothing registered to fall back on)
        MESSAGE: Message key absent from the resolved locale messages
    """

    LOCALE = "locale"
    MESSAGE = "message"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale lookup errors (missing locales, missing keys)
    """

    MESSAGE_KEY_NOT_FOUND = 1001
    LOCALE_NOT_REGISTERED = 1002

    @property
    def category(self) -> ErrorCategory:
        """Category this code belongs to."""
        if self is DiagnosticCode.LOCALE_NOT_REGISTERED:
            return ErrorCategory.LOCALE
        return ErrorCategory.MESSAGE


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context for a
    human (message, hint) and for tooling (code, locale, key).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale_code: Locale that was being consulted, if any
        message_key: Message key that was being looked up, if any
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale_code: str | None = None
    message_key: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like the Rust compiler.

        Control characters in interpolated values are escaped so that
        attacker-supplied keys cannot forge extra log lines.

        Example output:
            error[MESSAGE_KEY_NOT_FOUND]: Message key 'months.full.7' not found
              = locale: de
              = key: months.full.7
              = help: Register messages that define every month and weekday key

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {_escape(self.message)}"]
        if self.locale_code is not None:
            lines.append(f"  = locale: {_escape(self.locale_code)}")
        if self.message_key is not None:
            lines.append(f"  = key: {_escape(self.message_key)}")
        if self.hint:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    return text.encode("unicode_escape").decode("ascii") if not text.isprintable() else text
