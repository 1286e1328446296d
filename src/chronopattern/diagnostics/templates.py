"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    Keeps error text testable and documents every failure the library can
    surface.
    """

    @staticmethod
    def message_key_not_found(message_key: str, locale_code: str) -> Diagnostic:
        """Message key absent from the resolved locale messages.

        Args:
            message_key: The key that was looked up (e.g. "months.full.7")
            locale_code: Locale whose messages were consulted

        Returns:
            Diagnostic for MESSAGE_KEY_NOT_FOUND
        """
        msg = f"Message key '{message_key}' not found for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_KEY_NOT_FOUND,
            message=msg,
            hint="Register messages that define every month and weekday key",
            locale_code=locale_code,
            message_key=message_key,
        )

    @staticmethod
    def locale_not_registered(
        locale_code: str | None, default_locale: str, message_key: str | None = None
    ) -> Diagnostic:
        """Neither the requested nor the default locale has registered messages.

        Args:
            locale_code: Locale originally requested (None if none was given)
            default_locale: Fallback locale that was also missing
            message_key: Key whose lookup triggered the failure, if any

        Returns:
            Diagnostic for LOCALE_NOT_REGISTERED
        """
        if locale_code is None or locale_code == default_locale:
            msg = f"No locale messages registered for default locale '{default_locale}'"
        else:
            msg = (
                f"No locale messages registered for '{locale_code}' "
                f"or default locale '{default_locale}'"
            )
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NOT_REGISTERED,
            message=msg,
            hint=(
                f"Call register('{default_locale}', ...) or "
                f"register_cldr('{default_locale}') before formatting names"
            ),
            locale_code=default_locale,
            message_key=message_key,
        )
