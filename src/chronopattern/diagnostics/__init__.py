"""Diagnostic system for chronopattern errors.

Provides structured error diagnostics with codes, hints, and locale context.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    ChronoPatternError,
    LocaleLookupError,
    LocaleNotRegisteredError,
    MessageLookupError,
)
from .templates import ErrorTemplate

__all__ = [
    "ChronoPatternError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "ErrorTemplate",
    "LocaleLookupError",
    "LocaleNotRegisteredError",
    "MessageLookupError",
]
