"""Hypothesis strategies for chronopattern property-based testing.

Strategies are organized by domain:

- dates: datetime values, fixed UTC offsets and DateValue inputs
- patterns: pattern strings, letter runs, literal text and lexeme streams

Usage:
    from tests.strategies import reasonable_datetimes, pattern_strings
    from tests.strategies.dates import year_boundary_dates
    from tests.strategies.patterns import lexeme_streams

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - date_by_boundary, offset_by_direction, pattern_by_shape
"""

from .dates import (
    aware_datetimes,
    date_by_boundary,
    fixed_offsets,
    offset_by_direction,
    reasonable_dates,
    reasonable_datetimes,
    year_boundary_dates,
)
from .patterns import (
    KNOWN_LETTERS,
    UNKNOWN_LETTERS,
    known_letter_runs,
    lexeme_streams,
    literal_texts,
    pattern_by_shape,
    pattern_strings,
)

__all__ = [
    "KNOWN_LETTERS",
    "UNKNOWN_LETTERS",
    "aware_datetimes",
    "date_by_boundary",
    "fixed_offsets",
    "known_letter_runs",
    "lexeme_streams",
    "literal_texts",
    "offset_by_direction",
    "pattern_by_shape",
    "pattern_strings",
    "reasonable_dates",
    "reasonable_datetimes",
    "year_boundary_dates",
]
