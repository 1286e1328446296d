"""ISO-8601 calendar math for day-of-week and week numbering.

The ISO-8601 standard numbers weeks from Monday. Week 1 of a year is the
week containing that year's first Thursday, so every ISO week belongs to
the year that holds its Thursday. January 1, 2003 fell on a Wednesday and
opens week 1 of 2003; January 1, 2006 fell on a Sunday and closes week 52
of 2005.

All day counts are derived from calendar components through
``datetime.date`` ordinals, never from elapsed milliseconds, so time of day
and daylight-saving transitions cannot shift a result by one.

Inputs are assumed to be valid proleptic Gregorian dates; nothing here
validates them. Years outside ``datetime.date``'s range are handled by
moving them a whole number of 400-year cycles into it.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .accessor import DateValue

__all__ = [
    "day_of_week",
    "day_of_week_in_month",
    "day_of_year",
    "sakamoto_day_of_week",
    "week_based_year",
    "week_of_month",
    "week_of_year",
]

_SAKAMOTO_OFFSETS: tuple[int, ...] = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)

_CYCLE_YEARS = 400
_CYCLE_ANCHOR = 2001


def sakamoto_day_of_week(day: int, month: int, year: int) -> int:
    """Day of week from civil components, 1 (Monday) to 7 (Sunday).

    Sakamoto's congruence yields 0 for Sunday through 6 for Saturday;
    Sunday is remapped to 7 for ISO numbering. January and February are
    counted as months of the previous year so the leap day falls at the
    end of the counting year.

    See https://stackoverflow.com/questions/6385190/ for a derivation.

    Args:
        day: Day of month (1-31)
        month: Month (1-12)
        year: Proleptic Gregorian year

    Returns:
        ISO weekday number in range 1-7.
    """
    if month < 3:
        year -= 1
    index = (
        year + year // 4 - year // 100 + year // 400 + _SAKAMOTO_OFFSETS[month - 1] + day
    ) % 7
    return 7 if index == 0 else index


def _to_date(value: DateValue) -> tuple[date, int]:
    # 400 Gregorian years are 146097 days, a whole number of weeks, so any
    # year can be moved into datetime's range without changing the calendar.
    year = value.full_year()
    shifted = (year - 1) % _CYCLE_YEARS + _CYCLE_ANCHOR
    return date(shifted, value.month_index() + 1, value.day_of_month()), year - shifted


def _weekday(d: date) -> int:
    return sakamoto_day_of_week(d.day, d.month, d.year)


def _day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1


def _thursday_of_week(d: date) -> date:
    return d + timedelta(days=4 - _weekday(d))


def day_of_week(value: DateValue) -> int:
    """ISO weekday of the given date.

    Args:
        value: Date to inspect.

    Returns:
        Number in range 1-7 where 1 is Monday and 7 is Sunday.
    """
    return sakamoto_day_of_week(value.day_of_month(), value.month_index() + 1, value.full_year())


def day_of_week_in_month(value: DateValue) -> int:
    """Ordinal of this weekday's occurrence within its month (1st, 2nd, ...)."""
    return math.ceil(value.day_of_month() / 7)


def day_of_year(value: DateValue) -> int:
    """Day number within the year, 1 for January 1st."""
    d, _ = _to_date(value)
    return _day_of_year(d)


def week_based_year(value: DateValue) -> int:
    """Year to which the ISO week containing the given date belongs.

    Dates in the last days of December can belong to week 1 of the next
    year, and dates in the first days of January to the last week of the
    previous year.
    """
    d, shift = _to_date(value)
    return _thursday_of_week(d).year + shift


def week_of_month(value: DateValue) -> int:
    """Number of the week within its month.

    The first week of a month is the one containing the month's first
    Thursday. Like week_of_year, a date can report a week of the adjacent
    month (December 1st, 2018 is in week 5 of November).
    """
    d, _ = _to_date(value)
    thursday = _thursday_of_week(d)
    day4 = thursday.replace(day=4)
    return math.ceil((thursday.day - 4 + _weekday(day4)) / 7)


def week_of_year(value: DateValue) -> int:
    """ISO-8601 week number of the given date.

    CAUTION:
    The number can belong to the adjacent year: December 31st, 2018 is in
    week 1 of 2019 and January 1st, 2017 in week 52 of 2016. Pair it with
    week_based_year, not with the calendar year.
    """
    d, _ = _to_date(value)
    thursday = _thursday_of_week(d)
    # January 4th is always in week 1
    jan4 = date(thursday.year, 1, 4)
    return math.ceil((_day_of_year(thursday) - 4 + _weekday(jan4)) / 7)
