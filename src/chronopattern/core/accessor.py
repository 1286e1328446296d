"""Read-only date value capability consumed by the formatting pipeline.

Nodes never touch ``datetime`` directly. They read calendar fields through
the ``DateValue`` protocol, so any object exposing these getters can be
formatted: an adapted ``datetime``, a database row, a test double.

Timezone offsets follow the convention of ECMAScript's
``Date.getTimezoneOffset()``: minutes that local time lags UTC, so zones
west of Greenwich are positive (UTC-08:00 -> 480).

Python 3.13+.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Protocol, runtime_checkable

__all__ = ["DateTimeAccessor", "DateValue", "as_date_value"]


# pylint: disable=unnecessary-ellipsis
@runtime_checkable
class DateValue(Protocol):
    """Calendar and clock getters for one immutable instant."""

    def day_of_month(self) -> int:
        """Day of month, 1-31."""
        ...

    def month_index(self) -> int:
        """Zero-based month, 0 (January) to 11 (December)."""
        ...

    def full_year(self) -> int:
        """Full proleptic Gregorian year."""
        ...

    def hours(self) -> int:
        """Hour of day, 0-23."""
        ...

    def minutes(self) -> int:
        """Minute of hour, 0-59."""
        ...

    def seconds(self) -> int:
        """Second of minute, 0-59."""
        ...

    def milliseconds(self) -> int:
        """Millisecond of second, 0-999."""
        ...

    def timezone_offset_minutes(self) -> int:
        """Minutes local time lags UTC (positive west of Greenwich)."""
        ...

    def instant(self) -> int:
        """Milliseconds since the Unix epoch."""
        ...


class DateTimeAccessor:
    """DateValue adapter over ``datetime.date`` and ``datetime.datetime``.

    Naive datetimes and plain dates are read as UTC wall-clock values
    (offset 0). Aware datetimes report their own UTC offset.

    Example:
        >>> from datetime import datetime, timedelta, timezone
        >>> value = DateTimeAccessor(
        ...     datetime(2018, 11, 17, 9, 5, tzinfo=timezone(timedelta(hours=-8)))
        ... )
        >>> value.month_index(), value.timezone_offset_minutes()
        (10, 480)
    """

    __slots__ = ("_value",)

    def __init__(self, value: date) -> None:
        if not isinstance(value, datetime):
            value = datetime(value.year, value.month, value.day)
        self._value: datetime = value

    def __repr__(self) -> str:
        return f"DateTimeAccessor({self._value!r})"

    @property
    def value(self) -> datetime:
        """The wrapped datetime."""
        return self._value

    def day_of_month(self) -> int:
        return self._value.day

    def month_index(self) -> int:
        return self._value.month - 1

    def full_year(self) -> int:
        return self._value.year

    def hours(self) -> int:
        return self._value.hour

    def minutes(self) -> int:
        return self._value.minute

    def seconds(self) -> int:
        return self._value.second

    def milliseconds(self) -> int:
        return self._value.microsecond // 1000

    def timezone_offset_minutes(self) -> int:
        offset = self._value.utcoffset()
        if offset is None:
            return 0
        # Seconds are dropped toward zero on both sides of UTC
        return -int(offset.total_seconds() / 60)

    def instant(self) -> int:
        value = self._value
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return round(value.timestamp() * 1000)


def as_date_value(value: object) -> DateValue:
    """Coerce a supported object into a DateValue.

    Args:
        value: ``datetime``, ``date``, or an object already implementing
            the DateValue protocol.

    Returns:
        A DateValue reading the same calendar fields.

    Raises:
        TypeError: If the value is none of the supported kinds.
    """
    if isinstance(value, date):
        return DateTimeAccessor(value)
    if isinstance(value, DateValue):
        return value
    msg = f"Expected datetime, date or DateValue, got {type(value).__name__}"
    raise TypeError(msg)
