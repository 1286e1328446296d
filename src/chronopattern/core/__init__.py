"""Core utilities shared across syntax and runtime layers.

Holds the date value capability and the ISO-8601 calendar math that the
token catalog depends on. Nothing here imports from the runtime layer:

    core <- syntax <- runtime

Exports:
    DateValue: Protocol of calendar/clock getters read by formatting nodes
    DateTimeAccessor: DateValue adapter over datetime/date
    as_date_value: Coerce datetime/date/DateValue into a DateValue

Python 3.13+.
"""

from .accessor import DateTimeAccessor, DateValue, as_date_value

__all__ = ["DateTimeAccessor", "DateValue", "as_date_value"]
