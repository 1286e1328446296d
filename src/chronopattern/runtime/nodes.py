"""Formatting nodes: the executable units of a compiled pattern.

Every node is a frozen dataclass with a single ``render(value, messages)``
operation that produces one output fragment. Nodes hold no mutable state,
so one instance can be shared by any number of compiled patterns and
rendered concurrently from any number of threads.

Node variants:
    LiteralNode: Verbatim text (literal runs, unknown letters)
    PaddedNumberNode: Integer field left-padded with zeros
    YearNode: Year field, two-digit or full
    FixedTextNode: Count-independent text chosen from the value (era, AM/PM)
    MessageNode: Locale message lookup (month and weekday names)
    ZoneOffsetNode: Fixed numeric UTC offset in one of five styles

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol, TypeAlias

if TYPE_CHECKING:
    from chronopattern.core.accessor import DateValue
    from chronopattern.localization.messages import LocaleMessages

__all__ = [
    "FixedTextNode",
    "IntField",
    "LiteralNode",
    "MessageNode",
    "Node",
    "PaddedNumberNode",
    "YearNode",
    "ZoneOffsetNode",
    "ZoneStyle",
    "pad",
]

IntField: TypeAlias = "Callable[[DateValue], int]"


def pad(value: int, width: int) -> str:
    """Left-pad the decimal form of value with zeros to width characters.

    Never truncates: a representation already longer than width is
    returned unchanged.

    Example:
        >>> pad(7, 2), pad(2018, 2)
        ('07', '2018')
    """
    return str(value).rjust(width, "0")


# pylint: disable=unnecessary-ellipsis
class Node(Protocol):
    """One stateless unit of the formatting pipeline."""

    def render(self, value: DateValue, messages: LocaleMessages) -> str:
        """Render this node's fragment for the given value and messages."""
        ...


@dataclass(frozen=True, slots=True)
class LiteralNode:
    """Emit fixed text regardless of the value."""

    text: str

    def render(self, value: DateValue, messages: LocaleMessages) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class PaddedNumberNode:
    """Emit an integer field zero-padded to ``width`` digits."""

    field: IntField
    width: int

    def __post_init__(self) -> None:
        if self.width < 1:
            msg = f"PaddedNumberNode.width must be >= 1, got {self.width}"
            raise ValueError(msg)

    def render(self, value: DateValue, messages: LocaleMessages) -> str:
        return pad(self.field(value), self.width)


@dataclass(frozen=True, slots=True)
class YearNode:
    """Emit a year field.

    The two-digit form keeps the last two digits of the absolute year,
    zero-padded ("05" for 2005). The full form is the plain decimal year,
    signed for years before 1 AD.
    """

    field: IntField
    two_digit: bool

    def render(self, value: DateValue, messages: LocaleMessages) -> str:
        year = self.field(value)
        if self.two_digit:
            return pad(abs(year) % 100, 2)
        return str(year)


@dataclass(frozen=True, slots=True)
class FixedTextNode:
    """Emit text selected from the value without consulting locale data."""

    select: Callable[[DateValue], str]

    def render(self, value: DateValue, messages: LocaleMessages) -> str:
        return self.select(value)


@dataclass(frozen=True, slots=True)
class MessageNode:
    """Emit the locale message ``<prefix>.<field(value)>``.

    Raises the lookup errors of LocaleMessages.lookup() when the key is
    missing; never emits placeholder text.
    """

    prefix: str
    field: IntField

    def render(self, value: DateValue, messages: LocaleMessages) -> str:
        return messages.lookup(f"{self.prefix}.{self.field(value)}")


class ZoneStyle(Enum):
    """Rendering styles for fixed UTC offsets (UTC-08:00 shown)."""

    GENERAL = "general"  # GMT-08:00, or GMT for a zero offset
    RFC822 = "rfc822"  # -0800
    ISO_HOURS = "iso_hours"  # -08
    ISO_BASIC = "iso_basic"  # -0800
    ISO_EXTENDED = "iso_extended"  # -08:00


@dataclass(frozen=True, slots=True)
class ZoneOffsetNode:
    """Emit the value's UTC offset.

    The stored offset counts minutes local time lags UTC, so a positive
    offset renders with "-" and zero or negative with "+".
    """

    style: ZoneStyle

    def render(self, value: DateValue, messages: LocaleMessages) -> str:
        offset = value.timezone_offset_minutes()
        sign = "-" if offset > 0 else "+"
        hours, minutes = divmod(abs(offset), 60)

        match self.style:
            case ZoneStyle.GENERAL:
                if offset == 0:
                    return "GMT"
                return f"GMT{sign}{pad(hours, 2)}:{pad(minutes, 2)}"
            case ZoneStyle.ISO_HOURS:
                return f"{sign}{pad(hours, 2)}"
            case ZoneStyle.ISO_EXTENDED:
                return f"{sign}{pad(hours, 2)}:{pad(minutes, 2)}"
            case ZoneStyle.RFC822 | ZoneStyle.ISO_BASIC:
                return f"{sign}{pad(hours, 2)}{pad(minutes, 2)}"
