"""Token catalog: one node factory per pattern letter.

Each pattern letter names a calendar field. How many times the letter is
repeated (its occurrence count) selects the concrete rendering:

    Letter | Field                     | Count -> rendering
    -------|---------------------------|---------------------------------------
    G      | Era                       | AD / BC
    y      | Year                      | 1-2: 2-digit (96); 3+: full (1996)
    Y      | ISO week-based year       | as y (2009, 09)
    M      | Month                     | 1: 7; 2: 07; 3: Jul; 4+: July
    w      | Week of year (ISO)        | zero-padded to count
    W      | Week of month (ISO)       | zero-padded to count
    D      | Day of year               | zero-padded to count
    d      | Day of month              | zero-padded to count
    F      | Weekday occurrence        | zero-padded to count
    E      | Weekday name              | 1-3: Tue; 4+: Tuesday
    u      | ISO weekday (1 = Monday)  | zero-padded to count
    a      | AM/PM marker              | AM / PM
    H      | Hour 0-23                 | zero-padded to count
    k      | Hour 1-24                 | zero-padded to count
    K      | Hour 0-11                 | zero-padded to count
    h      | Hour 1-12                 | zero-padded to count
    m      | Minute                    | zero-padded to count
    s      | Second                    | zero-padded to count
    S      | Millisecond               | zero-padded to count
    z      | General zone              | GMT, GMT-08:00
    Z      | RFC 822 zone              | -0800
    X      | ISO 8601 zone             | 1: -08; 2: -0800; 3+: -08:00

Month and weekday names come from the locale messages; everything else is
locale-independent. Named time zones are not supported, only fixed offsets.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol

from chronopattern.constants import MONTHS_FULL, MONTHS_SHORT, WEEKDAYS_FULL, WEEKDAYS_SHORT
from chronopattern.core import iso8601

from .nodes import (
    FixedTextNode,
    IntField,
    MessageNode,
    Node,
    PaddedNumberNode,
    YearNode,
    ZoneOffsetNode,
    ZoneStyle,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from chronopattern.core.accessor import DateValue

__all__ = [
    "CATALOG",
    "MonoNodeFactory",
    "NodeFactory",
    "PaddedNumberNodeFactory",
    "ThresholdNodeFactory",
    "TokenKind",
    "YearNodeFactory",
    "default_factories",
]


class TokenKind(StrEnum):
    """The fixed set of pattern letters understood by the default catalog.

    The enum value is the pattern letter itself.
    """

    ERA = "G"
    YEAR = "y"
    WEEK_BASED_YEAR = "Y"
    MONTH = "M"
    WEEK_OF_YEAR = "w"
    WEEK_OF_MONTH = "W"
    DAY_OF_YEAR = "D"
    DAY_OF_MONTH = "d"
    DAY_OF_WEEK_IN_MONTH = "F"
    DAY_NAME = "E"
    DAY_NUMBER = "u"
    AM_PM = "a"
    HOUR_OF_DAY = "H"
    HOUR_OF_DAY_1_24 = "k"
    HOUR_OF_AM_PM = "K"
    HOUR_OF_AM_PM_1_12 = "h"
    MINUTE = "m"
    SECOND = "s"
    MILLISECOND = "S"
    GENERAL_ZONE = "z"
    RFC822_ZONE = "Z"
    ISO_ZONE = "X"


# pylint: disable=unnecessary-ellipsis
class NodeFactory(Protocol):
    """Maps an occurrence count to a node for one pattern letter.

    Implementations must be pure: the same count always yields an
    equivalent node, and no call changes the factory.
    """

    @property
    def token(self) -> str:
        """Pattern letter this factory handles."""
        ...

    def for_occurrence(self, count: int) -> Node:
        """Node for the letter repeated ``count`` times."""
        ...


def _check_token(token: str) -> None:
    if len(token) != 1 or not (token.isascii() and token.isalpha()):
        msg = f"Factory token must be a single ASCII letter, got {token!r}"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class MonoNodeFactory:
    """Returns the same node for every occurrence count."""

    token: str
    node: Node

    def __post_init__(self) -> None:
        _check_token(self.token)

    def for_occurrence(self, count: int) -> Node:
        return self.node


@dataclass(frozen=True, slots=True)
class PaddedNumberNodeFactory:
    """Zero-pads an integer field to as many digits as the letter repeats."""

    token: str
    field: IntField

    def __post_init__(self) -> None:
        _check_token(self.token)

    def for_occurrence(self, count: int) -> Node:
        return PaddedNumberNode(self.field, count)


@dataclass(frozen=True, slots=True)
class YearNodeFactory:
    """Two-digit year below three repetitions, full year from three on."""

    token: str
    field: IntField

    def __post_init__(self) -> None:
        _check_token(self.token)

    def for_occurrence(self, count: int) -> Node:
        return YearNode(self.field, two_digit=count < 3)


@dataclass(frozen=True, slots=True)
class ThresholdNodeFactory:
    """Picks the node registered for the highest threshold <= count.

    Attributes:
        token: Pattern letter
        thresholds: (minimum count, node) pairs in ascending order; the
            first minimum must be 1 so that every count resolves.
    """

    token: str
    thresholds: tuple[tuple[int, Node], ...]

    def __post_init__(self) -> None:
        _check_token(self.token)
        minimums = [minimum for minimum, _ in self.thresholds]
        if not minimums or minimums[0] != 1:
            msg = f"Thresholds for '{self.token}' must start at count 1"
            raise ValueError(msg)
        if minimums != sorted(set(minimums)):
            msg = f"Thresholds for '{self.token}' must be strictly ascending"
            raise ValueError(msg)

    def for_occurrence(self, count: int) -> Node:
        selected = self.thresholds[0][1]
        for minimum, node in self.thresholds:
            if count < minimum:
                break
            selected = node
        return selected


# ==============================================================================
# FIELD ACCESSORS
# ==============================================================================


def _month_number(value: DateValue) -> int:
    return value.month_index() + 1


def _hour_1_24(value: DateValue) -> int:
    return value.hours() or 24


def _hour_0_11(value: DateValue) -> int:
    return value.hours() % 12


def _hour_1_12(value: DateValue) -> int:
    return value.hours() % 12 or 12


def _era(value: DateValue) -> str:
    return "BC" if value.full_year() < 0 else "AD"


def _am_pm(value: DateValue) -> str:
    return "AM" if value.hours() < 12 else "PM"


# ==============================================================================
# DEFAULT CATALOG
# ==============================================================================


def _padded(kind: TokenKind, field: IntField) -> PaddedNumberNodeFactory:
    return PaddedNumberNodeFactory(kind.value, field)


def default_factories() -> tuple[NodeFactory, ...]:
    """Build one factory per TokenKind, in declaration order."""
    month_number = PaddedNumberNode(_month_number, 1)
    return (
        MonoNodeFactory(TokenKind.ERA.value, FixedTextNode(_era)),
        YearNodeFactory(TokenKind.YEAR.value, lambda value: value.full_year()),
        YearNodeFactory(TokenKind.WEEK_BASED_YEAR.value, iso8601.week_based_year),
        ThresholdNodeFactory(
            TokenKind.MONTH.value,
            (
                (1, month_number),
                (2, PaddedNumberNode(_month_number, 2)),
                (3, MessageNode(MONTHS_SHORT, _month_number)),
                (4, MessageNode(MONTHS_FULL, _month_number)),
            ),
        ),
        _padded(TokenKind.WEEK_OF_YEAR, iso8601.week_of_year),
        _padded(TokenKind.WEEK_OF_MONTH, iso8601.week_of_month),
        _padded(TokenKind.DAY_OF_YEAR, iso8601.day_of_year),
        _padded(TokenKind.DAY_OF_MONTH, lambda value: value.day_of_month()),
        _padded(TokenKind.DAY_OF_WEEK_IN_MONTH, iso8601.day_of_week_in_month),
        ThresholdNodeFactory(
            TokenKind.DAY_NAME.value,
            (
                (1, MessageNode(WEEKDAYS_SHORT, iso8601.day_of_week)),
                (4, MessageNode(WEEKDAYS_FULL, iso8601.day_of_week)),
            ),
        ),
        _padded(TokenKind.DAY_NUMBER, iso8601.day_of_week),
        MonoNodeFactory(TokenKind.AM_PM.value, FixedTextNode(_am_pm)),
        _padded(TokenKind.HOUR_OF_DAY, lambda value: value.hours()),
        _padded(TokenKind.HOUR_OF_DAY_1_24, _hour_1_24),
        _padded(TokenKind.HOUR_OF_AM_PM, _hour_0_11),
        _padded(TokenKind.HOUR_OF_AM_PM_1_12, _hour_1_12),
        _padded(TokenKind.MINUTE, lambda value: value.minutes()),
        _padded(TokenKind.SECOND, lambda value: value.seconds()),
        _padded(TokenKind.MILLISECOND, lambda value: value.milliseconds()),
        MonoNodeFactory(TokenKind.GENERAL_ZONE.value, ZoneOffsetNode(ZoneStyle.GENERAL)),
        MonoNodeFactory(TokenKind.RFC822_ZONE.value, ZoneOffsetNode(ZoneStyle.RFC822)),
        ThresholdNodeFactory(
            TokenKind.ISO_ZONE.value,
            (
                (1, ZoneOffsetNode(ZoneStyle.ISO_HOURS)),
                (2, ZoneOffsetNode(ZoneStyle.ISO_BASIC)),
                (3, ZoneOffsetNode(ZoneStyle.ISO_EXTENDED)),
            ),
        ),
    )


CATALOG: Mapping[TokenKind, NodeFactory] = MappingProxyType(
    {TokenKind(factory.token): factory for factory in default_factories()}
)
