"""Temporal data models for event parsing.

This module defines the data structures that flow through the pipeline:
- Calendar vocabulary (months of the year, days of the week)
- Date expressions (unresolved, e.g. "next friday")
- Time expressions (unresolved, e.g. "in 2 hours")
- Event spans (resolved start/end or whole-day range plus a summary)

Expressions are produced by the recognizers and are turned into concrete
``date``/``time`` values by the resolvers. All structures are immutable and
are created fresh for every parse call.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Dict, Optional, Union


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class MonthOfYear(Enum):
    """Month of the Gregorian year, valued 1-12."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def from_number(cls, number: int) -> Optional[MonthOfYear]:
        """Month for ``number`` (1-12), or None when out of range."""
        try:
            return cls(number)
        except ValueError:
            return None


class Weekday(Enum):
    """Day of the week, valued as days from Sunday (0-6)."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, day: date) -> Weekday:
        """Weekday of a calendar date (``date.weekday()`` counts from Monday)."""
        return cls((day.weekday() + 1) % 7)


class EventShape(Enum):
    """Temporal shape of a parsed event."""

    UNKNOWN = "unknown"                                       # nothing recognized
    STARTS = "starts"                                         # start time only
    STARTS_AND_ENDS = "starts_and_ends"                       # start and end time
    STARTS_WITH_DATE = "starts_with_date"                     # start time and date
    STARTS_AND_ENDS_WITH_DATE = "starts_and_ends_with_date"   # start, end and date
    ALL_DAY = "all_day"                                       # a single date
    ALL_DAY_RANGE = "all_day_range"                           # start and end date


# ---------------------------------------------------------------------------
# Date Expressions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class InNDays:
    """Days relative to the reference date, e.g. "yesterday" is -1."""

    offset: int


@dataclass(frozen=True)
class DayInNWeeks:
    """A weekday ``week_offset`` weeks from the reference week.

    "next thursday" is ``DayInNWeeks(1, Weekday.THURSDAY)``.
    """

    week_offset: int
    day: Weekday


@dataclass(frozen=True)
class InNMonths:
    """Same day of month, ``offset`` months from the reference date."""

    offset: int


@dataclass(frozen=True)
class InMonth:
    """Month and day in the reference year, e.g. "June 8th"."""

    month: MonthOfYear
    day: int


@dataclass(frozen=True)
class InYear:
    """Fully specified date; ``year`` is kept exactly as written."""

    month: MonthOfYear
    day: int
    year: int


DateExpression = Union[InNDays, DayInNWeeks, InNMonths, InMonth, InYear]


# ---------------------------------------------------------------------------
# Time Expressions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Absolute:
    """A clock time on a 24 hour clock."""

    hour: int
    minute: int = 0

    def to_time(self) -> time:
        return time(self.hour, self.minute)


@dataclass(frozen=True)
class InNHours:
    offset: int


@dataclass(frozen=True)
class InNMinutes:
    offset: int


TimeExpression = Union[Absolute, InNHours, InNMinutes]


# ---------------------------------------------------------------------------
# Result Models
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EventSpan:
    """Resolved temporal extent of an event plus its summary.

    Timed events carry ``start`` and ``end`` instants. Whole-day events
    (ALL_DAY, ALL_DAY_RANGE and UNKNOWN, which defaults to the reference day)
    carry ``start_date`` and ``end_date`` instead.
    """

    shape: EventShape
    summary: str
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @property
    def all_day(self) -> bool:
        return self.start is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "shape": self.shape.value,
            "summary": self.summary,
            "all_day": self.all_day,
            "start": self.start.isoformat() if self.start else None,
            "end": self.end.isoformat() if self.end else None,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None,
        }
