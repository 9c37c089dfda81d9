"""English month and weekday vocabulary.

Names are matched as a three-letter prefix plus an optional suffix, so "jun",
"june" and "JUNE" all map to the same month. Matches are word-bounded but may
appear anywhere in the text; the leftmost one wins.
"""

from __future__ import annotations

import re
from typing import Optional

from eventparse.temporal.models import MonthOfYear, Weekday
from eventparse.temporal.recognizable import Recognizer


# ---------------------------------------------------------------------------
# Prefix Mappings
# ---------------------------------------------------------------------------

MONTH_PREFIXES = {
    "jan": MonthOfYear.JANUARY,
    "feb": MonthOfYear.FEBRUARY,
    "mar": MonthOfYear.MARCH,
    "apr": MonthOfYear.APRIL,
    "may": MonthOfYear.MAY,
    "jun": MonthOfYear.JUNE,
    "jul": MonthOfYear.JULY,
    "aug": MonthOfYear.AUGUST,
    "sep": MonthOfYear.SEPTEMBER,
    "oct": MonthOfYear.OCTOBER,
    "nov": MonthOfYear.NOVEMBER,
    "dec": MonthOfYear.DECEMBER,
}

WEEKDAY_PREFIXES = {
    "sun": Weekday.SUNDAY,
    "mon": Weekday.MONDAY,
    "tue": Weekday.TUESDAY,
    "wed": Weekday.WEDNESDAY,
    "thu": Weekday.THURSDAY,
    "fri": Weekday.FRIDAY,
    "sat": Weekday.SATURDAY,
}


# ---------------------------------------------------------------------------
# Regular Expression Fragments
# ---------------------------------------------------------------------------

_MONTH_PREFIX = r"jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec"
_MONTH_SUFFIX = r"(?:uary|ruary|ch|il|e|y|ust|tember|t|ober|ember)?"
_WEEKDAY_PREFIX = r"mon|tue|wed|thu|fri|sat|sun"
_WEEKDAY_SUFFIX = r"(?:day|sday|s|nesday|rsday|rs|r|urday)?"

# Uncompiled so other patterns can embed them; both capture the prefix only.
MONTH_NAME = r"\b(?P<month>" + _MONTH_PREFIX + r")" + _MONTH_SUFFIX + r"\b"
WEEKDAY_NAME = r"\b(?P<day>" + _WEEKDAY_PREFIX + r")" + _WEEKDAY_SUFFIX + r"\b"

# Same words without named groups, for patterns that embed more than one.
MONTH_WORD = r"\b(?:" + _MONTH_PREFIX + r")" + _MONTH_SUFFIX + r"\b"
WEEKDAY_WORD = r"\b(?:" + _WEEKDAY_PREFIX + r")" + _WEEKDAY_SUFFIX + r"\b"

MONTH_PATTERN = re.compile(MONTH_NAME, re.IGNORECASE)
WEEKDAY_PATTERN = re.compile(WEEKDAY_NAME, re.IGNORECASE)


def month_from_prefix(prefix: str) -> MonthOfYear:
    return MONTH_PREFIXES[prefix.lower()]


def weekday_from_prefix(prefix: str) -> Weekday:
    return WEEKDAY_PREFIXES[prefix.lower()]


# ---------------------------------------------------------------------------
# Recognizers
# ---------------------------------------------------------------------------


class MonthRecognizer(Recognizer[MonthOfYear]):
    """Finds the first English month name or abbreviation."""

    label = "month of year"

    def recognize(self, text: str) -> Optional[MonthOfYear]:
        match = MONTH_PATTERN.search(text)
        if not match:
            return None
        return month_from_prefix(match.group("month"))


class WeekdayRecognizer(Recognizer[Weekday]):
    """Finds the first English weekday name or abbreviation."""

    label = "day of week"

    def recognize(self, text: str) -> Optional[Weekday]:
        match = WEEKDAY_PATTERN.search(text)
        if not match:
            return None
        return weekday_from_prefix(match.group("day"))


month_recognizer = MonthRecognizer()
weekday_recognizer = WeekdayRecognizer()


def recognize_month(text: str) -> Optional[MonthOfYear]:
    return month_recognizer.recognize(text)


def recognize_weekday(text: str) -> Optional[Weekday]:
    return weekday_recognizer.recognize(text)
