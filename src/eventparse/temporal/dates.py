"""Date recognition and resolution.

Recognition turns text into a ``DateExpression`` by trying, in a fixed order:

1. Calendar keywords (today, tomorrow, yesterday)
2. Relative day counts ("in 3 days")
3. Numeric month/day/year ("12/15/19", "12/15/2019")
4. Numeric month/day ("6/15")
5. English month and day ("June 5th", "Jul 4 2019")
6. Qualified weekdays ("next thursday", "last wed", "this sat")
7. Relative month counts ("in 2 months")
8. Qualified months ("next month")
9. Bare weekdays ("saturday")

More specific patterns come first, so "12/15/19" is never read as "12/15".
Resolution turns the expression into a ``date`` relative to a reference date.
"""

from __future__ import annotations

import logging
import re
from datetime import date, timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta

from eventparse.configuration.settings import ParserSettings
from eventparse.errors import (
    InvalidCalendarDateError,
    MalformedDateError,
    MalformedExpressionError,
)
from eventparse.temporal.models import (
    DateExpression,
    DayInNWeeks,
    InMonth,
    InNDays,
    InNMonths,
    InYear,
    MonthOfYear,
    Weekday,
)
from eventparse.temporal.recognizable import PatternChain
from eventparse.temporal.vocabulary import (
    MONTH_NAME,
    WEEKDAY_NAME,
    month_from_prefix,
    weekday_from_prefix,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Relative Expression Mappings
# ---------------------------------------------------------------------------

DAY_KEYWORDS = {
    "today": 0,
    "tomorrow": 1,
    "yesterday": -1,
}

QUALIFIER_OFFSETS = {
    "this": 0,
    "next": 1,
    "last": -1,
}


# ---------------------------------------------------------------------------
# Regular Expression Patterns
# ---------------------------------------------------------------------------

DAY_KEYWORD_PATTERN = re.compile(r"\b(?P<key>today|tomorrow|yesterday)\b", re.IGNORECASE)

IN_N_DAYS_PATTERN = re.compile(r"\bin\s+(?P<num>\d{1,3})\s+days?\b", re.IGNORECASE)

IN_N_MONTHS_PATTERN = re.compile(r"\bin\s+(?P<num>\d{1,3})\s+months?\b", re.IGNORECASE)

# M/D/YY or M/D/YYYY
NUMERIC_DATE_YEAR_PATTERN = re.compile(
    r"\b(?P<month>\d{1,2})/(?P<date>\d{1,2})/(?P<year>\d{4}|\d{2})\b"
)

# M/D
NUMERIC_DATE_PATTERN = re.compile(r"\b(?P<month>\d{1,2})/(?P<date>\d{1,2})\b")

# June 5, June 5th, Jun 5th, 2019
MONTH_DAY_PATTERN = re.compile(
    MONTH_NAME
    + r"\.?\s+(?P<date>\d{1,2})(?:st|nd|rd|th)?\b"
    + r"(?:,?\s+(?P<year>\d{4})\b)?",
    re.IGNORECASE,
)

QUALIFIED_WEEKDAY_PATTERN = re.compile(
    r"\b(?P<prep>next|last|this)\s+" + WEEKDAY_NAME, re.IGNORECASE
)

QUALIFIED_MONTH_PATTERN = re.compile(r"\b(?P<prep>next|last|this)\s+month\b", re.IGNORECASE)

BARE_WEEKDAY_PATTERN = re.compile(WEEKDAY_NAME, re.IGNORECASE)

# Two-digit years below the pivot belong to the 2000s, the rest to the 1900s.
DEFAULT_TWO_DIGIT_YEAR_PIVOT = 50


# ---------------------------------------------------------------------------
# Pattern Attempts
# ---------------------------------------------------------------------------


def _checked_month(number: int, text: str) -> MonthOfYear:
    month = MonthOfYear.from_number(number)
    if month is None:
        raise MalformedDateError(
            f"Month {number} is out of range",
            details={"text": text, "month": number},
        )
    return month


def _checked_day(number: int, text: str) -> int:
    if not 1 <= number <= 31:
        raise MalformedDateError(
            f"Day {number} is out of range",
            details={"text": text, "day": number},
        )
    return number


def parse_keywords(text: str) -> Optional[DateExpression]:
    """today, tomorrow, yesterday"""
    match = DAY_KEYWORD_PATTERN.search(text)
    if not match:
        return None
    return InNDays(DAY_KEYWORDS[match.group("key").lower()])


def parse_in_n_days(text: str) -> Optional[DateExpression]:
    """in 2 days"""
    match = IN_N_DAYS_PATTERN.search(text)
    if not match:
        return None
    return InNDays(int(match.group("num")))


def parse_in_year(text: str) -> Optional[DateExpression]:
    """12/15/19, 12/15/2019"""
    match = NUMERIC_DATE_YEAR_PATTERN.search(text)
    if not match:
        return None
    return InYear(
        _checked_month(int(match.group("month")), match.group(0)),
        _checked_day(int(match.group("date")), match.group(0)),
        int(match.group("year")),
    )


def parse_in_month(text: str) -> Optional[DateExpression]:
    """6/1, 06/01"""
    match = NUMERIC_DATE_PATTERN.search(text)
    if not match:
        return None
    return InMonth(
        _checked_month(int(match.group("month")), match.group(0)),
        _checked_day(int(match.group("date")), match.group(0)),
    )


def parse_month_date_english(text: str) -> Optional[DateExpression]:
    """june 1, june 1st, Jul 4 2019"""
    match = MONTH_DAY_PATTERN.search(text)
    if not match:
        return None

    month = month_from_prefix(match.group("month"))
    day = _checked_day(int(match.group("date")), match.group(0))
    if match.group("year"):
        return InYear(month, day, int(match.group("year")))
    return InMonth(month, day)


def parse_date_in_week(text: str) -> Optional[DateExpression]:
    """this saturday, next sat, last wednesday"""
    match = QUALIFIED_WEEKDAY_PATTERN.search(text)
    if not match:
        return None
    return DayInNWeeks(
        QUALIFIER_OFFSETS[match.group("prep").lower()],
        weekday_from_prefix(match.group("day")),
    )


def parse_in_n_months(text: str) -> Optional[DateExpression]:
    """in 4 months"""
    match = IN_N_MONTHS_PATTERN.search(text)
    if not match:
        return None
    return InNMonths(int(match.group("num")))


def parse_relative_month(text: str) -> Optional[DateExpression]:
    """this month, next month, last month"""
    match = QUALIFIED_MONTH_PATTERN.search(text)
    if not match:
        return None
    return InNMonths(QUALIFIER_OFFSETS[match.group("prep").lower()])


def parse_day_alone(text: str) -> Optional[DateExpression]:
    """saturday"""
    match = BARE_WEEKDAY_PATTERN.search(text)
    if not match:
        return None
    return DayInNWeeks(0, weekday_from_prefix(match.group("day")))


DATE_PATTERN_ATTEMPTS = (
    parse_keywords,
    parse_in_n_days,
    parse_in_year,
    parse_in_month,
    parse_month_date_english,
    parse_date_in_week,
    parse_in_n_months,
    parse_relative_month,
    parse_day_alone,
)

date_recognizer: PatternChain[DateExpression] = PatternChain("date", DATE_PATTERN_ATTEMPTS)


def recognize_date(text: str) -> Optional[DateExpression]:
    """Recognize the first date expression in ``text``.

    Returns:
        The expression, or None when the text holds no date.

    Raises:
        MalformedDateError: date-like text with an impossible month or day.
    """
    return date_recognizer.recognize(text)


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def expand_year(year: int, pivot: Optional[int] = DEFAULT_TWO_DIGIT_YEAR_PIVOT) -> int:
    """Expand a two-digit year around ``pivot``; None keeps it literal."""
    if pivot is None or year >= 100:
        return year
    return 2000 + year if year < pivot else 1900 + year


def _calendar_date(year: int, month: MonthOfYear, day: int) -> date:
    try:
        return date(year, month.value, day)
    except ValueError as exc:
        raise InvalidCalendarDateError(
            f"{month.name.title()} {day}, {year} does not exist",
            details={"year": year, "month": month.value, "day": day},
        ) from exc


def resolve_date(
    expression: DateExpression,
    reference: date,
    settings: Optional[ParserSettings] = None,
) -> date:
    """Turn a date expression into a concrete date relative to ``reference``.

    Args:
        expression: Recognized date expression
        reference: Date that relative expressions are counted from
        settings: Parser settings (two-digit year pivot)

    Returns:
        The resolved calendar date

    Raises:
        InvalidCalendarDateError: the expression names a day that does not exist
    """
    if isinstance(expression, InNDays):
        return reference + timedelta(days=expression.offset)

    if isinstance(expression, DayInNWeeks):
        difference = (expression.day.value - Weekday.of(reference).value) % 7
        difference += 7 * expression.week_offset
        return reference + timedelta(days=difference)

    if isinstance(expression, InNMonths):
        # relativedelta rolls the year over and clamps to the month's last day
        return reference + relativedelta(months=expression.offset)

    if isinstance(expression, InMonth):
        return _calendar_date(reference.year, expression.month, expression.day)

    if isinstance(expression, InYear):
        pivot = (settings or ParserSettings()).two_digit_year_pivot
        return _calendar_date(expand_year(expression.year, pivot), expression.month, expression.day)

    raise TypeError(f"Unsupported date expression: {expression!r}")


def parse_date(
    text: str,
    reference: Optional[date] = None,
    settings: Optional[ParserSettings] = None,
) -> Optional[date]:
    """Find a date in ``text`` and resolve it.

    Args:
        text: Input text, e.g. "Lunch on June 5th"
        reference: Date that relative expressions are counted from
                   (defaults to today)
        settings: Parser settings

    Returns:
        The resolved date, or None if no usable date was found
    """
    if reference is None:
        reference = date.today()

    try:
        expression = recognize_date(text)
        if expression is None:
            return None
        return resolve_date(expression, reference, settings)
    except MalformedExpressionError as e:
        logger.debug(f"Ignoring unusable date in {text!r}: {e}")
        return None
