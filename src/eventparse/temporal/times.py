"""Time-of-day recognition and resolution.

Recognition tries, in order: relative minutes ("in 5 mins"), relative hours
("in 2 hours"), explicit clock times ("10:30am", "7", "2 pm") and casual
phrases ("noon", "tonight").

Clock times without a meridiem follow a daytime scheduling bias: hours 1-8
are read as PM ("dinner at 7"), hours 9-12 as AM/noon ("meeting at 10").
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, time, timedelta
from typing import Optional

from eventparse.errors import MalformedExpressionError, MalformedTimeError
from eventparse.temporal.dates import (
    IN_N_DAYS_PATTERN,
    IN_N_MONTHS_PATTERN,
    MONTH_DAY_PATTERN,
    NUMERIC_DATE_PATTERN,
    NUMERIC_DATE_YEAR_PATTERN,
)
from eventparse.temporal.models import Absolute, InNHours, InNMinutes, TimeExpression
from eventparse.temporal.recognizable import PatternChain

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Casual Phrase Mapping
# ---------------------------------------------------------------------------

# Checked in this order; the first phrase present wins.
CASUAL_PHRASES = {
    "morning": 9,
    "afternoon": 14,
    "evening": 18,
    "tonight": 21,
    "noon": 12,
    "midnight": 0,
}

# Hours below this without am/pm are taken as PM.
PM_BIAS_CUTOFF_HOUR = 9


# ---------------------------------------------------------------------------
# Regular Expression Patterns
# ---------------------------------------------------------------------------

IN_N_MINUTES_PATTERN = re.compile(
    r"\bin\s+(?P<num>\d{1,3})\s*(?:minutes?|mins?)\b", re.IGNORECASE
)

IN_N_HOURS_PATTERN = re.compile(
    r"\bin\s+(?P<num>\d{1,3})\s*(?:hours?|hrs?)\b", re.IGNORECASE
)

# A spaced lone "a"/"p" before another word is an article, not a meridiem ("7 a la carte").
CLOCK_TIME_PATTERN = re.compile(
    r"\b(?P<hour>\d{1,2})(?::(?P<minute>\d{2}))?\s?(?P<meridiem>[ap]m|(?<=\d)[ap]|[ap](?!\s+[a-z]))?\b",
    re.IGNORECASE,
)

CASUAL_PHRASE_PATTERNS = [
    (re.compile(rf"\b{phrase}\b", re.IGNORECASE), hour)
    for phrase, hour in CASUAL_PHRASES.items()
]

# Date fragments removed before looking for a clock time, most specific first.
DATE_FRAGMENT_PATTERNS = (
    NUMERIC_DATE_YEAR_PATTERN,
    NUMERIC_DATE_PATTERN,
    MONTH_DAY_PATTERN,
    IN_N_DAYS_PATTERN,
    IN_N_MONTHS_PATTERN,
)


def strip_date_fragments(text: str) -> str:
    """Blank out numeric date fragments so "6/1" is never read as 6pm."""
    for pattern in DATE_FRAGMENT_PATTERNS:
        text = pattern.sub(" ", text)
    return text


def to_24_hour(hour: int, meridiem: Optional[str]) -> int:
    """Apply am/pm, or the daytime bias when no meridiem was written."""
    if meridiem:
        if meridiem.lower().startswith("p"):
            return hour if hour == 12 else hour + 12
        return 0 if hour == 12 else hour
    if 1 <= hour < PM_BIAS_CUTOFF_HOUR:
        return hour + 12
    return hour


def has_meridiem(text: str) -> bool:
    """True when the first clock time in ``text`` spells out am/pm."""
    match = CLOCK_TIME_PATTERN.search(strip_date_fragments(text))
    return bool(match and match.group("meridiem"))


# ---------------------------------------------------------------------------
# Pattern Attempts
# ---------------------------------------------------------------------------


def parse_in_n_minutes(text: str) -> Optional[TimeExpression]:
    """in 5 mins, in 10 minutes"""
    match = IN_N_MINUTES_PATTERN.search(text)
    if not match:
        return None
    return InNMinutes(int(match.group("num")))


def parse_in_n_hours(text: str) -> Optional[TimeExpression]:
    """in 2 hours, in 1 hr"""
    match = IN_N_HOURS_PATTERN.search(text)
    if not match:
        return None
    return InNHours(int(match.group("num")))


def _clock_time(match: re.Match) -> Absolute:
    hour = int(match.group("hour"))
    minute = int(match.group("minute") or 0)
    meridiem = match.group("meridiem")

    if minute > 59:
        raise MalformedTimeError(
            f"Minute {minute} is out of range", details={"text": match.group(0)}
        )
    if meridiem and not 1 <= hour <= 12:
        raise MalformedTimeError(
            f"Hour {hour} cannot take {meridiem!r}", details={"text": match.group(0)}
        )
    if hour > 23:
        raise MalformedTimeError(
            f"Hour {hour} is out of range", details={"text": match.group(0)}
        )
    return Absolute(to_24_hour(hour, meridiem), minute)


def parse_absolute_time(text: str) -> Optional[TimeExpression]:
    """12pm, 12, 10:30, 2:30p, 7 pm"""
    malformed: Optional[MalformedTimeError] = None

    for match in CLOCK_TIME_PATTERN.finditer(strip_date_fragments(text)):
        try:
            return _clock_time(match)
        except MalformedTimeError as exc:
            if malformed is None:
                malformed = exc

    if malformed is not None:
        raise malformed
    return None


def parse_casual_time(text: str) -> Optional[TimeExpression]:
    """morning, afternoon, evening, tonight, noon, midnight"""
    for pattern, hour in CASUAL_PHRASE_PATTERNS:
        if pattern.search(text):
            return Absolute(hour, 0)
    return None


TIME_PATTERN_ATTEMPTS = (
    parse_in_n_minutes,
    parse_in_n_hours,
    parse_absolute_time,
    parse_casual_time,
)

time_recognizer: PatternChain[TimeExpression] = PatternChain("time of day", TIME_PATTERN_ATTEMPTS)


def recognize_time(text: str) -> Optional[TimeExpression]:
    """Recognize the first time-of-day expression in ``text``.

    Returns:
        The expression, or None when the text holds no time.

    Raises:
        MalformedTimeError: time-like text with an impossible hour or minute.
    """
    return time_recognizer.recognize(text)


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def time_offset(expression: TimeExpression) -> Optional[timedelta]:
    """Duration carried by a relative expression, None for clock times."""
    if isinstance(expression, InNHours):
        return timedelta(hours=expression.offset)
    if isinstance(expression, InNMinutes):
        return timedelta(minutes=expression.offset)
    return None


def resolve_time(expression: TimeExpression, reference: time) -> time:
    """Turn a time expression into a time of day relative to ``reference``.

    Relative offsets wrap around midnight; the day change is not reported.
    """
    if isinstance(expression, Absolute):
        return expression.to_time()

    offset = time_offset(expression)
    if offset is None:
        raise TypeError(f"Unsupported time expression: {expression!r}")

    anchor = datetime.combine(date(2000, 1, 1), reference)
    return (anchor + offset).time().replace(tzinfo=reference.tzinfo)


def parse_time(text: str, reference: Optional[time] = None) -> Optional[time]:
    """Find a time of day in ``text`` and resolve it.

    Args:
        text: Input text, e.g. "6:30pm dinner"
        reference: Time that relative expressions are counted from
                   (defaults to now)

    Returns:
        The resolved time, or None if no usable time was found
    """
    if reference is None:
        reference = datetime.now().time()

    try:
        expression = recognize_time(text)
        if expression is None:
            return None
        return resolve_time(expression, reference)
    except MalformedExpressionError as e:
        logger.debug(f"Ignoring unusable time in {text!r}: {e}")
        return None
