"""Event span composition.

Combines date and time recognition into the temporal shape of an event:

- "Lunch 1-2pm 6/10"      -> start and end time on a date
- "Concert 7 to 9"        -> start and end time on the reference date
- "Welcome Week 9/1-9/8"  -> whole-day range
- "Dinner at 7"           -> start time, end one default duration later
- "America's Birthday 7/4" -> whole day
- anything else           -> whole day on the reference date

The summary is the text with every recognizable date/time removed.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Iterator, Optional, Tuple

from eventparse.configuration.settings import ParserSettings
from eventparse.errors import MalformedExpressionError
from eventparse.temporal.dates import parse_date
from eventparse.temporal.models import EventShape, EventSpan, TimeExpression
from eventparse.temporal.summary import extract_summary
from eventparse.temporal.times import (
    has_meridiem,
    parse_time,
    recognize_time,
    resolve_time,
    time_offset,
)

logger = logging.getLogger(__name__)


# "7-9pm", "9/1-9/8", "10:30 to 11:30"
SPAN_SEPARATOR_PATTERN = re.compile(
    r"(?P<start>[/:\w]+)\s?(?:-|\bto\b)\s?(?P<end>[/:\w]+)", re.IGNORECASE
)


@dataclass(frozen=True)
class _Reference:
    """Reference instant split into the parts each resolver needs."""

    instant: datetime

    @property
    def day(self) -> date:
        return self.instant.date()

    @property
    def clock(self) -> time:
        return self.instant.timetz()

    def at(self, day: date, clock: time) -> datetime:
        return datetime.combine(day, clock.replace(tzinfo=None), tzinfo=self.instant.tzinfo)


def _span_candidates(text: str) -> Iterator[Tuple[str, str]]:
    for match in SPAN_SEPARATOR_PATTERN.finditer(text):
        yield match.group("start"), match.group("end")


def _recognize_time_quietly(text: str) -> Optional[TimeExpression]:
    try:
        return recognize_time(text)
    except MalformedExpressionError as e:
        logger.debug(f"Ignoring unusable time in {text!r}: {e}")
        return None


class EventSpanBuilder:
    """Builds ``EventSpan`` values relative to a reference instant.

    Holds only settings; every call to ``build`` is independent.
    """

    def __init__(self, settings: Optional[ParserSettings] = None):
        self.settings = settings or ParserSettings()

    @property
    def default_duration(self) -> timedelta:
        return timedelta(minutes=self.settings.default_duration_minutes)

    def build(self, text: str, reference: Optional[datetime] = None) -> EventSpan:
        """Parse ``text`` into an event span.

        Args:
            text: Event text, e.g. "Lunch at 1pm tomorrow"
            reference: Instant relative expressions are resolved against
                       (defaults to now, local time)

        Returns:
            EventSpan; never raises for unrecognizable input
        """
        if reference is None:
            reference = datetime.now()
        ref = _Reference(reference)
        summary = extract_summary(text)

        span = self._from_separator(text, ref, summary)
        if span is not None:
            return span

        span = self._from_start_time(text, ref, summary)
        if span is not None:
            return span

        found_date = self._parse_date(text, ref)
        if found_date is not None:
            return EventSpan(
                shape=EventShape.ALL_DAY,
                summary=summary,
                start_date=found_date,
                end_date=found_date,
            )

        return EventSpan(
            shape=EventShape.UNKNOWN,
            summary=summary,
            start_date=ref.day,
            end_date=ref.day,
        )

    # -----------------------------------------------------------------------
    # Private: Shapes
    # -----------------------------------------------------------------------

    def _from_separator(self, text: str, ref: _Reference, summary: str) -> Optional[EventSpan]:
        """Start/end pairs split around "-" or "to"; the first usable pair wins."""
        for start_text, end_text in _span_candidates(text):
            start_time = parse_time(start_text, ref.clock)
            end_time = parse_time(end_text, ref.clock) if start_time is not None else None

            if start_time is not None and end_time is not None:
                found_date = self._parse_date(text, ref)
                day = found_date if found_date is not None else ref.day
                start = ref.at(day, start_time)
                end = self._range_end(start, ref.at(day, end_time), end_text)
                return EventSpan(
                    shape=(
                        EventShape.STARTS_AND_ENDS_WITH_DATE
                        if found_date is not None
                        else EventShape.STARTS_AND_ENDS
                    ),
                    summary=summary,
                    start=start,
                    end=end,
                )

            start_date = self._parse_date(start_text, ref)
            end_date = self._parse_date(end_text, ref) if start_date is not None else None
            if start_date is not None and end_date is not None:
                return EventSpan(
                    shape=EventShape.ALL_DAY_RANGE,
                    summary=summary,
                    start_date=start_date,
                    end_date=end_date,
                )

            logger.debug(f"Separator candidate {start_text!r}/{end_text!r} is not a span")
        return None

    @staticmethod
    def _range_end(start: datetime, end: datetime, end_text: str) -> datetime:
        """Place an end that reads earlier than its start.

        "7 to 9" means 19:00-21:00: an end without am/pm first moves to the
        afternoon of the same day. Anything still before the start ("10pm-1am")
        belongs to the next day.
        """
        if end < start and not has_meridiem(end_text):
            afternoon = end + timedelta(hours=12)
            if afternoon > start and afternoon.date() == start.date():
                return afternoon
        if end < start:
            return end + timedelta(days=1)
        return end

    def _from_start_time(self, text: str, ref: _Reference, summary: str) -> Optional[EventSpan]:
        expression = _recognize_time_quietly(text)
        if expression is None:
            return None

        found_date = self._parse_date(text, ref)
        offset = time_offset(expression)

        if found_date is None and offset is not None:
            # "in 2 hours" counts from the full instant so it can cross midnight
            start = ref.instant + offset
        else:
            day = found_date if found_date is not None else ref.day
            start = ref.at(day, resolve_time(expression, ref.clock))

        return EventSpan(
            shape=EventShape.STARTS_WITH_DATE if found_date is not None else EventShape.STARTS,
            summary=summary,
            start=start,
            end=start + self.default_duration,
        )

    def _parse_date(self, text: str, ref: _Reference) -> Optional[date]:
        return parse_date(text, ref.day, self.settings)


def build_event_span(
    text: str,
    reference: Optional[datetime] = None,
    settings: Optional[ParserSettings] = None,
) -> EventSpan:
    """Parse ``text`` into an ``EventSpan`` (see ``EventSpanBuilder.build``)."""
    return EventSpanBuilder(settings).build(text, reference)
