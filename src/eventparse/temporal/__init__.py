"""Temporal recognition for short event descriptions.

Turns informal English such as "Lunch at 1pm tomorrow" or
"Welcome Week 9/1-9/8" into dates, times of day and event spans.

Layers:
- Recognizers: text -> unresolved expression (or None)
- Resolvers: expression + reference instant -> concrete date/time
- Composition: text -> EventSpan with a summary
"""

# Models
from eventparse.temporal.models import (
    Absolute,
    DateExpression,
    DayInNWeeks,
    EventShape,
    EventSpan,
    InMonth,
    InNDays,
    InNHours,
    InNMinutes,
    InNMonths,
    InYear,
    MonthOfYear,
    TimeExpression,
    Weekday,
)

# Recognizer framework
from eventparse.temporal.recognizable import PatternChain, Recognizer

# Vocabulary
from eventparse.temporal.vocabulary import (
    MonthRecognizer,
    WeekdayRecognizer,
    recognize_month,
    recognize_weekday,
)

# Dates
from eventparse.temporal.dates import (
    expand_year,
    parse_date,
    recognize_date,
    resolve_date,
)

# Times
from eventparse.temporal.times import (
    parse_time,
    recognize_time,
    resolve_time,
)

# Events
from eventparse.temporal.events import EventSpanBuilder, build_event_span
from eventparse.temporal.summary import extract_summary

__all__ = [
    # Models
    "Absolute",
    "DateExpression",
    "DayInNWeeks",
    "EventShape",
    "EventSpan",
    "InMonth",
    "InNDays",
    "InNHours",
    "InNMinutes",
    "InNMonths",
    "InYear",
    "MonthOfYear",
    "TimeExpression",
    "Weekday",
    # Recognizer framework
    "PatternChain",
    "Recognizer",
    # Vocabulary
    "MonthRecognizer",
    "WeekdayRecognizer",
    "recognize_month",
    "recognize_weekday",
    # Dates
    "expand_year",
    "parse_date",
    "recognize_date",
    "resolve_date",
    # Times
    "parse_time",
    "recognize_time",
    "resolve_time",
    # Events
    "EventSpanBuilder",
    "build_event_span",
    "extract_summary",
]
