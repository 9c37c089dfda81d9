"""Summary extraction: what is left of the text once dates and times are gone."""

from __future__ import annotations

import re

from eventparse.temporal.vocabulary import MONTH_NAME, MONTH_WORD, WEEKDAY_NAME, WEEKDAY_WORD

# Leading prepositions/articles that belong to the expression they precede.
_LEAD = r"(?:\b(?:at|on|in|from|by)\s+)?"

# One side of a "<x> to <y>" span: clock time, numeric date, month date,
# weekday or casual phrase. No capturing groups.
_SPAN_TOKEN = (
    r"(?:\b\d{1,2}(?::\d{2})?(?:/\d{1,2}(?:/\d{2,4})?)?(?:\s?[ap]m?)?\b"
    r"|" + MONTH_WORD + r"(?:\.?\s+\d{1,2}(?:st|nd|rd|th)?\b)?"
    r"|" + WEEKDAY_WORD
    + r"|\b(?:morning|afternoon|evening|tonight|noon|midnight)\b)"
)

# "9/1 to 9/8", "10am to noon", "mon to fri": drops the separator word and
# keeps the left side for the patterns below.
SPAN_TO_PATTERN = re.compile(
    r"(" + _SPAN_TOKEN + r")\s+to\s+(?=" + _SPAN_TOKEN + r")", re.IGNORECASE
)

SUMMARY_STRIP_PATTERNS = [
    # in 2 days, in 3 months, in 10 mins, in 2 hours
    re.compile(
        r"\bin\s+\d{1,3}\s*(?:days?|months?|minutes?|mins?|hours?|hrs?)\b",
        re.IGNORECASE,
    ),
    # 6/1, 12/15/19, 12/15/2019
    re.compile(_LEAD + r"\b\d{1,2}/\d{1,2}(?:/(?:\d{4}|\d{2}))?\b", re.IGNORECASE),
    # June 5th, Jul 4 2019
    re.compile(
        _LEAD + MONTH_NAME + r"\.?\s+\d{1,2}(?:st|nd|rd|th)?\b(?:,?\s+\d{4}\b)?",
        re.IGNORECASE,
    ),
    # next friday, last month
    re.compile(
        _LEAD + r"\b(?:next|last|this)\s+(?:" + WEEKDAY_NAME + r"|month\b)",
        re.IGNORECASE,
    ),
    # saturday
    re.compile(_LEAD + WEEKDAY_NAME, re.IGNORECASE),
    # today, tomorrow, yesterday
    re.compile(r"\b(?:today|tomorrow|yesterday)\b", re.IGNORECASE),
    # in the morning, this afternoon, at noon
    re.compile(
        r"(?:\b(?:at|in|this|by)\s+(?:the\s+)?)?"
        r"\b(?:morning|afternoon|evening|tonight|noon|midnight)\b",
        re.IGNORECASE,
    ),
    # 7, 7pm, 10:30am, 2 pm; "7 a la carte" keeps its article
    re.compile(
        _LEAD + r"\b\d{1,2}(?::\d{2})?\s?(?:[ap]m|(?<=\d)[ap]|[ap](?!\s+[a-z]))?\b",
        re.IGNORECASE,
    ),
    # span separators, but not hyphenated words like "follow-up"
    re.compile(r"(?<![A-Za-z])-|-(?![A-Za-z])"),
]

_WHITESPACE = re.compile(r"\s+")
_EDGE_PUNCTUATION = " ,;:"


def extract_summary(text: str) -> str:
    """Remove every recognizable date/time expression from ``text``.

    Args:
        text: Original event text, e.g. "Lunch at noon next Friday"

    Returns:
        The remaining words, trimmed ("Lunch"); may be empty
    """
    text = SPAN_TO_PATTERN.sub(r"\1 ", text)
    for pattern in SUMMARY_STRIP_PATTERNS:
        text = pattern.sub(" ", text)
    return _WHITESPACE.sub(" ", text).strip(_EDGE_PUNCTUATION)
