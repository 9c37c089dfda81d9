"""Tests for summary extraction."""

import pytest

from eventparse.temporal.summary import extract_summary


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Dinner at 7", "Dinner"),
        ("Lunch 1-2pm 6/10", "Lunch"),
        ("Welcome Week 9/1-9/8", "Welcome Week"),
        ("Lunch at noon next Friday", "Lunch"),
        ("Flight on saturday at noon", "Flight"),
        ("Dinner with friends tomorrow", "Dinner with friends"),
        ("My Birthday April 5", "My Birthday"),
        ("April 5 My Birthday", "My Birthday"),
        ("America's Birthday July 4th", "America's Birthday"),
        ("6pm Next Friday Doctor's Appointment", "Doctor's Appointment"),
        ("Concert 7 to 9", "Concert"),
        ("Call mom in 2 hours", "Call mom"),
        ("Lunch at 1pm with Bob", "Lunch with Bob"),
        ("Senior Week 6/17-6/21", "Senior Week"),
    ],
)
def test_dates_and_times_are_removed(text, expected):
    assert extract_summary(text) == expected


def test_unrecognized_text_is_kept():
    assert extract_summary("gibberish text") == "gibberish text"


def test_hyphenated_words_are_kept():
    assert extract_summary("Follow-up call at 3pm") == "Follow-up call"


def test_prepositions_without_expression_are_kept():
    assert extract_summary("Dinner in Paris") == "Dinner in Paris"


def test_to_without_number_is_kept():
    assert extract_summary("Drive to Boston tomorrow") == "Drive to Boston"


def test_only_time_leaves_empty_summary():
    assert extract_summary("tomorrow at 5") == ""


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Welcome Week 9/1 to 9/8", "Welcome Week"),
        ("Meeting 10am to noon", "Meeting"),
        ("Retreat mon to fri", "Retreat"),
        ("Vacation June 5 to June 12", "Vacation"),
    ],
)
def test_to_between_dates_and_times_is_removed(text, expected):
    assert extract_summary(text) == expected


def test_to_before_a_number_after_a_word_is_kept():
    assert extract_summary("Walk to 5th avenue") == "Walk to 5th avenue"


def test_article_after_bare_hour_is_kept():
    assert extract_summary("Dinner at 7 a la carte") == "Dinner a la carte"
