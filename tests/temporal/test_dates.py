"""Tests for date recognition, resolution and parse_date."""

from datetime import date, timedelta

import pytest

from eventparse.configuration.settings import ParserSettings
from eventparse.errors import InvalidCalendarDateError, MalformedDateError
from eventparse.temporal.dates import expand_year, parse_date, recognize_date, resolve_date
from eventparse.temporal.models import (
    DayInNWeeks,
    InMonth,
    InNDays,
    InNMonths,
    InYear,
    MonthOfYear,
    Weekday,
)


# ---------------------------------------------------------------------------
# Recognition
# ---------------------------------------------------------------------------


class TestDateRecognition:
    """Text to DateExpression."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("today", InNDays(0)),
            ("tomorrow", InNDays(1)),
            ("yesterday", InNDays(-1)),
            ("Dinner Tomorrow", InNDays(1)),
        ],
    )
    def test_keywords(self, text, expected):
        assert recognize_date(text) == expected

    def test_in_n_days(self):
        assert recognize_date("in 3 days") == InNDays(3)
        assert recognize_date("in 1 day") == InNDays(1)

    def test_numeric_month_day(self):
        assert recognize_date("6/15") == InMonth(MonthOfYear.JUNE, 15)

    def test_numeric_with_two_digit_year(self):
        assert recognize_date("12/15/19") == InYear(MonthOfYear.DECEMBER, 15, 19)

    def test_numeric_with_four_digit_year(self):
        assert recognize_date("12/15/2019") == InYear(MonthOfYear.DECEMBER, 15, 2019)

    @pytest.mark.parametrize("text", ["June 5th", "June 5", "jun 5", "Party on June 5th"])
    def test_month_name_and_day(self, text):
        assert recognize_date(text) == InMonth(MonthOfYear.JUNE, 5)

    def test_month_name_day_and_year(self):
        assert recognize_date("July 4th, 2019") == InYear(MonthOfYear.JULY, 4, 2019)
        assert recognize_date("July 4 2019") == InYear(MonthOfYear.JULY, 4, 2019)

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("next thursday", DayInNWeeks(1, Weekday.THURSDAY)),
            ("last wed", DayInNWeeks(-1, Weekday.WEDNESDAY)),
            ("this sat", DayInNWeeks(0, Weekday.SATURDAY)),
        ],
    )
    def test_qualified_weekday(self, text, expected):
        assert recognize_date(text) == expected

    def test_in_n_months(self):
        assert recognize_date("in 2 months") == InNMonths(2)

    def test_qualified_month(self):
        assert recognize_date("next month") == InNMonths(1)
        assert recognize_date("last month") == InNMonths(-1)
        assert recognize_date("this month") == InNMonths(0)

    def test_bare_weekday(self):
        assert recognize_date("Flight on saturday") == DayInNWeeks(0, Weekday.SATURDAY)

    def test_no_date(self):
        assert recognize_date("gibberish text") is None


class TestDateRecognitionPriority:
    """Earlier patterns win over later ones."""

    def test_keyword_before_numeric(self):
        assert recognize_date("tomorrow 6/15") == InNDays(1)

    def test_full_numeric_before_month_day(self):
        assert isinstance(recognize_date("1/2/20"), InYear)

    def test_qualified_before_bare_weekday(self):
        assert recognize_date("next friday") == DayInNWeeks(1, Weekday.FRIDAY)


class TestMalformedDates:
    """Date-like text with impossible values."""

    def test_month_out_of_range(self):
        with pytest.raises(MalformedDateError):
            recognize_date("13/45")

    def test_day_out_of_range(self):
        with pytest.raises(MalformedDateError):
            recognize_date("6/45")

    def test_month_name_day_out_of_range(self):
        with pytest.raises(MalformedDateError):
            recognize_date("June 40")

    def test_later_pattern_still_matches(self):
        assert recognize_date("13/45 on saturday") == DayInNWeeks(0, Weekday.SATURDAY)


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


class TestDateResolution:
    """DateExpression plus reference date to a calendar date."""

    @pytest.mark.parametrize(
        "reference",
        [date(2020, 1, 31), date(2020, 2, 29), date(2019, 12, 31), date(2020, 6, 5)],
    )
    def test_in_n_days(self, reference):
        assert resolve_date(InNDays(0), reference) == reference
        assert resolve_date(InNDays(1), reference) == reference + timedelta(days=1)

    def test_in_n_days_crosses_month(self):
        assert resolve_date(InNDays(1), date(2020, 1, 31)) == date(2020, 2, 1)

    def test_next_weekday(self, wednesday):
        assert resolve_date(DayInNWeeks(1, Weekday.THURSDAY), wednesday) == wednesday + timedelta(days=8)

    def test_this_weekday_same_day(self, wednesday):
        assert resolve_date(DayInNWeeks(0, Weekday.WEDNESDAY), wednesday) == wednesday

    def test_this_weekday_earlier_in_week_moves_forward(self, wednesday):
        assert resolve_date(DayInNWeeks(0, Weekday.MONDAY), wednesday) == date(2020, 6, 8)

    def test_last_weekday(self, wednesday):
        assert resolve_date(DayInNWeeks(-1, Weekday.WEDNESDAY), wednesday) == date(2020, 5, 27)

    def test_in_n_months(self):
        assert resolve_date(InNMonths(2), date(2020, 6, 5)) == date(2020, 8, 5)

    def test_in_n_months_rolls_year(self):
        assert resolve_date(InNMonths(2), date(2020, 11, 15)) == date(2021, 1, 15)
        assert resolve_date(InNMonths(-1), date(2020, 1, 10)) == date(2019, 12, 10)

    def test_in_n_months_clamps_day(self):
        assert resolve_date(InNMonths(1), date(2020, 1, 31)) == date(2020, 2, 29)

    def test_in_month_uses_reference_year(self, friday):
        assert resolve_date(InMonth(MonthOfYear.JUNE, 15), friday) == date(2020, 6, 15)

    def test_in_year_two_digit_pivot(self, friday):
        assert resolve_date(InYear(MonthOfYear.DECEMBER, 15, 19), friday) == date(2019, 12, 15)
        assert resolve_date(InYear(MonthOfYear.DECEMBER, 15, 75), friday) == date(1975, 12, 15)

    def test_in_year_literal_when_pivot_disabled(self, friday):
        settings = ParserSettings(two_digit_year_pivot=None)
        resolved = resolve_date(InYear(MonthOfYear.DECEMBER, 15, 19), friday, settings)
        assert resolved == date(19, 12, 15)

    def test_in_year_four_digit(self, friday):
        assert resolve_date(InYear(MonthOfYear.JULY, 4, 2019), friday) == date(2019, 7, 4)

    def test_nonexistent_day(self, friday):
        with pytest.raises(InvalidCalendarDateError):
            resolve_date(InMonth(MonthOfYear.FEBRUARY, 30), friday)

    def test_nonexistent_day_is_malformed_date(self):
        assert issubclass(InvalidCalendarDateError, MalformedDateError)

    def test_unsupported_expression(self, friday):
        with pytest.raises(TypeError):
            resolve_date("tomorrow", friday)


class TestExpandYear:
    def test_pivot(self):
        assert expand_year(0) == 2000
        assert expand_year(49) == 2049
        assert expand_year(50) == 1950
        assert expand_year(99) == 1999

    def test_custom_pivot(self):
        assert expand_year(30, pivot=25) == 1930

    def test_four_digit_years_untouched(self):
        assert expand_year(2019) == 2019

    def test_no_pivot(self):
        assert expand_year(19, pivot=None) == 19


# ---------------------------------------------------------------------------
# parse_date
# ---------------------------------------------------------------------------


class TestParseDate:
    def test_relative(self, wednesday):
        assert parse_date("next friday", wednesday) == date(2020, 6, 12)

    def test_absolute(self, friday):
        assert parse_date("Lunch 6/10", friday) == date(2020, 6, 10)

    def test_no_date(self, friday):
        assert parse_date("gibberish text", friday) is None

    def test_malformed_degrades_to_none(self, friday):
        assert parse_date("13/45", friday) is None

    def test_nonexistent_day_degrades_to_none(self, friday):
        assert parse_date("Feb 30", friday) is None

    def test_defaults_to_today(self):
        assert parse_date("today") == date.today()
