"""Tests for the pattern chain shared by every recognizer."""

import pytest

from eventparse.errors import MalformedDateError, MalformedTimeError
from eventparse.temporal.recognizable import PatternChain


def _never(text):
    return None


def _always(text):
    return "found"


def _malformed_date(text):
    raise MalformedDateError("bad date")


def _malformed_time(text):
    raise MalformedTimeError("bad time")


class TestPatternChain:
    """Ordered, short-circuit evaluation of pattern attempts."""

    def test_first_value_wins(self):
        chain = PatternChain("test", [_never, lambda text: "first", lambda text: "second"])
        assert chain.recognize("anything") == "first"

    def test_no_match_returns_none(self):
        chain = PatternChain("test", [_never, _never])
        assert chain.recognize("anything") is None

    def test_later_match_beats_earlier_malformed(self):
        chain = PatternChain("test", [_malformed_date, _always])
        assert chain.recognize("anything") == "found"

    def test_malformed_raised_when_nothing_matches(self):
        chain = PatternChain("test", [_never, _malformed_date, _never])
        with pytest.raises(MalformedDateError):
            chain.recognize("anything")

    def test_first_malformed_error_is_reported(self):
        chain = PatternChain("test", [_malformed_time, _malformed_date])
        with pytest.raises(MalformedTimeError):
            chain.recognize("anything")

    def test_attempts_after_a_match_are_not_run(self):
        calls = []

        def tracked(text):
            calls.append(text)
            return None

        chain = PatternChain("test", [_always, tracked])
        chain.recognize("anything")

        assert calls == []

    def test_label_in_repr(self):
        chain = PatternChain("date", [])
        assert chain.label == "date"
        assert "date" in repr(chain)
