"""Shared test configuration."""

from __future__ import annotations

import pytest


_ENV_OVERRIDES = (
    "EVENTPARSE_DEFAULT_DURATION_MINUTES",
    "EVENTPARSE_TWO_DIGIT_YEAR_PIVOT",
    "EVENTPARSE_DEFAULT_SUMMARY",
)


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's EVENTPARSE_* variables out of the tests."""
    for name in _ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)
