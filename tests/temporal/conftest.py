"""Test fixtures for temporal recognition tests.

Provides fixed reference instants so relative expressions resolve the same
way on every run:
- friday: 2020-06-05
- wednesday: 2020-06-03
- noon_friday: 2020-06-05 12:00
"""

from datetime import date, datetime

import pytest


@pytest.fixture
def friday():
    return date(2020, 6, 5)


@pytest.fixture
def wednesday():
    return date(2020, 6, 3)


@pytest.fixture
def noon_friday():
    return datetime(2020, 6, 5, 12, 0)
