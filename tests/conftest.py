"""Shared test fixtures."""

import pytest

from pyduration import Duration


@pytest.fixture
def zero():
    return Duration()


@pytest.fixture
def workday_duration():
    """A duration carried on an 8-hour day."""
    return Duration("1d 2h", hours_per_day=8)
