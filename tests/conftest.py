"""Pytest fixtures for all tests."""

from datetime import datetime, timezone

import pytest

from chronoid.config import IDConfig
from chronoid.utils.timestamp import to_nanos

START = datetime(2024, 1, 1, tzinfo=timezone.utc)
START_NS = to_nanos(START)


class FakeClock:
    """Clock returning a settable nanosecond timestamp."""

    def __init__(self, now_ns):
        self.now_ns = now_ns

    def __call__(self):
        return self.now_ns

    def advance(self, nanos):
        self.now_ns += nanos


@pytest.fixture
def start():
    """Start instant shared by the test configurations."""
    return START


@pytest.fixture
def start_ns():
    return START_NS


@pytest.fixture
def clock():
    """Clock frozen at the configured start."""
    return FakeClock(START_NS)


@pytest.fixture
def decimal_config():
    """Decimal alphabet, one identifier per second."""
    return IDConfig(
        alphabet="0123456789",
        length=14,
        timestamp_start=START,
        timestamp_level="second",
        max_sortable_rate="1/s",
    )


@pytest.fixture
def hundred_config():
    """Decimal alphabet, a hundred identifiers per second."""
    return IDConfig(
        alphabet="0123456789",
        length=16,
        timestamp_start=START,
        timestamp_level="second",
        max_sortable_rate="100/s",
    )
