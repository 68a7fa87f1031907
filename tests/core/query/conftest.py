"""Fixtures for query tokenizer tests."""

import time
from datetime import datetime, timedelta, timezone

import pytest


@pytest.fixture
def tz():
    """Return a fixed-offset zone so date literals are deterministic."""
    return timezone(timedelta(hours=-4), "EDT")


@pytest.fixture
def at(tz):
    """Return a function building an aware datetime in the fixed zone."""

    def _at(year: int, month: int, day: int, hour: int = 0, minute: int = 0):
        return datetime(year, month, day, hour, minute, tzinfo=tz)

    return _at


@pytest.fixture
def local_zone(monkeypatch):
    """Return a function that switches the process's local zone.

    The original zone is restored after the test.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    def _local_zone(name: str) -> None:
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield _local_zone
    monkeypatch.undo()
    time.tzset()
