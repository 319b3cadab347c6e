"""Shared test fixtures for periodpicker tests."""

import pytest
from concurrent.futures import Future
from datetime import datetime, timezone

from periodpicker.config import PickerConfig
from periodpicker.period import Period


UTC = timezone.utc


class FakeRangePicker:
    """Stand-in for the modal calendar.

    Each call hands out a fresh pending Future; the test completes it later
    to play the user confirming or dismissing the picker.

    Example:
        picker = FakeRangePicker()
        future = controller.select_index(2)
        picker.last.set_result(CustomRangeCancelled())
    """

    def __init__(self):
        self.futures: list[Future] = []

    def __call__(self) -> Future:
        future = Future()
        self.futures.append(future)
        return future

    @property
    def last(self) -> Future:
        return self.futures[-1]

    @property
    def calls(self) -> int:
        return len(self.futures)


@pytest.fixture
def asof():
    """Fixed reference instant: 2025-03-31 12:00 UTC (last day of a 31-day month)."""
    return datetime(2025, 3, 31, 12, 0, tzinfo=UTC)


@pytest.fixture
def config():
    """Default configuration, independent of PERIODPICKER_* environment variables."""
    return PickerConfig()


@pytest.fixture
def picker():
    return FakeRangePicker()


@pytest.fixture
def templates():
    """Caller-owned option list: two dynamic periods, a fixed range, the custom sentinel."""
    return [
        Period.seconds("Last 7 Days", -7 * 86400),
        Period.months("Last Month", -1),
        Period.explicit("Q1", datetime(2025, 1, 1, tzinfo=UTC), datetime(2025, 3, 31, tzinfo=UTC)),
        Period.custom("Custom"),
    ]
