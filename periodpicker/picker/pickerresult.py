"""Custom-range picker results.

The external range picker (a modal calendar, a dialog, a test double)
answers with either a chosen range or a cancellation. Older pickers hand
back a mapping of millisecond epoch values under one of two key pairs;
``parse_custom_range_payload`` folds both into ``CustomRangeResolved``.

All instants are UTC.
"""

from __future__ import annotations
from concurrent.futures import Future
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Union

from periodpicker.period.periodnormalize import as_utc, from_epoch_millis

# Key pairs used by the two legacy pickers, in lookup order
_PAYLOAD_KEYS = (
    ("startDate", "endDate"),
    ("startTimeInMillis", "endTimeInMillis"),
)


@dataclass(frozen=True)
class CustomRangeResolved:
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", as_utc(self.start))
        object.__setattr__(self, "end", as_utc(self.end))


@dataclass(frozen=True)
class CustomRangeCancelled:
    pass


CustomRangeResult = Union[CustomRangeResolved, CustomRangeCancelled]
CustomRangeProvider = Callable[[], "Future[CustomRangeResult]"]


def parse_custom_range_payload(payload: Optional[Mapping[str, Any]]) -> CustomRangeResult:
    """
    Normalize a legacy picker payload.

    Args:
        payload: Mapping with ``startDate``/``endDate`` or
                 ``startTimeInMillis``/``endTimeInMillis`` (ms since epoch),
                 or None when the user dismissed the picker

    Returns:
        CustomRangeResolved with UTC datetimes, or CustomRangeCancelled

    Raises:
        ValueError: If the payload carries neither key pair

    Examples:
        >>> parse_custom_range_payload({"startDate": 1735689600000, "endDate": 1736899200000})
        CustomRangeResolved(start=datetime(2025, 1, 1, 0, 0, tzinfo=UTC),
                            end=datetime(2025, 1, 15, 0, 0, tzinfo=UTC))

        >>> parse_custom_range_payload(None)
        CustomRangeCancelled()
    """
    if payload is None:
        return CustomRangeCancelled()

    for start_key, end_key in _PAYLOAD_KEYS:
        start_ms = payload.get(start_key)
        end_ms = payload.get(end_key)
        if start_ms is not None and end_ms is not None:
            return CustomRangeResolved(
                start=from_epoch_millis(start_ms),
                end=from_epoch_millis(end_ms),
            )

    raise ValueError(f"Custom range payload has no start/end pair. Found keys: {sorted(payload)}")


def completed(result: CustomRangeResult) -> "Future[CustomRangeResult]":
    """Wrap an already known result in a finished Future (for synchronous pickers)."""
    future: Future[CustomRangeResult] = Future()
    future.set_result(result)
    return future


__all__ = [
    "CustomRangeResolved",
    "CustomRangeCancelled",
    "CustomRangeResult",
    "CustomRangeProvider",
    "parse_custom_range_payload",
    "completed",
]
