"""Date format patterns for period descriptions.

Six strftime patterns cover every description: month-abbrev + day, with the
year when the range crosses a calendar year, each optionally followed by a
24-hour or 12-hour (AM/PM) time of day.

Patterns use the glibc ``%-d`` / ``%-I`` flags for unpadded day and hour.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime

DATE_FORMAT_SHORT = "%b %-d"
DATE_FORMAT_LONG = "%b %-d %Y"
TIME_FORMAT_24H = "%H:%M"
TIME_FORMAT_12H = "%-I:%M %p"

DATE_FORMAT_SHORT_24H = f"{DATE_FORMAT_SHORT} {TIME_FORMAT_24H}"
DATE_FORMAT_SHORT_12H = f"{DATE_FORMAT_SHORT} {TIME_FORMAT_12H}"
DATE_FORMAT_LONG_24H = f"{DATE_FORMAT_LONG} {TIME_FORMAT_24H}"
DATE_FORMAT_LONG_12H = f"{DATE_FORMAT_LONG} {TIME_FORMAT_12H}"


@dataclass(frozen=True)
class PeriodFormats:
    """Pattern set used when formatting descriptions.

    Callers wanting a different date layout pass their own instance; the
    default reproduces the six standard patterns.
    """

    short: str = DATE_FORMAT_SHORT
    long: str = DATE_FORMAT_LONG
    time_24h: str = TIME_FORMAT_24H
    time_12h: str = TIME_FORMAT_12H

    def select(self, cross_year: bool, show_time: bool, use_24_hour_format: bool) -> str:
        pattern = self.long if cross_year else self.short
        if not show_time:
            return pattern
        time_pattern = self.time_24h if use_24_hour_format else self.time_12h
        return f"{pattern} {time_pattern}"


DEFAULT_FORMATS = PeriodFormats()


def select_date_format(
    cross_year: bool,
    show_time: bool = False,
    use_24_hour_format: bool = False,
) -> str:
    """
    Pick one of the six standard patterns.

    Examples:
        >>> select_date_format(False)
        '%b %-d'
        >>> select_date_format(True, show_time=True, use_24_hour_format=True)
        '%b %-d %Y %H:%M'
    """
    return DEFAULT_FORMATS.select(cross_year, show_time, use_24_hour_format)


def format_range(lo: datetime, hi: datetime, pattern: str) -> str:
    return f"{lo.strftime(pattern)} - {hi.strftime(pattern)}"


__all__ = [
    "DATE_FORMAT_SHORT",
    "DATE_FORMAT_LONG",
    "DATE_FORMAT_SHORT_24H",
    "DATE_FORMAT_SHORT_12H",
    "DATE_FORMAT_LONG_24H",
    "DATE_FORMAT_LONG_12H",
    "TIME_FORMAT_24H",
    "TIME_FORMAT_12H",
    "PeriodFormats",
    "DEFAULT_FORMATS",
    "select_date_format",
    "format_range",
]
