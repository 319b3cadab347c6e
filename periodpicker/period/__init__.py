"""Period module: selectable time-period options.

Public API:
    Period.months(name, n) / Period.seconds(name, n)
        Dynamic periods relative to now ("Last Month", "Last 7 Days")

    Period.explicit(name, min_ts, max_ts) / Period.custom(name)
        Fixed ranges and the "ask the user" sentinel

    resolve_bounds(period, asof_ts=None) -> (start, end)
    describe_period(period, asof_ts=None) -> str
    format_selection(period, asof_ts=None) -> str
    default_periods() -> list[Period]
    match_period(query, periods) -> int | None
    list_periods(periods) -> pd.DataFrame

Examples:
    >>> from datetime import datetime, timezone
    >>> from periodpicker.period import Period, describe_period
    >>>
    >>> asof = datetime(2025, 3, 31, tzinfo=timezone.utc)
    >>> describe_period(Period.months("Last Month", -1), asof_ts=asof)
    'Feb 28 - Mar 31'
    >>>
    >>> describe_period(Period.months("Last 6 Months", -6), asof_ts=asof)
    'Sep 30 2024 - Mar 31 2025'
"""

from periodpicker.period.periodmodel import (
    Period,
    PeriodKind,
    MonthOffset,
    SecondOffset,
    ExplicitRange,
    CustomRange,
)
from periodpicker.period.periodformat import (
    PeriodFormats,
    select_date_format,
)
from periodpicker.period.periodapi import (
    resolve_bounds,
    describe_period,
    format_selection,
    default_periods,
    match_period,
    list_periods,
)

__all__ = [
    "Period",
    "PeriodKind",
    "MonthOffset",
    "SecondOffset",
    "ExplicitRange",
    "CustomRange",
    "PeriodFormats",
    "select_date_format",
    "resolve_bounds",
    "describe_period",
    "format_selection",
    "default_periods",
    "match_period",
    "list_periods",
]
