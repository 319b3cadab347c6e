"""Period API.

Public functions over ``Period`` options: bound resolution, descriptions,
the standard preset list, fuzzy label matching and tabular listing.
"""

from datetime import datetime
from typing import Optional, Sequence

import pandas as pd

try:
    from rapidfuzz import fuzz, process
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e

from periodpicker.config import PickerConfig, load_config
from periodpicker.errors import InvalidStateError
from periodpicker.period.periodformat import PeriodFormats
from periodpicker.period.periodmodel import Period
from periodpicker.period.periodnormalize import normalize_label

SECONDS_PER_DAY = 24 * 60 * 60


def resolve_bounds(
    period: Period,
    *,
    asof_ts: Optional[datetime] = None,
) -> tuple[datetime, datetime]:
    """
    Resolve a period to its (start, end) pair.

    Args:
        period: Period option
        asof_ts: Reference instant for dynamic periods (default: now UTC)

    Returns:
        (start, end); start may be after end for positive offsets

    Raises:
        InvalidStateError: Kind unset, custom range not chosen, or bound missing

    Examples:
        >>> asof = datetime(2025, 3, 31, tzinfo=timezone.utc)
        >>> resolve_bounds(Period.seconds("Last Day", -86400), asof_ts=asof)
        (datetime(2025, 3, 30, 0, 0, tzinfo=UTC), datetime(2025, 3, 31, 0, 0, tzinfo=UTC))
    """
    return period.resolve_bounds(asof_ts=asof_ts)


def describe_period(
    period: Period,
    *,
    asof_ts: Optional[datetime] = None,
    formats: Optional[PeriodFormats] = None,
) -> Optional[str]:
    """
    Format a period's range for display.

    Examples:
        >>> describe_period(Period.explicit("x", datetime(2024, 12, 1), datetime(2025, 1, 1)))
        'Dec 1 2024 - Jan 1 2025'

        >>> describe_period(Period.custom())
        'Custom'
    """
    return period.description(asof_ts=asof_ts, formats=formats)


def format_selection(
    period: Period,
    *,
    asof_ts: Optional[datetime] = None,
    formats: Optional[PeriodFormats] = None,
) -> str:
    """
    Two-line text shown for a committed selection: name, then description.

    Example:
        >>> format_selection(Period.explicit("Custom", datetime(2025, 1, 1), datetime(2025, 1, 15)))
        'Custom\\nJan 1 - Jan 15'
    """
    description = period.description(asof_ts=asof_ts, formats=formats)
    return f"{period.name or ''}\n{description or ''}"


def default_periods(
    *,
    show_time: Optional[bool] = None,
    use_24_hour_format: Optional[bool] = None,
    config: Optional[PickerConfig] = None,
) -> list[Period]:
    """
    Standard option list, most recent first, ending with the custom sentinel.

    Returns a new list of new Period objects on every call.

    Args:
        show_time: Include time of day (default: config.show_time)
        use_24_hour_format: 24-hour clock (default: config.use_24_hour_format)
        config: Picker configuration (default: load_config())
    """
    if show_time is None or use_24_hour_format is None:
        config = config or load_config()
        if show_time is None:
            show_time = config.show_time
        if use_24_hour_format is None:
            use_24_hour_format = config.use_24_hour_format

    flags = {"show_time": show_time, "use_24_hour_format": use_24_hour_format}
    return [
        Period.seconds("Last 24 Hours", -SECONDS_PER_DAY, **flags),
        Period.seconds("Last 7 Days", -7 * SECONDS_PER_DAY, **flags),
        Period.seconds("Last 30 Days", -30 * SECONDS_PER_DAY, **flags),
        Period.months("Last Month", -1, **flags),
        Period.months("Last 3 Months", -3, **flags),
        Period.months("Last 6 Months", -6, **flags),
        Period.months("Last Year", -12, **flags),
        Period.custom("Custom", **flags),
    ]


def match_period(
    query: str,
    periods: Sequence[Period],
    *,
    threshold: int = 80,
) -> Optional[int]:
    """
    Find the option whose name best matches a typed label.

    Uses RapidFuzz WRatio on normalized labels.

    Args:
        query: Typed label (e.g., "last month", "7 days")
        periods: Options to search
        threshold: Minimum score (0-100) to accept a match

    Returns:
        Index of the best match, or None if nothing scores above threshold

    Examples:
        >>> match_period("last 7 days", default_periods())
        1
        >>> match_period("fortnight", default_periods()) is None
        True
    """
    query_norm = normalize_label(query)
    if not query_norm:
        return None

    choices = {i: normalize_label(p.name) for i, p in enumerate(periods) if p.name}
    if not choices:
        return None

    match = process.extractOne(query_norm, choices, scorer=fuzz.WRatio)
    if match is None:
        return None

    _, score, index = match
    if score < threshold:
        return None
    return index


def list_periods(
    periods: Sequence[Period],
    *,
    asof_ts: Optional[datetime] = None,
) -> pd.DataFrame:
    """
    Tabulate options with their resolved bounds and descriptions.

    Unresolvable bounds (custom sentinel, missing explicit bound) are NaT;
    the description of an unresolvable explicit period is None.

    Returns:
        DataFrame with columns: name, kind, start_ts, end_ts, description
    """
    rows = []
    for period in periods:
        try:
            start_ts, end_ts = period.resolve_bounds(asof_ts=asof_ts)
        except InvalidStateError:
            start_ts, end_ts = pd.NaT, pd.NaT

        try:
            description = period.description(asof_ts=asof_ts)
        except InvalidStateError:
            description = None

        rows.append({
            "name": period.name,
            "kind": period.kind.value if period.kind else None,
            "start_ts": start_ts,
            "end_ts": end_ts,
            "description": description,
        })

    return pd.DataFrame(rows, columns=["name", "kind", "start_ts", "end_ts", "description"])


__all__ = [
    "resolve_bounds",
    "describe_period",
    "format_selection",
    "default_periods",
    "match_period",
    "list_periods",
]
