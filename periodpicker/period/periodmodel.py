"""Period Model
------------

A ``Period`` is one selectable option of the picker. How it turns into a
concrete start/end pair is decided by its rule, a tagged payload:

  - MonthOffset:   "Last Month", "Last 3 Months" (calendar month shift from now)
  - SecondOffset:  "Last 7 Days", "Last 15 Minutes" (exact elapsed seconds)
  - ExplicitRange: fixed start and end instants
  - CustomRange:   sentinel meaning "ask the user for a range"

Key Design Principles:
  1. Exactly one rule per period; a period without a rule cannot be resolved
  2. Dynamic periods resolve against an injectable ``asof_ts`` (default: now UTC)
  3. Month shifts clamp the day to the target month (Mar 31 - 1 month = Feb 28)
  4. Bounds are not reordered; descriptions order them on their own

Examples:
  >>> asof = datetime(2025, 3, 31, tzinfo=timezone.utc)
  >>> Period.months("Last Month", -1).resolve_bounds(asof_ts=asof)
  (datetime(2025, 2, 28, 0, 0, tzinfo=UTC), datetime(2025, 3, 31, 0, 0, tzinfo=UTC))

  >>> Period.explicit("Q1", datetime(2025, 1, 1), datetime(2025, 3, 31)).description()
  'Jan 1 - Mar 31'
"""

from __future__ import annotations
import copy
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional, Union

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from periodpicker.errors import InvalidStateError
from periodpicker.period.periodformat import DEFAULT_FORMATS, PeriodFormats, format_range
from periodpicker.period.periodnormalize import as_utc, resolve_asof


class PeriodKind(str, Enum):
    DYNAMIC_MONTH = "dynamic_month"
    DYNAMIC_SECONDS = "dynamic_seconds"
    EXPLICIT = "explicit"
    CUSTOM = "custom"


# ---- Rules ----

@dataclass(frozen=True)
class MonthOffset:
    """Signed calendar-month delta from now."""
    months: int


@dataclass(frozen=True)
class SecondOffset:
    """Signed delta from now in seconds (unbounded int)."""
    seconds: int


@dataclass(frozen=True)
class ExplicitRange:
    min_ts: Optional[datetime]
    max_ts: Optional[datetime]


@dataclass(frozen=True)
class CustomRange:
    pass


Rule = Union[MonthOffset, SecondOffset, ExplicitRange, CustomRange]

_RULE_KINDS = {
    MonthOffset: PeriodKind.DYNAMIC_MONTH,
    SecondOffset: PeriodKind.DYNAMIC_SECONDS,
    ExplicitRange: PeriodKind.EXPLICIT,
    CustomRange: PeriodKind.CUSTOM,
}


# ---- Period ----

@dataclass
class Period:
    """One selectable period option.

    Attributes:
        name: Display label (e.g., "Last Month"); returned as the description
              of an unresolved custom period
        rule: Resolution rule, or None while the kind is unset
        show_time: Include time of day in the description
        use_24_hour_format: 24h clock instead of 12h with AM/PM (only with show_time)
    """

    name: Optional[str]
    rule: Optional[Rule] = None
    show_time: bool = False
    use_24_hour_format: bool = False

    # ---- Constructors ----

    @classmethod
    def months(cls, name: Optional[str], months: int, **flags) -> "Period":
        return cls(name, MonthOffset(months), **flags)

    @classmethod
    def seconds(cls, name: Optional[str], seconds: int, **flags) -> "Period":
        return cls(name, SecondOffset(seconds), **flags)

    @classmethod
    def explicit(
        cls,
        name: Optional[str],
        min_ts: Optional[datetime],
        max_ts: Optional[datetime],
        **flags,
    ) -> "Period":
        return cls(name, ExplicitRange(min_ts, max_ts), **flags)

    @classmethod
    def custom(cls, name: Optional[str] = "Custom", **flags) -> "Period":
        return cls(name, CustomRange(), **flags)

    # ---- Accessors ----

    @property
    def kind(self) -> Optional[PeriodKind]:
        if self.rule is None:
            return None
        return _RULE_KINDS[type(self.rule)]

    @property
    def is_custom(self) -> bool:
        return isinstance(self.rule, CustomRange)

    def copy(self) -> "Period":
        """Independent deep copy (used when a list of templates is ingested)."""
        return copy.deepcopy(self)

    # ---- Resolution ----

    def resolve_bounds(self, *, asof_ts: Optional[datetime] = None) -> tuple[datetime, datetime]:
        """
        Resolve this period to a (start, end) pair.

        Dynamic rules end at ``asof_ts`` (default: now UTC) and start at
        ``asof_ts`` shifted by the offset. Explicit rules return the stored
        instants unchanged. Start is not forced to precede end.

        Args:
            asof_ts: Reference instant for dynamic rules; naive values are UTC

        Returns:
            (start, end) tuple of datetimes

        Raises:
            InvalidStateError: Kind unset, custom range not yet chosen,
                               or an explicit bound missing
        """
        rule = self.rule

        if isinstance(rule, MonthOffset):
            now = resolve_asof(asof_ts)
            return now + relativedelta(months=rule.months), now

        if isinstance(rule, SecondOffset):
            now = resolve_asof(asof_ts)
            return now + timedelta(seconds=rule.seconds), now

        if isinstance(rule, ExplicitRange):
            if rule.min_ts is None or rule.max_ts is None:
                raise InvalidStateError(
                    f"Explicit period {self.name!r} is missing a bound "
                    f"(min_ts={rule.min_ts}, max_ts={rule.max_ts})"
                )
            return rule.min_ts, rule.max_ts

        if isinstance(rule, CustomRange):
            raise InvalidStateError(f"Custom period {self.name!r} has no range selected yet")

        raise InvalidStateError(f"Period {self.name!r} has no kind set")

    def description(
        self,
        *,
        asof_ts: Optional[datetime] = None,
        formats: Optional[PeriodFormats] = None,
    ) -> Optional[str]:
        """
        Human-readable range, e.g. "Feb 28 - Mar 31" or "Dec 1 2024 - Jan 1 2025".

        The year is included only when the two ends fall in different years.
        An unresolved custom period describes itself by its name.

        Raises:
            InvalidStateError: Same conditions as resolve_bounds (except custom)
        """
        if self.is_custom:
            return self.name

        start, end = (as_utc(ts) for ts in self.resolve_bounds(asof_ts=asof_ts))
        lo, hi = (start, end) if start <= end else (end, start)

        formats = formats or DEFAULT_FORMATS
        pattern = formats.select(
            cross_year=lo.year != hi.year,
            show_time=self.show_time,
            use_24_hour_format=self.use_24_hour_format,
        )
        return format_range(lo, hi, pattern)


__all__ = [
    "PeriodKind",
    "MonthOffset",
    "SecondOffset",
    "ExplicitRange",
    "CustomRange",
    "Rule",
    "Period",
]
