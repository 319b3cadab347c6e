"""Period Label and Instant Normalization
---------------------------------------

Helpers for putting option labels and instants into a canonical form
before matching or resolving.

Examples:
  >>> normalize_label("  Last  7 Days ")
  'last 7 days'

  >>> normalize_label("Jan–Mar")
  'jan-mar'

  >>> as_utc(datetime(2025, 3, 31, 12, 0))
  datetime.datetime(2025, 3, 31, 12, 0, tzinfo=datetime.timezone.utc)
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional
import re
import unicodedata


def normalize_label(text: Optional[str]) -> str:
    """
    Normalize an option label for fuzzy matching.

    Transformations:
      - Strip whitespace and lowercase
      - Unicode NFC normalization
      - Normalize dashes (—, –, −, ‒ → -) and spaces around them
      - Collapse repeated whitespace

    Args:
        text: Raw label (e.g., "Last 7 Days", "Jan – Mar")

    Returns:
        Normalized label, or "" for None/blank input
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFC", text.strip().lower())

    for dash in ("—", "–", "−", "‒"):
        text = text.replace(dash, "-")

    text = re.sub(r"\s*-\s*", "-", text)
    text = re.sub(r"\s+", " ", text)

    return text.strip()


def as_utc(ts: datetime) -> datetime:
    """Return ts as an aware datetime; naive values are taken to be UTC."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def resolve_asof(asof_ts: Optional[datetime]) -> datetime:
    """Reference instant for dynamic periods (default: now, UTC)."""
    if asof_ts is None:
        return datetime.now(timezone.utc)
    return as_utc(asof_ts)


def from_epoch_millis(millis: int) -> datetime:
    """
    Convert a millisecond epoch value to a UTC datetime.

    Example:
        >>> from_epoch_millis(1735689600000)
        datetime.datetime(2025, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    seconds, ms = divmod(int(millis), 1000)
    return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=ms * 1000)


__all__ = [
    "normalize_label",
    "as_utc",
    "resolve_asof",
    "from_epoch_millis",
]
