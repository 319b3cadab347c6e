"""Typed errors raised by periodpicker.

Each error also derives from the closest builtin, so callers can catch
either the package error or the usual Python exception.
"""


class PeriodPickerError(Exception):
    """Base class for periodpicker errors."""


class InvalidStateError(PeriodPickerError, RuntimeError):
    """Period cannot be resolved (kind unset, or explicit bounds missing)."""


class IndexOutOfRangeError(PeriodPickerError, IndexError):
    """Selection index outside the current option list."""


class NoSelectionError(PeriodPickerError, LookupError):
    """No option has been selected yet."""


class NotFoundError(PeriodPickerError, LookupError):
    """Option is not (or no longer) in the controller's list."""


__all__ = [
    "PeriodPickerError",
    "InvalidStateError",
    "IndexOutOfRangeError",
    "NoSelectionError",
    "NotFoundError",
]
