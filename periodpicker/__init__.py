"""Period Picker - time period options and selection

Public API for choosing a time period ("Last Month", "Last 7 Days", or a
custom range) from a list of options.

Usage:
    from periodpicker import Period, PeriodListController, default_periods

    # Describe an option
    Period.months("Last Month", -1).description()  # Returns: 'Feb 28 - Mar 31'

    # Drive a selection
    controller = PeriodListController(open_calendar, on_selection_changed=handle)
    controller.set_items(default_periods())
    controller.select_index(1)                     # emits "Last 7 Days"
"""

__version__ = "0.0.1"

# ============================================================================
# Period API
# ============================================================================

from .period import (
    Period,                # Selectable period option
    PeriodKind,            # Resolution strategy discriminant
    PeriodFormats,         # Date format pattern set
    resolve_bounds,        # (start, end) for a period
    describe_period,       # "Feb 28 - Mar 31"
    format_selection,      # "Last Month\nFeb 28 - Mar 31"
    default_periods,       # Standard option list
    match_period,          # Fuzzy-match a label to an option
    list_periods,          # Options as a DataFrame
)

# ============================================================================
# Picker API
# ============================================================================

from .picker import (
    PeriodListController,        # Selection state machine
    PickerState,                 # IDLE / READY / AWAITING_CUSTOM_RANGE
    CustomRangeResolved,         # Picker chose a range
    CustomRangeCancelled,        # Picker dismissed
    parse_custom_range_payload,  # Legacy millisecond payloads
)

# ============================================================================
# Configuration and errors
# ============================================================================

from .config import PickerConfig, load_config
from .errors import (
    PeriodPickerError,
    InvalidStateError,
    IndexOutOfRangeError,
    NoSelectionError,
    NotFoundError,
)

__all__ = [
    "Period",
    "PeriodKind",
    "PeriodFormats",
    "resolve_bounds",
    "describe_period",
    "format_selection",
    "default_periods",
    "match_period",
    "list_periods",
    "PeriodListController",
    "PickerState",
    "CustomRangeResolved",
    "CustomRangeCancelled",
    "parse_custom_range_payload",
    "PickerConfig",
    "load_config",
    "PeriodPickerError",
    "InvalidStateError",
    "IndexOutOfRangeError",
    "NoSelectionError",
    "NotFoundError",
]
