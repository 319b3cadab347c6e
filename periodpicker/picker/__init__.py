"""Picker module: selection state over a list of period options.

Public API:
    PeriodListController(custom_range_provider, on_selection_changed=None)
        set_items(templates), select_index(i), select_name(query),
        current_selection(), index_of(item), display_text(), discard()

    CustomRangeResolved(start, end) / CustomRangeCancelled()
        Results of the external custom-range picker

    parse_custom_range_payload(payload) -> CustomRangeResolved | CustomRangeCancelled
        Normalize legacy millisecond payloads
"""

from periodpicker.picker.pickerresult import (
    CustomRangeResolved,
    CustomRangeCancelled,
    CustomRangeResult,
    CustomRangeProvider,
    parse_custom_range_payload,
    completed,
)
from periodpicker.picker.pickercontroller import (
    PeriodListController,
    PickerState,
    SelectionListener,
)

__all__ = [
    "CustomRangeResolved",
    "CustomRangeCancelled",
    "CustomRangeResult",
    "CustomRangeProvider",
    "parse_custom_range_payload",
    "completed",
    "PeriodListController",
    "PickerState",
    "SelectionListener",
]
