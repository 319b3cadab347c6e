"""Selection state machine for a list of period options.

The controller owns copies of the caller's period templates, tracks which
one is selected, and hands off to an external custom-range picker when the
custom sentinel is activated.

States:
    IDLE                   no options
    READY                  options present, selection valid
    AWAITING_CUSTOM_RANGE  custom option activated, picker result outstanding

Every call that changes what the user is looking at (``set_items``,
``select_index``, ``discard``) supersedes an outstanding custom-range
request. A picker result that arrives after being superseded is dropped,
so it can never overwrite a newer selection or a slot of a replaced list.
"""

from __future__ import annotations
import logging
from concurrent.futures import Future
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Iterable, Optional

from periodpicker.config import PickerConfig, load_config
from periodpicker.errors import (
    IndexOutOfRangeError,
    InvalidStateError,
    NoSelectionError,
    NotFoundError,
)
from periodpicker.period.periodapi import format_selection, match_period
from periodpicker.period.periodmodel import Period
from periodpicker.picker.pickerresult import (
    CustomRangeCancelled,
    CustomRangeProvider,
    CustomRangeResolved,
    CustomRangeResult,
)

logger = logging.getLogger(__name__)

SelectionListener = Callable[[Period], None]


class PickerState(str, Enum):
    IDLE = "idle"
    READY = "ready"
    AWAITING_CUSTOM_RANGE = "awaiting_custom_range"


@dataclass(frozen=True)
class _PendingRequest:
    """Outstanding custom-range request."""

    index: int
    token: int
    future: Future


class PeriodListController:
    """Ordered period options with a single selection.

    Args:
        custom_range_provider: Called with no arguments when a custom option is
            activated; returns a Future resolving to CustomRangeResolved or
            CustomRangeCancelled
        on_selection_changed: Optional listener, same as calling subscribe()
        config: Picker configuration (default: load_config())
        clock: Returns the reference instant for descriptions (default: now UTC)

    Example:
        >>> controller = PeriodListController(open_calendar, on_selection_changed=print)
        >>> controller.set_items(default_periods())
        >>> controller.select_index(3)      # "Last Month", emitted immediately
        >>> future = controller.select_index(7)   # "Custom", waits for the picker
    """

    def __init__(
        self,
        custom_range_provider: Optional[CustomRangeProvider] = None,
        *,
        on_selection_changed: Optional[SelectionListener] = None,
        config: Optional[PickerConfig] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._provider = custom_range_provider
        self._config = config or load_config()
        self._clock = clock
        self._items: list[Period] = []
        self._selected_index: Optional[int] = None
        self._state = PickerState.IDLE
        self._listeners: list[SelectionListener] = []
        self._pending: Optional[_PendingRequest] = None
        self._token = 0

        if on_selection_changed is not None:
            self.subscribe(on_selection_changed)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def items(self) -> tuple[Period, ...]:
        return tuple(self._items)

    @property
    def selected_index(self) -> Optional[int]:
        return self._selected_index

    @property
    def state(self) -> PickerState:
        return self._state

    @property
    def pending_index(self) -> Optional[int]:
        """Index of the custom option awaiting a range, if any."""
        return self._pending.index if self._pending else None

    def __len__(self) -> int:
        return len(self._items)

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def subscribe(self, listener: SelectionListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: SelectionListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def set_items(self, templates: Iterable[Period]) -> None:
        """Replace the options with independent copies of ``templates``.

        Order is preserved. The first option becomes the selection without
        notifying listeners.
        """
        self._supersede("items replaced")
        self._items = [template.copy() for template in templates]

        if self._items:
            self._selected_index = 0
            self._state = PickerState.READY
        else:
            self._selected_index = None
            self._state = PickerState.IDLE

        logger.debug(f"Set {len(self._items)} period options")

    def select_index(self, index: int) -> Optional[Future]:
        """Activate the option at ``index``.

        A regular option is selected and emitted right away and None is
        returned. The custom option starts a picker request and its Future is
        returned; the selection changes only if the picker resolves a range.

        Raises:
            IndexOutOfRangeError: If index is outside the option list
            InvalidStateError: If a custom option is activated without a provider
        """
        if not 0 <= index < len(self._items):
            raise IndexOutOfRangeError(
                f"Index {index} out of range for {len(self._items)} period options"
            )

        is_custom = self._items[index].is_custom
        if is_custom and self._provider is None:
            raise InvalidStateError("Custom period activated but no custom range provider configured")

        self._supersede(f"option {index} activated")

        if is_custom:
            return self._request_custom_range(index)

        self._commit(index)
        return None

    def select_name(self, query: str) -> Optional[Future]:
        """Activate the option whose name best matches ``query``.

        Raises:
            NotFoundError: If no option name matches above the configured threshold
        """
        index = match_period(query, self._items, threshold=self._config.match_threshold)
        if index is None:
            raise NotFoundError(f"No period option matches {query!r}")
        return self.select_index(index)

    def select_item(self, item: Period) -> Optional[Future]:
        """Activate a previously returned option object.

        A stale object (from a replaced list) is ignored with a warning.
        """
        try:
            index = self.index_of(item)
        except NotFoundError:
            logger.warning(f"Ignoring selection of stale period option {item.name!r}")
            return None
        return self.select_index(index)

    def current_selection(self) -> Period:
        """
        Raises:
            NoSelectionError: If nothing is selected
        """
        if self._selected_index is None:
            raise NoSelectionError("No period option selected")
        return self._items[self._selected_index]

    def index_of(self, item: Period) -> int:
        """Index of the option that *is* ``item`` (identity, not equality).

        Raises:
            NotFoundError: If item is not one of the current options
        """
        for i, candidate in enumerate(self._items):
            if candidate is item:
                return i
        raise NotFoundError(f"Period option {item.name!r} is not in the current list")

    def display_text(self, *, asof_ts: Optional[datetime] = None) -> str:
        """Name and description of the current selection, one per line."""
        return format_selection(self.current_selection(), asof_ts=asof_ts or self._now())

    def rows(self, *, asof_ts: Optional[datetime] = None) -> list[tuple[Optional[str], Optional[str]]]:
        """(name, description) for each option, in display order."""
        asof_ts = asof_ts or self._now()
        return [(item.name, item.description(asof_ts=asof_ts)) for item in self._items]

    def discard(self) -> None:
        """Drop options, listeners and any outstanding picker request."""
        self._supersede("controller discarded")
        self._items = []
        self._selected_index = None
        self._state = PickerState.IDLE
        self._listeners.clear()

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _now(self) -> Optional[datetime]:
        return self._clock() if self._clock is not None else None

    def _settled_state(self) -> PickerState:
        return PickerState.READY if self._items else PickerState.IDLE

    def _supersede(self, reason: str) -> None:
        # Bump the token before cancelling: cancel() runs done-callbacks inline.
        self._token += 1
        pending = self._pending
        if pending is None:
            return
        self._pending = None
        self._state = self._settled_state()
        logger.debug(f"Dropping custom range request for option {pending.index}: {reason}")
        pending.future.cancel()

    def _request_custom_range(self, index: int) -> Future:
        token = self._token
        previous_state = self._state
        self._state = PickerState.AWAITING_CUSTOM_RANGE
        try:
            future = self._provider()
        except Exception:
            self._state = previous_state
            raise

        if not isinstance(future, Future):
            self._state = previous_state
            raise InvalidStateError(
                f"Custom range provider must return a Future, got {type(future).__name__}"
            )

        self._pending = _PendingRequest(index=index, token=token, future=future)
        logger.debug(f"Requested custom range for option {index}")
        future.add_done_callback(lambda done: self._finish_custom_range(token, done))
        return future

    def _finish_custom_range(self, token: int, future: Future) -> None:
        if token != self._token or self._pending is None:
            logger.debug("Discarding custom range result for a superseded request")
            return

        index = self._pending.index
        self._pending = None
        self._state = self._settled_state()

        result = self._read_result(future)
        if isinstance(result, CustomRangeCancelled):
            logger.debug(f"Custom range for option {index} cancelled")
            return

        template = self._items[index]
        self._items[index] = Period.explicit(
            self._config.custom_label,
            result.start,
            result.end,
            show_time=template.show_time,
            use_24_hour_format=template.use_24_hour_format,
        )
        self._commit(index)

    def _read_result(self, future: Future) -> CustomRangeResult:
        if future.cancelled():
            return CustomRangeCancelled()

        error = future.exception()
        if error is not None:
            logger.warning(f"Custom range picker failed: {error}, keeping current selection")
            return CustomRangeCancelled()

        result = future.result()
        if not isinstance(result, (CustomRangeResolved, CustomRangeCancelled)):
            logger.warning(f"Unexpected custom range result {result!r}, keeping current selection")
            return CustomRangeCancelled()
        return result

    def _commit(self, index: int) -> None:
        self._selected_index = index
        self._state = PickerState.READY
        item = self._items[index]
        logger.info(f"Selected period {item.name!r} (option {index})")
        for listener in list(self._listeners):
            listener(item)


__all__ = [
    "PickerState",
    "PeriodListController",
    "SelectionListener",
]
