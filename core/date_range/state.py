# SPDX-License-Identifier: Apache-2.0
#
# Copyright (c) 2024-2025 RangePicker Contributors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
Working state of the date range control.

``DateRangeState`` owns the ``{start, end}`` pair and keeps it ordered.
An inconsistent end is always cleared instead of rejected, and every
mutation recomputes the end calendar window before the result is pushed
to the change notifier.
"""

from datetime import date
from typing import Any, Optional, Protocol

from core.date_range.bounds import compute_end_bounds, compute_start_bounds
from core.date_range.models import DateBounds, DateRange, coerce_boundary
from core.date_range.notifier import ChangeNotifier
from utils.logger import get_logger

logger = get_logger(__name__)


class CalendarCollaborator(Protocol):
    """Day grid commanded by the control. Never read back."""

    def set_selected_date(self, value: Optional[date]) -> None: ...

    def clear(self) -> None: ...

    def set_bounds(self, bounds: DateBounds) -> None: ...


class PopoverCollaborator(Protocol):
    """Overlay hosting the calendars."""

    def toggle(self, origin: Any = None) -> None: ...


class DateRangeState:
    """
    Authoritative start/end pair plus the calendar windows derived from it.

    Collaborators are optional until ``attach`` is called. Commands aimed
    at a missing collaborator are skipped.
    """

    def __init__(self, global_bounds: DateBounds, notifier: Optional[ChangeNotifier] = None):
        """
        Args:
            global_bounds: Outer window no boundary may exceed
            notifier: Pipeline receiving every resulting range
        """
        self._global_bounds = global_bounds
        self._notifier = notifier or ChangeNotifier()
        self._start: Optional[date] = None
        self._end: Optional[date] = None
        self._start_bounds = compute_start_bounds(global_bounds)
        self._end_bounds = compute_end_bounds(None, global_bounds)
        self._begin_calendar: Optional[CalendarCollaborator] = None
        self._end_calendar: Optional[CalendarCollaborator] = None

    @property
    def notifier(self) -> ChangeNotifier:
        return self._notifier

    @property
    def start(self) -> Optional[date]:
        return self._start

    @property
    def end(self) -> Optional[date]:
        return self._end

    @property
    def global_bounds(self) -> DateBounds:
        return self._global_bounds

    @property
    def derived_bounds_for_start(self) -> DateBounds:
        return self._start_bounds

    @property
    def derived_bounds_for_end(self) -> DateBounds:
        return self._end_bounds

    def current_value(self) -> DateRange:
        """Working pair, which may be partial."""
        return DateRange(self._start, self._end)

    def attach(
        self,
        begin_calendar: Optional[CalendarCollaborator] = None,
        end_calendar: Optional[CalendarCollaborator] = None,
    ) -> None:
        """Wire the calendars and bring them in line with the current state."""
        self._begin_calendar = begin_calendar
        self._end_calendar = end_calendar

        if begin_calendar is not None:
            begin_calendar.set_bounds(self._start_bounds)
            self._show(begin_calendar, self._start)
        if end_calendar is not None:
            end_calendar.set_bounds(self._end_bounds)
            self._show(end_calendar, self._end)

    def set_begin(self, value: Optional[date]) -> None:
        """Assign the start. A start after the current end clears the end."""
        value = coerce_boundary(value)
        logger.debug(f"set_begin({value})")
        self._apply_begin(value)
        self._notifier.push(self.current_value())

    def set_end(self, value: Optional[date]) -> None:
        """Assign the end. An end before the current start is dropped."""
        value = coerce_boundary(value)
        logger.debug(f"set_end({value})")
        if value is not None and self._start is not None and value < self._start:
            logger.debug("End %s precedes start %s, clearing end", value, self._start)
            value = None

        self._end = value
        if value is None:
            self._clear_calendar(self._end_calendar)

        self._notifier.push(self.current_value())

    def clear(self) -> None:
        """Drop both boundaries and clear both calendars."""
        logger.debug("clear()")
        self._end = None
        self._apply_begin(None)
        self._notifier.push(self.current_value())

    def check_state(self) -> None:
        """Clear everything unless the pair is empty or complete and ordered."""
        start, end = self._start, self._end
        if start is None and end is None:
            return
        if start is None or end is None or start > end:
            logger.debug(f"Inconsistent range ({start}, {end}), clearing")
            self.clear()

    def write_external(self, value: Any) -> None:
        """
        Apply a value set programmatically by the host.

        The committed value is updated silently, so subscribers are not told
        about a write they made themselves.
        """
        incoming = DateRange.from_value(value)
        logger.debug(f"write_external({incoming})")

        self._end = incoming.end
        self._apply_begin(incoming.start)

        # Windows are updated first so the grids accept the selection.
        self._show(self._begin_calendar, self._start)
        self._show(self._end_calendar, self._end)

        self._notifier.push(self.current_value(), silent=True)

    def set_global_bounds(self, bounds: DateBounds) -> None:
        """Replace the outer window and refresh both calendar windows."""
        self._global_bounds = bounds
        self._start_bounds = compute_start_bounds(bounds)
        self._end_bounds = compute_end_bounds(self._start, bounds)

        if self._begin_calendar is not None:
            self._begin_calendar.set_bounds(self._start_bounds)
        if self._end_calendar is not None:
            self._end_calendar.set_bounds(self._end_bounds)

    def _apply_begin(self, value: Optional[date]) -> None:
        self._start = value

        if value is None:
            self._clear_calendar(self._begin_calendar)

        if value is None or (self._end is not None and value > self._end):
            self._end = None
            self._clear_calendar(self._end_calendar)

        self._end_bounds = compute_end_bounds(value, self._global_bounds)
        if self._end_calendar is not None:
            self._end_calendar.set_bounds(self._end_bounds)

    @staticmethod
    def _clear_calendar(calendar: Optional[CalendarCollaborator]) -> None:
        if calendar is not None:
            calendar.clear()

    @staticmethod
    def _show(calendar: Optional[CalendarCollaborator], value: Optional[date]) -> None:
        if calendar is None:
            return
        if value is None:
            calendar.clear()
        else:
            calendar.set_selected_date(value)
