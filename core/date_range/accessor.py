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
Form-binding adapter for the date range control.

Hosts talk to the control through ``write_value`` / ``register_on_change``
/ ``register_on_touched`` / ``set_disabled_state``. User commands go
through the same object so the disabled flag can gate all of them.
"""

from datetime import date
from typing import Any, Callable, Optional

from core.date_range.bounds import default_global_bounds
from core.date_range.models import DateBounds, DateRange
from core.date_range.notifier import ChangeNotifier
from core.date_range.state import CalendarCollaborator, DateRangeState, PopoverCollaborator
from utils.logger import get_logger

logger = get_logger(__name__)


def _noop(*_args, **_kwargs) -> None:
    return None


class DateRangeValueAccessor:
    """
    Bridges a host form to ``DateRangeState``.

    Only user-driven edits reach the on-change callback. Values written by
    the host are applied silently.
    """

    def __init__(self, global_bounds: Optional[DateBounds] = None):
        """
        Args:
            global_bounds: Outer selectable window, defaults to a
                two-hundred-year span around the current year
        """
        self._notifier = ChangeNotifier()
        self._state = DateRangeState(global_bounds or default_global_bounds(), self._notifier)
        self._on_change: Callable[[DateRange], Any] = _noop
        self._on_touched: Callable[[], Any] = _noop
        self._popover: Optional[PopoverCollaborator] = None
        self._disabled = False

        self._notifier.subscribe(self._dispatch_change)

    @property
    def state(self) -> DateRangeState:
        return self._state

    @property
    def notifier(self) -> ChangeNotifier:
        return self._notifier

    @property
    def disabled(self) -> bool:
        return self._disabled

    @property
    def value(self) -> DateRange:
        """Committed value as last seen by the host."""
        return self._notifier.committed

    def current_value(self) -> DateRange:
        return self._state.current_value()

    def attach(
        self,
        begin_calendar: Optional[CalendarCollaborator] = None,
        end_calendar: Optional[CalendarCollaborator] = None,
        popover: Optional[PopoverCollaborator] = None,
    ) -> None:
        self._state.attach(begin_calendar, end_calendar)
        self._popover = popover

    def activate(self) -> None:
        """Called once the view has its collaborators in place."""
        self._notifier.activate()

    # Host-facing contract

    def write_value(self, value: Any) -> None:
        self._state.write_external(value)

    def register_on_change(self, callback: Callable[[DateRange], Any]) -> None:
        self._on_change = callback or _noop

    def register_on_touched(self, callback: Callable[[], Any]) -> None:
        self._on_touched = callback or _noop

    def set_disabled_state(self, disabled: bool) -> None:
        self._disabled = bool(disabled)
        logger.debug(f"Disabled state set to {self._disabled}")

    def mark_touched(self) -> None:
        self._on_touched()

    def set_global_bounds(self, bounds: DateBounds) -> None:
        self._state.set_global_bounds(bounds)

    # Interaction surface

    def set_begin(self, value: Optional[date]) -> None:
        if self._ignored("set_begin"):
            return
        self._state.set_begin(value)

    def set_end(self, value: Optional[date]) -> None:
        if self._ignored("set_end"):
            return
        self._state.set_end(value)

    def update_model(self, is_begin: bool, value: Optional[date]) -> None:
        """Route a calendar pick to the matching boundary."""
        if is_begin:
            self.set_begin(value)
        else:
            self.set_end(value)

    def clear(self) -> None:
        if self._ignored("clear"):
            return
        self._state.clear()

    def check_state(self) -> None:
        if self._ignored("check_state"):
            return
        self._state.check_state()

    def open_picker(self, origin: Any = None) -> None:
        if self._ignored("open_picker"):
            return
        if self._popover is None:
            logger.warning("open_picker called before a popover was attached")
            return
        self._popover.toggle(origin)

    def _ignored(self, command: str) -> bool:
        if self._disabled:
            logger.debug(f"Ignoring {command} while disabled")
        return self._disabled

    def _dispatch_change(self, value: DateRange) -> None:
        self._on_change(value)
