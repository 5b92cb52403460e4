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
Calendar panel used for each side of the date range picker.
"""

from datetime import date
from typing import Optional

from core.date_range.models import DateBounds
from ui.constants import CALENDAR_PANEL_MIN_WIDTH, ROLE_CALENDAR_TITLE
from ui.date_range_picker.formatting import from_qdate, to_qdate
from ui.qt_imports import QCalendarWidget, QDate, QLabel, QVBoxLayout, QWidget, Signal
from utils.logger import get_logger

logger = get_logger(__name__)


class CalendarPanel(QWidget):
    """
    A titled ``QCalendarWidget`` driven by the range control.

    The panel only reports clicks. Selection and bounds are pushed in
    from outside, with signals blocked so they never loop back.
    """

    date_picked = Signal(object)  # datetime.date

    def __init__(self, title: str = "", parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._selected: Optional[date] = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.title_label = QLabel(title)
        self.title_label.setProperty("role", ROLE_CALENDAR_TITLE)
        layout.addWidget(self.title_label)

        self.calendar = QCalendarWidget()
        self.calendar.setMinimumWidth(CALENDAR_PANEL_MIN_WIDTH)
        self.calendar.setGridVisible(True)
        self.calendar.clicked.connect(self._on_clicked)
        layout.addWidget(self.calendar)

        self.setProperty("hasSelection", False)

    def set_title(self, title: str) -> None:
        self.title_label.setText(title)

    def selected_date(self) -> Optional[date]:
        """Date currently highlighted by the control, or ``None``."""
        return self._selected

    def minimum_date(self) -> Optional[date]:
        return from_qdate(self.calendar.minimumDate())

    def maximum_date(self) -> Optional[date]:
        return from_qdate(self.calendar.maximumDate())

    def set_selected_date(self, value: Optional[date]) -> None:
        if value is None:
            self.clear()
            return

        previous = self.calendar.blockSignals(True)
        try:
            self.calendar.setSelectedDate(to_qdate(value))
            self.calendar.setCurrentPage(value.year, value.month)
        finally:
            self.calendar.blockSignals(previous)

        self._selected = value
        self.setProperty("hasSelection", True)

    def clear(self) -> None:
        # QCalendarWidget always highlights a day; the flag tracks whether
        # that highlight is a real selection.
        self._selected = None
        self.setProperty("hasSelection", False)

        previous = self.calendar.blockSignals(True)
        try:
            today = QDate.currentDate()
            self.calendar.setSelectedDate(today)
            self.calendar.setCurrentPage(today.year(), today.month())
        finally:
            self.calendar.blockSignals(previous)

    def set_bounds(self, bounds: DateBounds) -> None:
        previous = self.calendar.blockSignals(True)
        try:
            self.calendar.setDateRange(to_qdate(bounds.min_date), to_qdate(bounds.max_date))
        finally:
            self.calendar.blockSignals(previous)
        logger.debug(f"{self.objectName() or 'calendar'} bounds set to {bounds}")

    def _on_clicked(self, qdate: QDate) -> None:
        picked = from_qdate(qdate)
        if picked is not None:
            self.date_picked.emit(picked)
