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
Date range picker widget.

A read-only preview field plus a calendar button. The button opens a popover
with a Begin and an End calendar. All state lives in
``DateRangeValueAccessor``; this widget only wires Qt collaborators to it.
"""

from datetime import date
from typing import Any, Callable, Dict, Mapping, Optional

from core.date_range.accessor import DateRangeValueAccessor
from core.date_range.config import PickerConfig
from core.date_range.models import DateBounds, DateRange
from ui.base_widgets import BaseWidget
from ui.constants import (
    DEFAULT_MARGINS,
    DEFAULT_SPACING,
    PICKER_INPUT_MIN_WIDTH,
    ROLE_PICKER_BUTTON,
    ROLE_PICKER_INPUT,
    ROLE_POPOVER_ACTION,
)
from ui.date_range_picker.calendar_panel import CalendarPanel
from ui.date_range_picker.formatting import format_range
from ui.date_range_picker.popover import PickerPopover
from ui.qt_imports import (
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QToolButton,
    QVBoxLayout,
    QWidget,
    Signal,
)
from utils.i18n import I18nQtManager
from utils.logger import get_logger

logger = get_logger(__name__)

TEXT_KEYS = ("begin", "end", "done", "clear", "open_calendar", "select_range")


class DateRangePicker(BaseWidget):
    """
    Form control picking a ``DateRange``.

    Hosts bind to it with ``write_value`` / ``register_on_change`` /
    ``register_on_touched`` / ``set_disabled_state``, or connect to the
    ``value_changed`` and ``touched`` signals.
    """

    # Signals
    value_changed = Signal(object)  # DateRange
    touched = Signal()

    def __init__(
        self,
        i18n: I18nQtManager,
        parent: Optional[QWidget] = None,
        config: Optional[PickerConfig] = None,
        global_bounds: Optional[DateBounds] = None,
        text: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize the picker.

        Args:
            i18n: Internationalization manager
            parent: Parent widget
            config: Picker settings, defaults to ``PickerConfig()``
            global_bounds: Outer selectable window, derived from ``config``
                when omitted
            text: Per-key overrides of the translated labels
        """
        super().__init__(i18n, parent)

        self.config = config or PickerConfig()
        self._date_format = self.config.date_format
        self._separator = self.config.separator
        self._text_overrides: Dict[str, str] = {}
        if text:
            self._text_overrides.update(self._filter_text(text))

        self._host_on_change: Optional[Callable[[DateRange], Any]] = None
        self._host_on_touched: Optional[Callable[[], Any]] = None

        self._accessor = DateRangeValueAccessor(global_bounds or self.config.global_bounds())
        self._accessor.register_on_change(self._on_committed)
        self._accessor.register_on_touched(self._on_touched)

        self.setup_ui()
        self.update_translations()

        self._accessor.attach(self.begin_panel, self.end_panel, self.popover)
        self._accessor.activate()

        logger.debug("Date range picker initialized")

    def setup_ui(self):
        """Create the preview field, the button and the popover."""
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(DEFAULT_SPACING)

        self.input = QLineEdit()
        self.input.setReadOnly(True)
        self.input.setMinimumWidth(PICKER_INPUT_MIN_WIDTH)
        self.input.setProperty("role", ROLE_PICKER_INPUT)
        layout.addWidget(self.input, stretch=1)

        self.open_button = QToolButton()
        self.open_button.setProperty("role", ROLE_PICKER_BUTTON)
        self.open_button.clicked.connect(lambda: self.open_picker())
        layout.addWidget(self.open_button)

        self.popover = PickerPopover(anchor=self.input, parent=self)
        popover_layout = QVBoxLayout(self.popover)
        popover_layout.setContentsMargins(*DEFAULT_MARGINS)
        popover_layout.setSpacing(DEFAULT_SPACING)

        calendars_row = QHBoxLayout()
        self.begin_panel = CalendarPanel()
        self.begin_panel.setObjectName("begin_calendar")
        self.begin_panel.date_picked.connect(lambda picked: self._accessor.update_model(True, picked))
        calendars_row.addWidget(self.begin_panel)

        self.end_panel = CalendarPanel()
        self.end_panel.setObjectName("end_calendar")
        self.end_panel.date_picked.connect(lambda picked: self._accessor.update_model(False, picked))
        calendars_row.addWidget(self.end_panel)
        popover_layout.addLayout(calendars_row)

        actions_row = QHBoxLayout()
        actions_row.addStretch()
        self.clear_button = QPushButton()
        self.clear_button.setProperty("role", ROLE_POPOVER_ACTION)
        self.clear_button.clicked.connect(self.clear)
        actions_row.addWidget(self.clear_button)

        self.done_button = QPushButton()
        self.done_button.setProperty("role", ROLE_POPOVER_ACTION)
        self.done_button.clicked.connect(self.popover.hide)
        actions_row.addWidget(self.done_button)
        popover_layout.addLayout(actions_row)

        # Closing the popover is the control's blur
        self.popover.closed.connect(self._on_popover_closed)

    def update_translations(self):
        """Refresh every label from the text table."""
        self.begin_panel.set_title(self.text("begin"))
        self.end_panel.set_title(self.text("end"))
        self.clear_button.setText(self.text("clear"))
        self.done_button.setText(self.text("done"))
        self.open_button.setText(self.text("open_calendar"))
        self.open_button.setToolTip(self.text("open_calendar"))
        self.input.setPlaceholderText(self.text("select_range"))
        self._refresh_display()

    def text(self, key: str) -> str:
        """Label for ``key``, host override first, then translation."""
        if key in self._text_overrides:
            return self._text_overrides[key]
        return self.i18n.t(f"date_range_picker.{key}")

    def set_text(self, text: Mapping[str, str]) -> None:
        self._text_overrides.update(self._filter_text(text))
        self.update_translations()

    # Host-facing contract

    @property
    def accessor(self) -> DateRangeValueAccessor:
        return self._accessor

    def value(self) -> DateRange:
        return self._accessor.value

    def current_value(self) -> DateRange:
        return self._accessor.current_value()

    def write_value(self, value: Any) -> None:
        self._accessor.write_value(value)
        self._refresh_display()

    def register_on_change(self, callback: Callable[[DateRange], Any]) -> None:
        self._host_on_change = callback

    def register_on_touched(self, callback: Callable[[], Any]) -> None:
        self._host_on_touched = callback

    def set_disabled_state(self, disabled: bool) -> None:
        self._accessor.set_disabled_state(disabled)
        self.input.setEnabled(not disabled)
        self.open_button.setEnabled(not disabled)
        self.set_theme_property("disabled", bool(disabled))

    def is_disabled(self) -> bool:
        return self._accessor.disabled

    def set_global_bounds(self, bounds: DateBounds) -> None:
        self._accessor.set_global_bounds(bounds)

    def set_date_format(self, pattern: str) -> None:
        self._date_format = pattern
        self._refresh_display()

    def set_accessible_label(self, label: str) -> None:
        self.input.setAccessibleName(label)
        self.open_button.setAccessibleName(label)

    # Interaction surface

    def open_picker(self, origin: Any = None) -> None:
        self._accessor.open_picker(origin if origin is not None else self.input)

    def set_begin(self, value: Optional[date]) -> None:
        self._accessor.set_begin(value)

    def set_end(self, value: Optional[date]) -> None:
        self._accessor.set_end(value)

    def clear(self) -> None:
        self._accessor.clear()

    def check_state(self) -> None:
        self._accessor.check_state()

    def _on_committed(self, value: DateRange) -> None:
        self._refresh_display()
        self.value_changed.emit(value)
        if self._host_on_change is not None:
            self._host_on_change(value)

    def _on_touched(self) -> None:
        self.touched.emit()
        if self._host_on_touched is not None:
            self._host_on_touched()

    def _on_popover_closed(self) -> None:
        self._accessor.check_state()
        self._accessor.mark_touched()

    def _refresh_display(self) -> None:
        if not hasattr(self, "input"):
            return
        self.input.setText(format_range(self._accessor.value, self._date_format, self._separator))

    @staticmethod
    def _filter_text(text: Mapping[str, str]) -> Dict[str, str]:
        unknown = set(text) - set(TEXT_KEYS)
        if unknown:
            logger.warning(f"Ignoring unknown picker text keys: {sorted(unknown)}")
        return {key: value for key, value in text.items() if key in TEXT_KEYS}
