# SPDX-License-Identifier: Apache-2.0
"""
Tests for the date range picker widget.
"""

from datetime import date
from unittest.mock import Mock

import pytest

from core.date_range.config import PickerConfig
from core.date_range.models import DateBounds, DateRange
from ui.date_range_picker import DateRangePicker
from ui.date_range_picker.formatting import format_range, from_qdate, to_qdate

pytestmark = pytest.mark.ui

GLOBAL = DateBounds(date(2000, 1, 1), date(2030, 12, 31))


@pytest.fixture
def picker(qapp, mock_i18n):
    created = DateRangePicker(mock_i18n, global_bounds=GLOBAL)
    yield created
    created.popover.hide()
    created.deleteLater()


def test_labels_come_from_translation_keys(picker):
    assert picker.begin_panel.title_label.text() == "date_range_picker.begin"
    assert picker.end_panel.title_label.text() == "date_range_picker.end"
    assert picker.done_button.text() == "date_range_picker.done"
    assert picker.clear_button.text() == "date_range_picker.clear"
    assert picker.input.placeholderText() == "date_range_picker.select_range"
    assert picker.input.property("role") == "date-range-input"


def test_text_overrides_take_precedence(qapp, mock_i18n):
    picker = DateRangePicker(
        mock_i18n, global_bounds=GLOBAL, text={"begin": "From", "bogus": "ignored"}
    )

    assert picker.begin_panel.title_label.text() == "From"
    assert picker.text("end") == "date_range_picker.end"

    picker.set_text({"end": "To"})
    assert picker.end_panel.title_label.text() == "To"


def test_calendar_clicks_drive_committed_value(picker):
    on_change = Mock()
    picker.register_on_change(on_change)
    emitted = []
    picker.value_changed.connect(emitted.append)

    picker.begin_panel.calendar.clicked.emit(to_qdate(date(2024, 3, 10)))
    on_change.assert_not_called()
    assert picker.end_panel.minimum_date() == date(2024, 3, 10)

    picker.end_panel.calendar.clicked.emit(to_qdate(date(2024, 3, 15)))

    expected = DateRange(date(2024, 3, 10), date(2024, 3, 15))
    on_change.assert_called_once_with(expected)
    assert emitted == [expected]
    assert picker.value() == expected
    assert picker.input.text() == "03/10/2024 - 03/15/2024"


def test_later_begin_clears_end_and_preview(picker):
    picker.set_begin(date(2024, 3, 10))
    picker.set_end(date(2024, 3, 15))

    picker.begin_panel.calendar.clicked.emit(to_qdate(date(2024, 3, 20)))

    assert picker.value() == DateRange.empty()
    assert picker.current_value() == DateRange(date(2024, 3, 20), None)
    assert picker.end_panel.selected_date() is None
    assert picker.input.text() == ""


def test_write_value_updates_view_without_notifying(picker):
    on_change = Mock()
    picker.register_on_change(on_change)

    picker.write_value({"start": date(2024, 1, 1), "end": date(2024, 1, 31)})

    on_change.assert_not_called()
    assert picker.begin_panel.selected_date() == date(2024, 1, 1)
    assert picker.end_panel.selected_date() == date(2024, 1, 31)
    assert picker.begin_panel.calendar.selectedDate() == to_qdate(date(2024, 1, 1))
    assert picker.input.text() == "01/01/2024 - 01/31/2024"


def test_clear_button_resets_selection(picker):
    picker.write_value(DateRange(date(2024, 1, 1), date(2024, 1, 31)))
    on_change = Mock()
    picker.register_on_change(on_change)

    picker.clear_button.click()

    on_change.assert_called_once_with(DateRange.empty())
    assert picker.begin_panel.selected_date() is None
    assert picker.end_panel.selected_date() is None
    assert picker.input.text() == ""


def test_popover_close_validates_and_marks_touched(picker):
    on_touched = Mock()
    picker.register_on_touched(on_touched)
    picker.set_begin(date(2024, 3, 10))

    picker.popover.closed.emit()

    assert picker.current_value().is_empty
    on_touched.assert_called_once_with()


def test_disabled_picker_ignores_clicks(picker):
    on_change = Mock()
    picker.register_on_change(on_change)
    picker.set_disabled_state(True)

    picker.begin_panel.calendar.clicked.emit(to_qdate(date(2024, 3, 10)))
    picker.end_panel.calendar.clicked.emit(to_qdate(date(2024, 3, 15)))
    picker.open_picker()

    on_change.assert_not_called()
    assert picker.current_value().is_empty
    assert not picker.open_button.isEnabled()
    assert not picker.popover.isVisible()
    assert picker.is_disabled()
    assert picker.property("disabled") is True


def test_open_picker_toggles_popover(picker):
    picker.open_picker()
    assert picker.popover.isVisible()

    picker.open_picker()
    assert not picker.popover.isVisible()


def test_global_bounds_reach_calendars(picker):
    narrow = DateBounds(date(2024, 1, 1), date(2024, 12, 31))

    picker.set_global_bounds(narrow)

    assert picker.begin_panel.minimum_date() == date(2024, 1, 1)
    assert picker.begin_panel.maximum_date() == date(2024, 12, 31)
    assert picker.end_panel.maximum_date() == date(2024, 12, 31)


def test_date_format_and_config_applied(qapp, mock_i18n):
    picker = DateRangePicker(
        mock_i18n,
        global_bounds=GLOBAL,
        config=PickerConfig(date_format="yyyy-MM-dd", separator=" ~ "),
    )
    picker.write_value((date(2024, 1, 1), date(2024, 1, 2)))
    assert picker.input.text() == "2024-01-01 ~ 2024-01-02"

    picker.set_date_format("dd.MM.yyyy")
    assert picker.input.text() == "01.01.2024 ~ 02.01.2024"


def test_accessible_label(picker):
    picker.set_accessible_label("Reporting period")

    assert picker.input.accessibleName() == "Reporting period"


def test_format_helpers():
    assert format_range(DateRange(date(2024, 1, 1), None)) == ""
    assert from_qdate(to_qdate(date(2024, 2, 29))) == date(2024, 2, 29)
