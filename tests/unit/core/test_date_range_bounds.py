# SPDX-License-Identifier: Apache-2.0
"""
Tests for date range window calculation and value types.
"""

from datetime import date, datetime

import pytest

from core.date_range.bounds import compute_end_bounds, compute_start_bounds, default_global_bounds
from core.date_range.models import DateBounds, DateRange

GLOBAL = DateBounds(date(2000, 1, 1), date(2030, 12, 31))


def test_start_bounds_are_global_bounds():
    assert compute_start_bounds(GLOBAL) == GLOBAL


def test_end_bounds_without_start_use_global_window():
    assert compute_end_bounds(None, GLOBAL) == GLOBAL


def test_end_bounds_start_at_picked_start():
    bounds = compute_end_bounds(date(2024, 3, 10), GLOBAL)

    assert bounds == DateBounds(date(2024, 3, 10), date(2030, 12, 31))


def test_end_bounds_for_start_past_global_max_collapse_to_single_day():
    bounds = compute_end_bounds(date(2031, 6, 1), GLOBAL)

    assert bounds.min_date == bounds.max_date == date(2031, 6, 1)


def test_default_global_bounds_span_years_around_today():
    bounds = default_global_bounds(today=date(2024, 7, 15))

    assert bounds.min_date == date(1924, 1, 1)
    assert bounds.max_date == date(2124, 12, 31)


def test_default_global_bounds_custom_offsets():
    bounds = default_global_bounds(today=date(2024, 7, 15), years_back=1, years_ahead=0)

    assert bounds == DateBounds(date(2023, 1, 1), date(2024, 12, 31))


def test_default_global_bounds_rejects_negative_offsets():
    with pytest.raises(ValueError):
        default_global_bounds(today=date(2024, 1, 1), years_back=-1)


def test_inverted_bounds_rejected():
    with pytest.raises(ValueError):
        DateBounds(date(2024, 2, 1), date(2024, 1, 1))


def test_bounds_contains():
    assert GLOBAL.contains(date(2010, 5, 5))
    assert not GLOBAL.contains(date(1999, 12, 31))
    assert not GLOBAL.contains(None)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, DateRange(None, None)),
        ({"start": date(2024, 1, 1), "end": None}, DateRange(date(2024, 1, 1), None)),
        ((date(2024, 1, 1), date(2024, 1, 2)), DateRange(date(2024, 1, 1), date(2024, 1, 2))),
        ({}, DateRange(None, None)),
    ],
)
def test_date_range_from_value(raw, expected):
    assert DateRange.from_value(raw) == expected


def test_date_range_from_value_rejects_unknown_shapes():
    with pytest.raises(TypeError):
        DateRange.from_value("2024-01-01/2024-01-02")


def test_partial_range_normalizes_to_empty():
    assert DateRange(date(2024, 1, 1), None).normalized() == DateRange.empty()
    assert DateRange(None, date(2024, 1, 1)).normalized().is_empty

    complete = DateRange(date(2024, 1, 1), date(2024, 1, 2))
    assert complete.normalized() is complete
    assert complete.to_dict() == {"start": date(2024, 1, 1), "end": date(2024, 1, 2)}


def test_date_range_from_value_truncates_datetimes():
    value = DateRange.from_value({"start": datetime(2024, 1, 1, 23, 59), "end": datetime(2024, 1, 2, 0, 1)})

    assert value == DateRange(date(2024, 1, 1), date(2024, 1, 2))
    assert type(value.start) is date and type(value.end) is date


@pytest.mark.parametrize("side", ["2024-01-01", 20240101, 1.5])
def test_date_range_from_value_rejects_non_date_sides(side):
    with pytest.raises(TypeError):
        DateRange.from_value({"start": side, "end": None})
    with pytest.raises(TypeError):
        DateRange.from_value((None, side))
