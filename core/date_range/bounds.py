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
Selectable window calculation for the begin and end calendars.

The begin calendar always gets the global window. Picking a new start
invalidates an inconsistent end, so only the end calendar ever needs its
window narrowed.
"""

from datetime import date
from typing import Optional

from config.constants import DEFAULT_YEARS_AHEAD, DEFAULT_YEARS_BACK
from core.date_range.models import DateBounds


def default_global_bounds(
    today: Optional[date] = None,
    years_back: int = DEFAULT_YEARS_BACK,
    years_ahead: int = DEFAULT_YEARS_AHEAD,
) -> DateBounds:
    """
    Build the default global window around the current year.

    Args:
        today: Reference date, defaults to ``date.today()``
        years_back: Whole years before the current one to allow
        years_ahead: Whole years after the current one to allow

    Returns:
        Window from Jan 1 of ``year - years_back`` to Dec 31 of
        ``year + years_ahead``
    """
    if years_back < 0 or years_ahead < 0:
        raise ValueError("years_back and years_ahead must be non-negative")

    year = (today or date.today()).year
    min_year = max(year - years_back, date.min.year)
    max_year = min(year + years_ahead, date.max.year)
    return DateBounds(date(min_year, 1, 1), date(max_year, 12, 31))


def compute_start_bounds(global_bounds: DateBounds) -> DateBounds:
    """Window for the begin calendar: the global window, untouched."""
    return global_bounds


def compute_end_bounds(start: Optional[date], global_bounds: DateBounds) -> DateBounds:
    """Window for the end calendar: starts at ``start`` when one is picked."""
    if start is None:
        return DateBounds(global_bounds.min_date, global_bounds.max_date)
    # A start past the global window pins the end calendar to that day.
    return DateBounds(start, max(start, global_bounds.max_date))
