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
Conversion between Python dates and QDate, and preview text for a range.
"""

from datetime import date
from typing import Optional

from config.constants import DEFAULT_DATE_FORMAT, DEFAULT_RANGE_SEPARATOR
from core.date_range.models import DateRange
from ui.qt_imports import QDate


def to_qdate(value: date) -> QDate:
    return QDate(value.year, value.month, value.day)


def from_qdate(value: QDate) -> Optional[date]:
    if value is None or not value.isValid():
        return None
    return date(value.year(), value.month(), value.day())


def format_date(value: Optional[date], pattern: str = DEFAULT_DATE_FORMAT) -> str:
    """Render a single date with a Qt date pattern, empty for ``None``."""
    if value is None:
        return ""
    return to_qdate(value).toString(pattern)


def format_range(
    value: DateRange,
    pattern: str = DEFAULT_DATE_FORMAT,
    separator: str = DEFAULT_RANGE_SEPARATOR,
) -> str:
    """
    Render a committed range for the preview field.

    Partial and empty ranges render as an empty string so the field shows
    its placeholder.
    """
    if value is None or not value.is_complete:
        return ""
    return f"{format_date(value.start, pattern)}{separator}{format_date(value.end, pattern)}"
