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
Value types for the date range control.

``DateRange`` is the pair a host form sees, ``DateBounds`` is a selectable
``[min_date, max_date]`` window handed to a calendar.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional


def coerce_boundary(value: Any) -> Optional[date]:
    """
    Return ``value`` as a plain ``date`` or ``None``.

    ``datetime`` values are truncated to their date part.

    Raises:
        TypeError: If ``value`` is neither ``None`` nor a date
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected a date or None, got {type(value).__name__}")


@dataclass(frozen=True)
class DateBounds:
    """Inclusive window of selectable dates."""

    min_date: date
    max_date: date

    def __post_init__(self):
        if self.min_date > self.max_date:
            raise ValueError(
                f"min_date {self.min_date.isoformat()} is after "
                f"max_date {self.max_date.isoformat()}"
            )

    def contains(self, value: Optional[date]) -> bool:
        """Return True if ``value`` lies inside the window."""
        if value is None:
            return False
        return self.min_date <= value <= self.max_date


@dataclass(frozen=True)
class DateRange:
    """
    A start/end pair where either side may be unset.

    Equality is structural, so two empty ranges always compare equal.
    """

    start: Optional[date] = None
    end: Optional[date] = None

    @classmethod
    def empty(cls) -> "DateRange":
        return cls(None, None)

    @classmethod
    def from_value(cls, value: Any) -> "DateRange":
        """
        Coerce a host-supplied value into a ``DateRange``.

        Accepts ``None``, a ``DateRange``, a mapping with ``start``/``end``
        keys or a ``(start, end)`` tuple. Each side goes through
        ``coerce_boundary``.

        Raises:
            TypeError: If ``value`` or one of its sides has an unsupported type
        """
        if value is None:
            return cls.empty()
        if isinstance(value, DateRange):
            start, end = value.start, value.end
        elif isinstance(value, Mapping):
            start, end = value.get("start"), value.get("end")
        elif isinstance(value, (tuple, list)) and len(value) == 2:
            start, end = value
        else:
            raise TypeError(
                f"Cannot interpret {type(value).__name__} as a date range"
            )
        return cls(coerce_boundary(start), coerce_boundary(end))

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None

    @property
    def is_empty(self) -> bool:
        return self.start is None and self.end is None

    def normalized(self) -> "DateRange":
        """Collapse a partial range to the empty range."""
        if self.is_complete:
            return self
        return DateRange.empty()

    def to_dict(self) -> Dict[str, Optional[date]]:
        return {"start": self.start, "end": self.end}
