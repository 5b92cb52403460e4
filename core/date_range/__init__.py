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
"""Date range control core: value types, bounds, notifier and state."""

from core.date_range.accessor import DateRangeValueAccessor
from core.date_range.bounds import compute_end_bounds, compute_start_bounds, default_global_bounds
from core.date_range.config import PickerConfig
from core.date_range.models import DateBounds, DateRange, coerce_boundary
from core.date_range.notifier import ChangeNotifier
from core.date_range.state import CalendarCollaborator, DateRangeState, PopoverCollaborator

__all__ = [
    "CalendarCollaborator",
    "ChangeNotifier",
    "DateBounds",
    "DateRange",
    "DateRangeState",
    "DateRangeValueAccessor",
    "PickerConfig",
    "PopoverCollaborator",
    "coerce_boundary",
    "compute_end_bounds",
    "compute_start_bounds",
    "default_global_bounds",
]
