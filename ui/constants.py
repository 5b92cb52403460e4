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
UI Constants for RangePicker.

Centralized constants to avoid hardcoding values throughout the UI layer.
"""

# Layout constants
DEFAULT_SPACING = 8
DEFAULT_MARGINS = (12, 12, 12, 12)

# Date range picker constants
PICKER_INPUT_MIN_WIDTH = 200
CALENDAR_PANEL_MIN_WIDTH = 260
POPOVER_OFFSET_Y = 4

# Dynamic property roles used by stylesheets
ROLE_PICKER_INPUT = "date-range-input"
ROLE_PICKER_BUTTON = "date-range-open"
ROLE_CALENDAR_TITLE = "date-range-calendar-title"
ROLE_POPOVER_ACTION = "date-range-action"
