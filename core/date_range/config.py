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
Configuration for the date range picker.
"""

from dataclasses import dataclass, fields
from datetime import date
from typing import Any, Mapping, Optional

from config.constants import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_RANGE_SEPARATOR,
    DEFAULT_YEARS_AHEAD,
    DEFAULT_YEARS_BACK,
)
from core.date_range.bounds import default_global_bounds
from core.date_range.models import DateBounds


@dataclass
class PickerConfig:
    """Settings shared by every picker instance."""

    # Global window, in whole years around the current one
    years_back: int = DEFAULT_YEARS_BACK
    years_ahead: int = DEFAULT_YEARS_AHEAD

    # Qt date pattern used for the committed value preview
    date_format: str = DEFAULT_DATE_FORMAT
    separator: str = DEFAULT_RANGE_SEPARATOR

    @classmethod
    def from_dict(cls, config_dict: Optional[Mapping[str, Any]]) -> "PickerConfig":
        """Create a PickerConfig from a dictionary, ignoring unknown keys."""
        valid_keys = {f.name for f in fields(cls)}
        filtered_args = {k: v for k, v in (config_dict or {}).items() if k in valid_keys}

        return cls(**filtered_args)

    @classmethod
    def from_manager(cls, config_manager) -> "PickerConfig":
        """Read the ``date_range_picker`` section of a ConfigManager."""
        return cls.from_dict(config_manager.get("date_range_picker", {}))

    def global_bounds(self, today: Optional[date] = None) -> DateBounds:
        return default_global_bounds(today, self.years_back, self.years_ahead)
