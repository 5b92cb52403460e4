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
Package-wide constants for RangePicker.
"""

# ============================================================================
# Application Constants
# ============================================================================

APP_LOGGER_NAME = "rangepicker"
ENV_VAR_NAME = "RANGEPICKER_ENV"

# ============================================================================
# Date Range Picker Defaults
# ============================================================================

DEFAULT_YEARS_BACK = 100
DEFAULT_YEARS_AHEAD = 100
DEFAULT_DATE_FORMAT = "MM/dd/yyyy"
DEFAULT_RANGE_SEPARATOR = " - "
SUPPORTED_LANGUAGES = ("en_US", "zh_CN")

# ============================================================================
# Logging Constants
# ============================================================================

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10 MB log file size
LOG_FILE_BACKUP_COUNT = 5  # Number of backup log files
