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
Centralized PySide6 imports for the UI layer.

This module provides a single location for all PySide6 imports used throughout
the UI layer, making it easier to manage dependencies and ensure consistent
import patterns across the UI layer.
"""

# Core Qt classes
from PySide6.QtCore import (
    QDate,
    QEvent,
    QObject,
    QPoint,
    Qt,
    Signal,
    Slot,
)

# GUI classes
from PySide6.QtGui import (
    QHideEvent,
    QKeyEvent,
    QShowEvent,
)

# Widget classes
from PySide6.QtWidgets import (
    QApplication,
    QWidget,
    # Layout classes
    QVBoxLayout,
    QHBoxLayout,
    # Container widgets
    QFrame,
    # Input widgets
    QCalendarWidget,
    QLineEdit,
    QPushButton,
    QToolButton,
    # Display widgets
    QLabel,
    QSizePolicy,
)

# Re-export commonly used items for convenience
__all__ = [
    # Core
    "QApplication",
    "QWidget",
    "QObject",
    "QDate",
    "QEvent",
    "QPoint",
    "Qt",
    "Signal",
    "Slot",
    # Layouts
    "QVBoxLayout",
    "QHBoxLayout",
    # Widgets
    "QCalendarWidget",
    "QFrame",
    "QLabel",
    "QLineEdit",
    "QPushButton",
    "QToolButton",
    "QSizePolicy",
    # Events
    "QHideEvent",
    "QKeyEvent",
    "QShowEvent",
]
