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
Popup frame hosting the two calendars of the date range picker.
"""

from typing import Any, Optional

from ui.constants import POPOVER_OFFSET_Y
from ui.qt_imports import QFrame, QHideEvent, QPoint, Qt, QWidget, Signal


class PickerPopover(QFrame):
    """Frame shown as a ``Qt.Popup`` below an anchor widget."""

    closed = Signal()

    def __init__(self, anchor: Optional[QWidget] = None, parent: Optional[QWidget] = None):
        super().__init__(parent, Qt.WindowType.Popup)
        self._anchor = anchor
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.setObjectName("date_range_popover")

    def set_anchor(self, anchor: Optional[QWidget]) -> None:
        self._anchor = anchor

    def toggle(self, origin: Any = None) -> None:
        """
        Show the popover below ``origin`` (or the anchor), or hide it.

        Args:
            origin: Widget the popover should align with
        """
        if self.isVisible():
            self.hide()
            return

        target = origin if isinstance(origin, QWidget) else self._anchor
        if target is not None:
            self.move(target.mapToGlobal(QPoint(0, target.height() + POPOVER_OFFSET_Y)))

        self.show()
        self.raise_()

    def hideEvent(self, event: QHideEvent) -> None:
        super().hideEvent(event)
        self.closed.emit()
