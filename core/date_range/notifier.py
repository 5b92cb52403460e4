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
Change notification for the committed date range.

Holds the last committed value and a list of subscribers. A push only
reaches subscribers when the normalized value differs from the committed
one and the notifier has been activated.
"""

from typing import Any, Callable, List

from core.date_range.models import DateRange
from utils.logger import get_logger

logger = get_logger(__name__)

ChangeCallback = Callable[[DateRange], Any]


class ChangeNotifier:
    """Distinct-until-changed broadcast of the committed range."""

    def __init__(self):
        self._committed = DateRange.empty()
        self._subscribers: List[ChangeCallback] = []
        self._active = False

    @property
    def committed(self) -> DateRange:
        """Last committed value, never partial."""
        return self._committed

    @property
    def is_active(self) -> bool:
        return self._active

    def activate(self) -> None:
        """Open the gate. Pushes made before this never reach subscribers."""
        if not self._active:
            self._active = True
            logger.debug("Change notifier activated")

    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        """
        Register a subscriber.

        Args:
            callback: Called with the new committed ``DateRange``

        Returns:
            A function that removes the subscription
        """
        self._subscribers.append(callback)
        return lambda: self.unsubscribe(callback)

    def unsubscribe(self, callback: ChangeCallback) -> None:
        try:
            self._subscribers.remove(callback)
        except ValueError:
            logger.debug("Unsubscribe called for unknown callback %r", callback)

    def push(self, value: DateRange, silent: bool = False) -> bool:
        """
        Offer a new working value.

        Args:
            value: Working range, possibly partial or ``None``
            silent: Update the committed value without calling subscribers

        Returns:
            True if the committed value changed
        """
        normalized = DateRange.from_value(value).normalized()

        if normalized == self._committed:
            return False

        self._committed = normalized
        logger.debug(f"Committed value changed to {normalized}")

        if self._active and not silent:
            for callback in list(self._subscribers):
                callback(normalized)

        return True
