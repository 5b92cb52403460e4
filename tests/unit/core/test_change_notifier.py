# SPDX-License-Identifier: Apache-2.0
"""
Tests for the committed value notifier.
"""

from datetime import date
from unittest.mock import Mock

import pytest

from core.date_range.models import DateRange
from core.date_range.notifier import ChangeNotifier

RANGE = DateRange(date(2024, 3, 10), date(2024, 3, 15))


@pytest.fixture
def notifier():
    created = ChangeNotifier()
    created.activate()
    return created


def test_initial_committed_value_is_empty():
    assert ChangeNotifier().committed == DateRange.empty()


def test_push_notifies_on_distinct_value(notifier):
    callback = Mock()
    notifier.subscribe(callback)

    assert notifier.push(RANGE) is True

    callback.assert_called_once_with(RANGE)
    assert notifier.committed == RANGE


def test_repeated_push_notifies_once(notifier):
    callback = Mock()
    notifier.subscribe(callback)

    notifier.push(RANGE)
    assert notifier.push(DateRange(date(2024, 3, 10), date(2024, 3, 15))) is False

    callback.assert_called_once()


def test_partial_push_collapses_to_empty(notifier):
    callback = Mock()
    notifier.subscribe(callback)

    assert notifier.push(DateRange(date(2024, 3, 10), None)) is False
    callback.assert_not_called()

    notifier.push(RANGE)
    notifier.push(DateRange(date(2024, 3, 20), None))

    assert callback.call_args_list[-1].args == (DateRange.empty(),)
    assert notifier.committed.is_empty


def test_push_before_activation_updates_committed_without_callback():
    notifier = ChangeNotifier()
    callback = Mock()
    notifier.subscribe(callback)

    assert notifier.push(RANGE) is True

    callback.assert_not_called()
    assert notifier.committed == RANGE

    notifier.activate()
    notifier.push(RANGE)
    callback.assert_not_called()


def test_silent_push_skips_subscribers(notifier):
    callback = Mock()
    notifier.subscribe(callback)

    notifier.push(RANGE, silent=True)

    callback.assert_not_called()
    assert notifier.committed == RANGE


def test_unsubscribe_stops_notifications(notifier):
    callback = Mock()
    unsubscribe = notifier.subscribe(callback)

    unsubscribe()
    notifier.push(RANGE)

    callback.assert_not_called()
    # Removing twice is harmless
    notifier.unsubscribe(callback)


def test_subscriber_errors_propagate(notifier):
    notifier.subscribe(Mock(side_effect=RuntimeError("host failure")))

    with pytest.raises(RuntimeError):
        notifier.push(RANGE)
