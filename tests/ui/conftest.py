# SPDX-License-Identifier: Apache-2.0
"""
Pytest fixtures for UI tests.
"""

from unittest.mock import Mock

import pytest

from utils.i18n import I18nQtManager


@pytest.fixture
def mock_i18n():
    """Create a mock I18nQtManager for testing."""
    i18n = Mock(spec=I18nQtManager)
    i18n.t = Mock(side_effect=lambda key, **kwargs: key)
    i18n.language_changed = Mock()
    i18n.language_changed.connect = Mock()
    return i18n
