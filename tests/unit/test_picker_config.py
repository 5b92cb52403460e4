# SPDX-License-Identifier: Apache-2.0
"""
Tests for configuration loading and the picker configuration dataclass.
"""

import json
from datetime import date

import pytest

from config import app_config
from config.app_config import APP_DIR_NAME, ConfigManager
from core.date_range.config import PickerConfig
from core.date_range.models import DateBounds


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setattr(app_config.Path, "home", lambda: tmp_path)
    return tmp_path


def _write_user_config(home, data):
    user_config_dir = home / APP_DIR_NAME
    user_config_dir.mkdir(exist_ok=True)
    (user_config_dir / "app_config.json").write_text(
        json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8"
    )


def test_defaults_loaded_without_user_config(home):
    manager = ConfigManager()

    assert manager.get("date_range_picker.years_back") == 100
    assert manager.get("date_range_picker.date_format") == "MM/dd/yyyy"
    assert manager.get("ui.language") == "en_US"
    assert manager.get("missing.key", "fallback") == "fallback"


def test_user_config_merges_over_defaults(home):
    _write_user_config(home, {"date_range_picker": {"years_ahead": 5}})

    manager = ConfigManager()

    assert manager.get("date_range_picker.years_ahead") == 5
    assert manager.get("date_range_picker.years_back") == 100


@pytest.mark.parametrize(
    "override, error",
    [
        ({"date_range_picker": {"years_back": -1}}, ValueError),
        ({"date_range_picker": {"years_back": True}}, ValueError),
        ({"date_range_picker": {"date_format": "  "}}, ValueError),
        ({"date_range_picker": {"separator": 3}}, TypeError),
        ({"ui": {"language": "xx_XX"}}, ValueError),
        ({"ui": "dark"}, TypeError),
    ],
)
def test_invalid_user_config_rejected(home, override, error):
    _write_user_config(home, override)

    with pytest.raises(error):
        ConfigManager()


def test_save_round_trips_through_user_file(home):
    manager = ConfigManager()
    manager.set("date_range_picker.date_format", "yyyy-MM-dd")
    manager.save()

    reloaded = ConfigManager()

    assert reloaded.get("date_range_picker.date_format") == "yyyy-MM-dd"


def test_get_all_returns_copy(home):
    manager = ConfigManager()
    snapshot = manager.get_all()
    snapshot["ui"]["language"] = "zh_CN"

    assert manager.get("ui.language") == "en_US"


def test_picker_config_from_manager(home):
    _write_user_config(home, {"date_range_picker": {"years_back": 2, "years_ahead": 1}})

    config = PickerConfig.from_manager(ConfigManager())

    assert config.global_bounds(today=date(2024, 6, 1)) == DateBounds(
        date(2022, 1, 1), date(2025, 12, 31)
    )


def test_picker_config_from_dict_ignores_unknown_keys():
    config = PickerConfig.from_dict({"date_format": "dd.MM.yyyy", "theme": "dark"})

    assert config.date_format == "dd.MM.yyyy"
    assert config.years_back == 100
