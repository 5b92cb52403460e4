#!/usr/bin/env python3
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
Date range picker demo - a small form hosting one picker.

Run from the repository root:

    python examples/date_range_picker_demo.py
"""

import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from PySide6.QtWidgets import QApplication, QCheckBox, QLabel, QVBoxLayout, QWidget

from config.app_config import ConfigManager
from core.date_range import DateRange, PickerConfig
from ui.date_range_picker import DateRangePicker
from utils.i18n import I18nQtManager
from utils.logger import setup_logging


def main() -> int:
    logger = setup_logging(level="DEBUG")
    config_manager = ConfigManager()

    app = QApplication(sys.argv)
    i18n = I18nQtManager(default_language=config_manager.get("ui.language", "en_US"))

    form = QWidget()
    form.setWindowTitle("Date range picker demo")
    layout = QVBoxLayout(form)

    picker = DateRangePicker(i18n, config=PickerConfig.from_manager(config_manager))
    picker.set_accessible_label("Reporting period")
    status = QLabel()

    def show_value(value: DateRange) -> None:
        logger.info(f"Host received {value}")
        status.setText(f"start={value.start} end={value.end}")

    picker.register_on_change(show_value)
    picker.register_on_touched(lambda: logger.info("Picker touched"))
    picker.write_value({"start": date.today().replace(day=1), "end": date.today()})

    disabled_box = QCheckBox("Disabled")
    disabled_box.toggled.connect(picker.set_disabled_state)

    layout.addWidget(picker)
    layout.addWidget(disabled_box)
    layout.addWidget(status)
    form.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
