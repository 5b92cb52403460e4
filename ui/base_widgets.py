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
基础UI组件

提供可重用的基础组件，统一国际化和主题属性行为。
"""

from typing import Any, Optional

from ui.qt_imports import QWidget
from utils.i18n import I18nQtManager
from utils.logger import get_logger

logger = get_logger(__name__)


class BaseWidget(QWidget):
    """基础UI组件

    集成了国际化和主题属性功能的基础组件。
    """

    def __init__(self, i18n: I18nQtManager, parent: Optional[QWidget] = None):
        """初始化基础组件

        Args:
            i18n: 国际化管理器
            parent: 父组件
        """
        super().__init__(parent)

        self.i18n = i18n
        if hasattr(self.i18n, "language_changed"):
            self.i18n.language_changed.connect(self.update_translations)

        self.setObjectName(self.__class__.__name__)

        # 注意：不在这里调用 setup_ui()，让子类在自己的 __init__ 中调用

    def setup_ui(self):
        """设置UI布局

        子类应该重写此方法来创建UI元素。
        """
        pass

    def update_translations(self):
        """更新翻译

        子类应该重写此方法来更新所有UI文本。
        """
        pass

    def set_theme_property(self, property_name: str, value: Any):
        """设置主题属性

        Args:
            property_name: 属性名
            value: 属性值
        """
        self.setProperty(property_name, value)
        # 动态属性变化后需要重新应用样式
        self.style().unpolish(self)
        self.style().polish(self)

