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
Internationalization (i18n) support for RangePicker.

Provides translation lookup with dot-notation keys, ``{param}`` substitution
and language switching.
"""

import json
import re
from pathlib import Path
from typing import Any, Dict, List

from PySide6.QtCore import QObject, Signal

from utils.logger import get_logger

logger = get_logger(__name__)

PARAMETER_PATTERN = r"\{(\w+)\}"

DEFAULT_TRANSLATIONS_DIR = Path(__file__).parent.parent / "resources" / "translations"


class I18nManager:
    """Basic translation manager without Qt dependencies."""

    def __init__(self, translations_dir: str = None, default_language: str = "en_US"):
        """
        Initialize the translation manager.

        Args:
            translations_dir: Directory containing translation files
            default_language: Default language code (en_US)
        """
        if translations_dir is None:
            translations_dir = DEFAULT_TRANSLATIONS_DIR
        else:
            translations_dir = Path(translations_dir)

        self.translations_dir = translations_dir
        self.current_language = default_language
        self.translations: Dict[str, Any] = {}
        self._load_translations(default_language)

    def _load_translations(self, language: str) -> None:
        """
        Load translations for the specified language.

        Args:
            language: Language code (en_US)
        """
        translation_file = self.translations_dir / f"{language}.json"

        try:
            with open(translation_file, "r", encoding="utf-8") as f:
                self.translations = json.load(f)
            logger.info(f"Loaded translations for language: {language}")
        except FileNotFoundError:
            logger.error(f"Translation file not found: {translation_file}")
            self.translations = {}
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in translation file {translation_file}: {e}")
            self.translations = {}

    def t(self, key: str, **kwargs) -> str:
        """
        Get translated string for the given key.

        Args:
            key: Translation key (supports dot notation, e.g., "date_range_picker.begin")
            **kwargs: Parameters for string formatting. ``fallback`` is returned
                      instead of the key when the key is missing.

        Returns:
            Translated string with parameters substituted
        """
        fallback = kwargs.pop("fallback", None)

        keys = key.split(".")
        value = self.translations

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                logger.warning(
                    f"Translation key not found: {key} (language: {self.current_language})"
                )
                return fallback if fallback is not None else key

        if not isinstance(value, str):
            logger.warning(f"Translation value is not a string: {key}")
            return fallback if fallback is not None else key

        if "{" not in value:
            return value

        try:
            return value.format(**kwargs)
        except KeyError as e:
            logger.warning(f"Missing parameter in translation: {e} for key {key}")
            return value
        except (IndexError, ValueError) as e:
            logger.warning(f"Format error for key {key}: {e}")
            return value

    def get_parameters(self, key: str) -> List[str]:
        """Return the ``{param}`` names used by a translation string."""
        value = self.translations
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return []
        if not isinstance(value, str):
            return []
        return re.findall(PARAMETER_PATTERN, value)

    def change_language(self, language: str) -> None:
        """
        Change the current language.

        Args:
            language: New language code (en_US)
        """
        if language == self.current_language:
            return

        self._load_translations(language)
        self.current_language = language

        logger.info(f"Language changed to: {language}")

    def get_available_languages(self) -> list:
        """
        Get list of available languages.

        Returns:
            List of language codes
        """
        return sorted(file.stem for file in self.translations_dir.glob("*.json"))


class I18nQtManager(QObject, I18nManager):
    """Translation manager with Qt Signal support."""

    language_changed = Signal(str)

    def __init__(self, translations_dir: str = None, default_language: str = "en_US"):
        """
        Initialize the Qt-enabled translation manager.

        Args:
            translations_dir: Directory containing translation files
            default_language: Default language code
        """
        QObject.__init__(self)
        I18nManager.__init__(self, translations_dir, default_language)

    def change_language(self, language: str) -> None:
        """
        Change the current language and emit signal.

        Args:
            language: New language code (en_US)
        """
        if language == self.current_language:
            return

        I18nManager.change_language(self, language)
        self.language_changed.emit(language)
