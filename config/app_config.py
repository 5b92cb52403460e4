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
Configuration management for RangePicker.

Handles loading, validation, and saving of the picker configuration.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from config.constants import SUPPORTED_LANGUAGES

APP_DIR_NAME = ".rangepicker"


def get_app_dir() -> Path:
    """Return the root directory for RangePicker user data."""
    return Path.home() / APP_DIR_NAME


logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages picker configuration with validation and persistence."""

    def __init__(self):
        """Initialize the configuration manager."""
        self.default_config_path = (
            Path(__file__).parent / "default_config.json"
        )
        self.user_config_dir = get_app_dir()
        self.user_config_path = self.user_config_dir / "app_config.json"
        self._config: Dict[str, Any] = {}
        self._default_config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from user config or default config."""
        try:
            logger.info(
                f"Loading default configuration from "
                f"{self.default_config_path}"
            )
            with open(self.default_config_path, 'r', encoding='utf-8') as f:
                self._default_config = json.load(f)

            user_config: Dict[str, Any] = {}
            if self.user_config_path.exists():
                logger.info(
                    f"Loading user configuration from "
                    f"{self.user_config_path}"
                )
                with open(self.user_config_path, 'r', encoding='utf-8') as f:
                    user_config = json.load(f)

            self._config = self._deep_merge(self._default_config, user_config)

            self._validate_config()
            logger.info("Configuration loaded and validated successfully")

        except FileNotFoundError as e:
            logger.error(f"Configuration file not found: {e}")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in configuration file: {e}")
            raise

    def _validate_config(self) -> None:
        """Validate required configuration fields and types."""
        required_fields = {
            "version": str,
            "date_range_picker": dict,
            "ui": dict,
        }

        for field, expected_type in required_fields.items():
            if field not in self._config:
                raise ValueError(
                    f"Missing required configuration field: {field}"
                )
            if not isinstance(self._config[field], expected_type):
                raise TypeError(
                    f"Configuration field '{field}' must be of type "
                    f"{expected_type.__name__}, got "
                    f"{type(self._config[field]).__name__}"
                )

        self._validate_picker_config()
        self._validate_ui_config()

    def _validate_picker_config(self) -> None:
        """Validate date range picker configuration."""
        picker_config = self._config["date_range_picker"]

        for field in ("years_back", "years_ahead"):
            if field not in picker_config:
                raise ValueError(f"Missing required field: date_range_picker.{field}")
            value = picker_config[field]
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(
                    f"date_range_picker.{field} must be a non-negative integer"
                )

        date_format = picker_config.get("date_format")
        if not isinstance(date_format, str) or not date_format.strip():
            raise ValueError("date_range_picker.date_format must be a non-empty string")

        if "separator" in picker_config and not isinstance(picker_config["separator"], str):
            raise TypeError("date_range_picker.separator must be a string")

    def _validate_ui_config(self) -> None:
        """Validate UI configuration."""
        ui_config = self._config["ui"]
        if "language" not in ui_config:
            raise ValueError("Missing required field: ui.language")

        if ui_config["language"] not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"ui.language must be one of {list(SUPPORTED_LANGUAGES)}"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Supports nested keys using dot notation (e.g., "ui.language").

        Args:
            key: Configuration key (supports dot notation)
            default: Default value if key is not found

        Returns:
            Configuration value or default
        """
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value by key.

        Args:
            key: Configuration key (supports dot notation)
            value: Value to set
        """
        keys = key.split('.')
        config = self._config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def save(self) -> None:
        """Save the current configuration to the user config file."""
        self.user_config_dir.mkdir(parents=True, exist_ok=True)

        # Validate before saving
        self._validate_config()

        with open(self.user_config_path, 'w', encoding='utf-8') as f:
            json.dump(self._config, f, indent=2, ensure_ascii=False)

        try:
            os.chmod(self.user_config_path, 0o600)
        except OSError as e:
            logger.warning(f"Could not set file permissions: {e}")

        logger.info(f"Configuration saved to {self.user_config_path}")

    def get_all(self) -> Dict[str, Any]:
        """
        Get the entire configuration dictionary.

        Returns:
            Complete configuration dictionary
        """
        return self._clone_value(self._config)

    @classmethod
    def _deep_merge(cls, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge two dictionaries without mutating inputs."""
        result: Dict[str, Any] = {}

        for key, base_value in base.items():
            if key in override:
                override_value = override[key]
                if isinstance(base_value, dict) and isinstance(override_value, dict):
                    result[key] = cls._deep_merge(base_value, override_value)
                else:
                    result[key] = cls._clone_value(override_value)
            else:
                result[key] = cls._clone_value(base_value)

        for key, override_value in override.items():
            if key not in base:
                result[key] = cls._clone_value(override_value)

        return result

    @classmethod
    def _clone_value(cls, value: Any) -> Any:
        """Return a deep copy of supported container types."""
        if isinstance(value, dict):
            return {k: cls._clone_value(v) for k, v in value.items()}
        if isinstance(value, list):
            return [cls._clone_value(v) for v in value]
        return copy.deepcopy(value)

