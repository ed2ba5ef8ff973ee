"""
Configuration management for Window Keeper.

Handles loading, validation, and saving of library configuration.
"""

import copy
import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict

from window_keeper.config.constants import APP_NAME
from window_keeper.core.platform import get_platform
from window_keeper.core.window_state.config import WindowStateConfig
from window_keeper.core.window_state.flavor import FLAVORS


CONFIG_FILE_NAME = "config.json"


def get_app_dir() -> Path:
    """Return the root directory for Window Keeper user data."""
    return get_platform().get_app_data_directory() / APP_NAME


logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages library configuration with validation and persistence."""

    def __init__(self, config_dir: Path = None):
        """
        Initialize the configuration manager.

        Args:
            config_dir: Directory holding the user config file, defaults to
                get_app_dir()
        """
        self.default_config_path = Path(__file__).parent / "default_config.json"
        self.user_config_dir = Path(config_dir) if config_dir is not None else get_app_dir()
        self.user_config_path = self.user_config_dir / CONFIG_FILE_NAME
        self._config: Dict[str, Any] = {}
        self._default_config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from user config or default config."""
        try:
            logger.info(f"Loading default configuration from {self.default_config_path}")
            with open(self.default_config_path, 'r', encoding='utf-8') as f:
                self._default_config = json.load(f)

            user_config: Dict[str, Any] = {}
            if self.user_config_path.exists():
                logger.info(f"Loading user configuration from {self.user_config_path}")
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
        except Exception as e:
            logger.error(f"Error loading configuration: {e}")
            raise

    def _validate_config(self) -> None:
        """Validate required configuration fields and types."""
        required_fields = {
            "version": str,
            "window_state": dict,
            "logging": dict,
        }

        for field, expected_type in required_fields.items():
            if field not in self._config:
                raise ValueError(f"Missing required configuration field: {field}")
            if not isinstance(self._config[field], expected_type):
                raise TypeError(
                    f"Configuration field '{field}' must be of type "
                    f"{expected_type.__name__}, got "
                    f"{type(self._config[field]).__name__}"
                )

        self._validate_window_state_config()
        self._validate_logging_config()

    def _validate_window_state_config(self) -> None:
        """Validate window state configuration."""
        ws_config = self._config["window_state"]

        flavor = ws_config.get("flavor")
        if flavor not in FLAVORS:
            raise ValueError(f"window_state.flavor must be one of {sorted(FLAVORS)}")

        if ws_config.get("scope") not in ("user", "system"):
            raise ValueError("window_state.scope must be 'user' or 'system'")

        for field in ("organization", "application"):
            value = ws_config.get(field)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"window_state.{field} must be a non-empty string")

        if not isinstance(ws_config.get("skip_save_when_iconified", True), bool):
            raise TypeError("window_state.skip_save_when_iconified must be a boolean")

        # null means "not set"
        optional_numbers = (
            "fallback_width",
            "fallback_height",
            "default_width",
            "default_height",
            "default_x",
            "default_y",
        )
        for field in optional_numbers:
            value = ws_config.get(field)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"window_state.{field} must be a number or null")

    def _validate_logging_config(self) -> None:
        """Validate logging configuration."""
        log_config = self._config["logging"]
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        level = log_config.get("level", "INFO")
        if not isinstance(level, str) or level.upper() not in valid_levels:
            raise ValueError(f"logging.level must be one of {valid_levels}")
        if not isinstance(log_config.get("console_output", True), bool):
            raise TypeError("logging.console_output must be a boolean")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Supports nested keys using dot notation (e.g., "window_state.flavor").

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

        Supports nested keys using dot notation (e.g., "logging.level").

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
        try:
            self.user_config_dir.mkdir(parents=True, exist_ok=True)

            self._validate_config()

            with open(self.user_config_path, 'w', encoding='utf-8') as f:
                json.dump(self._config, f, indent=2, ensure_ascii=False)

            # Owner read/write only
            try:
                os.chmod(self.user_config_path, 0o600)
            except OSError as e:
                logger.warning(f"Could not set file permissions: {e}")

            logger.info(f"Configuration saved to {self.user_config_path}")

        except Exception as e:
            logger.error(f"Error saving configuration: {e}")
            raise

    def get_all(self) -> Dict[str, Any]:
        """
        Get the entire configuration dictionary.

        Returns:
            Complete configuration dictionary
        """
        return self._clone_value(self._config)

    def reload(self) -> None:
        """Reload configuration from disk."""
        self._load_config()

    def get_defaults(self) -> Mapping[str, Any]:
        """Return an immutable view of the default configuration."""
        return self._deep_freeze(self._default_config)

    def get_window_state_config(self) -> WindowStateConfig:
        """Return the window_state section as a WindowStateConfig."""
        return WindowStateConfig.from_dict(self.get("window_state", {}))

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

    @classmethod
    def _deep_freeze(cls, value: Any) -> Any:
        """Create an immutable representation of nested configuration data."""
        if isinstance(value, dict):
            frozen = {k: cls._deep_freeze(v) for k, v in value.items()}
            return MappingProxyType(frozen)
        if isinstance(value, list):
            return tuple(cls._deep_freeze(v) for v in value)
        return value
