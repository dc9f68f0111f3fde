"""Unified configuration management for the application."""
from __future__ import annotations

import copy
import json
import os
import threading
from typing import Any, Dict, Optional

from pydantic import ValidationError

from gof_patterns.config.defaults import DEFAULT_CONFIG
from gof_patterns.config.schemas import AppConfig, validate_config
from gof_patterns.config.utils import expand_config_env_vars
from gof_patterns.domain.exceptions import ConfigurationError
from gof_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge override into a copy of base, recursing into nested dicts."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is assembled lazily from:
    - built-in defaults (with ``${VAR:default}`` placeholders)
    - an optional JSON configuration file
    - environment variables expanded into the merged result

    The merged data is validated into a typed AppConfig.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data = copy.deepcopy(DEFAULT_CONFIG)

        if self._config_file:
            config_data = _deep_merge(config_data, self._load_file(self._config_file))

        config_data = expand_config_env_vars(config_data)

        try:
            app_config = validate_config(config_data)
        except ValidationError as e:
            raise ConfigurationError("Invalid configuration", details=e.errors()) from e

        logger.debug(
            "Configuration loaded",
            config_file=self._config_file,
            environment=app_config.environment,
        )
        return app_config

    @staticmethod
    def _load_file(path: str) -> Dict[str, Any]:
        """Read a JSON configuration file."""
        if not os.path.exists(path):
            raise ConfigurationError(f"Configuration file not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Configuration file is not valid JSON: {path}", details=str(e)) from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file must contain a JSON object: {path}")
        return data

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get a configuration value by dotted path.

        Args:
            path: Dotted key such as ``"factory.strict_variants"``
            default: Value returned when the path does not exist

        Returns:
            The configuration value or default
        """
        current: Any = self.app_config.model_dump()
        for part in path.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def reload(self) -> AppConfig:
        """Discard the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
        return self.app_config


_config_manager: Optional[ConfigurationManager] = None
_manager_lock = threading.Lock()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """
    Get the global configuration manager instance.

    Passing a config_file different from the current one replaces the
    global instance.

    Returns:
        Global configuration manager
    """
    global _config_manager

    if _config_manager is None or (config_file and config_file != _config_manager.config_file):
        with _manager_lock:
            if _config_manager is None or (
                config_file and config_file != _config_manager.config_file
            ):
                _config_manager = ConfigurationManager(config_file)

    return _config_manager


def reset_config_manager() -> None:
    """Drop the global configuration manager."""
    global _config_manager

    with _manager_lock:
        _config_manager = None
