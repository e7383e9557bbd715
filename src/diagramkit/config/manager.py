"""Unified configuration management for the application."""
from __future__ import annotations

import copy
import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import ValidationError

from diagramkit.config.schemas import AppConfig
from diagramkit.domain.base.exceptions import ConfigurationError

ENV_PREFIX = "DIAGRAMKIT_"

# Environment variable -> path inside the configuration dictionary
ENV_OVERRIDES = {
    f"{ENV_PREFIX}LOG_LEVEL": ("logging", "level"),
    f"{ENV_PREFIX}LOG_DESTINATION": ("logging", "destination"),
    f"{ENV_PREFIX}LOG_FILE": ("logging", "file_path"),
    f"{ENV_PREFIX}EVENTS_MODE": ("events", "mode"),
    f"{ENV_PREFIX}STRICT_MODE": ("diagram", "strict_mode"),
    f"{ENV_PREFIX}COLORED_MARKER": ("diagram", "colored_marker"),
}


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is assembled from, in increasing precedence:
    - schema defaults
    - an optional JSON or YAML file
    - ``DIAGRAMKIT_*`` environment variables
    - explicit overrides passed by the caller (e.g. CLI flags)

    The resulting ``AppConfig`` is loaded lazily and cached.
    """

    def __init__(
        self,
        config_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._overrides = overrides or {}
        self._environ = environ if environ is not None else os.environ
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def reload(self, config_file: Optional[str] = None) -> AppConfig:
        """Discard the cached configuration and load it again."""
        with self._lock:
            if config_file is not None:
                self._config_file = config_file
            self._app_config = None
        return self.app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self.load_from_file(self._config_file)

        config_data = self.apply_environment_overrides(config_data)
        config_data = _deep_merge(config_data, self._overrides)

        try:
            return AppConfig.from_dict(config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}", details=e.errors()) from e

    @staticmethod
    def load_from_file(config_file: str) -> Dict[str, Any]:
        """
        Load a configuration dictionary from a JSON or YAML file.

        Args:
            config_file: Path to a ``.json``, ``.yaml`` or ``.yml`` file

        Returns:
            Configuration dictionary

        Raises:
            ConfigurationError: If the file is missing or cannot be parsed
        """
        path = Path(config_file)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with path.open("r", encoding="utf-8") as f:
                if path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {config_file}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {config_file} must contain a mapping")
        return data

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply ``DIAGRAMKIT_*`` environment variables on top of config_data."""
        result = copy.deepcopy(config_data)
        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = self._environ.get(env_name)
            if value is None or value == "":
                continue
            result.setdefault(section, {})[key] = value
        return result


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result
