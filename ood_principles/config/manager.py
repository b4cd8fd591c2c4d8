"""Configuration management for the application."""
from __future__ import annotations
import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from ood_principles.config.defaults import DEFAULT_CONFIG
from ood_principles.config.env_expansion import expand_env_vars
from ood_principles.config.schemas import AppConfig
from ood_principles.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = "OOD_CONFIG_FILE"


class ConfigurationManager:
    """
    Manages application configuration with defaults and overrides.

    This class handles:
    - Loading default configuration
    - Applying user configuration file overrides
    - Environment variable interpolation
    - Configuration validation
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration manager.

        Args:
            config_file: Optional path to a JSON configuration file. If not
                         provided, OOD_CONFIG_FILE is consulted.
        """
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV)
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            self._app_config = self._load_app_config()
        return self._app_config

    def get_raw_config(self) -> Dict[str, Any]:
        """Merged and expanded configuration before validation."""
        config = copy.deepcopy(DEFAULT_CONFIG)
        if self._config_file:
            self._merge_config(config, self._load_config_file(self._config_file))
        return expand_env_vars(config)

    def reload(self) -> None:
        """Drop the cached configuration so the next access reloads it."""
        self._app_config = None

    def _load_app_config(self) -> AppConfig:
        raw = self.get_raw_config()
        try:
            return AppConfig.from_dict(raw)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")

    def _load_config_file(self, config_path: str) -> Dict[str, Any]:
        """Load configuration from file."""
        logger.debug("Loading configuration file %s", config_path)
        try:
            with open(config_path, 'r') as f:
                user_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}")
        if not isinstance(user_config, dict):
            raise ConfigurationError("Configuration file must contain a JSON object")
        return user_config

    @staticmethod
    def _merge_config(target: Dict[str, Any], source: Dict[str, Any]) -> None:
        """Deep-merge source into target, source winning."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                ConfigurationManager._merge_config(target[key], value)
            else:
                target[key] = value
