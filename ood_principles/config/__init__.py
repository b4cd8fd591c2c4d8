"""Configuration package with clean public API."""

from .defaults import DEFAULT_CONFIG, LogDestination, LogLevel
from .env_expansion import expand_env_vars
from .manager import ConfigurationManager
from .schemas import AppConfig, DemoConfig, LoggingConfig

__all__ = [
    'AppConfig',
    'DemoConfig',
    'LoggingConfig',
    'LogLevel',
    'LogDestination',
    'DEFAULT_CONFIG',
    'ConfigurationManager',
    'expand_env_vars',
]
