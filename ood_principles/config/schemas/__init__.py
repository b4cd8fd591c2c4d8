"""Configuration schemas."""

from .app_schema import AppConfig
from .demo_schema import DemoConfig
from .logging_schema import LoggingConfig

__all__ = [
    "AppConfig",
    "DemoConfig",
    "LoggingConfig",
]
