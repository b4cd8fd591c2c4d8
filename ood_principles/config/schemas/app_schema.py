"""Main application configuration schema."""
from typing import Any, Dict

from pydantic import BaseModel, Field, model_validator

from .demo_schema import DemoConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    demo: DemoConfig = Field(default_factory=lambda: DemoConfig())

    @model_validator(mode="after")
    def ensure_log_file(self) -> "AppConfig":
        """File logging needs a path."""
        if self.logging.writes_to_file and not self.logging.file_path:
            raise ValueError("logging.file_path is required when logging to a file")
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        return cls.model_validate(data)
