"""Logging configuration schema."""
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ood_principles.config.defaults import LogDestination, LogLevel


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Root log level")
    destination: LogDestination = Field(LogDestination.STDOUT, description="Where log records go")
    file_path: Optional[str] = Field(None, description="Log file path, required for file output")
    max_size_mb: int = Field(10, description="Rotate the log file after this size")
    backup_count: int = Field(5, description="Number of rotated files to keep")
    format: str = Field(
        "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
        description="stdlib logging format string",
    )

    @field_validator('level', mode='before')
    @classmethod
    def normalise_level(cls, v):
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v

    @field_validator('max_size_mb', 'backup_count')
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v

    @property
    def writes_to_file(self) -> bool:
        return self.destination in (LogDestination.FILE, LogDestination.BOTH)

    @property
    def writes_to_stdout(self) -> bool:
        return self.destination in (LogDestination.STDOUT, LogDestination.BOTH)
