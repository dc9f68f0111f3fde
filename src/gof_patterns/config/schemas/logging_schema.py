"""Logging configuration schema."""
from typing import Any

from pydantic import BaseModel, Field, field_validator

from gof_patterns.config.defaults import LogDestination, LogLevel


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Log level")
    destination: LogDestination = Field(
        LogDestination.STDERR, description="Log destination (stderr, file, both)"
    )
    file_path: str = Field("logs/gof_patterns.log", description="Log file path")
    max_size_mb: int = Field(10, description="Maximum log file size in MB")
    backup_count: int = Field(5, description="Number of rotated log files to keep")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """
        Normalize log level names before enum validation.

        Args:
            v: Value to validate

        Returns:
            Upper-cased log level name
        """
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Log file limits must not be negative")
        return v
