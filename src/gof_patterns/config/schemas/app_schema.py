"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from .demo_schema import ConsoleConfig, DemoConfig, FactoryConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    console: ConsoleConfig = Field(default_factory=lambda: ConsoleConfig())
    factory: FactoryConfig = Field(default_factory=lambda: FactoryConfig())
    demo: DemoConfig = Field(default_factory=lambda: DemoConfig())
    environment: str = Field("development", description="Environment")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """
        Validate environment.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If environment is invalid
        """
        valid_environments = ["development", "testing", "production"]
        if v not in valid_environments:
            raise ValueError(f"Environment must be one of {valid_environments}")
        return v

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create configuration from a plain dictionary."""
        return cls.model_validate(data)


def validate_config(data: Dict[str, Any]) -> AppConfig:
    """Validate raw configuration data and return the typed configuration."""
    return AppConfig.from_dict(data)
