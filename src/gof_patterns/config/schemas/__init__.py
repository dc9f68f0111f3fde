"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .demo_schema import ConsoleConfig, DemoConfig, FactoryConfig, IteratorDemoConfig
from .logging_schema import LoggingConfig

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",
    # Logging configuration
    "LoggingConfig",
    # Demo configurations
    "ConsoleConfig",
    "FactoryConfig",
    "DemoConfig",
    "IteratorDemoConfig",
]
