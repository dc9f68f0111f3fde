"""Configuration package with clean public API."""

from .schemas import (
    AppConfig,
    ConsoleConfig,
    DemoConfig,
    FactoryConfig,
    IteratorDemoConfig,
    LoggingConfig,
    validate_config,
)
from .manager import ConfigurationManager, get_config_manager, reset_config_manager

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",
    # Specific configurations
    "LoggingConfig",
    "ConsoleConfig",
    "FactoryConfig",
    "DemoConfig",
    "IteratorDemoConfig",
    # Configuration management
    "ConfigurationManager",
    "get_config_manager",
    "reset_config_manager",
]
