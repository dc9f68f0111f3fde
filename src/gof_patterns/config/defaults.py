# src/gof_patterns/config/defaults.py
from enum import Enum
from typing import Any, Dict


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDERR = "stderr"
    BOTH = "both"


DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "environment": "${GOF_PATTERNS_ENVIRONMENT:development}",

    # Logging configuration
    "logging": {
        "level": "${GOF_PATTERNS_LOG_LEVEL:WARNING}",
        "destination": "${GOF_PATTERNS_LOG_DESTINATION:stderr}",
        "file_path": "${GOF_PATTERNS_LOG_DIR:logs}/gof_patterns.log",
        "max_size_mb": 10,
        "backup_count": 5,
    },

    # Console output
    "console": {
        "section_separator": True,
    },

    # Creational patterns
    "factory": {
        "strict_variants": "${GOF_PATTERNS_STRICT_VARIANTS:false}",
    },

    # Demo drivers
    "demo": {
        "iterator": {
            "start": 0,
            "end": 20,
            "step": 5,
        },
        "random_seed": None,
    },
}
