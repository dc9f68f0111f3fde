import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, List, Optional

import structlog

if TYPE_CHECKING:
    from gof_patterns.config.schemas import LoggingConfig

LOGGER_NAMESPACE = "gof_patterns"


def _configure_structlog() -> None:
    """Route structlog through the stdlib logging tree."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def setup_logging(config: Optional["LoggingConfig"] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Demo output owns stdout, so log records only ever go to stderr and/or
    a rotating file.

    Args:
        config: Logging configuration. If None, it is read from the
               process-wide ConfigurationManager.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        from gof_patterns.config.manager import get_config_manager

        config = get_config_manager().app_config.logging

    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    package_logger.setLevel(getattr(logging, config.level.upper()))
    package_logger.propagate = False

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=False),
    )

    handlers: List[logging.Handler] = []

    if config.destination in ("file", "both"):
        log_path = os.path.expandvars(config.file_path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if config.destination in ("stderr", "both"):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        package_logger.addHandler(handler)

    _configure_structlog()

    logger = structlog.get_logger(LOGGER_NAMESPACE)
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the given module name."""
    return structlog.get_logger(name)


_configure_structlog()
