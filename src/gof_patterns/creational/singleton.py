"""Singleton.

``ApplicationSettings.get_instance()`` is the only way to obtain the
settings object; calling the constructor directly raises.
"""

import threading
from typing import Any, Callable, Dict, Optional, Tuple

from gof_patterns.domain.exceptions import SingletonViolationError
from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.console import get_console
from gof_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

_CONSTRUCTION_TOKEN = object()


class ApplicationSettings:
    """
    Process-wide application settings.

    Thread-safe singleton implementation: the instance is created on first
    access under a lock and lives until the process exits.
    """

    _instance: Optional["ApplicationSettings"] = None
    _lock = threading.Lock()

    def __new__(cls, _token: object = None) -> "ApplicationSettings":
        # Only get_instance holds the token, and only while no instance exists
        if _token is not _CONSTRUCTION_TOKEN or cls._instance is not None:
            raise SingletonViolationError(cls.__name__)
        return super().__new__(cls)

    def __init__(self, _token: object = None):
        self._application_theme = "dark"

    def __copy__(self) -> "ApplicationSettings":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "ApplicationSettings":
        return self

    def __reduce__(self) -> Tuple[Callable[[], "ApplicationSettings"], Tuple[()]]:
        return (_get_application_settings, ())

    @property
    def application_theme(self) -> str:
        return self._application_theme

    @classmethod
    def get_instance(cls) -> "ApplicationSettings":
        """Get singleton instance of the application settings."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(_CONSTRUCTION_TOKEN)
                    logger.debug("ApplicationSettings instance created")
        return cls._instance


def _get_application_settings() -> ApplicationSettings:
    return ApplicationSettings.get_instance()


def run_demo(console: Optional[ConsolePort] = None) -> None:
    console = console or get_console()

    settings = ApplicationSettings.get_instance()
    same_settings = ApplicationSettings.get_instance()
    console.write_line(f"Application theme: {settings.application_theme}")
    console.write_line(f"Both accessors returned the same instance: {settings is same_settings}")

    try:
        ApplicationSettings()
    except SingletonViolationError as e:
        console.write_line(f"Direct construction refused: {e}")
