"""Demo Registry - Registry pattern for pattern demo drivers.

New demos are added by registering a runner; nothing that lists or runs
demos needs to change.
"""

import threading
from enum import Enum
from typing import Callable, Dict, List, Optional

from gof_patterns.config.schemas import AppConfig
from gof_patterns.domain.exceptions import UnknownDemoError
from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.logging.logger import get_logger

DemoRunner = Callable[[ConsolePort, AppConfig], None]


class DemoCategory(str, Enum):
    """Pattern category enumeration."""
    BEHAVIORAL = "behavioral"
    CREATIONAL = "creational"
    STRUCTURAL = "structural"


class DemoRegistration:
    """Container for demo registration information."""

    def __init__(self, name: str, category: DemoCategory, runner: DemoRunner, description: str = ""):
        """
        Initialize demo registration.

        Args:
            name: Unique demo name (e.g. 'observer')
            category: Pattern category the demo belongs to
            runner: Callable receiving the console and application config
            description: One-line summary shown by the CLI
        """
        self.name = name
        self.category = category
        self.runner = runner
        self.description = description


class DemoRegistry:
    """
    Registry for pattern demo drivers.

    Thread-safe singleton implementation.
    """

    _instance: Optional["DemoRegistry"] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize demo registry."""
        self._registrations: Dict[str, DemoRegistration] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "DemoRegistry":
        """Get singleton instance of demo registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def register(
        self,
        name: str,
        category: DemoCategory,
        runner: DemoRunner,
        description: str = "",
    ) -> None:
        """
        Register a demo runner.

        Raises:
            ValueError: If name is already registered
        """
        with self._registration_lock:
            if name in self._registrations:
                raise ValueError(f"Demo '{name}' is already registered")
            self._registrations[name] = DemoRegistration(
                name=name, category=DemoCategory(category), runner=runner, description=description
            )
            self._logger.debug("Registered demo", demo=name, category=DemoCategory(category).value)

    def is_registered(self, name: str) -> bool:
        with self._registration_lock:
            return name in self._registrations

    def get(self, name: str) -> DemoRegistration:
        """
        Get a registration by name.

        Raises:
            UnknownDemoError: If no demo with that name is registered
        """
        with self._registration_lock:
            registration = self._registrations.get(name)
            if registration is None:
                raise UnknownDemoError(name, list(self._registrations))
            return registration

    def names(self, category: Optional[DemoCategory] = None) -> List[str]:
        """Registered demo names in registration order, optionally filtered by category."""
        with self._registration_lock:
            return [
                registration.name
                for registration in self._registrations.values()
                if category is None or registration.category == DemoCategory(category)
            ]

    def registrations(self, category: Optional[DemoCategory] = None) -> List[DemoRegistration]:
        with self._registration_lock:
            return [
                registration
                for registration in self._registrations.values()
                if category is None or registration.category == DemoCategory(category)
            ]

    def run(self, name: str, console: ConsolePort, config: AppConfig) -> None:
        """Run a registered demo against console."""
        registration = self.get(name)
        self._logger.info("Running demo", demo=name)
        registration.runner(console, config)

    def clear_registrations(self) -> None:
        """Remove every registration."""
        with self._registration_lock:
            self._registrations.clear()


def get_demo_registry() -> DemoRegistry:
    return DemoRegistry.get_instance()
