"""Process-wide registry of lazily created singleton instances."""

import threading
from typing import Any, Dict, Optional, Type, TypeVar, cast

from gof_patterns.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Registry holding at most one instance per class.

    Check-then-create runs under a lock so concurrent first access still
    produces exactly one instance per class.

    Thread-safe singleton implementation.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize singleton registry."""
        self._instances: Dict[Type, Any] = {}
        self._registry_lock = threading.RLock()
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get singleton instance of the registry itself."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of singleton_class, creating it on first request.

        Args:
            singleton_class: The class to get an instance of
            *args: Constructor arguments used only when creating the instance
            **kwargs: Constructor keyword arguments used only when creating the instance

        Returns:
            The single instance of singleton_class
        """
        instance = self._instances.get(singleton_class)
        if instance is None:
            with self._registry_lock:
                instance = self._instances.get(singleton_class)
                if instance is None:
                    instance = singleton_class(*args, **kwargs)
                    self._instances[singleton_class] = instance
                    self._logger.debug(
                        "Singleton created", singleton=singleton_class.__name__
                    )
        return cast(T, instance)

    def has(self, singleton_class: Type) -> bool:
        """Check whether an instance of singleton_class already exists."""
        with self._registry_lock:
            return singleton_class in self._instances

    def reset(self, singleton_class: Optional[Type] = None) -> None:
        """Forget one instance, or all of them when no class is given."""
        with self._registry_lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)
