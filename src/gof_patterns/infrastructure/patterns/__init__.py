"""Infrastructure patterns package."""

from gof_patterns.infrastructure.patterns.singleton_access import get_singleton
from gof_patterns.infrastructure.patterns.singleton_registry import SingletonRegistry

__all__ = ["SingletonRegistry", "get_singleton"]
