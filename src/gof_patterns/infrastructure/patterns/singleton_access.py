"""Standard singleton access functions."""

from typing import Any, Type, TypeVar

from gof_patterns.infrastructure.patterns.singleton_registry import SingletonRegistry

T = TypeVar("T")


def get_singleton(singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
    """
    Get the process-wide instance of singleton_class.

    The first call creates the instance with the given arguments; later
    calls ignore their arguments and return that same instance.

    Args:
        singleton_class: The class to get an instance of
        *args: Constructor arguments, used only on first access
        **kwargs: Constructor keyword arguments, used only on first access

    Returns:
        The shared instance
    """
    return SingletonRegistry.get_instance().get(singleton_class, *args, **kwargs)
