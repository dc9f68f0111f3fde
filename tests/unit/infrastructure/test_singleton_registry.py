"""Tests for the singleton registry."""
from gof_patterns.infrastructure.patterns import get_singleton
from gof_patterns.infrastructure.patterns.singleton_registry import SingletonRegistry


class Counter:
    created = 0

    def __init__(self, start=0):
        Counter.created += 1
        self.value = start


class TestSingletonRegistry:
    """Test per-class instance caching."""

    def setup_method(self):
        self.registry = SingletonRegistry()
        Counter.created = 0

    def test_registry_is_itself_a_singleton(self):
        assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()

    def test_one_instance_per_class(self):
        first = self.registry.get(Counter, 5)
        second = self.registry.get(Counter, 99)

        assert first is second
        assert first.value == 5
        assert Counter.created == 1

    def test_has_and_reset(self):
        assert not self.registry.has(Counter)
        first = self.registry.get(Counter)
        assert self.registry.has(Counter)

        self.registry.reset(Counter)

        assert not self.registry.has(Counter)
        assert self.registry.get(Counter) is not first

    def test_reset_all(self):
        self.registry.get(Counter)
        self.registry.reset()
        assert not self.registry.has(Counter)


def test_get_singleton_uses_global_registry():
    SingletonRegistry.get_instance().reset(Counter)
    assert get_singleton(Counter) is get_singleton(Counter)
    assert SingletonRegistry.get_instance().has(Counter)
    SingletonRegistry.get_instance().reset(Counter)
