"""Infrastructure registry patterns."""

from .demo_registry import DemoCategory, DemoRegistration, DemoRegistry, get_demo_registry

__all__ = [
    "DemoCategory",
    "DemoRegistration",
    "DemoRegistry",
    "get_demo_registry",
]
