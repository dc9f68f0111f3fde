"""Creational patterns: how objects get made."""

from . import abstract_factory, builder, factory, prototype, singleton

__all__ = ["abstract_factory", "builder", "factory", "prototype", "singleton"]
