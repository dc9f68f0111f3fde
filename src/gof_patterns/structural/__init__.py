"""Structural patterns: how objects are composed."""

from . import adapter, bridge, facade, flyweight, proxy

__all__ = ["adapter", "bridge", "facade", "flyweight", "proxy"]
