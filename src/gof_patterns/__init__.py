"""GoF Patterns - Root Package.

A collection of Gang-of-Four design pattern demonstrations. Every pattern
module is self-contained: a handful of role classes plus a ``run_demo``
driver that narrates the pattern to a console.

Key Components:
    - behavioral: chain of responsibility, command, iterator, mediator,
      observer, state, template method, visitor
    - creational: abstract factory, builder, factory, prototype, singleton
    - structural: adapter, bridge, facade, flyweight, proxy
    - config: typed configuration with environment overrides
    - infrastructure: logging, console sinks, demo registry
    - cli: the ``gof-patterns`` command

Usage:
    >>> gof-patterns list
    >>> gof-patterns run observer flyweight
    >>> gof-patterns run --all --format json
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME
