"""Demo Registration Module.

Registers the driver of every pattern example with the demo registry.
Runners adapt the typed application configuration to each driver's
parameters.
"""

from typing import Optional

from gof_patterns.behavioral import (
    chain_of_responsibility,
    command,
    iterator,
    mediator,
    observer,
    state,
    template_method,
    visitor,
)
from gof_patterns.config.schemas import AppConfig
from gof_patterns.creational import abstract_factory, builder, factory, prototype, singleton
from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.registry.demo_registry import (
    DemoCategory,
    DemoRegistry,
    get_demo_registry,
)
from gof_patterns.structural import adapter, bridge, facade, flyweight, proxy


def _run_iterator(console: ConsolePort, config: AppConfig) -> None:
    bounds = config.demo.iterator
    iterator.run_demo(console, start=bounds.start, end=bounds.end, step=bounds.step)


def _run_template_method(console: ConsolePort, config: AppConfig) -> None:
    template_method.run_demo(console, random_seed=config.demo.random_seed)


def _run_abstract_factory(console: ConsolePort, config: AppConfig) -> None:
    abstract_factory.run_demo(console, strict=config.factory.strict_variants)


def _run_factory(console: ConsolePort, config: AppConfig) -> None:
    factory.run_demo(console, strict=config.factory.strict_variants)


def _console_only(run_demo):
    def runner(console: ConsolePort, config: AppConfig) -> None:
        run_demo(console)

    return runner


DEMOS = [
    # Behavioral
    ("chain_of_responsibility", DemoCategory.BEHAVIORAL, _console_only(chain_of_responsibility.run_demo),
     "Offer a request to a chain of handlers until one takes it"),
    ("command", DemoCategory.BEHAVIORAL, _console_only(command.run_demo),
     "Wrap actions in objects and trigger them from an invoker"),
    ("iterator", DemoCategory.BEHAVIORAL, _run_iterator,
     "Walk a bounded range lazily, one step at a time"),
    ("mediator", DemoCategory.BEHAVIORAL, _console_only(mediator.run_demo),
     "Coordinate collaborators through a control tower and a middleware pipeline"),
    ("observer", DemoCategory.BEHAVIORAL, _console_only(observer.run_demo),
     "Broadcast values to subscribers in subscription order"),
    ("state", DemoCategory.BEHAVIORAL, _console_only(state.run_demo),
     "Delegate behavior to the current state object"),
    ("template_method", DemoCategory.BEHAVIORAL, _run_template_method,
     "Run a fixed sequence of base steps, required steps and hooks"),
    ("visitor", DemoCategory.BEHAVIORAL, _console_only(visitor.run_demo),
     "Select per-element behavior through double dispatch"),
    # Creational
    ("abstract_factory", DemoCategory.CREATIONAL, _run_abstract_factory,
     "Create family-specific enemy factories"),
    ("builder", DemoCategory.CREATIONAL, _console_only(builder.run_demo),
     "Assemble a hamburger through chained steps"),
    ("factory", DemoCategory.CREATIONAL, _run_factory,
     "Map an operating system to a button class"),
    ("prototype", DemoCategory.CREATIONAL, _console_only(prototype.run_demo),
     "Derive objects that fall back to their prototype"),
    ("singleton", DemoCategory.CREATIONAL, _console_only(singleton.run_demo),
     "Share one process-wide settings instance"),
    # Structural
    ("adapter", DemoCategory.STRUCTURAL, _console_only(adapter.run_demo),
     "Translate an incompatible interface into the expected one"),
    ("bridge", DemoCategory.STRUCTURAL, _console_only(bridge.run_demo),
     "Combine independent abstraction and implementation hierarchies"),
    ("facade", DemoCategory.STRUCTURAL, _console_only(facade.run_demo),
     "Drive several subsystems through two coarse operations"),
    ("flyweight", DemoCategory.STRUCTURAL, _console_only(flyweight.run_demo),
     "Share cached intrinsic state across many entities"),
    ("proxy", DemoCategory.STRUCTURAL, _console_only(proxy.run_demo),
     "Track reads and writes on a stand-in object"),
]


def register_all_demos(registry: Optional[DemoRegistry] = None) -> DemoRegistry:
    """
    Register every pattern demo.

    Demos that are already registered are left alone, so calling this more
    than once is safe.

    Args:
        registry: Registry to fill; defaults to the process-wide registry

    Returns:
        The registry that was filled
    """
    registry = registry or get_demo_registry()
    for name, category, runner, description in DEMOS:
        if not registry.is_registered(name):
            registry.register(name, category, runner, description)
    return registry
