# src/gof_patterns/domain/exceptions.py
from typing import Any, List, Optional


class PatternError(Exception):
    """Base exception for all errors raised by the pattern examples."""
    pass


class ConfigurationError(PatternError):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class UnknownVariantError(PatternError):
    """Raised when a factory receives a discriminator outside its closed set."""
    def __init__(self, family: str, value: Any, known: Optional[List[Any]] = None):
        super().__init__(f"Unknown {family} variant: {value!r}")
        self.family = family
        self.value = value
        self.known = known or []


class InvalidRangeError(PatternError):
    """Raised when a range iterator is built with a non-positive step."""
    def __init__(self, step: Any):
        super().__init__(f"Range step must be a positive integer, got {step!r}")
        self.step = step


class ChainCycleError(PatternError):
    """Raised when linking a handler would let a request reach it twice."""
    def __init__(self, handler_name: str):
        super().__init__(f"Linking {handler_name} would create a cycle in the chain")
        self.handler_name = handler_name


class SingletonViolationError(PatternError):
    """Raised when a singleton is constructed outside its accessor."""
    def __init__(self, class_name: str):
        super().__init__(
            f"{class_name} cannot be instantiated directly; use {class_name}.get_instance()"
        )
        self.class_name = class_name


class SubsystemStateError(PatternError):
    """Raised when a subsystem operation is attempted in the wrong order."""
    def __init__(self, subsystem: str, message: str):
        super().__init__(f"{subsystem}: {message}")
        self.subsystem = subsystem


class UnknownDemoError(PatternError):
    """Raised when a requested demo is not registered."""
    def __init__(self, name: str, available: Optional[List[str]] = None):
        super().__init__(f"Demo '{name}' is not registered")
        self.name = name
        self.available = available or []
