"""Behavioral patterns: how objects share work and responsibility."""

from . import (
    chain_of_responsibility,
    command,
    iterator,
    mediator,
    observer,
    state,
    template_method,
    visitor,
)

__all__ = [
    "chain_of_responsibility",
    "command",
    "iterator",
    "mediator",
    "observer",
    "state",
    "template_method",
    "visitor",
]
