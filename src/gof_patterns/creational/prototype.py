"""Prototype.

New objects are derived from an existing one. A derived object keeps its
own attributes and falls back to its prototype, hop by hop, for everything
else.
"""

import inspect
from functools import partial
from typing import Any, Dict, Iterator, Optional

from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.console import get_console

_MISSING = object()


class PrototypeObject:
    """
    Object with own attributes plus an explicit link to its prototype.

    Plain functions stored as attributes behave like methods: they are
    bound to the object the lookup started from, wherever along the chain
    they were found.
    """

    def __init__(self, prototype: Optional["PrototypeObject"] = None, **own: Any):
        object.__setattr__(self, "_prototype", prototype)
        object.__setattr__(self, "_own", dict(own))

    @classmethod
    def create(cls, prototype: Optional["PrototypeObject"], **own: Any) -> "PrototypeObject":
        return cls(prototype, **own)

    def get_prototype(self) -> Optional["PrototypeObject"]:
        return self._prototype

    def own_attributes(self) -> Dict[str, Any]:
        return dict(self._own)

    def has_own(self, name: str) -> bool:
        return name in self._own

    def _chain(self) -> Iterator["PrototypeObject"]:
        node: Optional[PrototypeObject] = self
        while node is not None:
            yield node
            node = node._prototype

    def lookup(self, name: str, default: Any = _MISSING) -> Any:
        for node in self._chain():
            if name in node._own:
                value = node._own[name]
                if inspect.isfunction(value):
                    return partial(value, self)
                return value
        if default is _MISSING:
            raise AttributeError(f"'{type(self).__name__}' chain has no attribute '{name}'")
        return default

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal attribute lookup fails
        if name in ("_own", "_prototype") or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        return self.lookup(name)

    def __setattr__(self, name: str, value: Any) -> None:
        self._own[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self._own[name]
        except KeyError:
            raise AttributeError(name) from None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._own!r})"


def _do_something(self: PrototypeObject) -> str:
    return "Doing something!"


def run_demo(console: Optional[ConsolePort] = None) -> None:
    console = console or get_console()

    prototype_object = PrototypeObject(do_something=_do_something)
    cloned_object = PrototypeObject.create(prototype_object, name="Cloned Name! ")

    console.write_line(repr(cloned_object))
    # do_something is not an own attribute; it is found on the prototype
    console.write_line(cloned_object.do_something())
    console.write_line(repr(cloned_object.get_prototype()))
