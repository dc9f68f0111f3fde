"""Proxy.

``TrackingProxy`` stands in for a target object: every read or write is
reported to the console and then forwarded unchanged, and the caller gets
back exactly what the target returned.
"""

from typing import Any, Iterator, Optional

from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.console import get_console


class TrackingProxy:
    """
    Intercepts attribute and item access on a wrapped target.

    Attribute access works on any object; item access works when the
    target supports it (e.g. a dict).
    """

    __slots__ = ("_target", "_console")

    def __init__(self, target: Any, console: Optional[ConsolePort] = None):
        object.__setattr__(self, "_target", target)
        object.__setattr__(self, "_console", console or get_console())

    def __getattr__(self, name: str) -> Any:
        self._console.write_line(f"Tracking:  {name}")
        return getattr(self._target, name)

    def __setattr__(self, name: str, value: Any) -> None:
        self._console.write_line("Updating...")
        setattr(self._target, name, value)

    def __delattr__(self, name: str) -> None:
        self._console.write_line("Deleting...")
        delattr(self._target, name)

    def __getitem__(self, key: Any) -> Any:
        self._console.write_line(f"Tracking:  {key}")
        return self._target[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._console.write_line("Updating...")
        self._target[key] = value

    def __delitem__(self, key: Any) -> None:
        self._console.write_line("Deleting...")
        del self._target[key]

    def __iter__(self) -> Iterator[Any]:
        self._console.write_line("Tracking:  __iter__")
        return iter(self._target)

    def __len__(self) -> int:
        self._console.write_line("Tracking:  __len__")
        return len(self._target)

    def __bool__(self) -> bool:
        return bool(self._target)

    def __contains__(self, key: Any) -> bool:
        return key in self._target

    def __repr__(self) -> str:
        return f"TrackingProxy({self._target!r})"


class Person:
    def __init__(self, name: str):
        self.name = name


def run_demo(console: Optional[ConsolePort] = None) -> None:
    console = console or get_console()

    original_object = Person("Alan")
    reactive_object = TrackingProxy(original_object, console)

    console.write_line(reactive_object.name)
    reactive_object.name = "Someone Else"
    console.write_line(f"Original object now named: {original_object.name}")

    settings = TrackingProxy({"theme": "dark"}, console)
    console.write_line(settings["theme"])
    settings["theme"] = "light"
