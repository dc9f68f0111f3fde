"""Flyweight.

Shared (intrinsic) state lives in cached flyweights, one per distinct
value; per-entity (extrinsic) state is passed to each call and never
stored.
"""

import json
import threading
from abc import ABC, abstractmethod
from typing import Dict, Generic, Iterable, List, Optional, Sequence, Tuple, TypeVar

from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.console import get_console
from gof_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

F = TypeVar("F")


def _to_json(state: Sequence[str]) -> str:
    return json.dumps(list(state), separators=(",", ":"), ensure_ascii=False)


class Flyweight:
    """Holds the shared state common to many cars."""

    def __init__(self, shared_state: Sequence[str], console: Optional[ConsolePort] = None):
        self._shared_state: Tuple[str, ...] = tuple(shared_state)
        self._console = console or get_console()

    @property
    def shared_state(self) -> Tuple[str, ...]:
        return self._shared_state

    def operation(self, unique_state: Sequence[str]) -> None:
        s = _to_json(self._shared_state)
        u = _to_json(unique_state)
        self._console.write_line(f"Flyweight: Displaying shared ({s}) and unique ({u}) state.")


class BaseFlyweightFactory(ABC, Generic[F]):
    """
    Cache of flyweights keyed by a deterministic serialization of their shared state.

    Equal shared states (by value) always map to the same key, so they
    always yield the same instance. Check-then-create runs under a lock.
    """

    item_name = "flyweight"
    factory_name = "FlyweightFactory"

    def __init__(
        self,
        initial_states: Iterable[Sequence[str]] = (),
        console: Optional[ConsolePort] = None,
    ):
        self._console = console or get_console()
        self._items: Dict[str, F] = {}
        self._labels: Dict[str, str] = {}
        self._lock = threading.Lock()
        for state in initial_states:
            key = self.get_key(state)
            self._items[key] = self._create(state)
            self._labels[key] = "_".join(state)

    @staticmethod
    def get_key(state: Sequence[str]) -> str:
        """Return the cache key for a shared state."""
        return _to_json(state)

    @abstractmethod
    def _create(self, state: Sequence[str]) -> F:
        """Build a new flyweight for state."""

    def _get(self, state: Sequence[str]) -> F:
        key = self.get_key(state)
        with self._lock:
            if key not in self._items:
                self._console.write_line(
                    f"{self.factory_name}: Can't find a {self.item_name}, creating new one."
                )
                self._items[key] = self._create(state)
                self._labels[key] = "_".join(state)
                logger.debug("Flyweight cache miss", key=key, size=len(self._items))
            else:
                self._console.write_line(f"{self.factory_name}: Reusing existing {self.item_name}.")
                logger.debug("Flyweight cache hit", key=key)
            return self._items[key]

    def __len__(self) -> int:
        return len(self._items)

    def labels(self) -> List[str]:
        """Human-readable labels of the cached entries, in insertion order."""
        return list(self._labels.values())

    def _list(self) -> None:
        count = len(self._items)
        self._console.write_line()
        self._console.write_line(f"FlyweightFactory: I have {count} {self.item_name}s:")
        for label in self.labels():
            self._console.write_line(label)


class FlyweightFactory(BaseFlyweightFactory[Flyweight]):
    def _create(self, state: Sequence[str]) -> Flyweight:
        return Flyweight(state, self._console)

    def get_flyweight(self, shared_state: Sequence[str]) -> Flyweight:
        """Return the cached flyweight for shared_state, creating it if needed."""
        return self._get(shared_state)

    def list_flyweights(self) -> None:
        self._list()


def add_car_to_police_database(
    ff: FlyweightFactory,
    plates: str,
    owner: str,
    brand: str,
    model: str,
    color: str,
    console: ConsolePort,
) -> None:
    console.write_line()
    console.write_line("Client: Adding a car to database.")
    flyweight = ff.get_flyweight([brand, model, color])
    # The extrinsic state travels with the call
    flyweight.operation([plates, owner])


# === Citizens ===================================================================


class Citizen:
    """Flyweight holding the information many citizen records share."""

    def __init__(self, shared_information: Sequence[str], console: Optional[ConsolePort] = None):
        self._shared_information: Tuple[str, ...] = tuple(shared_information)
        self._console = console or get_console()

    @property
    def shared_information(self) -> Tuple[str, ...]:
        return self._shared_information

    def get_citizen_information(self, unique_information: Sequence[str]) -> None:
        shared = ",".join(self._shared_information)
        unique = ",".join(unique_information)
        self._console.write_line(
            f"Citizen object displaying shared information {shared} and unique information {unique}"
        )


class CitizenFactory(BaseFlyweightFactory[Citizen]):
    item_name = "citizen"
    factory_name = "CitizenFactory"

    def _create(self, state: Sequence[str]) -> Citizen:
        return Citizen(state, self._console)

    def get_citizen(self, citizen_shared_state: Sequence[str]) -> Citizen:
        return self._get(citizen_shared_state)

    def list_citizens(self) -> None:
        self._list()


def add_citizen_to_database(
    factory: CitizenFactory, name: str, date_of_birth: str, address: str, ssn: str
) -> None:
    citizen = factory.get_citizen([name, date_of_birth, address])
    citizen.get_citizen_information([ssn])


def run_demo(console: Optional[ConsolePort] = None) -> None:
    console = console or get_console()

    factory = FlyweightFactory(
        [
            ["Chevrolet", "Camaro2018", "pink"],
            ["Mercedes Benz", "C300", "black"],
            ["Mercedes Benz", "C500", "red"],
            ["BMW", "M5", "red"],
            ["BMW", "X6", "white"],
        ],
        console,
    )
    factory.list_flyweights()

    add_car_to_police_database(factory, "CL234IR", "James Doe", "BMW", "M5", "red", console)
    add_car_to_police_database(factory, "CL234IR", "James Doe", "BMW", "X1", "red", console)
    factory.list_flyweights()
    console.write_line()

    citizen_factory = CitizenFactory(
        [
            ["Anne Mary", "Date of Birth: 1999", "Address: Somewhere in Nevada"],
            ["John Doe", "Date of Birth: unknown", "Address: unknown"],
            ["Ridley", "Date of Birth: 1900", "Address: Outer Space"],
        ],
        console,
    )
    citizen_factory.list_citizens()

    add_citizen_to_database(
        citizen_factory, "Ishmael", "Date of Birth: Before the 1900s", "The Sea", "SSN: 606060"
    )
    add_citizen_to_database(
        citizen_factory, "Ahab", "Date of Birth: Before the 1900s", "The Sea", "SSN: 707070"
    )
    citizen_factory.list_citizens()
