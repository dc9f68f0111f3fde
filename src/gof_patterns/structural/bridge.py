"""Bridge.

Abstractions hold a reference to an implementation interface and delegate
the primitive work to it, so either side can grow without touching the
other.
"""

from abc import ABC, abstractmethod
from typing import Optional

from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.console import get_console


class Implementation(ABC):
    """Primitive operations; need not resemble the abstraction's interface."""

    @abstractmethod
    def operation_implementation(self) -> str:
        pass


class ConcreteImplementationA(Implementation):
    def operation_implementation(self) -> str:
        return "ConcreteImplementationA: Here's the result on the platform A."


class ConcreteImplementationB(Implementation):
    def operation_implementation(self) -> str:
        return "ConcreteImplementationB: Here's the result on the platform B."


class Abstraction(ABC):
    """The control side of the bridge."""

    def __init__(self, implementation: Implementation):
        self._implementation = implementation

    @property
    def implementation(self) -> Implementation:
        return self._implementation

    @abstractmethod
    def operation(self) -> str:
        pass


class BasicAbstraction(Abstraction):
    def operation(self) -> str:
        result = self._implementation.operation_implementation()
        return f"Abstraction: Base operation with:\n{result}"


class ExtendedAbstraction(Abstraction):
    def operation(self) -> str:
        result = self._implementation.operation_implementation()
        return f"ExtendedAbstraction: Extended operation with:\n{result}"


def client_code(abstraction: Abstraction, console: ConsolePort) -> None:
    """Works with any abstraction-implementation combination."""
    console.write_line(abstraction.operation())


# === Animals ====================================================================


class AnimalImplementation(ABC):
    @abstractmethod
    def make_sound(self) -> str:
        pass


class DogImplementation(AnimalImplementation):
    def make_sound(self) -> str:
        return 'A dog goes "woof"!'


class CatImplementation(AnimalImplementation):
    def make_sound(self) -> str:
        return 'A cat goes "meow"!'


class AnimalAbstraction:
    def __init__(self, animal: AnimalImplementation):
        self._animal = animal

    def make_sound(self) -> str:
        result = self._animal.make_sound()
        return f"AnimalAbstraction: Base operation with:\n{result}"


class ExtendedAnimalAbstraction(AnimalAbstraction):
    def make_sound_and_describe(self) -> str:
        result = self._animal.make_sound()
        return f"Make Sound: {result}\n, and now the animal would be described."


def animal_client_code(animal: AnimalAbstraction, console: ConsolePort) -> None:
    console.write_line(animal.make_sound())


def run_demo(console: Optional[ConsolePort] = None) -> None:
    console = console or get_console()

    client_code(BasicAbstraction(ConcreteImplementationA()), console)
    console.write_line()
    client_code(ExtendedAbstraction(ConcreteImplementationB()), console)
    console.write_line()

    animal_client_code(AnimalAbstraction(DogImplementation()), console)
    console.write_line()
    cat = ExtendedAnimalAbstraction(CatImplementation())
    animal_client_code(cat, console)
    console.write_line(cat.make_sound_and_describe())
