"""Visitor.

Elements call back into the visitor method named after their own class
(double dispatch). The element set is closed: adding an element means
adding an abstract method here, which every visitor must then implement.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.console import get_console


class Component(ABC):
    @abstractmethod
    def accept(self, visitor: "Visitor") -> None:
        """Dispatch to the visitor method matching this component's class."""


class ConcreteComponentA(Component):
    def accept(self, visitor: "Visitor") -> None:
        visitor.visit_concrete_component_a(self)

    def exclusive_method_of_concrete_component_a(self) -> str:
        return "A"


class ConcreteComponentB(Component):
    def accept(self, visitor: "Visitor") -> None:
        visitor.visit_concrete_component_b(self)

    def special_method_of_concrete_component_b(self) -> str:
        return "B"


class Visitor(ABC):
    """One visiting method per concrete component class."""

    @abstractmethod
    def visit_concrete_component_a(self, element: ConcreteComponentA) -> None:
        pass

    @abstractmethod
    def visit_concrete_component_b(self, element: ConcreteComponentB) -> None:
        pass


class _ConsoleVisitor(Visitor):
    label = ""

    def __init__(self, console: Optional[ConsolePort] = None):
        self._console = console or get_console()

    def visit_concrete_component_a(self, element: ConcreteComponentA) -> None:
        self._console.write_line(f"{element.exclusive_method_of_concrete_component_a()} + {self.label}")

    def visit_concrete_component_b(self, element: ConcreteComponentB) -> None:
        self._console.write_line(f"{element.special_method_of_concrete_component_b()} + {self.label}")


class ConcreteVisitor1(_ConsoleVisitor):
    label = "ConcreteVisitor1"


class ConcreteVisitor2(_ConsoleVisitor):
    label = "ConcreteVisitor2"


def client_code(components: Iterable[Component], visitor: Visitor) -> None:
    for component in components:
        component.accept(visitor)


# === Car assembly line ==========================================================


class CarAssemblyLineMachine(ABC):
    """Element role on the assembly line."""

    @abstractmethod
    def add_parts(self, part_integrator: "PartIntegrationMachine") -> None:
        pass


class AddDoorsSubMachine(CarAssemblyLineMachine):
    def add_parts(self, part_integrator: "PartIntegrationMachine") -> None:
        part_integrator.add_doors(self)

    def paint_doors(self, color: str) -> str:
        return f"Doors have been painted with color: {color}"


class AddWheelsSubMachine(CarAssemblyLineMachine):
    def add_parts(self, part_integrator: "PartIntegrationMachine") -> None:
        part_integrator.add_wheels(self)

    def apply_wheel_design(self, special_design: str) -> str:
        return f"Special design: {special_design} has been applied to the wheels"


class PartIntegrationMachine(ABC):
    """Visitor role: one method per sub-machine type."""

    @abstractmethod
    def add_doors(self, machine: AddDoorsSubMachine) -> None:
        pass

    @abstractmethod
    def add_wheels(self, machine: AddWheelsSubMachine) -> None:
        pass


class _BrandPartIntegrationMachine(PartIntegrationMachine):
    brand = ""

    def __init__(self, console: Optional[ConsolePort] = None):
        self._console = console or get_console()

    def add_doors(self, machine: AddDoorsSubMachine) -> None:
        self._console.write_line(machine.paint_doors(f"{self.brand} Color"))

    def add_wheels(self, machine: AddWheelsSubMachine) -> None:
        self._console.write_line(machine.apply_wheel_design(f"{self.brand} Special Design"))


class FirstBrandPartIntegrationMachine(_BrandPartIntegrationMachine):
    brand = "Brand1"


class SecondBrandPartIntegrationMachine(_BrandPartIntegrationMachine):
    brand = "Brand2"


def car_maker_client_code(
    machines: Iterable[CarAssemblyLineMachine], integration_machine: PartIntegrationMachine
) -> None:
    for machine in machines:
        machine.add_parts(integration_machine)


def run_demo(console: Optional[ConsolePort] = None) -> None:
    console = console or get_console()

    components = [ConcreteComponentA(), ConcreteComponentB()]

    console.write_line("The client code works with all visitors via the base Visitor interface:")
    client_code(components, ConcreteVisitor1(console))

    console.write_line("It allows the same client code to work with different types of visitors:")
    client_code(components, ConcreteVisitor2(console))
    console.write_line()

    machines = [AddDoorsSubMachine(), AddWheelsSubMachine()]
    car_maker_client_code(machines, FirstBrandPartIntegrationMachine(console))
    car_maker_client_code(machines, SecondBrandPartIntegrationMachine(console))
