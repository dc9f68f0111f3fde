"""Tests for the visitor examples."""
from gof_patterns.behavioral.visitor import (
    AddDoorsSubMachine,
    AddWheelsSubMachine,
    ConcreteComponentA,
    ConcreteComponentB,
    ConcreteVisitor1,
    ConcreteVisitor2,
    FirstBrandPartIntegrationMachine,
    PartIntegrationMachine,
    SecondBrandPartIntegrationMachine,
    Visitor,
    car_maker_client_code,
    client_code,
    run_demo,
)


class RecordingVisitor(Visitor):
    def __init__(self):
        self.visited = []

    def visit_concrete_component_a(self, element):
        self.visited.append(("a", element))

    def visit_concrete_component_b(self, element):
        self.visited.append(("b", element))


class TestDoubleDispatch:
    """Test that each component routes to its own visitor method."""

    def test_components_dispatch_by_class(self):
        a = ConcreteComponentA()
        b = ConcreteComponentB()
        visitor = RecordingVisitor()

        client_code([b, a, b], visitor)

        assert visitor.visited == [("b", b), ("a", a), ("b", b)]

    def test_concrete_visitors(self, console):
        components = [ConcreteComponentA(), ConcreteComponentB()]
        client_code(components, ConcreteVisitor1(console))
        client_code(components, ConcreteVisitor2(console))
        assert console.lines == [
            "A + ConcreteVisitor1",
            "B + ConcreteVisitor1",
            "A + ConcreteVisitor2",
            "B + ConcreteVisitor2",
        ]


class TestAssemblyLine:
    """Test the car assembly line machines."""

    def test_brand_machines(self, console):
        machines = [AddDoorsSubMachine(), AddWheelsSubMachine()]
        car_maker_client_code(machines, FirstBrandPartIntegrationMachine(console))
        car_maker_client_code(machines, SecondBrandPartIntegrationMachine(console))
        assert console.lines == [
            "Doors have been painted with color: Brand1 Color",
            "Special design: Brand1 Special Design has been applied to the wheels",
            "Doors have been painted with color: Brand2 Color",
            "Special design: Brand2 Special Design has been applied to the wheels",
        ]

    def test_custom_integration_machine(self):
        class Inspector(PartIntegrationMachine):
            def __init__(self):
                self.seen = []

            def add_doors(self, machine):
                self.seen.append("doors")

            def add_wheels(self, machine):
                self.seen.append("wheels")

        inspector = Inspector()
        car_maker_client_code([AddWheelsSubMachine(), AddDoorsSubMachine()], inspector)
        assert inspector.seen == ["wheels", "doors"]


def test_run_demo(console):
    run_demo(console)
    assert "B + ConcreteVisitor2" in console.lines
    assert console.lines[-1] == "Special design: Brand2 Special Design has been applied to the wheels"
