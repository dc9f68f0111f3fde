"""Template Method.

A fixed sequence of steps is defined once. Required steps must be supplied
when the template is built (omitting one is a TypeError at construction),
hooks default to doing nothing, and the order never changes.
"""

import random
from dataclasses import dataclass, field
from typing import Callable, Optional

from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.console import get_console

Step = Callable[[], None]


def _noop() -> None:
    return None


def _identity(result: int) -> int:
    return result


@dataclass(frozen=True)
class AlgorithmTemplate:
    """
    Skeleton of an algorithm built from base steps, required steps and hooks.

    Attributes:
        required_operation1: Mandatory step run after the first base step
        required_operation2: Mandatory step run after the first hook
        hook1: Optional extension point, no-op by default
        hook2: Optional extension point run last, no-op by default
        console: Where the base steps report
    """
    required_operation1: Step
    required_operation2: Step
    hook1: Step = _noop
    hook2: Step = _noop
    console: Optional[ConsolePort] = field(default=None, compare=False)

    def _write(self, text: str) -> None:
        (self.console or get_console()).write_line(text)

    def base_operation1(self) -> None:
        self._write("AlgorithmTemplate says: I am doing the bulk of the work")

    def base_operation2(self) -> None:
        self._write("AlgorithmTemplate says: But I let implementers override some operations")

    def base_operation3(self) -> None:
        self._write("AlgorithmTemplate says: But I am doing the bulk of the work anyway")

    def template_method(self) -> None:
        self.base_operation1()
        self.required_operation1()
        self.base_operation2()
        self.hook1()
        self.required_operation2()
        self.base_operation3()
        self.hook2()


def concrete_template1(console: ConsolePort) -> AlgorithmTemplate:
    """Supplies only the required steps."""
    return AlgorithmTemplate(
        required_operation1=lambda: console.write_line("ConcreteTemplate1 says: Implemented Operation1"),
        required_operation2=lambda: console.write_line("ConcreteTemplate1 says: Implemented Operation2"),
        console=console,
    )


def concrete_template2(console: ConsolePort) -> AlgorithmTemplate:
    """Supplies the required steps and overrides the first hook."""
    return AlgorithmTemplate(
        required_operation1=lambda: console.write_line("ConcreteTemplate2 says: Implemented Operation1"),
        required_operation2=lambda: console.write_line("ConcreteTemplate2 says: Implemented Operation2"),
        hook1=lambda: console.write_line("ConcreteTemplate2 says: Overridden Hook1"),
        console=console,
    )


def client_code(template: AlgorithmTemplate) -> None:
    template.template_method()


# === Mathematical operations ====================================================


@dataclass
class MathematicalOperation:
    """
    Fetch two operands, combine them, pass the result through a hook and show it.

    The operand sources default to random draws in [10, 100] and
    [100, 1000]; tests and seeded demos inject their own.
    """
    perform_operation: Callable[[int, int], int]
    hook_operation: Callable[[int], int] = _identity
    first_operand: Optional[Callable[[], int]] = None
    second_operand: Optional[Callable[[], int]] = None
    console: Optional[ConsolePort] = field(default=None, compare=False)
    result: Optional[int] = field(default=None, init=False)

    def get_first_operand(self) -> int:
        if self.first_operand is not None:
            return self.first_operand()
        return random.randint(10, 100)

    def get_second_operand(self) -> int:
        if self.second_operand is not None:
            return self.second_operand()
        return random.randint(100, 1000)

    def show_result(self, result: int) -> None:
        (self.console or get_console()).write_line(f"The result is: {result}")

    def perform_mathematical_operation(self) -> int:
        number1 = self.get_first_operand()
        number2 = self.get_second_operand()
        self.result = self.perform_operation(number1, number2)
        self.result = self.hook_operation(self.result)
        self.show_result(self.result)
        return self.result


def _record_hook(name: str, console: ConsolePort) -> Callable[[int], int]:
    def hook(result: int) -> int:
        console.write_line(f"{name} record has been added to Database with result: {result}")
        return result

    return hook


def sum_operation(console: ConsolePort, rng: Optional[random.Random] = None) -> MathematicalOperation:
    rng = rng or random.Random()
    return MathematicalOperation(
        perform_operation=lambda a, b: a + b,
        hook_operation=_record_hook("Sum", console),
        first_operand=lambda: rng.randint(10, 100),
        second_operand=lambda: rng.randint(100, 1000),
        console=console,
    )


def rest_operation(console: ConsolePort, rng: Optional[random.Random] = None) -> MathematicalOperation:
    rng = rng or random.Random()
    return MathematicalOperation(
        perform_operation=lambda a, b: a - b,
        hook_operation=_record_hook("Rest", console),
        first_operand=lambda: rng.randint(10, 100),
        second_operand=lambda: rng.randint(100, 1000),
        console=console,
    )


def run_demo(console: Optional[ConsolePort] = None, random_seed: Optional[int] = None) -> None:
    console = console or get_console()

    console.write_line("Same client code can work with different templates:")
    client_code(concrete_template1(console))
    console.write_line()

    console.write_line("Same client code can work with different templates:")
    client_code(concrete_template2(console))
    console.write_line()

    rng = random.Random(random_seed)
    sum_operation(console, rng).perform_mathematical_operation()
    rest_operation(console, rng).perform_mathematical_operation()
