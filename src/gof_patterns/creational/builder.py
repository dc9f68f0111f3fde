"""Builder.

The product is assembled through chained optional steps and can be
inspected at any point; there is no separate build call.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.console import get_console


class Hamburger(BaseModel):
    """A hamburger that gains toppings one step at a time."""
    model_config = ConfigDict(validate_assignment=True)

    bread: str
    ketchup: bool = False
    mustard: bool = False
    double_meat: bool = False

    def add_ketchup(self) -> "Hamburger":
        self.ketchup = True
        return self

    def add_mustard(self) -> "Hamburger":
        self.mustard = True
        return self

    def add_double_meat(self) -> "Hamburger":
        self.double_meat = True
        return self

    def describe(self) -> str:
        extras = [
            name
            for name, present in (
                ("ketchup", self.ketchup),
                ("mustard", self.mustard),
                ("double meat", self.double_meat),
            )
            if present
        ]
        if not extras:
            return f"Hamburger on {self.bread}"
        return f"Hamburger on {self.bread} with {', '.join(extras)}"


def run_demo(console: Optional[ConsolePort] = None) -> None:
    console = console or get_console()

    lunch = Hamburger(bread="Some Bread")
    console.write_line(lunch.describe())
    lunch.add_ketchup().add_mustard()
    console.write_line(lunch.describe())
    lunch.add_double_meat()
    console.write_line(lunch.describe())
