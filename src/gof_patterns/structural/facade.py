"""Facade.

``House`` exposes two coarse operations and sequences the plumbing and
electrical subsystems in the order they require.
"""

from typing import Optional

from gof_patterns.domain.exceptions import SubsystemStateError
from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.console import get_console


class PlumbingSystem:
    """Must have its pressure set before it can be turned on."""

    def __init__(self, console: Optional[ConsolePort] = None):
        self._console = console or get_console()
        self.pressure: Optional[int] = None
        self.on = False

    def set_pressure(self, pressure: int) -> None:
        self.pressure = pressure
        self._console.write_line(f"Plumbing: pressure set to {pressure}")

    def turn_on(self) -> None:
        if self.pressure is None:
            raise SubsystemStateError("Plumbing", "pressure must be set before turning on")
        self.on = True
        self._console.write_line("Plumbing: turned on")

    def turn_off(self) -> None:
        self.on = False
        self._console.write_line("Plumbing: turned off")


class ElectricalSystem:
    """Must have its voltage set before it can be turned on."""

    def __init__(self, console: Optional[ConsolePort] = None):
        self._console = console or get_console()
        self.voltage: Optional[int] = None
        self.on = False

    def set_voltage(self, voltage: int) -> None:
        self.voltage = voltage
        self._console.write_line(f"Electrical: voltage set to {voltage}")

    def turn_on(self) -> None:
        if self.voltage is None:
            raise SubsystemStateError("Electrical", "voltage must be set before turning on")
        self.on = True
        self._console.write_line("Electrical: turned on")

    def turn_off(self) -> None:
        self.on = False
        self._console.write_line("Electrical: turned off")


class House:
    """Turn everything on or off without knowing the subsystems exist."""

    VOLTAGE = 120
    PRESSURE = 500

    def __init__(self, console: Optional[ConsolePort] = None):
        self._plumbing = PlumbingSystem(console)
        self._electrical = ElectricalSystem(console)

    def turn_on_systems(self) -> None:
        self._electrical.set_voltage(self.VOLTAGE)
        self._electrical.turn_on()

        self._plumbing.set_pressure(self.PRESSURE)
        self._plumbing.turn_on()

    def turn_off_systems(self) -> None:
        self._electrical.turn_off()
        self._plumbing.turn_off()

    @property
    def systems_on(self) -> bool:
        return self._electrical.on and self._plumbing.on


def run_demo(console: Optional[ConsolePort] = None) -> None:
    console = console or get_console()

    house = House(console)
    house.turn_on_systems()
    house.turn_off_systems()
