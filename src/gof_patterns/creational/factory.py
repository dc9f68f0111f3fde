"""Factory.

One creation method maps an operating-system discriminator to a button
class. Anything that is not ``"ios"`` gets the Android button unless the
factory is strict.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from gof_patterns.domain.exceptions import UnknownVariantError
from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.console import get_console
from gof_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Button(ABC):
    @abstractmethod
    def render(self) -> str:
        pass


class IOSButton(Button):
    def render(self) -> str:
        return "Rendering an iOS button"


class AndroidButton(Button):
    def render(self) -> str:
        return "Rendering an Android button"


class ButtonFactory:
    """Creates the button matching an operating system name."""

    _buttons: Dict[str, Type[Button]] = {
        "ios": IOSButton,
        "android": AndroidButton,
    }
    default_button: Type[Button] = AndroidButton

    def __init__(self, strict: bool = False):
        self._strict = strict

    def create_button(self, os_name: str) -> Button:
        button_class = self._buttons.get(os_name)
        if button_class is None:
            if self._strict:
                raise UnknownVariantError("button", os_name, list(self._buttons))
            logger.warning(
                "Unknown operating system, using default button",
                os_name=os_name,
                default=self.default_button.__name__,
            )
            button_class = self.default_button
        return button_class()


def run_demo(console: Optional[ConsolePort] = None, strict: bool = False) -> None:
    console = console or get_console()

    factory = ButtonFactory(strict=strict)
    btn1 = factory.create_button("ios")
    btn2 = factory.create_button("android")
    console.write_line(btn1.render())
    console.write_line(btn2.render())
