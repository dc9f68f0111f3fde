"""State.

An owner delegates its behavior to whichever state object it currently holds.
"""

from abc import ABC, abstractmethod
from typing import Optional

from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.console import get_console
from gof_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class State(ABC):
    @abstractmethod
    def think(self) -> str:
        """Return what the owner thinks while in this state."""


class HappyState(State):
    def think(self) -> str:
        return "Im Happy!"


class SadState(State):
    def think(self) -> str:
        return "Im Sad!"


class Human:
    """Starts happy; changes mood only through ``transition_to``."""

    def __init__(self, state: Optional[State] = None):
        self._state: State = state or HappyState()

    @property
    def state(self) -> State:
        return self._state

    def transition_to(self, state: State) -> None:
        logger.debug(
            "State transition",
            from_state=type(self._state).__name__,
            to_state=type(state).__name__,
        )
        self._state = state

    def think(self) -> str:
        return self._state.think()


def run_demo(console: Optional[ConsolePort] = None) -> None:
    console = console or get_console()

    human = Human()
    console.write_line(human.think())
    human.transition_to(SadState())
    console.write_line(human.think())
    human.transition_to(HappyState())
    console.write_line(human.think())
