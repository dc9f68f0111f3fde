"""Chain of Responsibility.

A request is offered to a chain of handlers; each one either satisfies it
and stops, or passes it on. A request no handler wants comes back as None.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from gof_patterns.domain.exceptions import ChainCycleError
from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.console import get_console
from gof_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Handler(ABC):
    """Declares chain building and request handling."""

    @abstractmethod
    def set_next(self, handler: "Handler") -> "Handler":
        """Link the next handler and return it so links can be chained."""

    @abstractmethod
    def handle(self, request: str) -> Optional[str]:
        """Handle the request or forward it down the chain."""


class AbstractHandler(Handler):
    """Default chaining behavior shared by all concrete handlers."""

    def __init__(self):
        self._next_handler: Optional[Handler] = None

    @property
    def next_handler(self) -> Optional[Handler]:
        return self._next_handler

    def set_next(self, handler: Handler) -> Handler:
        # Walking from the new successor must never lead back here
        node: Optional[Handler] = handler
        while node is not None:
            if node is self:
                raise ChainCycleError(type(handler).__name__)
            node = getattr(node, "next_handler", None)

        self._next_handler = handler
        logger.debug(
            "Handler linked", handler=type(self).__name__, next=type(handler).__name__
        )
        # Returning a handler from here lets callers link handlers like
        # monkey.set_next(squirrel).set_next(dog)
        return handler

    def handle(self, request: str) -> Optional[str]:
        if self._next_handler is not None:
            return self._next_handler.handle(request)
        return None


class _FoodHandler(AbstractHandler):
    eater: str = ""
    food: str = ""

    def handle(self, request: str) -> Optional[str]:
        if request == self.food:
            return f"{self.eater}: I'll eat the {request}."
        return super().handle(request)


class MonkeyHandler(_FoodHandler):
    eater = "Monkey"
    food = "Banana"


class SquirrelHandler(_FoodHandler):
    eater = "Squirrel"
    food = "Nut"


class DogHandler(_FoodHandler):
    eater = "Dog"
    food = "MeatBall"


def client_code(
    handler: Handler,
    console: ConsolePort,
    foods: Iterable[str] = ("Nut", "Banana", "Cup of coffee"),
) -> None:
    """Offer every food to the chain starting at handler."""
    for food in foods:
        console.write_line(f"Client: Who wants a {food}?")
        result = handler.handle(food)
        if result:
            console.write_line(f"  {result}")
        else:
            console.write_line(f"  {food} was left untouched.")


# === Buffets ====================================================================


class Buffet(ABC):
    """Handler role for the buffet chain."""

    @abstractmethod
    def pass_to_next_buffet(self, buffet: "Buffet") -> "Buffet":
        """Link the next buffet and return it."""

    @abstractmethod
    def add_to_menu(self, food_type: str) -> Optional[str]:
        """Add the dish to this buffet's menu or forward it."""


class AbstractBuffet(Buffet):
    """Buffet that owns a menu and knows which dishes it specializes in."""

    name: str = "Buffet"
    specialties: tuple = ()

    def __init__(self, menu: Optional[List[str]] = None):
        self._next_buffet: Optional[Buffet] = None
        self.menu: List[str] = menu if menu is not None else []

    @property
    def next_buffet(self) -> Optional[Buffet]:
        return self._next_buffet

    def pass_to_next_buffet(self, buffet: Buffet) -> Buffet:
        node: Optional[Buffet] = buffet
        while node is not None:
            if node is self:
                raise ChainCycleError(type(buffet).__name__)
            node = getattr(node, "next_buffet", None)
        self._next_buffet = buffet
        return buffet

    def add_to_menu(self, food_type: str) -> Optional[str]:
        if food_type in self.specialties and food_type not in self.menu:
            self.menu.append(food_type)
            return f"{self.name}: I'll add the {food_type} to my menu."
        if self._next_buffet is not None:
            return self._next_buffet.add_to_menu(food_type)
        return None


class JapaneseFoodBuffet(AbstractBuffet):
    name = "JapaneseFoodBuffet"
    specialties = ("Sushi", "Yakimeshi")


class MexicanFoodBuffet(AbstractBuffet):
    name = "MexicanFoodBuffet"
    specialties = ("Tacos", "Enchiladas")


def buffet_client_code(
    buffet: Buffet,
    console: ConsolePort,
    foods: Iterable[str] = ("Sushi", "Yakimeshi", "Tacos", "Enchiladas", "Hamburger"),
) -> None:
    for food in foods:
        console.write_line(f"Client: Who wants a {food}?")
        result = buffet.add_to_menu(food)
        if result:
            console.write_line(f"  {result}")
        else:
            console.write_line(f"  {food} was left untouched.")


def run_demo(console: Optional[ConsolePort] = None) -> None:
    """Run the animal chain and the buffet chain."""
    console = console or get_console()

    monkey = MonkeyHandler()
    squirrel = SquirrelHandler()
    dog = DogHandler()
    monkey.set_next(squirrel).set_next(dog)

    # The client can send a request to any handler, not just the first one
    console.write_line("Chain: Monkey > Squirrel > Dog")
    console.write_line()
    client_code(monkey, console)
    console.write_line()

    console.write_line("Subchain: Squirrel > Dog")
    console.write_line()
    client_code(squirrel, console)
    console.write_line()

    japanese = JapaneseFoodBuffet()
    mexican = MexicanFoodBuffet()
    japanese.pass_to_next_buffet(mexican)

    buffet_client_code(japanese, console)
    buffet_client_code(mexican, console)
