"""Command.

Requests are wrapped in objects so an invoker can trigger them without
knowing what they do or who does the actual work.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.console import get_console


class Command(ABC):
    """Declares the method for executing a command."""

    @abstractmethod
    def execute(self) -> None:
        """Run the command."""


class SimpleCommand(Command):
    """Some commands can implement simple operations on their own."""

    def __init__(self, payload: str, console: Optional[ConsolePort] = None):
        self._payload = payload
        self._console = console or get_console()

    def execute(self) -> None:
        self._console.write_line(
            f"SimpleCommand: See, I can do simple things like printing ({self._payload})"
        )


class Receiver:
    """Holds the business logic commands delegate to."""

    def __init__(self, console: Optional[ConsolePort] = None):
        self._console = console or get_console()

    def do_something(self, a: str) -> None:
        self._console.write_line(f"Receiver: Working on ({a}.)")

    def do_something_else(self, b: str) -> None:
        self._console.write_line(f"Receiver: Also working on ({b}.)")


class ComplexCommand(Command):
    """Delegates the real work to a receiver, passing context captured at construction."""

    def __init__(self, receiver: Receiver, a: str, b: str, console: Optional[ConsolePort] = None):
        self._receiver = receiver
        self._a = a
        self._b = b
        self._console = console or get_console()

    def execute(self) -> None:
        self._console.write_line("ComplexCommand: Complex stuff should be done by a receiver object.")
        self._receiver.do_something(self._a)
        self._receiver.do_something_else(self._b)


class Invoker:
    """
    Sends requests to commands held in optional slots.

    An empty slot is skipped silently.
    """

    def __init__(self, console: Optional[ConsolePort] = None):
        self._on_start: Optional[Command] = None
        self._on_finish: Optional[Command] = None
        self._console = console or get_console()

    def set_on_start(self, command: Optional[Command]) -> None:
        self._on_start = command

    def set_on_finish(self, command: Optional[Command]) -> None:
        self._on_finish = command

    def do_something_important(self) -> None:
        self._console.write_line("Invoker: Does anybody want something done before I begin?")
        if self._on_start is not None:
            self._on_start.execute()

        self._console.write_line("Invoker: ...doing something really important...")

        self._console.write_line("Invoker: Does anybody want something done after I finish?")
        if self._on_finish is not None:
            self._on_finish.execute()


# === Sales department ===========================================================


class AdministrativeAction(ABC):
    """Command role for the sales department."""

    @abstractmethod
    def perform_administrative_action(self) -> None:
        """Carry out the action."""


class ReceiveItems(AdministrativeAction):
    """Simple action: registers incoming items."""

    def __init__(self, items: List[str], console: Optional[ConsolePort] = None):
        self._items = list(items)
        self._console = console or get_console()

    def perform_administrative_action(self) -> None:
        self._console.write_line("Receiving items...")
        self._console.write_line("Items received.")
        self._console.write_line("Adding items to DB.")
        for item in self._items:
            self._console.write_line(f"Item: {item} has been added to the DB")


class Client:
    """Receiver for deliveries."""

    def __init__(self, name: str, console: Optional[ConsolePort] = None):
        self.name = name
        self._console = console or get_console()

    def perform_specific_client_actions(self, client_specific_actions: List[str]) -> None:
        for action in client_specific_actions:
            self._console.write_line(f"Action: {action} has been performed")

    def notify_about_package_delivery(self, client_address: str) -> None:
        self._console.write_line(
            f"Client with address {client_address} has been notified about the delivery"
        )

    def __str__(self) -> str:
        return self.name


class SendItem(AdministrativeAction):
    """Complex action: delegates delivery steps to a Client receiver."""

    def __init__(
        self,
        client: Client,
        client_specific_actions: List[str],
        client_address: str,
        console: Optional[ConsolePort] = None,
    ):
        self._client = client
        self._client_specific_actions = list(client_specific_actions)
        self._client_address = client_address
        self._console = console or get_console()

    def perform_administrative_action(self) -> None:
        self._console.write_line("ComplexCommand: Complex stuff should be done by a client object.")
        self._client.perform_specific_client_actions(self._client_specific_actions)
        self._client.notify_about_package_delivery(self._client_address)
        self._console.write_line("Sending Item...")
        self._console.write_line(f"Item has been sent to client: {self._client}")


class SalesDepartment:
    """Invoker with one optional slot per administrative action."""

    def __init__(self):
        self._receive_items: Optional[AdministrativeAction] = None
        self._send_item: Optional[AdministrativeAction] = None

    def set_receive_items(self, action: Optional[AdministrativeAction]) -> None:
        self._receive_items = action

    def set_send_item(self, action: Optional[AdministrativeAction]) -> None:
        self._send_item = action

    def receive_a_bunch_of_items(self) -> None:
        if self._receive_items is not None:
            self._receive_items.perform_administrative_action()

    def send_an_item(self) -> None:
        if self._send_item is not None:
            self._send_item.perform_administrative_action()


def run_demo(console: Optional[ConsolePort] = None) -> None:
    """Parameterize the invokers with simple and complex commands."""
    console = console or get_console()

    invoker = Invoker(console)
    invoker.set_on_start(SimpleCommand("Say Hi!", console))
    receiver = Receiver(console)
    invoker.set_on_finish(ComplexCommand(receiver, "Send email", "Save report", console))
    invoker.do_something_important()
    console.write_line()

    sales_department = SalesDepartment()
    sales_department.set_receive_items(ReceiveItems(["item1", "item2", "item3"], console))
    main_client = Client("Main Client", console)
    sales_department.set_send_item(
        SendItem(
            main_client,
            ["Notify through Email", "Add special gift card"],
            "Some Address in NY",
            console,
        )
    )
    sales_department.receive_a_bunch_of_items()
    sales_department.send_an_item()
