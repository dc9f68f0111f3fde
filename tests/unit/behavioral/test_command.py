"""Tests for the command example."""
from unittest.mock import Mock

from gof_patterns.behavioral.command import (
    Client,
    Command,
    ComplexCommand,
    Invoker,
    Receiver,
    ReceiveItems,
    SalesDepartment,
    SendItem,
    SimpleCommand,
    run_demo,
)


class TestInvoker:
    """Test the invoker's optional command slots."""

    def test_empty_slots_are_skipped(self, console):
        invoker = Invoker(console)

        invoker.do_something_important()

        assert console.lines == [
            "Invoker: Does anybody want something done before I begin?",
            "Invoker: ...doing something really important...",
            "Invoker: Does anybody want something done after I finish?",
        ]

    def test_only_finish_command_runs(self, console):
        # Arrange
        on_finish = Mock(spec=Command)
        invoker = Invoker(console)
        invoker.set_on_finish(on_finish)

        # Act
        invoker.do_something_important()

        # Assert
        on_finish.execute.assert_called_once_with()

    def test_commands_run_around_the_important_work(self, console):
        invoker = Invoker(console)
        invoker.set_on_start(SimpleCommand("Say Hi!", console))
        invoker.set_on_finish(ComplexCommand(Receiver(console), "Send email", "Save report", console))

        invoker.do_something_important()

        assert console.lines == [
            "Invoker: Does anybody want something done before I begin?",
            "SimpleCommand: See, I can do simple things like printing (Say Hi!)",
            "Invoker: ...doing something really important...",
            "Invoker: Does anybody want something done after I finish?",
            "ComplexCommand: Complex stuff should be done by a receiver object.",
            "Receiver: Working on (Send email.)",
            "Receiver: Also working on (Save report.)",
        ]

    def test_complex_command_delegates_to_receiver(self, console):
        receiver = Mock(spec=Receiver)
        ComplexCommand(receiver, "a", "b", console).execute()
        receiver.do_something.assert_called_once_with("a")
        receiver.do_something_else.assert_called_once_with("b")


class TestSalesDepartment:
    """Test the sales department invoker."""

    def test_unset_actions_do_nothing(self):
        department = SalesDepartment()
        department.receive_a_bunch_of_items()
        department.send_an_item()

    def test_receive_items_lists_each_item(self, console):
        department = SalesDepartment()
        department.set_receive_items(ReceiveItems(["item1", "item2"], console))

        department.receive_a_bunch_of_items()

        assert console.lines[-2:] == [
            "Item: item1 has been added to the DB",
            "Item: item2 has been added to the DB",
        ]

    def test_send_item_uses_client_receiver(self, console):
        client = Client("ACME", console)
        department = SalesDepartment()
        department.set_send_item(SendItem(client, ["Gift wrap"], "Main St", console))

        department.send_an_item()

        assert "Action: Gift wrap has been performed" in console.lines
        assert "Client with address Main St has been notified about the delivery" in console.lines
        assert console.lines[-1] == "Item has been sent to client: ACME"


def test_run_demo(console):
    run_demo(console)
    assert "Item: item3 has been added to the DB" in console.lines
    assert "Item has been sent to client: Main Client" in console.lines
