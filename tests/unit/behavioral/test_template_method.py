"""Tests for the template method examples."""
import random

import pytest

from gof_patterns.behavioral.template_method import (
    AlgorithmTemplate,
    MathematicalOperation,
    client_code,
    concrete_template1,
    concrete_template2,
    run_demo,
    sum_operation,
)

BASE1 = "AlgorithmTemplate says: I am doing the bulk of the work"
BASE2 = "AlgorithmTemplate says: But I let implementers override some operations"
BASE3 = "AlgorithmTemplate says: But I am doing the bulk of the work anyway"


class TestAlgorithmTemplate:
    """Test step ordering of the template method."""

    def test_steps_run_in_fixed_order(self, console):
        calls = []
        template = AlgorithmTemplate(
            required_operation1=lambda: calls.append("req1"),
            required_operation2=lambda: calls.append("req2"),
            hook1=lambda: calls.append("hook1"),
            hook2=lambda: calls.append("hook2"),
            console=console,
        )

        template.template_method()

        assert calls == ["req1", "hook1", "req2", "hook2"]
        assert console.lines == [BASE1, BASE2, BASE3]

    def test_required_steps_are_mandatory(self):
        with pytest.raises(TypeError):
            AlgorithmTemplate(required_operation1=lambda: None)

    def test_template_without_hooks(self, console):
        client_code(concrete_template1(console))
        assert console.lines == [
            BASE1,
            "ConcreteTemplate1 says: Implemented Operation1",
            BASE2,
            "ConcreteTemplate1 says: Implemented Operation2",
            BASE3,
        ]

    def test_template_with_overridden_hook(self, console):
        client_code(concrete_template2(console))
        assert console.lines == [
            BASE1,
            "ConcreteTemplate2 says: Implemented Operation1",
            BASE2,
            "ConcreteTemplate2 says: Overridden Hook1",
            "ConcreteTemplate2 says: Implemented Operation2",
            BASE3,
        ]


class TestMathematicalOperation:
    """Test the operand, operation and hook sequence."""

    def test_hook_transforms_result(self, console):
        operation = MathematicalOperation(
            perform_operation=lambda a, b: a * b,
            hook_operation=lambda result: result + 1,
            first_operand=lambda: 6,
            second_operand=lambda: 7,
            console=console,
        )

        assert operation.perform_mathematical_operation() == 43
        assert operation.result == 43
        assert console.lines == ["The result is: 43"]

    def test_default_operands_fall_in_range(self, console):
        operation = MathematicalOperation(perform_operation=lambda a, b: b - a, console=console)
        result = operation.perform_mathematical_operation()
        assert 0 <= result <= 990

    def test_sum_operation_records_result(self, console):
        rng = random.Random(7)
        expected_rng = random.Random(7)
        expected = expected_rng.randint(10, 100) + expected_rng.randint(100, 1000)

        result = sum_operation(console, rng).perform_mathematical_operation()

        assert result == expected
        assert console.lines == [
            f"Sum record has been added to Database with result: {expected}",
            f"The result is: {expected}",
        ]


def test_run_demo_is_reproducible_with_seed(console):
    run_demo(console, random_seed=42)
    first = console.lines
    console.clear()
    run_demo(console, random_seed=42)
    assert console.lines == first
    assert first[0] == "Same client code can work with different templates:"
