"""Tests for the state example."""
from gof_patterns.behavioral.state import HappyState, Human, SadState, run_demo


class TestHuman:
    """Test behavior delegation to the current state."""

    def test_starts_happy(self):
        human = Human()
        assert isinstance(human.state, HappyState)
        assert human.think() == "Im Happy!"

    def test_initial_state_can_be_injected(self):
        assert Human(SadState()).think() == "Im Sad!"

    def test_transition_changes_behavior(self):
        human = Human()
        sad = SadState()

        human.transition_to(sad)

        assert human.state is sad
        assert human.think() == "Im Sad!"


def test_run_demo(console):
    run_demo(console)
    assert console.lines == ["Im Happy!", "Im Sad!", "Im Happy!"]
