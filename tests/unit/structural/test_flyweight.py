"""Tests for the flyweight factories."""
import threading

from gof_patterns.structural.flyweight import (
    CitizenFactory,
    FlyweightFactory,
    add_car_to_police_database,
    add_citizen_to_database,
    run_demo,
)


class TestFlyweightFactory:
    """Test caching by shared-state value."""

    def setup_method(self):
        self.states = [["BMW", "M5", "red"], ["BMW", "X6", "white"]]

    def test_initial_states_are_cached(self, console):
        factory = FlyweightFactory(self.states, console)
        assert len(factory) == 2
        assert factory.labels() == ["BMW_M5_red", "BMW_X6_white"]

    def test_equal_states_share_one_instance(self, console):
        factory = FlyweightFactory(self.states, console)

        first = factory.get_flyweight(["BMW", "M5", "red"])
        second = factory.get_flyweight(("BMW", "M5", "red"))

        assert first is second
        assert len(factory) == 2
        assert console.lines == [
            "FlyweightFactory: Reusing existing flyweight.",
            "FlyweightFactory: Reusing existing flyweight.",
        ]

    def test_new_state_grows_cache_by_one(self, console):
        factory = FlyweightFactory(self.states, console)

        flyweight = factory.get_flyweight(["BMW", "X1", "red"])

        assert len(factory) == 3
        assert flyweight.shared_state == ("BMW", "X1", "red")
        assert console.lines == ["FlyweightFactory: Can't find a flyweight, creating new one."]

    def test_joined_label_collisions_are_distinct_entries(self, console):
        factory = FlyweightFactory([], console)
        a = factory.get_flyweight(["a_b", "c"])
        b = factory.get_flyweight(["a", "b_c"])
        assert a is not b
        assert len(factory) == 2

    def test_concurrent_requests_create_one_flyweight(self, console):
        factory = FlyweightFactory([], console)
        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(factory.get_flyweight(["Audi", "A4", "blue"]))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(factory) == 1
        assert all(result is results[0] for result in results)

    def test_operation_shows_shared_and_unique_state(self, console):
        factory = FlyweightFactory(self.states, console)
        add_car_to_police_database(factory, "CL234IR", "James Doe", "BMW", "M5", "red", console)
        assert console.lines == [
            "",
            "Client: Adding a car to database.",
            "FlyweightFactory: Reusing existing flyweight.",
            'Flyweight: Displaying shared (["BMW","M5","red"]) and unique (["CL234IR","James Doe"]) state.',
        ]

    def test_list_flyweights(self, console):
        FlyweightFactory(self.states, console).list_flyweights()
        assert console.lines == ["", "FlyweightFactory: I have 2 flyweights:", "BMW_M5_red", "BMW_X6_white"]


class TestCitizenFactory:
    def test_citizens_share_information(self, console):
        factory = CitizenFactory([], console)

        add_citizen_to_database(factory, "Ishmael", "1851", "The Sea", "SSN: 1")
        add_citizen_to_database(factory, "Ishmael", "1851", "The Sea", "SSN: 2")

        assert len(factory) == 1
        assert console.lines == [
            "CitizenFactory: Can't find a citizen, creating new one.",
            "Citizen object displaying shared information Ishmael,1851,The Sea and unique information SSN: 1",
            "CitizenFactory: Reusing existing citizen.",
            "Citizen object displaying shared information Ishmael,1851,The Sea and unique information SSN: 2",
        ]


def test_run_demo(console):
    run_demo(console)
    assert "FlyweightFactory: I have 5 flyweights:" in console.lines
    assert "FlyweightFactory: I have 6 flyweights:" in console.lines
    assert "FlyweightFactory: I have 3 citizens:" in console.lines
    assert "FlyweightFactory: I have 5 citizens:" in console.lines
