"""Tests for the application settings singleton."""
import copy
import pickle
import threading

import pytest

from gof_patterns.creational import singleton
from gof_patterns.creational.singleton import ApplicationSettings, run_demo
from gof_patterns.domain.exceptions import SingletonViolationError


class TestApplicationSettings:
    """Test single-instance access."""

    def test_get_instance_returns_same_object(self):
        assert ApplicationSettings.get_instance() is ApplicationSettings.get_instance()

    def test_default_theme(self):
        assert ApplicationSettings.get_instance().application_theme == "dark"

    def test_direct_construction_raises(self):
        with pytest.raises(SingletonViolationError) as exc_info:
            ApplicationSettings()
        assert exc_info.value.class_name == "ApplicationSettings"

    def test_construction_token_refused_once_instance_exists(self):
        ApplicationSettings.get_instance()
        with pytest.raises(SingletonViolationError):
            ApplicationSettings(singleton._CONSTRUCTION_TOKEN)

    def test_copies_return_the_instance(self):
        settings = ApplicationSettings.get_instance()
        assert copy.copy(settings) is settings
        assert copy.deepcopy(settings) is settings
        assert copy.deepcopy({"settings": settings})["settings"] is settings

    def test_pickle_round_trip_returns_the_instance(self):
        settings = ApplicationSettings.get_instance()
        assert pickle.loads(pickle.dumps(settings)) is settings

    def test_concurrent_first_access_yields_one_instance(self, monkeypatch):
        monkeypatch.setattr(ApplicationSettings, "_instance", None)
        instances = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            instances.append(ApplicationSettings.get_instance())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(instances) == 8
        assert all(instance is instances[0] for instance in instances)


def test_run_demo(console):
    run_demo(console)
    assert console.lines[:2] == [
        "Application theme: dark",
        "Both accessors returned the same instance: True",
    ]
    assert console.lines[2].startswith("Direct construction refused:")
