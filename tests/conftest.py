import os

import pytest

from gof_patterns.config.manager import reset_config_manager
from gof_patterns.infrastructure.console import BufferedConsole


@pytest.fixture
def console():
    """Console that records every line written to it."""
    return BufferedConsole()


@pytest.fixture(autouse=True)
def clean_config_environment(monkeypatch):
    """Isolate tests from GOF_PATTERNS_* variables and the global config manager."""
    for key in list(os.environ):
        if key.startswith("GOF_PATTERNS_"):
            monkeypatch.delenv(key, raising=False)
    reset_config_manager()
    yield
    reset_config_manager()
