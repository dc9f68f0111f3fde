"""Console adapters for demo output."""

import sys
from typing import List, Optional, TextIO

from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.patterns import get_singleton


class StdoutConsole(ConsolePort):
    """Writes every line straight to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def write_line(self, text: str = "") -> None:
        stream = self._stream or sys.stdout
        stream.write(f"{text}\n")


class BufferedConsole(ConsolePort):
    """Records lines in memory, in write order."""

    def __init__(self):
        self._lines: List[str] = []

    def write_line(self, text: str = "") -> None:
        # Multi-line strings are stored the way a terminal would show them
        self._lines.extend(str(text).split("\n"))

    @property
    def lines(self) -> List[str]:
        """Get a copy of the recorded lines."""
        return list(self._lines)

    def clear(self) -> None:
        """Drop all recorded lines."""
        self._lines.clear()


def get_console() -> ConsolePort:
    """Get the process-wide stdout console."""
    return get_singleton(StdoutConsole)
