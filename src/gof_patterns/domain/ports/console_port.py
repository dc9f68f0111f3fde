"""Console port for line-oriented demo output."""

from abc import ABC, abstractmethod


class ConsolePort(ABC):
    """Port for writing human-readable output lines."""

    @abstractmethod
    def write_line(self, text: str = "") -> None:
        """Write a single line of output."""
