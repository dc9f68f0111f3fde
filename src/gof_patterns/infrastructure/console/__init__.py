"""Console sinks implementing the ConsolePort."""

from .console import BufferedConsole, StdoutConsole, get_console

__all__ = ["BufferedConsole", "StdoutConsole", "get_console"]
