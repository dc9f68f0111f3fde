"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- Rich tables for the demo listing
- JSON documents for machine-readable output
"""

import json
from io import StringIO
from typing import Any, Dict, List

from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(data, indent=2, default=str, ensure_ascii=False)
    if format_type == "table" and isinstance(data, dict) and "demos" in data:
        return format_demos_table(data["demos"])
    if format_type == "text" and isinstance(data, dict) and "demos" in data:
        return format_demos_text(data["demos"])
    # Fallback to JSON for unknown data structures
    return json.dumps(data, indent=2, default=str, ensure_ascii=False)


def format_demos_table(demos: List[Dict[str, Any]]) -> str:
    """Format the demo listing as a table using Rich."""
    if not demos:
        return "No demos registered."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Category", style="green")
    table.add_column("Description")

    for demo in demos:
        table.add_row(demo.get("name", ""), demo.get("category", ""), demo.get("description", ""))

    buffer = StringIO()
    console = Console(file=buffer, force_terminal=False, width=120)
    console.print(table)
    return buffer.getvalue().rstrip("\n")


def format_demos_text(demos: List[Dict[str, Any]]) -> str:
    """Format the demo listing as one name per line."""
    return "\n".join(demo.get("name", "") for demo in demos)
