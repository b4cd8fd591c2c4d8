"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML serialisation
- Rich tables for demonstration results
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "demonstrations" in data:
        return format_demonstrations_table(data["demonstrations"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_demonstrations_table(demonstrations: List[Dict[str, Any]]) -> str:
    """Format demonstration results as a Rich table."""
    if not demonstrations:
        return "No demonstrations found."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Principle", style="cyan", width=10)
    table.add_column("Title", style="green")
    table.add_column("Outcome", style="yellow")

    for demonstration in demonstrations:
        outcome = demonstration.get("outcome", {})
        table.add_row(
            str(demonstration.get("principle", "N/A")),
            str(demonstration.get("title", "N/A")),
            "\n".join(f"{key}: {_format_value(value)}" for key, value in outcome.items()),
        )

    console = Console(width=160)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def _format_value(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    return str(value)
