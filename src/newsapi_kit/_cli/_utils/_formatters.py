"""Output formatting for the CLI commands.

Supports a rich table for terminals and JSON for scripting. Pydantic models
are dumped before formatting.
"""

import json
from io import StringIO
from typing import Any

import click
from rich.console import Console
from rich.table import Table


def format_output(data: Any, fmt: str = "table", no_color: bool = False) -> None:
    """Format and print data to stdout.

    Args:
        data: A list of dicts, a dict, or pydantic models.
        fmt: Output format (table or json).
        no_color: Disable colored output for table format.
    """
    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json", by_alias=True)
    elif isinstance(data, list) and len(data) > 0 and hasattr(data[0], "model_dump"):
        data = [item.model_dump(mode="json", by_alias=True) for item in data]

    if fmt == "json":
        text = _format_json(data)
    else:
        text = _format_table(data, no_color=no_color)

    click.echo(text)


def _format_json(data: Any) -> str:
    return json.dumps(data, indent=2, default=str)


def _format_table(data: Any, no_color: bool = False) -> str:
    items = data if isinstance(data, list) else [data]
    if not items:
        return "No results"

    if not isinstance(items[0], dict):
        items = [{"value": str(item)} for item in items]

    columns = list(items[0].keys())

    table = Table(show_header=True, header_style="bold")
    for col in columns:
        table.add_column(col)

    for item in items:
        table.add_row(*[str(item.get(col, "")) for col in columns])

    buffer = StringIO()
    console = Console(file=buffer, force_terminal=not no_color, width=160)
    console.print(table)

    return buffer.getvalue()
