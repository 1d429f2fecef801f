"""
Utility functions for the baser command line.
"""

import json
import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

import click


class OutputFormat(str, Enum):
    """Output format options."""
    TABLE = "table"
    JSON = "json"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for the CLI.

    Args:
        verbose: Log debug messages, including every HTTP request
        quiet: Log errors only
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )

    # urllib3 is noisy at debug level
    if not verbose:
        logging.getLogger("urllib3").setLevel(logging.WARNING)


def print_success(message: str) -> None:
    """Print success message."""
    click.secho(f"✓ {message}", fg="green")


def print_error(message: str, details: Optional[str] = None) -> None:
    """Print error message to stderr."""
    click.secho(f"✗ Error: {message}", fg="red", err=True)
    if details:
        click.secho(f"  Details: {details}", fg="red", dim=True, err=True)


def print_warning(message: str) -> None:
    """Print warning message."""
    click.secho(f"⚠ {message}", fg="yellow")


def print_info(message: str) -> None:
    """Print info message."""
    click.secho(f"ℹ {message}", fg="blue")


def print_json(data: Any, indent: int = 2) -> None:
    """Print data as formatted JSON."""
    click.echo(json.dumps(data, indent=indent, ensure_ascii=False, default=str))


def truncate_string(text: Optional[str], max_length: int = 50) -> str:
    """Truncate string to max length."""
    if not text:
        return "-"
    if len(text) <= max_length:
        return text
    return text[:max_length - 3] + "..."


def format_bool(value: Any) -> str:
    """Format a boolean flag for table output."""
    if value is None:
        return "-"
    return click.style("Yes", fg="green") if value else click.style("No", fg="red")


def _visible_len(text: str) -> int:
    return len(click.unstyle(text))


def print_table(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    """
    Print a simple aligned table.

    Args:
        headers: Column titles
        rows: Row values; ``None`` is shown as ``-``
    """
    str_rows = [
        ["-" if cell is None else str(cell) for cell in row]
        for row in rows
    ]

    widths = [len(h) for h in headers]
    for row in str_rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], _visible_len(cell))

    def render(cells: Sequence[str]) -> str:
        return "  ".join(
            cell + " " * (widths[i] - _visible_len(cell))
            for i, cell in enumerate(cells)
        ).rstrip()

    click.echo(render([click.style(h, bold=True) for h in headers]))
    click.echo("  ".join("-" * w for w in widths))
    for row in str_rows:
        click.echo(render(row))


def print_records(
    records: Optional[List[Dict[str, Any]]],
    columns: Sequence[str],
    fmt: OutputFormat,
    title: Optional[str] = None,
) -> None:
    """
    Print a list of API records.

    Args:
        records: Records as returned by the client
        columns: Record keys shown in table format
        fmt: Output format
        title: Heading shown above the table
    """
    if fmt == OutputFormat.JSON:
        print_json(records)
        return

    if records is None:
        print_info("No records found.")
        return

    if title:
        click.echo(f"\n{title} ({len(records)} total):\n")

    if not records:
        print_info("No records found.")
        return

    rows = []
    for record in records:
        row = []
        for column in columns:
            value = record.get(column)
            if isinstance(value, bool):
                row.append(format_bool(value))
            elif isinstance(value, str):
                row.append(truncate_string(value))
            else:
                row.append(value)
        rows.append(row)

    print_table(list(columns), rows)


def print_record(record: Optional[Dict[str, Any]], fmt: OutputFormat) -> None:
    """Print a single API record as key/value pairs."""
    if fmt == OutputFormat.JSON:
        print_json(record)
        return

    if record is None:
        print_info("No record found.")
        return

    click.echo()
    width = max((len(k) for k in record), default=0)
    for key, value in record.items():
        if isinstance(value, dict):
            summary = value.get("title") or value.get("name") or value.get("id")
            click.echo(f"  {key:<{width}}  {{{summary}}}")
        elif isinstance(value, bool):
            click.echo(f"  {key:<{width}}  {format_bool(value)}")
        elif isinstance(value, str):
            click.echo(f"  {key:<{width}}  {truncate_string(value, 80)}")
        else:
            click.echo(f"  {key:<{width}}  {'-' if value is None else value}")


def mask_secret(value: Optional[str]) -> str:
    """Mask a secret for display."""
    if not value:
        return "(not set)"
    if len(value) <= 8:
        return "*" * len(value)
    return f"{value[:4]}...{value[-4:]}"
