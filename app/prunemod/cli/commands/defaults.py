"""Defaults command implementation.

Lists the built-in directory, file and extension tables.
"""

import json
from typing import Annotated

import typer
from rich.table import Table

from prunemod.cli.types import OutputFormat
from prunemod.filesystem.defaults import (
    DEFAULT_DIRECTORIES,
    DEFAULT_EXTENSIONS,
    DEFAULT_FILES,
    EXPERIMENTAL_DEFAULT_FILES,
)
from prunemod.utils.formatting import console


def get_default_tables(experimental: bool = False) -> dict[str, list[str]]:
    """Get the built-in rule tables.

    Args:
        experimental: Append the experimental file names to the file table.

    Returns:
        Mapping of table name to entries.
    """
    files = list(DEFAULT_FILES)
    if experimental:
        files.extend(name for name in EXPERIMENTAL_DEFAULT_FILES if name not in files)

    return {
        "directories": list(DEFAULT_DIRECTORIES),
        "files": files,
        "extensions": list(DEFAULT_EXTENSIONS),
    }


def defaults_command(
    experimental: Annotated[
        bool,
        typer.Option(
            "--experimental",
            help="Include the experimental default files.",
        ),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List the entries removed by default.

    Examples:
        prunemod defaults                    # Show the default tables
        prunemod defaults --experimental     # Include experimental files
        prunemod defaults --format json      # JSON output for scripting
    """
    tables = get_default_tables(experimental)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(tables))
        return

    for name, entries in tables.items():
        console.print(f"[bold_header]Default {name} ({len(entries)})[/]")
        table = Table(show_header=False, border_style="border")
        table.add_column(name.capitalize(), style="text")
        for entry in entries:
            table.add_row(entry)
        console.print(table)
