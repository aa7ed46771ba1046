"""Workspace command implementation.

Shows the workspace detected for a directory: the managing tool, the
root, the hoisted dependency tree and every package directory.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from prunemod.cli.types import OutputFormat
from prunemod.utils.formatting import console, print_info
from prunemod.workspace.detector import WorkspaceDetector
from prunemod.workspace.models import WorkspaceInfo


def workspace_command(
    directory: Annotated[
        Path,
        typer.Argument(help="Directory to start detection from."),
    ] = Path("."),
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
    """Detect the workspace containing a directory.

    Searches the directory and its parents for npm, Yarn, pnpm, Lerna,
    Nx, Rush, Bun or Turborepo configuration.

    Examples:
        prunemod workspace                 # Detect from the current directory
        prunemod workspace packages/app    # Detect from a package directory
        prunemod workspace --format json   # JSON output for scripting
    """
    info = WorkspaceDetector().detect(directory)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(info.to_dict()))
        return

    if not info.detected:
        print_info(f"No workspace configuration found for {directory}")
        return

    _print_table(info)


def _print_table(info: WorkspaceInfo) -> None:
    """Display a detected workspace as Rich tables."""
    summary = Table(
        title="Workspace",
        show_header=False,
        border_style="border",
    )
    summary.add_column("Field", style="bold_header")
    summary.add_column("Value", style="text")
    summary.add_row("Type", info.type.value)
    summary.add_row("Root", str(info.root))
    summary.add_row("Hoisted dependencies", str(info.hoisted_dependencies or "-"))
    summary.add_row("Packages", str(len(info.packages)))
    console.print(summary)

    if not info.packages:
        return

    packages = Table(
        title="Packages",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    packages.add_column("Package", style="text")
    packages.add_column("node_modules", justify="center")

    for package, dependencies in zip(info.packages, info.package_dependencies, strict=True):
        status = "[success]yes[/]" if dependencies.is_dir() else "[muted]no[/]"
        packages.add_row(_display_path(package, info.root), status)

    console.print(packages)


def _display_path(path: Path, root: Path) -> str:
    """Render a package path relative to the workspace root when possible."""
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)
