"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich, plus human
readable rendering of byte counts, entry counts and durations.
"""

import sys

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from prunemod.filesystem.models import Stats

THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "header": "#69B9A1",
        "bold_header": "bold #69B9A1",
        "border": "#29526d",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "bold #f53263",
        "info": "#0ec1c8",
        "removed": "#f53263",
    }
)

_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=THEME, color_system=_detect_color_system())
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())


def format_bytes(size: int) -> str:
    """Format a byte count as a human-readable string.

    Args:
        size: Number of bytes.

    Returns:
        String such as "512 B" or "1.5 MB".
    """
    value = float(size)
    for unit in _SIZE_UNITS:
        if abs(value) < 1024 or unit == _SIZE_UNITS[-1]:
            return f"{int(value)} {unit}" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} {_SIZE_UNITS[-1]}"


def format_number(value: int) -> str:
    """Format an integer with thousands separators."""
    return f"{value:,}"


def format_duration(seconds: float) -> str:
    """Format a duration in seconds.

    Args:
        seconds: Elapsed time.

    Returns:
        Milliseconds below one second, seconds below one minute,
        minutes and seconds otherwise.
    """
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes, rest = divmod(int(seconds), 60)
    return f"{minutes}m {rest}s"


def create_stats_table(stats: Stats, duration: float, *, dry_run: bool = False) -> Table:
    """Create the summary table of a prune run.

    Args:
        stats: Statistics of the run.
        duration: Elapsed time in seconds.
        dry_run: Label the table as a dry run.

    Returns:
        Rich Table with one row per statistic.
    """
    title = "Prune Summary (dry-run)" if dry_run else "Prune Summary"
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Statistic", style="text")
    table.add_column("Value", style="info", justify="right")

    table.add_row("Files total", format_number(stats.files_total))
    table.add_row("Files removed", f"[removed]{format_number(stats.files_removed)}[/]")
    table.add_row("Size removed", f"[removed]{format_bytes(stats.size_removed)}[/]")
    table.add_row("Size before", format_bytes(stats.size_before))
    table.add_row("Size after", format_bytes(stats.size_after))
    table.add_row("Duration", format_duration(duration))
    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
