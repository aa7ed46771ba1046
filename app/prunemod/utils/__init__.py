"""Utility modules for prunemod.

This module exports commonly used utility functions.
"""

from prunemod.utils.formatting import (
    console,
    create_stats_table,
    err_console,
    format_bytes,
    format_duration,
    format_number,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_stats_table",
    "err_console",
    "format_bytes",
    "format_duration",
    "format_number",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
