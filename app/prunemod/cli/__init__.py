"""CLI package for prunemod.

This package contains the Typer application and all subcommands.
"""

from prunemod.cli.main import app

__all__ = ["app"]
