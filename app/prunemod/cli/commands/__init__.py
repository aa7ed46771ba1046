"""CLI commands for prunemod.

This package contains all subcommand implementations.
"""

from prunemod.cli.commands import config, defaults, prune, workspace

__all__ = ["config", "defaults", "prune", "workspace"]
