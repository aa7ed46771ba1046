"""Main CLI application entry point.

Defines the Typer application, global options and logging setup.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from prunemod import __version__
from prunemod.cli.commands import config, defaults, prune, workspace
from prunemod.utils.formatting import err_console

app = typer.Typer(
    name="prunemod",
    help="Remove superfluous files from installed node_modules trees.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

_PACKAGE_LOGGER = "prunemod"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"prunemod version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route package log records to stderr through Rich.

    Only the ``prunemod`` logger is configured; records still propagate
    to the root logger.

    Args:
        verbose: Show INFO records instead of warnings and errors only.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=err_console, show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log every pruned entry and workspace decision.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Use this config file instead of ~/.config/prunemod/config.toml.",
        ),
    ] = None,
) -> None:
    """prunemod - Prune node_modules of tests, docs and tooling leftovers.

    Walks an installed dependency tree (or every package of a monorepo
    workspace) and removes files that are not needed at runtime.
    """
    configure_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path


# Register commands
app.command(name="prune")(prune.prune_command)
app.command(name="workspace")(workspace.workspace_command)
app.command(name="defaults")(defaults.defaults_command)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
