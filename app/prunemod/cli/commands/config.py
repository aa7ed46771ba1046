"""Config commands.

Show the effective configuration, write a default config file, or
print where the config file lives.
"""

from typing import Annotated

import tomli_w
import typer

from prunemod.cli.types import get_config_path_option, require_config
from prunemod.core.config import PruneConfigError, get_default_config, save_config
from prunemod.core.paths import CONFIG_FILENAME, ensure_config_dir, get_config_path
from prunemod.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialize the prunemod configuration.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Print the effective configuration as TOML."""
    config = require_config(ctx)
    content = tomli_w.dumps(config.model_dump(exclude_none=True))
    console.print(content, markup=False, highlight=False, end="")


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with the default settings."""
    path = get_config_path_option(ctx)
    if path is None:
        try:
            path = ensure_config_dir() / CONFIG_FILENAME
        except RuntimeError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e

    if path.exists() and not force:
        print_error(f"Config already exists: {path}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        saved = save_config(get_default_config(), path)
    except PruneConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the config file path."""
    typer.echo(str(get_config_path_option(ctx) or get_config_path()))
