"""Configuration commands.

Provides commands to locate, create and inspect the dircount config
file and the parameter presets it defines.
"""

import json
from typing import Annotated

import typer
from rich.markup import escape

from dircount.cli.types import get_config_path, load_cli_config
from dircount.core.config import ConfigError, DirCountConfig, save_config
from dircount.core.paths import get_config_path as get_default_config_path
from dircount.utils.formatting import (
    console,
    create_table,
    print_error,
    print_info,
    print_success,
    print_warning,
)

app = typer.Typer(
    help="Manage the dircount configuration file.",
    no_args_is_help=True,
)


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the path of the configuration file."""
    config_path = get_config_path(ctx) or get_default_config_path()
    console.print(escape(str(config_path)), highlight=False, soft_wrap=True)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration as JSON."""
    config = load_cli_config(ctx)
    console.print_json(json.dumps(config.model_dump(exclude_none=True)))


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a default configuration file."""
    config_path = get_config_path(ctx) or get_default_config_path()

    if config_path.exists() and not force:
        print_warning(
            f"Config already exists: {escape(str(config_path))} (use --force to overwrite)"
        )
        raise typer.Exit(code=1)

    try:
        saved = save_config(DirCountConfig(), config_path)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {escape(str(saved))}")


@app.command()
def presets(ctx: typer.Context) -> None:
    """List parameter presets defined in the configuration."""
    config = load_cli_config(ctx)

    if not config.presets:
        print_info("No presets configured.")
        return

    table = create_table("Presets")
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Parameters", style="muted")
    table.add_column("Description", style="text")

    for name, preset in sorted(config.presets.items()):
        params = ", ".join(repr(p) for p in preset.params)
        table.add_row(escape(name), escape(params), escape(preset.description or "-"))

    console.print(table)
