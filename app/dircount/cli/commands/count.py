"""Count command implementation.

Runs the directory entry count with raw positional parameters, exactly
as the monitoring agent passes them, or with a saved preset.
"""

from typing import Annotated

import typer
from rich.markup import escape

from dircount.cli.types import OutputFormat, load_cli_config, report_count
from dircount.core.config import ConfigError, get_preset
from dircount.utils.formatting import print_error


def count_command(
    ctx: typer.Context,
    params: Annotated[
        list[str] | None,
        typer.Argument(
            help="Positional parameters: path, include regex, exclude regex, types, "
            "exclude types, max depth, min size, max size, min age, max age, "
            "exclude-dir regex. Use '' to skip a slot and '--' before values "
            "starting with '-'.",
            show_default=False,
        ),
    ] = None,
    preset: Annotated[
        str | None,
        typer.Option(
            "--preset",
            "-p",
            help="Use the parameters of a preset from the config file.",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: text or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TEXT,
) -> None:
    """Count directory entries from positional metric parameters.

    Examples:
        dircount count /var/log                         # All entries below /var/log
        dircount count /var/log '\\.log$'                # Only names ending in .log
        dircount count /srv '' '' file '' 2             # Files at most 2 levels deep
        dircount count --preset logs                    # Parameters from config
    """
    if preset is not None:
        if params:
            print_error("Cannot combine --preset with positional parameters.")
            raise typer.Exit(code=1)
        config = load_cli_config(ctx)
        try:
            params = list(get_preset(config, preset).params)
        except ConfigError as e:
            print_error(escape(str(e)))
            raise typer.Exit(code=1) from e

    report_count(params or [], output_format)
