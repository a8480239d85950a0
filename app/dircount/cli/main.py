"""Main CLI application entry point.

Defines the Typer application, global options and logging setup.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from dircount import __version__
from dircount.cli.commands import config, count, metrics, scan
from dircount.core.config import DEFAULT_LOG_LEVEL, ConfigError, load_config_or_default
from dircount.utils.formatting import print_warning

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Create main Typer app
app = typer.Typer(
    name="dircount",
    help="Count directory entries with depth, name, type, size and age filters.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dircount version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool, config_path: Path | None) -> None:
    """Configure root logging from --verbose or the configured log level.

    A broken config file is reported as a warning here; commands that
    need the config report the error themselves.
    """
    if verbose:
        level = "DEBUG"
    else:
        try:
            level = load_config_or_default(config_path).log_level
        except ConfigError as e:
            print_warning(f"Ignoring config for logging setup: {escape(str(e))}")
            level = DEFAULT_LOG_LEVEL

    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT)


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
            help="Enable debug logging.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to the config file (default: ~/.config/dircount/config.toml).",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """dircount - directory entry count metric.

    Counts the entries below a directory the way a monitoring agent
    polls it, with optional recursion depth, name regex, entry type,
    size and age filters.
    """
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    configure_logging(verbose, config_path)


# Register commands
app.command(name="count")(count.count_command)
app.command(name="scan")(scan.scan_command)
app.command(name="metrics")(metrics.metrics_command)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
