"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

import json
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

import typer
from rich.markup import escape

from dircount.core.config import ConfigError, DirCountConfig, load_config_or_default
from dircount.utils.formatting import console, print_count, print_error
from dircount.vfs.errors import DirCountError
from dircount.vfs.metric import COUNT_METRIC, count


class OutputFormat(str, Enum):
    """Output format options for count results."""

    TEXT = "text"
    JSON = "json"


def get_config_path(ctx: typer.Context) -> Path | None:
    """Get the --config override stored by the root callback, if any."""
    obj = ctx.find_root().obj or {}
    return obj.get("config_path")


def load_cli_config(ctx: typer.Context) -> DirCountConfig:
    """Load configuration for a command, exiting with code 1 on errors."""
    try:
        return load_config_or_default(get_config_path(ctx))
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e


def report_count(params: Sequence[str], output_format: OutputFormat) -> None:
    """Count entries for ``params`` and print the result.

    Args:
        params: Positional metric parameters.
        output_format: Plain number or JSON object.

    Raises:
        typer.Exit: With code 1 if parsing or the walk fails.
    """
    try:
        value = count(params)
    except DirCountError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        data = {"key": COUNT_METRIC, "params": list(params), "value": value}
        console.print_json(json.dumps(data))
        return

    print_count(value)
