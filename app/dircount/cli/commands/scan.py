"""Scan command implementation.

Counts directory entries using named options instead of positional
parameters. The options are assembled into the positional list the
metric expects.
"""

from typing import Annotated

import typer

from dircount.cli.types import OutputFormat, report_count


def build_params(
    path: str,
    *,
    include: str = "",
    exclude: str = "",
    types: str = "",
    exclude_types: str = "",
    max_depth: str = "",
    min_size: str = "",
    max_size: str = "",
    min_age: str = "",
    max_age: str = "",
    exclude_dir: str = "",
) -> list[str]:
    """Assemble named filter values into positional metric parameters.

    Trailing empty slots are dropped so the list is only as long as the
    highest slot that was set.

    Returns:
        Positional parameter list starting with the path.
    """
    params = [
        path,
        include,
        exclude,
        types,
        exclude_types,
        max_depth,
        min_size,
        max_size,
        min_age,
        max_age,
        exclude_dir,
    ]
    while len(params) > 1 and params[-1] == "":
        params.pop()
    return params


def scan_command(
    path: Annotated[str, typer.Argument(help="Directory to count entries in.")],
    include: Annotated[
        str,
        typer.Option("--include", "-i", help="Regex an entry name must match."),
    ] = "",
    exclude: Annotated[
        str,
        typer.Option("--exclude", "-x", help="Regex an entry name must not match."),
    ] = "",
    types: Annotated[
        str,
        typer.Option(
            "--type",
            "-t",
            help="Comma-separated types to count: file, dir, sym, sock, bdev, cdev, dev, "
            "fifo or all.",
        ),
    ] = "",
    exclude_types: Annotated[
        str,
        typer.Option("--exclude-type", "-T", help="Comma-separated types to leave out."),
    ] = "",
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", "-d", help="Maximum depth below the path (-1 = unlimited)."),
    ] = None,
    min_size: Annotated[
        str,
        typer.Option("--min-size", help="Minimum size in bytes, or with K/M/G/T suffix."),
    ] = "",
    max_size: Annotated[
        str,
        typer.Option("--max-size", help="Maximum size in bytes, or with K/M/G/T suffix."),
    ] = "",
    min_age: Annotated[
        str,
        typer.Option("--min-age", help="Skip entries modified more recently (s/m/h/d/w)."),
    ] = "",
    max_age: Annotated[
        str,
        typer.Option("--max-age", help="Skip entries modified longer ago (s/m/h/d/w)."),
    ] = "",
    exclude_dir: Annotated[
        str,
        typer.Option("--exclude-dir", help="Regex of directory names not to descend into."),
    ] = "",
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
    """Count directory entries using named filter options.

    Examples:
        dircount scan /var/log --include '\\.log$'      # Log files only
        dircount scan /srv --type dir --max-depth 1     # Top-level directories
        dircount scan /tmp --min-age 1d --type file     # Files older than a day
        dircount scan ~/src --exclude-dir '^\\.git$'     # Skip .git trees
    """
    params = build_params(
        path,
        include=include,
        exclude=exclude,
        types=types,
        exclude_types=exclude_types,
        max_depth="" if max_depth is None else str(max_depth),
        min_size=min_size,
        max_size=max_size,
        min_age=min_age,
        max_age=max_age,
        exclude_dir=exclude_dir,
    )
    report_count(params, output_format)
