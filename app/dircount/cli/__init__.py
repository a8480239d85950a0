"""CLI package for dircount.

This package contains the Typer application and all subcommands.
"""

from dircount.cli.main import app

__all__ = ["app"]
