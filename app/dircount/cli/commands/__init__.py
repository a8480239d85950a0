"""CLI commands for dircount.

This package contains all subcommand implementations.
"""

from dircount.cli.commands import config, count, metrics, scan

__all__ = ["config", "count", "metrics", "scan"]
