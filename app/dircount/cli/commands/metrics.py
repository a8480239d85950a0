"""Metrics command implementation.

Lists the metric keys this package can collect.
"""

from dircount.utils.formatting import console, create_table
from dircount.vfs.metric import METRICS


def metrics_command() -> None:
    """List registered metric keys."""
    table = create_table("Registered Metrics")
    table.add_column("Key", style="key", no_wrap=True)
    table.add_column("Description", style="text")

    for key, description in sorted(METRICS.items()):
        table.add_row(key, description)

    console.print(table)
