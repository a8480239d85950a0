"""Rich console output for the dircount CLI.

Counts and tables go to stdout; warnings and errors go to stderr so
that ``dircount count ... > value.txt`` captures only the number.
"""

import sys

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "key": "bold #0ec1c8",
        "bold_header": "bold #69B9A1",
        "border": "#29526d",
        "count": "bold #c1ff62",
        "success": "#03b971",
        "info": "#0ec1c8",
        "warning": "#f5b332",
        "error": "#f53263",
    }
)


def _detect_color_system() -> str | None:
    """Use truecolor on interactive terminals, otherwise let Rich decide."""
    if sys.stdout.isatty():
        return "truecolor"
    return None


console = Console(theme=THEME, color_system=_detect_color_system())
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())


def create_table(title: str) -> Table:
    """Create an empty table with the dircount header and border styles.

    Args:
        title: Table title.

    Returns:
        Rich Table with no columns yet.
    """
    return Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )


def print_count(value: int) -> None:
    """Print a metric value as a bare number."""
    console.print(f"[count]{value}[/]", highlight=False)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")
