"""Utility modules for dircount.

This module exports commonly used utility functions.
"""

from dircount.utils.formatting import (
    console,
    create_table,
    err_console,
    print_count,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_table",
    "err_console",
    "print_count",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
