"""Utility modules for rmprogress.

This module exports commonly used utility functions.
"""

from rmprogress.utils.formatting import (
    console,
    err_console,
    format_observation,
    print_error,
    print_info,
    print_observation,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "err_console",
    "format_observation",
    "print_error",
    "print_info",
    "print_observation",
    "print_success",
    "print_warning",
]
