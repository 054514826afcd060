"""Utility modules for assettree.

This module exports commonly used utility functions.
"""

from assettree.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
    setup_logging,
)
from assettree.utils.modules import safe_import, unload_module

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "safe_import",
    "setup_logging",
    "unload_module",
]
