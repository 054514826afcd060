"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum

from assettree.core.config import ErrorPolicy
from assettree.core.paths import BaseDirectory


class BaseChoice(str, Enum):
    """Base location a CLI path argument is resolved against."""

    RESOURCE = "resource"
    DOCUMENTS = "documents"
    NONE = "none"


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def get_base(choice: BaseChoice) -> BaseDirectory | None:
    """Map a CLI base choice to a BaseDirectory (None = path as given)."""
    if choice == BaseChoice.NONE:
        return None
    return BaseDirectory(choice.value)


def get_error_policy(skip_errors: bool) -> ErrorPolicy | None:
    """Map the --skip-errors flag to an error policy (None = configured)."""
    return ErrorPolicy.SKIP if skip_errors else None
