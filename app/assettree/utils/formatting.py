"""Rich console formatting utilities.

Provides consistent formatting and log output for the CLI using Rich.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from assettree.core.theme import get_rich_theme

if TYPE_CHECKING:
    from assettree.naming.models import FileRecord
    from assettree.tree.models import DirectoryEntry


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
_theme = get_rich_theme()
console = Console(theme=_theme, color_system=_detect_color_system())
err_console = Console(theme=_theme, stderr=True, color_system=_detect_color_system())


def setup_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Route log records for the assettree package to stderr via Rich.

    Args:
        verbose: Show DEBUG records.
        quiet: Show only ERROR records.
    """
    level = logging.DEBUG if verbose else logging.ERROR if quiet else logging.WARNING
    logger = logging.getLogger("assettree")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=err_console, show_path=verbose, markup=False))
    logger.setLevel(level)
    logger.propagate = False


def create_entry_table(title: str = "Directory Tree") -> Table:
    """Create a pre-configured table for directory entries."""
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", no_wrap=True)
    table.add_column("Type", width=10)
    table.add_column("Size", style="info", justify="right")
    table.add_column("Modified", style="muted")
    return table


def format_entry_row(entry: DirectoryEntry) -> tuple[str, str, str, str]:
    """Format a directory entry as a table row with proper styling.

    Returns:
        Tuple of (path, type, size, mtime) with Rich markup.
    """
    style = "directory" if entry.is_directory else "file"
    size = "-" if entry.is_directory else format_size(entry.size_bytes)
    return (
        f"[{style}]{entry.path}[/]",
        entry.entry_type.value,
        size,
        entry.mtime,
    )


def create_name_table(title: str = "Asset Names") -> Table:
    """Create a pre-configured table for FileRecords."""
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("Name", style="asset_name", no_wrap=True)
    table.add_column("Filename", style="text")
    table.add_column("Path", style="muted", overflow="ellipsis")
    return table


def format_record_row(record: FileRecord) -> tuple[str, str, str]:
    """Format a FileRecord as a table row."""
    return (record.name, record.filename, record.path)


def format_size(size_bytes: int | None) -> str:
    """Format byte count as human-readable string."""
    if size_bytes is None or size_bytes == 0:
        return "0 B"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if abs(size) < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
        size /= 1024
    return f"{size:.1f} TB"


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
