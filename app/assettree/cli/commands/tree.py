"""Tree command implementation.

Walks a directory and lists its entries in pre-order.
"""

import json
from itertools import islice
from typing import Annotated

import typer

from assettree.cli.types import BaseChoice, OutputFormat, get_base, get_error_policy
from assettree.core.config import ConfigError, get_config
from assettree.core.paths import path_for_file
from assettree.tree.errors import InvalidArgumentError, TreeError
from assettree.tree.models import DirectoryEntry
from assettree.tree.walker import dirtree
from assettree.utils.formatting import (
    console,
    create_entry_table,
    format_entry_row,
    print_error,
    print_info,
)


def tree(
    root: Annotated[
        str,
        typer.Argument(help="Directory to walk."),
    ],
    base: Annotated[
        BaseChoice,
        typer.Option(
            "--base",
            "-b",
            help="Base location ROOT is relative to: resource, documents, or none.",
            case_sensitive=False,
        ),
    ] = BaseChoice.RESOURCE,
    files_only: Annotated[
        bool,
        typer.Option("--files-only", help="Only list regular files."),
    ] = False,
    skip_errors: Annotated[
        bool,
        typer.Option("--skip-errors", help="Skip entries whose metadata cannot be read."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-l",
            min=0,
            help="Stop after this many entries (0 = no limit).",
        ),
    ] = None,
) -> None:
    """Walk a directory tree and list every entry in pre-order."""
    try:
        if not root:
            raise InvalidArgumentError("Please pass directory parameter")
        policy = get_error_policy(skip_errors) or get_config().on_error
        walker = dirtree(path_for_file(root, get_base(base)), on_error=policy)

        entries = (entry for entry in walker if entry.is_file or not files_only)
        # The walker is lazy: with a limit, the rest of the tree is never read
        shown = list(islice(entries, limit) if limit else entries)
    except (TreeError, ConfigError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        _print_json(shown)
        return

    if not shown:
        print_info(f"No entries under {walker.root}")
        return

    table = create_entry_table(title=f"Directory Tree: {walker.root}")
    for entry in shown:
        table.add_row(*format_entry_row(entry))
    console.print(table)
    console.print(f"\n[dim]{len(shown)} entries[/dim]")


def _print_json(entries: list[DirectoryEntry]) -> None:
    """Display entries as JSON."""
    data = [
        {
            "path": e.path,
            "type": e.entry_type.value,
            "size_bytes": e.size_bytes,
            "mtime": e.mtime,
        }
        for e in entries
    ]
    console.print_json(json.dumps(data))
