"""Names command implementation.

Scans an asset directory and prints the derived name table.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from assettree.cli.types import BaseChoice, OutputFormat, get_base, get_error_policy
from assettree.core.config import ConfigError
from assettree.naming.models import FileRecord
from assettree.naming.namer import convert_paths_to_names
from assettree.storage.files import StorageError
from assettree.storage.json_store import save_name_table
from assettree.tree.errors import TreeError
from assettree.utils.formatting import (
    console,
    create_name_table,
    format_record_row,
    print_error,
    print_info,
    print_warning,
)


def names(
    root: Annotated[
        str,
        typer.Argument(help="Asset directory; its subdirectories are the asset types."),
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
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Export the name table to a JSON file.",
        ),
    ] = None,
) -> None:
    """Build asset names for every file under ROOT."""
    try:
        records = convert_paths_to_names(
            root,
            get_base(base),
            on_error=get_error_policy(skip_errors),
        )
    except (TreeError, ConfigError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if export_path is not None:
        _export_records(records, export_path)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps([r.to_dict() for r in records]))
        return

    if not records:
        print_info("No asset files found.")
        return

    table = create_name_table(title=f"Asset Names: {root}")
    for record in records:
        table.add_row(*format_record_row(record))
    console.print(table)

    console.print(f"\n[dim]{len(records)} assets[/dim]")
    duplicates = _find_duplicates(records)
    if duplicates:
        print_warning(f"Duplicate names: {', '.join(sorted(duplicates))}")


def _export_records(records: list[FileRecord], export_path: Path) -> None:
    """Export records to a JSON file."""
    export_path = export_path.resolve()
    if export_path.is_dir():
        print_error(f"Export path is a directory: {export_path}")
        raise typer.Exit(code=1)

    try:
        save_name_table(records, export_path, base=None)
    except StorageError as e:
        print_error(f"Failed to export: {e}")
        raise typer.Exit(code=1) from e
    print_info(f"Name table exported to {export_path}")


def _find_duplicates(records: list[FileRecord]) -> set[str]:
    """Find names shared by more than one record."""
    seen: set[str] = set()
    duplicates: set[str] = set()
    for record in records:
        if record.name in seen:
            duplicates.add(record.name)
        seen.add(record.name)
    return duplicates
