"""JSON persistence for name tables and other data."""

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from assettree.core.paths import BaseDirectory
from assettree.naming.models import FileRecord
from assettree.storage.files import StorageError, read_file, write_file


def json_encode(data: Any, *, indent: int | None = None) -> str:
    """Encode data as a JSON string."""
    return json.dumps(data, indent=indent)


def json_decode(text: str | None) -> Any:
    """Decode a JSON string.

    Returns:
        The decoded data, or None for empty or missing input.

    Raises:
        StorageError: If the text is not valid JSON.
    """
    if not text:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise StorageError(f"Invalid JSON: {e}") from e


def load_json_file(path: str | Path, base: BaseDirectory | None = BaseDirectory.DOCUMENTS) -> Any:
    """Read and decode a JSON file.

    Returns:
        The decoded data, or None if the file does not exist or is empty.
    """
    return json_decode(read_file(path, base))


def save_json_file(
    data: Any,
    path: str | Path,
    base: BaseDirectory | None = BaseDirectory.DOCUMENTS,
) -> Path:
    """Encode data as JSON and write it to a file.

    Returns:
        Path the file was written to.
    """
    return write_file(json_encode(data, indent=2), path, base)


def save_name_table(
    records: Iterable[FileRecord],
    path: str | Path,
    base: BaseDirectory | None = BaseDirectory.DOCUMENTS,
) -> Path:
    """Write FileRecords to a JSON file as a list of objects."""
    return save_json_file([record.to_dict() for record in records], path, base)


def load_name_table(
    path: str | Path,
    base: BaseDirectory | None = BaseDirectory.DOCUMENTS,
) -> list[FileRecord]:
    """Read FileRecords written by save_name_table().

    Returns:
        The records, or an empty list if the file does not exist.

    Raises:
        StorageError: If the file is not a valid name table.
    """
    data = load_json_file(path, base)
    if data is None:
        return []
    if not isinstance(data, list):
        raise StorageError(f"Name table must be a JSON list, got {type(data).__name__}")
    try:
        return [FileRecord(**item) for item in data]
    except (TypeError, ValueError) as e:
        raise StorageError(f"Invalid name table entry: {e}") from e
