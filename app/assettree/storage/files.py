"""File primitives relative to the base locations.

Reads default to the read-only resource base; writes, deletes and
existence checks default to the writable documents base.
"""

import logging
import os
import shutil
from pathlib import Path
from tempfile import NamedTemporaryFile

from assettree.core.paths import BaseDirectory, path_for_file

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when a file operation fails."""


def read_file(path: str | Path, base: BaseDirectory | None = BaseDirectory.RESOURCE) -> str | None:
    """Read a text file.

    Args:
        path: Path to the file.
        base: Base location for relative paths.

    Returns:
        The file contents, or None if the file does not exist.

    Raises:
        StorageError: If the file exists but cannot be read.
    """
    full_path = path_for_file(path, base)
    try:
        return full_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as e:
        raise StorageError(f"Failed to read {full_path}: {e}") from e


def write_file(
    contents: str,
    path: str | Path,
    base: BaseDirectory | None = BaseDirectory.DOCUMENTS,
) -> Path:
    """Write a text file, replacing any existing file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename. Parent directories
    are created as needed.

    Args:
        contents: The text to write.
        path: Path to the file.
        base: Base location for relative paths.

    Returns:
        Path the file was written to.

    Raises:
        StorageError: If the file cannot be written.
    """
    full_path = path_for_file(path, base)

    tmp_path: Path | None = None
    try:
        full_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=full_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            f.write(contents)
        os.replace(str(tmp_path), str(full_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise StorageError(f"Failed to write {full_path}: {e}") from e

    logger.debug("Wrote %d characters to %s", len(contents), full_path)
    return full_path


def delete_file(path: str | Path, base: BaseDirectory | None = BaseDirectory.DOCUMENTS) -> bool:
    """Delete a file.

    Returns:
        True if the file was deleted, False if it did not exist.

    Raises:
        StorageError: If the file exists but cannot be deleted.
    """
    full_path = path_for_file(path, base)
    try:
        full_path.unlink()
    except FileNotFoundError:
        return False
    except OSError as e:
        raise StorageError(f"Failed to delete {full_path}: {e}") from e
    return True


def file_exists(path: str | Path, base: BaseDirectory | None = BaseDirectory.DOCUMENTS) -> bool:
    """Check if a regular file exists."""
    return path_for_file(path, base).is_file()


def copy_file(source: str | Path, destination: str | Path) -> bool:
    """Copy a file's contents to another path.

    Both paths are used as given. The copy is verified by comparing
    sizes.

    Returns:
        True if the destination has the same size as the source.

    Raises:
        StorageError: If either file cannot be opened.
    """
    try:
        shutil.copyfile(source, destination)
    except OSError as e:
        raise StorageError(f"Failed to copy {source} to {destination}: {e}") from e
    return os.path.getsize(source) == os.path.getsize(destination)
