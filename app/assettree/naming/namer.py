"""Asset name synthesis from category-organised directory trees.

Assets are expected to live at least one directory below the scan
root, the first directory being the asset's type (category):

    sounds/                 scan root
        sfx/                type tag, not part of the name
            ui/click.wav    -> "ui-click"
            boom.ogg        -> "boom"
        readme.txt          dropped, no type directory

The name is every directory below the type tag joined with hyphens,
followed by the filename up to its first dot.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from assettree.core.config import ErrorPolicy, get_config
from assettree.core.paths import BaseDirectory, path_for_file
from assettree.naming.models import FileRecord
from assettree.tree.walker import list_files, normalize_root
from assettree.utils.strings import get_file_from_filename, split_path

logger = logging.getLogger(__name__)

# Marks an absolute path so it never matches a relative root
_ANCHOR = "/"


def _anchored_segments(path: str) -> tuple[str, ...]:
    """Split a path, keeping a leading separator as its first segment."""
    segments = tuple(split_path(path))
    if path[:1] in ("/", "\\"):
        return (_ANCHOR, *segments)
    return segments


class PathNamer:
    """Builds FileRecords for files found beneath a scan root.

    The root is matched both as given and in its resolved absolute
    form, so records can be built from walker output in either form.

    Args:
        root: The scan root the file paths were produced from.
        base: Base location the root was resolved against (None = as given).
        ignored_filenames: Filenames that never become records.
            Defaults to the configured ``ignored_filenames``.

    Raises:
        InvalidArgumentError: If root is empty.
    """

    def __init__(
        self,
        root: str | Path,
        *,
        base: BaseDirectory | None = BaseDirectory.RESOURCE,
        ignored_filenames: Iterable[str] | None = None,
    ) -> None:
        self._root = normalize_root(root)

        if ignored_filenames is None:
            ignored_filenames = get_config().ignored_filenames
        self._ignored = frozenset(ignored_filenames)

        resolved = path_for_file(self._root, base)
        candidates = {
            _anchored_segments(self._root),
            _anchored_segments(str(resolved)),
            _anchored_segments(os.path.abspath(resolved)),
        }
        # Longest prefix first so an absolute root wins over a relative one
        self._root_prefixes = sorted(candidates, key=len, reverse=True)

    def name_files(self, files: Iterable[str]) -> list[FileRecord]:
        """Build records for a list of files, preserving their order.

        Files that do not fit the ``root/type/.../file`` shape are
        omitted.

        Args:
            files: File paths, usually from list_files().

        Returns:
            Records for every file that fits the expected shape.
        """
        records: list[FileRecord] = []
        for path in files:
            record = self.name_path(path)
            if record is not None:
                records.append(record)
        return records

    def name_path(self, path: str) -> FileRecord | None:
        """Build the record for a single file.

        Args:
            path: File path beneath the scan root.

        Returns:
            The FileRecord, or None if the file is dropped.
        """
        relative = self._relative_segments(path)
        if relative is None:
            logger.debug("Dropping %s: outside scan root %s", path, self._root)
            return None

        filename = relative[-1]
        dir_segments = relative[:-1]

        if not dir_segments:
            logger.debug("Dropping %s: no type directory", path)
            return None

        if filename in self._ignored:
            logger.debug("Dropping %s: ignored filename", path)
            return None

        name_base = get_file_from_filename(filename)
        if name_base is None:
            logger.debug("Dropping %s: filename has no name part", path)
            return None

        # dir_segments[0] is the type tag
        local_dir = "".join(f"{segment}-" for segment in dir_segments[1:])

        return FileRecord(path=path, filename=filename, name=local_dir + name_base)

    def _relative_segments(self, path: str) -> list[str] | None:
        """Split a path and strip the scan root from its front.

        Returns:
            Segments below the root, or None if the path is not under it.
        """
        segments = _anchored_segments(path)
        for prefix in self._root_prefixes:
            size = len(prefix)
            if len(segments) > size and segments[:size] == prefix:
                return list(segments[size:])
        return None


def convert_paths_to_names(
    path: str | Path,
    base: BaseDirectory | None = BaseDirectory.RESOURCE,
    *,
    on_error: ErrorPolicy | None = None,
    ignored_filenames: Iterable[str] | None = None,
) -> list[FileRecord]:
    """Scan a directory and build a record for every asset file in it.

    Args:
        path: Directory to scan, resolved against ``base``.
        base: Base location for relative paths. None scans ``path`` as given.
        on_error: Metadata failure policy. None uses the configured policy.
        ignored_filenames: Filenames to drop. None uses the configured list.

    Returns:
        FileRecords in traversal order.

    Raises:
        InvalidArgumentError: If path is empty or not a directory.
        RootNotFoundError: If the resolved directory does not exist.
        MetadataUnavailableError: If an entry cannot be read under ErrorPolicy.RAISE.
    """
    files = list_files(path, base, on_error=on_error)
    namer = PathNamer(path, base=base, ignored_filenames=ignored_filenames)
    return namer.name_files(files)
