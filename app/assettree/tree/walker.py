"""Lazy depth-first directory traversal.

TreeWalker yields every entry beneath a root directory in pre-order:
a directory is yielded, then its whole subtree, then its later
siblings. The walker keeps an explicit stack of pending directories
instead of recursing, and each directory is listed in a single call
whose handle is closed before any entry is yielded. Dropping a walker
half-way therefore leaks nothing.
"""

import logging
import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from assettree.core.config import ErrorPolicy, get_config
from assettree.core.paths import BaseDirectory, path_for_file
from assettree.tree.errors import InvalidArgumentError, MetadataUnavailableError, RootNotFoundError
from assettree.tree.models import DirectoryEntry

logger = logging.getLogger(__name__)

_SEPARATORS: frozenset[str] = frozenset({"/", os.sep})


@dataclass(slots=True)
class _PendingDirectory:
    """A directory whose children have not all been yielded yet.

    Attributes:
        path: Directory path.
        lineage: (st_dev, st_ino) of this directory and all its ancestors.
        names: Sorted child names still to visit (None until listed).
    """

    path: str
    lineage: frozenset[tuple[int, int]]
    names: Iterator[str] | None = field(default=None)


def normalize_root(root: str | os.PathLike[str] | None) -> str:
    """Validate a traversal root and strip one trailing separator.

    Args:
        root: Directory path as given by the caller.

    Returns:
        The root path without its trailing separator.

    Raises:
        InvalidArgumentError: If the root is None or empty.
    """
    if root is None:
        raise InvalidArgumentError("Please pass directory parameter")
    path = os.fspath(root)
    if not path:
        raise InvalidArgumentError("Please pass directory parameter")
    # The filesystem root keeps its separator
    if len(path) > 1 and path[-1] in _SEPARATORS:
        path = path[:-1]
    return path


def _join(parent: str, name: str) -> str:
    """Join a child name onto a directory path.

    No separator is added after a parent that already ends in one.
    """
    if parent[-1] in _SEPARATORS:
        return parent + name
    return parent + os.sep + name


class TreeWalker:
    """Pull-based pre-order iterator over a directory subtree.

    Symlinks are followed when reading metadata, so a link to a file
    is reported as a file and a link to a directory is descended into.
    A directory that is already on the current descent path is yielded
    but not entered again, so symlink cycles terminate.

    Args:
        root: Directory to traverse.
        on_error: Policy for entries whose metadata cannot be read.

    Raises:
        InvalidArgumentError: If root is empty or not a directory.
        RootNotFoundError: If root does not exist.
        MetadataUnavailableError: If root exists but cannot be stat'ed.
    """

    def __init__(
        self,
        root: str | os.PathLike[str],
        *,
        on_error: ErrorPolicy = ErrorPolicy.RAISE,
    ) -> None:
        self._root = normalize_root(root)
        self._on_error = on_error

        try:
            st = os.stat(self._root)
        except (FileNotFoundError, NotADirectoryError) as e:
            # A path below a regular file does not exist either
            raise RootNotFoundError(f"Directory not found: {self._root}") from e
        except OSError as e:
            raise MetadataUnavailableError(self._root, e.strerror or str(e)) from e

        if not stat.S_ISDIR(st.st_mode):
            raise InvalidArgumentError(f"Not a directory: {self._root}")

        self._stack: list[_PendingDirectory] = [
            _PendingDirectory(
                path=self._root,
                lineage=frozenset({(st.st_dev, st.st_ino)}),
            )
        ]

    @property
    def root(self) -> str:
        """Normalized traversal root."""
        return self._root

    def __iter__(self) -> "TreeWalker":
        return self

    def __next__(self) -> DirectoryEntry:
        """Yield the next entry in pre-order.

        Raises:
            StopIteration: When the subtree is exhausted or the walker was closed.
            MetadataUnavailableError: Under ErrorPolicy.RAISE, when an entry or
                directory listing cannot be read. The walker is closed first.
        """
        while self._stack:
            pending = self._stack[-1]

            if pending.names is None:
                names = self._list(pending.path)
                if names is None:
                    self._stack.pop()
                    continue
                pending.names = iter(names)

            name = next(pending.names, None)
            if name is None:
                self._stack.pop()
                continue

            child_path = _join(pending.path, name)
            try:
                st = os.stat(child_path)
            except OSError as e:
                self._fail(child_path, e)
                continue

            entry = DirectoryEntry.from_stat(child_path, st)
            if entry.is_directory:
                identity = (st.st_dev, st.st_ino)
                if identity in pending.lineage:
                    logger.warning("Not descending into directory cycle: %s", child_path)
                else:
                    self._stack.append(
                        _PendingDirectory(
                            path=child_path,
                            lineage=pending.lineage | {identity},
                        )
                    )
            return entry

        raise StopIteration

    def close(self) -> None:
        """Stop the traversal; later pulls raise StopIteration."""
        self._stack.clear()

    def _list(self, path: str) -> list[str] | None:
        """List a directory's child names in sorted order.

        Returns:
            Sorted child names, or None if the listing failed and was skipped.
        """
        logger.debug("Listing directory: %s", path)
        try:
            with os.scandir(path) as it:
                return sorted(entry.name for entry in it)
        except OSError as e:
            self._fail(path, e)
            return None

    def _fail(self, path: str, error: OSError) -> None:
        """Apply the error policy to a metadata failure."""
        reason = error.strerror or str(error)
        if self._on_error == ErrorPolicy.SKIP:
            logger.warning("Skipping unreadable entry %s: %s", path, reason)
            return
        self.close()
        raise MetadataUnavailableError(path, reason) from error


def dirtree(
    root: str | os.PathLike[str],
    *,
    on_error: ErrorPolicy = ErrorPolicy.RAISE,
) -> TreeWalker:
    """Start a fresh traversal of a directory tree.

    Args:
        root: Directory to traverse.
        on_error: Policy for entries whose metadata cannot be read.

    Returns:
        A new TreeWalker positioned before the first entry.
    """
    return TreeWalker(root, on_error=on_error)


def list_files(
    path: str | Path,
    base: BaseDirectory | None = BaseDirectory.RESOURCE,
    *,
    on_error: ErrorPolicy | None = None,
) -> list[str]:
    """List every regular file beneath a directory, in traversal order.

    Args:
        path: Directory to scan, resolved against ``base``.
        base: Base location for relative paths. None scans ``path`` as given.
        on_error: Metadata failure policy. None uses the configured policy.

    Returns:
        Paths of all regular files in the subtree.

    Raises:
        InvalidArgumentError: If path is empty or not a directory.
        RootNotFoundError: If the resolved directory does not exist.
        MetadataUnavailableError: If an entry cannot be read under ErrorPolicy.RAISE.
    """
    if not path:
        raise InvalidArgumentError("Please pass directory parameter")

    policy = on_error if on_error is not None else get_config().on_error
    root = path_for_file(path, base)

    return [entry.path for entry in dirtree(root, on_error=policy) if entry.is_file]
