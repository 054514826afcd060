"""Directory traversal domain models.

This module defines the data structures produced while walking a
directory tree: the entry type classification and the per-entry
metadata record.
"""

import stat
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from os import stat_result


class EntryType(str, Enum):
    """Type of filesystem entry, after following symlinks.

    Attributes:
        DIRECTORY: Directory (or symlink to one).
        FILE: Regular file (or symlink to one).
        OTHER: Socket, FIFO, device node.
    """

    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"

    @classmethod
    def from_mode(cls, mode: int) -> "EntryType":
        """Classify an ``st_mode`` value."""
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISREG(mode):
            return cls.FILE
        return cls.OTHER


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """A filesystem entry discovered during traversal.

    Attributes:
        path: Root-prefixed path of the entry (``root + sep + name``). The
            root has one trailing separator stripped first, so ``sounds//``
            yields ``sounds/sfx`` and the filesystem root ``/`` yields ``/sfx``.
        entry_type: Type of the entry.
        size_bytes: Size in bytes as reported by stat.
        mtime: Last modification time in ISO 8601 format (UTC).
    """

    path: str
    entry_type: EntryType
    size_bytes: int
    mtime: str

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)

    @property
    def is_directory(self) -> bool:
        """Check if the entry is a directory."""
        return self.entry_type == EntryType.DIRECTORY

    @property
    def is_file(self) -> bool:
        """Check if the entry is a regular file."""
        return self.entry_type == EntryType.FILE

    @classmethod
    def from_stat(cls, path: str, st: stat_result) -> "DirectoryEntry":
        """Build an entry from a stat result.

        Args:
            path: Path of the entry.
            st: Result of ``os.stat`` on that path.

        Returns:
            DirectoryEntry carrying the type, size and mtime.
        """
        mtime = datetime.fromtimestamp(st.st_mtime, tz=UTC).isoformat()
        return cls(
            path=path,
            entry_type=EntryType.from_mode(st.st_mode),
            size_bytes=st.st_size,
            mtime=mtime,
        )
