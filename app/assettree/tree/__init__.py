"""Lazy directory traversal.

This module provides the pre-order tree walker, its entry models,
and the errors it raises.
"""

from assettree.tree.errors import (
    InvalidArgumentError,
    MetadataUnavailableError,
    RootNotFoundError,
    TreeError,
)
from assettree.tree.models import DirectoryEntry, EntryType
from assettree.tree.walker import TreeWalker, dirtree, list_files

__all__ = [
    "DirectoryEntry",
    "EntryType",
    "InvalidArgumentError",
    "MetadataUnavailableError",
    "RootNotFoundError",
    "TreeError",
    "TreeWalker",
    "dirtree",
    "list_files",
]
