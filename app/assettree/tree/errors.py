"""Exceptions raised by directory traversal."""


class TreeError(Exception):
    """Base exception for directory traversal errors."""


class InvalidArgumentError(TreeError, ValueError):
    """Raised when the traversal root is empty or not a directory."""


class RootNotFoundError(TreeError, FileNotFoundError):
    """Raised when the traversal root does not exist."""


class MetadataUnavailableError(TreeError, OSError):
    """Raised when an entry exists but its metadata cannot be read.

    Attributes:
        path: Path of the entry whose metadata could not be read.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read metadata of {path}: {reason}")
        self.path = path
        self.reason = reason
