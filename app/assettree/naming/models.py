"""Asset naming domain models."""

from dataclasses import dataclass

from assettree.utils.strings import get_filename_from_path


@dataclass(frozen=True, slots=True)
class FileRecord:
    """A discovered file paired with its synthesized asset name.

    Attributes:
        path: Full path of the file as produced by the tree walker.
        filename: Final segment of ``path``.
        name: Logical asset name, e.g. ``"ui-click"`` for ``sfx/ui/click.wav``.
    """

    path: str
    filename: str
    name: str

    def __post_init__(self) -> None:
        """Validate record data after initialization."""
        if get_filename_from_path(self.path) != self.filename:
            msg = f"Filename {self.filename!r} is not the last segment of {self.path!r}"
            raise ValueError(msg)
        if not self.name:
            msg = "Name cannot be empty"
            raise ValueError(msg)
        if "/" in self.name or "\\" in self.name:
            msg = f"Name cannot contain a path separator, got {self.name!r}"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, str]:
        """Convert to the JSON name-table shape."""
        return {"path": self.path, "filename": self.filename, "name": self.name}
