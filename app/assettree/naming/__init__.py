"""Asset name tables built from directory trees."""

from assettree.naming.models import FileRecord
from assettree.naming.namer import PathNamer, convert_paths_to_names

__all__ = ["FileRecord", "PathNamer", "convert_paths_to_names"]
