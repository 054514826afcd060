"""File and JSON persistence helpers.

Paths are resolved against the resource or documents base location.
"""

from assettree.storage.files import (
    StorageError,
    copy_file,
    delete_file,
    file_exists,
    read_file,
    write_file,
)
from assettree.storage.json_store import (
    json_decode,
    json_encode,
    load_json_file,
    load_name_table,
    save_json_file,
    save_name_table,
)

__all__ = [
    "StorageError",
    "copy_file",
    "delete_file",
    "file_exists",
    "json_decode",
    "json_encode",
    "load_json_file",
    "load_name_table",
    "read_file",
    "save_json_file",
    "save_name_table",
    "write_file",
]
