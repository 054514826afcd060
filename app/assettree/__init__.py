"""assettree - directory traversal and asset name tables.

Walks category-organised asset folders and derives lookup names
for every file found.
"""

__version__ = "0.1.0"
