"""CLI commands for assettree.

This package contains all subcommand implementations.
"""

from assettree.cli.commands import config, names, tree

__all__ = ["config", "names", "tree"]
