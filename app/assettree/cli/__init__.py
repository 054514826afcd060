"""CLI package for assettree.

This package contains the Typer application and all subcommands.
"""

from assettree.cli.main import app

__all__ = ["app"]
