"""Entry point of the ``assettree`` command.

Global flags control logging only; each subcommand handles its own
output and exit codes.
"""

from typing import Annotated

import typer

from assettree import __version__
from assettree.cli.commands import config, names, tree
from assettree.utils.formatting import setup_logging

app = typer.Typer(
    name="assettree",
    help="Walk asset directories and build asset name tables.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command(name="tree")(tree.tree)
app.command(name="names")(names.names)
app.add_typer(config.app, name="config")


def _show_version(value: bool) -> None:
    if value:
        typer.echo(f"assettree version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=_show_version,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log traversal details to stderr."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only log errors."),
    ] = False,
) -> None:
    """Derive lookup names for assets stored in category folders.

    [bold]assettree tree[/bold] lists a directory in walk order,
    [bold]assettree names[/bold] turns its files into a name table.
    """
    setup_logging(verbose=verbose, quiet=quiet)


if __name__ == "__main__":
    app()
