"""Config commands.

Show the active configuration and create a default config file.
"""

from pathlib import Path
from typing import Annotated

import tomli_w
import typer

from assettree.core.config import (
    ConfigError,
    get_default_config,
    load_config,
    save_config,
)
from assettree.core.paths import BaseDirectory, get_base_dir, get_config_path
from assettree.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialise configuration.",
    no_args_is_help=True,
)


@app.command()
def show(
    path: Annotated[
        Path | None,
        typer.Option("--path", "-p", help="Config file to read."),
    ] = None,
) -> None:
    """Show the active configuration."""
    config_path = path or get_config_path()

    if config_path.exists():
        try:
            config = load_config(config_path)
        except ConfigError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e
        print_info(f"Config file: {config_path}")
    else:
        config = get_default_config()
        print_info(f"No config file at {config_path}, showing defaults")

    data = config.model_dump(mode="json", exclude_none=True)
    console.print(tomli_w.dumps(data), markup=False, highlight=False)

    if path is None:
        console.print(f"[dim]resource base:  {get_base_dir(BaseDirectory.RESOURCE)}[/dim]")
        console.print(f"[dim]documents base: {get_base_dir(BaseDirectory.DOCUMENTS)}[/dim]")


@app.command()
def init(
    path: Annotated[
        Path | None,
        typer.Option("--path", "-p", help="Where to write the config file."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a default config file."""
    config_path = path or get_config_path()

    if config_path.exists() and not force:
        print_error(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(get_default_config(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
