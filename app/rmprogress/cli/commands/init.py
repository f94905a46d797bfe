"""Init command implementation.

Creates a config.toml file holding the default scan settings.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from rmprogress.core.config import ConfigError, ProgressConfig, save_config
from rmprogress.core.paths import get_config_path
from rmprogress.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Write the default configuration file.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def init_config(
    ctx: typer.Context,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path for the config file.",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing config file.",
        ),
    ] = False,
) -> None:
    """Create a config file with default scan settings.

    Examples:
        rmprogress init                     # Write ~/.config/rmprogress/config.toml
        rmprogress init --output my.toml    # Write to a custom path
        rmprogress init --force             # Overwrite existing config
    """
    if ctx.invoked_subcommand is not None:
        return

    output_path = output or get_config_path()

    if output_path.exists() and not force:
        print_error(f"Config already exists: {output_path}")
        print_info("Use --force to overwrite or specify a different path with --output.")
        raise typer.Exit(code=1)

    config = ProgressConfig()
    try:
        saved_path = save_config(config, output_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    console.print(f"  Match: [info]{escape(config.process_match)}[/info]")
    console.print(f"  Proc root: [muted]{escape(str(config.proc_root))}[/muted]")
    print_success(f"Config written to {saved_path}")
