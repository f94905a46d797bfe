"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from rmprogress import __version__
from rmprogress.cli.commands import init, scan
from rmprogress.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="rmprogress",
    help="Estimate progress of running file-deletion processes.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"rmprogress version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route debug logging to stderr when verbose output is requested."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log skipped entries and other debug details to stderr.",
        ),
    ] = False,
) -> None:
    """rmprogress - Estimate progress of running file-deletion processes.

    Matches each file a running `rm` holds open against its command-line
    arguments and reports which argument it is currently working on.
    Without a subcommand, runs [bold]scan[/bold] with the configured defaults.
    """
    configure_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    if ctx.invoked_subcommand is None:
        scan.run_scan(scan.resolve_config())


# Register commands
app.add_typer(scan.app, name="scan")
app.add_typer(init.app, name="init")


if __name__ == "__main__":
    app()
