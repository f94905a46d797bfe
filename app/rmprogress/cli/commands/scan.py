"""Scan command implementation.

Reports, for every running process whose executable matches, each open
file and the position of the command-line argument it belongs to.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from rmprogress.core.config import ConfigError, ProgressConfig, load_config
from rmprogress.core.normalize import NormalizeError
from rmprogress.procfs.errors import ProcfsError, ProcRootUnavailableError
from rmprogress.procfs.estimator import ProgressEstimator
from rmprogress.utils.formatting import print_error, print_observation, print_warning

app = typer.Typer(
    help="Show progress of running deletion processes.",
    invoke_without_command=True,
)


def resolve_config(
    process_match: str | None = None,
    proc_root: Path | None = None,
    keep_going: bool | None = None,
) -> ProgressConfig:
    """Load the config file and apply command-line overrides.

    Raises:
        typer.Exit: If the config file or an override is invalid.
    """
    try:
        config = load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    overrides: dict[str, object] = {}
    if process_match is not None:
        overrides["process_match"] = process_match
    if proc_root is not None:
        overrides["proc_root"] = proc_root
    if keep_going is not None:
        overrides["keep_going"] = keep_going
    try:
        return ProgressConfig.model_validate({**config.model_dump(), **overrides})
    except ValidationError as e:
        print_error(f"Invalid option value: {e}")
        raise typer.Exit(code=1) from e


def run_scan(config: ProgressConfig) -> None:
    """Stream observations for all matching processes to stdout.

    Output for earlier processes stays printed when a later one fails.

    Args:
        config: Effective scan configuration.

    Raises:
        typer.Exit: With code 1 if the scan could not start or any process
            failed analysis.
    """
    estimator = ProgressEstimator(config.proc_root)

    try:
        locator = estimator.locate(config.process_match)
    except ProcRootUnavailableError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    failed: list[int] = []
    with locator as pids:
        for pid in pids:
            try:
                for obs in estimator.estimate(pid):
                    print_observation(obs)
            except (ProcfsError, NormalizeError) as e:
                message = str(e) if isinstance(e, ProcfsError) else f"Process {pid}: {e}"
                if not config.keep_going:
                    print_error(message)
                    raise typer.Exit(code=1) from e
                print_warning(f"Skipping process {pid}: {message}")
                failed.append(pid)

    if failed:
        print_error(f"{len(failed)} process(es) could not be analyzed.")
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def scan_progress(
    ctx: typer.Context,
    process_match: Annotated[
        str | None,
        typer.Option(
            "--match",
            "-m",
            help="Substring of the executable path to watch (default: /usr/bin/rm).",
        ),
    ] = None,
    proc_root: Annotated[
        Path | None,
        typer.Option(
            "--proc-root",
            help="Mount point of the process-info filesystem.",
        ),
    ] = None,
    keep_going: Annotated[
        bool | None,
        typer.Option(
            "--keep-going/--fail-fast",
            "-k",
            help="Skip processes that cannot be analyzed instead of aborting.",
        ),
    ] = None,
) -> None:
    """Show which argument each matching process is working on.

    Examples:
        rmprogress scan                     # Watch /usr/bin/rm
        rmprogress scan --match shred       # Watch another executable
        rmprogress scan --keep-going        # Skip processes that fail
    """
    if ctx.invoked_subcommand is not None:
        return

    run_scan(resolve_config(process_match, proc_root, keep_going))
