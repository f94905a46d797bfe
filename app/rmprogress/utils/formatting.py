"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape

from rmprogress.core.theme import get_theme
from rmprogress.procfs.models import ProgressObservation


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_observation(obs: ProgressObservation) -> list[str]:
    """Format an observation as output lines with Rich markup.

    The first line names the process and the open path. A second
    ``Progress:`` line follows only when the path matched an argument.

    Args:
        obs: The observation to format.

    Returns:
        One or two lines of Rich markup.
    """
    lines = [f"[pid]{obs.pid}[/]: [text]{escape(str(obs.path))}[/]"]
    if obs.progress_label is not None:
        lines.append(f"Progress: [progress]{obs.progress_label}[/]")
    return lines


def print_observation(obs: ProgressObservation) -> None:
    """Print an observation to stdout without wrapping long paths."""
    for line in format_observation(obs):
        console.print(line, soft_wrap=True, highlight=False)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
