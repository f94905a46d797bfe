"""CLI package for rmprogress.

This package contains the Typer application and all subcommands.
"""

from rmprogress.cli.main import app

__all__ = ["app"]
