"""CLI commands for rmprogress.

This package contains all subcommand implementations.
"""

from rmprogress.cli.commands import init, scan

__all__ = ["init", "scan"]
