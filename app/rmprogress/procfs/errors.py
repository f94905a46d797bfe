"""Exceptions raised while reading the process-info filesystem.

Only failures that stop a scan (or the analysis of one process) are
exceptions. Entries that vanish or cannot be resolved during iteration
are skipped by the locators and never surface here.
"""

from pathlib import Path


class RmProgressError(Exception):
    """Base exception for rmprogress failures."""


class ProcfsError(RmProgressError):
    """Base exception for process-info filesystem failures."""


class ProcRootUnavailableError(ProcfsError):
    """Raised when the process-info root itself cannot be listed."""

    def __init__(self, proc_root: Path, cause: OSError) -> None:
        self.proc_root = proc_root
        self.cause = cause
        super().__init__(f"Cannot open {proc_root}: {cause.strerror or cause}")


class ProcessReadError(ProcfsError):
    """Raised when a matched process's metadata (cwd, cmdline) cannot be read."""

    def __init__(self, pid: int, entry: str, cause: OSError) -> None:
        self.pid = pid
        self.entry = entry
        self.cause = cause
        super().__init__(f"Cannot read {entry} of process {pid}: {cause.strerror or cause}")


class DescriptorTableError(ProcfsError):
    """Raised when a process's descriptor table cannot be opened."""

    def __init__(self, pid: int, cause: OSError) -> None:
        self.pid = pid
        self.cause = cause
        super().__init__(f"Cannot open fd table of process {pid}: {cause.strerror or cause}")
