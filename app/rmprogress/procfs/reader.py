"""Read per-process metadata from the process-info filesystem."""

import os
from pathlib import Path, PurePosixPath

from rmprogress.procfs.errors import ProcessReadError
from rmprogress.procfs.processes import DEFAULT_PROC_ROOT


def read_cwd(pid: int, proc_root: Path = DEFAULT_PROC_ROOT) -> PurePosixPath:
    """Read the working directory of a process.

    Args:
        pid: Process identifier.
        proc_root: Mount point of the process-info filesystem.

    Returns:
        Absolute working directory of the process.

    Raises:
        ProcessReadError: If the ``cwd`` link cannot be read.
    """
    try:
        return PurePosixPath(os.readlink(proc_root / str(pid) / "cwd"))
    except OSError as e:
        raise ProcessReadError(pid, "cwd", e) from e


def read_cmdline(pid: int, proc_root: Path = DEFAULT_PROC_ROOT) -> list[str]:
    """Read the original command-line arguments of a process.

    The kernel exposes arguments as NUL-terminated strings. A single
    trailing terminator is dropped; empty arguments in between are kept.

    Args:
        pid: Process identifier.
        proc_root: Mount point of the process-info filesystem.

    Returns:
        Arguments in invocation order, including ``argv[0]``.

    Raises:
        ProcessReadError: If ``cmdline`` cannot be read.
    """
    try:
        raw = (proc_root / str(pid) / "cmdline").read_bytes()
    except OSError as e:
        raise ProcessReadError(pid, "cmdline", e) from e
    return split_cmdline(raw)


def split_cmdline(raw: bytes) -> list[str]:
    """Split a raw NUL-separated command line into arguments."""
    args = os.fsdecode(raw).split("\0")
    if args[-1] == "":
        args.pop()
    return args
