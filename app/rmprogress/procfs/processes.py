"""Locate running processes by executable path.

Walks the numeric entries of the process-info root and keeps the PIDs
whose ``exe`` link resolves to a path containing a given substring.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path
from types import TracebackType
from typing import Self

from rmprogress.procfs.errors import ProcRootUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_PROC_ROOT = Path("/proc")


def read_exe(pid: int, proc_root: Path = DEFAULT_PROC_ROOT) -> str | None:
    """Resolve the executable link of a process.

    Args:
        pid: Process identifier.
        proc_root: Mount point of the process-info filesystem.

    Returns:
        The executable path, or None if the link cannot be read or is not
        valid text.
    """
    try:
        target = os.readlink(proc_root / str(pid) / "exe")
    except OSError as e:
        logger.debug("Skipping pid %d: cannot read exe link: %s", pid, e)
        return None

    if not _is_valid_text(target):
        logger.debug("Skipping pid %d: exe link is not valid text", pid)
        return None
    return target


def _is_valid_text(value: str) -> bool:
    """Check that a filesystem string decoded without surrogate escapes."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class ProcessLocator:
    """Lazily yields PIDs of processes whose executable matches a pattern.

    The directory listing of the process-info root is opened when the
    locator is created, so an unreadable root fails immediately. Each call
    to ``next()`` then inspects listing entries until one matches. Entries
    for processes that exit mid-scan are skipped.

    Args:
        pattern: Substring the resolved executable path must contain.
        proc_root: Mount point of the process-info filesystem.

    Raises:
        ProcRootUnavailableError: If ``proc_root`` cannot be listed.

    Example:
        >>> with ProcessLocator("/usr/bin/rm") as pids:
        ...     for pid in pids:
        ...         print(pid)
    """

    def __init__(self, pattern: str, proc_root: Path = DEFAULT_PROC_ROOT) -> None:
        self._pattern = pattern
        self._proc_root = proc_root
        try:
            self._entries: Iterator[os.DirEntry[str]] | None = os.scandir(proc_root)
        except OSError as e:
            raise ProcRootUnavailableError(proc_root, e) from e

    @property
    def pattern(self) -> str:
        """Return the executable-path substring being matched."""
        return self._pattern

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> int:
        if self._entries is None:
            raise StopIteration

        for entry in self._entries:
            if not (entry.name.isascii() and entry.name.isdigit()):
                continue
            pid = int(entry.name)
            exe = read_exe(pid, self._proc_root)
            if exe is not None and self._pattern in exe:
                return pid

        self.close()
        raise StopIteration

    def close(self) -> None:
        """Release the underlying directory listing."""
        if self._entries is not None:
            self._entries.close()  # type: ignore[attr-defined]
            self._entries = None

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
