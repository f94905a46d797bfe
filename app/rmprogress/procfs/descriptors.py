"""Locate the filesystem paths a process holds open.

Resolves the links in ``<proc_root>/<pid>/fd``. Only links that name a
real absolute path are yielded; sockets, pipes, anonymous inodes, and
deleted files are skipped.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path, PurePosixPath
from types import TracebackType
from typing import Self

from rmprogress.procfs.errors import DescriptorTableError
from rmprogress.procfs.processes import DEFAULT_PROC_ROOT

logger = logging.getLogger(__name__)

# Suffix the kernel appends to links of unlinked files
_DELETED_SUFFIX = " (deleted)"


def resolve_descriptor(link: Path) -> PurePosixPath | None:
    """Resolve one descriptor link to an absolute filesystem path.

    Args:
        link: Path to an entry of a descriptor table.

    Returns:
        The absolute path the descriptor refers to, or None if it is not
        backed by a live filesystem path or could not be read.
    """
    try:
        target = os.readlink(link)
    except OSError as e:
        logger.debug("Skipping descriptor %s: %s", link, e)
        return None

    try:
        target.encode("utf-8")
    except UnicodeEncodeError:
        logger.debug("Skipping descriptor %s: target is not valid text", link)
        return None

    if not target.startswith("/") or target.endswith(_DELETED_SUFFIX):
        return None
    return PurePosixPath(target)


class DescriptorLocator:
    """Lazily yields the absolute paths of a process's open descriptors.

    Args:
        pid: Process identifier.
        proc_root: Mount point of the process-info filesystem.

    Raises:
        DescriptorTableError: If the descriptor table cannot be opened.
    """

    def __init__(self, pid: int, proc_root: Path = DEFAULT_PROC_ROOT) -> None:
        self._pid = pid
        fd_dir = proc_root / str(pid) / "fd"
        try:
            self._entries: Iterator[os.DirEntry[str]] | None = os.scandir(fd_dir)
        except OSError as e:
            raise DescriptorTableError(pid, e) from e

    @property
    def pid(self) -> int:
        """Return the process whose descriptors are listed."""
        return self._pid

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> PurePosixPath:
        if self._entries is None:
            raise StopIteration

        for entry in self._entries:
            path = resolve_descriptor(Path(entry.path))
            if path is not None:
                return path

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
