"""Progress estimation for running deletion processes.

For every matched process the command-line arguments are normalized
against the working directory and indexed by position. Each open
descriptor path is then walked upward, one component at a time, until it
hits an indexed argument. The index of that argument is the estimate of
how far the process has come through its argument list.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path, PurePath

from rmprogress.core.normalize import normalize_lexically
from rmprogress.procfs.descriptors import DescriptorLocator
from rmprogress.procfs.models import ProgressObservation
from rmprogress.procfs.processes import DEFAULT_PROC_ROOT, ProcessLocator
from rmprogress.procfs.reader import read_cmdline, read_cwd

logger = logging.getLogger(__name__)

# Arguments starting with this prefix are treated as options, not targets
FLAG_PREFIX = "--"


def filter_arguments(args: Iterable[str]) -> list[str]:
    """Drop arguments that look like long options.

    This is a heuristic, not a command-line parser: it is applied to every
    argument, including those after a literal ``--`` separator.

    Args:
        args: Raw command-line arguments.

    Returns:
        Remaining arguments in their original order.
    """
    return [arg for arg in args if not arg.startswith(FLAG_PREFIX)]


def build_lookup(cwd: PurePath, args: Iterable[str]) -> dict[PurePath, int]:
    """Map each normalized argument path to its position.

    Relative arguments are joined onto ``cwd``; absolute ones replace it.
    When two arguments normalize to the same path the later index wins.

    Args:
        cwd: Working directory of the process.
        args: Filtered command-line arguments.

    Returns:
        Dictionary of normalized path to argument index.

    Raises:
        NormalizeError: If an argument escapes above the root.
    """
    return {normalize_lexically(cwd / arg): i for i, arg in enumerate(args)}


def match_descriptor(path: PurePath, lookup: Mapping[PurePath, int]) -> int | None:
    """Find the argument a descriptor path belongs to.

    Tries the path itself, then each ancestor up to the root. The first
    (most specific) hit wins, so a file nested inside an argument
    directory counts as progress on that argument.

    Args:
        path: Absolute path of an open descriptor.
        lookup: Normalized argument paths mapped to their indices.

    Returns:
        Index of the nearest matching argument, or None.
    """
    for candidate in (path, *path.parents):
        index = lookup.get(candidate)
        if index is not None:
            return index
    return None


class ProgressEstimator:
    """Estimates progress of processes from their open descriptors.

    Args:
        proc_root: Mount point of the process-info filesystem.
    """

    def __init__(self, proc_root: Path = DEFAULT_PROC_ROOT) -> None:
        self._proc_root = proc_root

    @property
    def proc_root(self) -> Path:
        """Return the process-info filesystem root."""
        return self._proc_root

    def estimate(self, pid: int) -> Iterator[ProgressObservation]:
        """Yield one observation per open filesystem descriptor of a process.

        Observations are produced as descriptors are read, so a consumer
        sees earlier results even if a later step fails.

        Args:
            pid: Process identifier.

        Yields:
            ProgressObservation for each open descriptor path.

        Raises:
            ProcessReadError: If cwd or cmdline cannot be read.
            NormalizeError: If an argument cannot be normalized.
            DescriptorTableError: If the descriptor table cannot be opened.
        """
        cwd = read_cwd(pid, self._proc_root)
        args = filter_arguments(read_cmdline(pid, self._proc_root))
        lookup = build_lookup(cwd, args)
        logger.debug("pid %d: cwd=%s, %d tracked argument(s)", pid, cwd, len(args))

        with DescriptorLocator(pid, self._proc_root) as descriptors:
            for path in descriptors:
                yield ProgressObservation(
                    pid=pid,
                    path=path,
                    index=match_descriptor(path, lookup),
                    total=len(args),
                )

    def scan(self, pattern: str) -> Iterator[ProgressObservation]:
        """Yield observations for every process whose executable matches.

        Args:
            pattern: Substring of the executable path to match.

        Yields:
            ProgressObservation for each open descriptor of each process.

        Raises:
            ProcRootUnavailableError: If the process-info root is unreadable.
        """
        with ProcessLocator(pattern, self._proc_root) as pids:
            for pid in pids:
                yield from self.estimate(pid)

    def locate(self, pattern: str) -> ProcessLocator:
        """Open a locator over processes matching ``pattern``."""
        return ProcessLocator(pattern, self._proc_root)
