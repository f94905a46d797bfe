"""Progress domain models.

This module defines the observation emitted for every open file
descriptor of a process under inspection.
"""

from dataclasses import dataclass
from pathlib import PurePosixPath


@dataclass(frozen=True, slots=True)
class ProgressObservation:
    """One open descriptor of a process, matched against its arguments.

    Attributes:
        pid: Process identifier the descriptor belongs to.
        path: Absolute path the descriptor resolves to.
        index: Position of the matched command-line argument, or None if
            no argument is an ancestor of the path.
        total: Number of tracked command-line arguments.
    """

    pid: int
    path: PurePosixPath
    index: int | None
    total: int

    def __post_init__(self) -> None:
        """Validate observation data after initialization."""
        if self.total < 0:
            msg = f"Total must be non-negative, got {self.total}"
            raise ValueError(msg)
        if self.index is not None and not (0 <= self.index < self.total):
            msg = f"Index {self.index} out of range for {self.total} argument(s)"
            raise ValueError(msg)

    @property
    def matched(self) -> bool:
        """Check if the descriptor was matched to an argument."""
        return self.index is not None

    @property
    def progress_label(self) -> str | None:
        """Format progress as ``"<index> / <total>"``, or None if unmatched."""
        if self.index is None:
            return None
        return f"{self.index} / {self.total}"
