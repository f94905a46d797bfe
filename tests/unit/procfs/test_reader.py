"""Tests for per-process metadata readers."""

from pathlib import PurePosixPath

import pytest
from rmprogress.procfs.errors import ProcessReadError
from rmprogress.procfs.reader import read_cmdline, read_cwd, split_cmdline


class TestSplitCmdline:
    """Tests for split_cmdline function."""

    def test_splits_on_nul(self) -> None:
        """Arguments are NUL-terminated."""
        assert split_cmdline(b"rm\0-rf\0dir\0") == ["rm", "-rf", "dir"]

    def test_empty(self) -> None:
        """An empty cmdline has no arguments."""
        assert split_cmdline(b"") == []

    def test_keeps_inner_empty_argument(self) -> None:
        """Only one trailing terminator is dropped."""
        assert split_cmdline(b"rm\0\0x\0") == ["rm", "", "x"]
        assert split_cmdline(b"rm\0\0") == ["rm", ""]

    def test_missing_terminator(self) -> None:
        """A last argument without terminator is kept."""
        assert split_cmdline(b"rm\0x") == ["rm", "x"]

    def test_undecodable_bytes_survive(self) -> None:
        """Non-UTF-8 names decode with surrogate escapes instead of failing."""
        args = split_cmdline(b"rm\0caf\xe9\0")
        assert len(args) == 2
        assert args[1].startswith("caf")


class TestReadCwd:
    """Tests for read_cwd function."""

    def test_reads_link(self, fake_proc) -> None:
        """Returns the working directory as a POSIX path."""
        fake_proc.add_process(7, cwd="/home/u")
        assert read_cwd(7, fake_proc.root) == PurePosixPath("/home/u")

    def test_missing_raises(self, fake_proc) -> None:
        """An unreadable cwd is a per-process hard failure."""
        fake_proc.add_process(8, cwd=None)

        with pytest.raises(ProcessReadError) as exc_info:
            read_cwd(8, fake_proc.root)

        assert exc_info.value.entry == "cwd"
        assert exc_info.value.pid == 8


class TestReadCmdline:
    """Tests for read_cmdline function."""

    def test_reads_arguments(self, fake_proc) -> None:
        """Returns arguments in invocation order."""
        fake_proc.add_process(9, cmdline=["rm", "-r", "a", "b"])
        assert read_cmdline(9, fake_proc.root) == ["rm", "-r", "a", "b"]

    def test_missing_raises(self, fake_proc) -> None:
        """An unreadable cmdline is a per-process hard failure."""
        fake_proc.add_process(10, cmdline=None)

        with pytest.raises(ProcessReadError, match="cmdline of process 10"):
            read_cmdline(10, fake_proc.root)
