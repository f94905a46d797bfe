"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from pathlib import Path

import pytest


class FakeProc:
    """Builds a fake process-info tree out of real directories and symlinks.

    Symlink targets need not exist: descriptor and exe links are only ever
    read with ``readlink``, never followed.
    """

    def __init__(self, root: Path) -> None:
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)

    def add_process(
        self,
        pid: int,
        *,
        exe: str | None = "/usr/bin/rm",
        cwd: str | None = "/home/u",
        cmdline: list[str] | None = None,
        fds: dict[int, str] | None = None,
    ) -> Path:
        """Create ``<root>/<pid>`` with the given metadata.

        Passing None for ``exe`` or ``cwd`` omits that link; passing None
        for ``fds`` omits the ``fd`` directory entirely.
        """
        proc_dir = self.root / str(pid)
        proc_dir.mkdir()
        if exe is not None:
            os.symlink(exe, proc_dir / "exe")
        if cwd is not None:
            os.symlink(cwd, proc_dir / "cwd")
        if cmdline is not None:
            (proc_dir / "cmdline").write_bytes(b"".join(a.encode() + b"\0" for a in cmdline))
        if fds is not None:
            fd_dir = proc_dir / "fd"
            fd_dir.mkdir()
            for fd, target in fds.items():
                os.symlink(target, fd_dir / str(fd))
        return proc_dir


@pytest.fixture
def fake_proc(tmp_path: Path) -> FakeProc:
    """Empty fake process-info root under tmp_path."""
    return FakeProc(tmp_path / "proc")


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory for every test."""
    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home
