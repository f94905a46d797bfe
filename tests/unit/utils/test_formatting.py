"""Unit tests for console formatting helpers."""

from pathlib import PurePosixPath

import pytest
from rmprogress.procfs.models import ProgressObservation
from rmprogress.utils.formatting import (
    format_observation,
    print_error,
    print_info,
    print_observation,
    print_success,
    print_warning,
)


class TestFormatObservation:
    """Tests for format_observation function."""

    def test_matched_has_progress_line(self) -> None:
        """Matched observations produce a second Progress line."""
        obs = ProgressObservation(pid=7, path=PurePosixPath("/a/b"), index=1, total=3)

        lines = format_observation(obs)

        assert len(lines) == 2
        assert "/a/b" in lines[0]
        assert lines[1].startswith("Progress: ")
        assert "1 / 3" in lines[1]

    def test_unmatched_single_line(self) -> None:
        """Unmatched observations produce only the path line."""
        obs = ProgressObservation(pid=7, path=PurePosixPath("/etc"), index=None, total=3)

        assert len(format_observation(obs)) == 1

    def test_escapes_markup_in_paths(self) -> None:
        """Square brackets in file names are not treated as markup."""
        obs = ProgressObservation(pid=7, path=PurePosixPath("/a/[bold]x"), index=None, total=0)

        (line,) = format_observation(obs)

        assert "\\[bold]x" in line


class TestPrintHelpers:
    """Tests for printing helpers."""

    def test_print_observation_plain_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Printed output carries no markup when not writing to a terminal."""
        obs = ProgressObservation(pid=12, path=PurePosixPath("/d/[x]"), index=0, total=1)

        print_observation(obs)

        assert capsys.readouterr().out.splitlines() == ["12: /d/[x]", "Progress: 0 / 1"]

    def test_long_paths_not_wrapped(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Paths longer than the console width stay on one line."""
        long_path = PurePosixPath("/" + "/".join(["segment"] * 30))
        obs = ProgressObservation(pid=1, path=long_path, index=None, total=0)

        print_observation(obs)

        assert capsys.readouterr().out.splitlines() == [f"1: {long_path}"]

    def test_error_and_warning_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Errors and warnings are written to stderr with a prefix."""
        print_error("boom [x]")
        print_warning("careful")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: boom [x]" in captured.err
        assert "Warning: careful" in captured.err

    def test_info_and_success_print_brackets_literally(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Bracketed text in messages is printed, not parsed as markup."""
        print_info("reading /tmp/[bold]x")
        print_success("Config written to /tmp/[x]/config.toml")

        out = capsys.readouterr().out
        assert "reading /tmp/[bold]x" in out
        assert "Config written to /tmp/[x]/config.toml" in out
