"""Tests for the fmt command."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from blogctl.cli import cli
from tests.conftest import write_content

UNORDERED = '+++\ndate = 2024-01-01\ntitle = "T"\n+++\nBody\n'


@pytest.mark.usefixtures("_isolated_site")
class TestFmtCommand:
    def test_check_reports_and_exits_one(self, cli_runner: CliRunner, site_root: Path) -> None:
        path = write_content(site_root, "posts/unordered.md", UNORDERED)
        result = cli_runner.invoke(cli, ["fmt", "--check", str(path)])
        assert result.exit_code == 1
        assert "would reformat posts/unordered.md" in result.stderr
        assert path.read_text(encoding="utf-8") == UNORDERED

    def test_fmt_then_check_passes(self, cli_runner: CliRunner) -> None:
        first = cli_runner.invoke(cli, ["fmt"])
        assert first.exit_code == 0
        second = cli_runner.invoke(cli, ["fmt", "--check"])
        assert second.exit_code == 0

    def test_quiet_lists_changed(self, cli_runner: CliRunner, site_root: Path) -> None:
        write_content(site_root, "posts/unordered.md", UNORDERED)
        result = cli_runner.invoke(cli, ["-q", "fmt", "content/posts/unordered.md"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "posts/unordered.md"
