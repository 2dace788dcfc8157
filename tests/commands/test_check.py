"""Tests for the check command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from blogctl.cli import cli
from tests.conftest import write_content


@pytest.mark.usefixtures("_isolated_site")
class TestCheckCommand:
    def test_clean_site(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check"])
        assert result.exit_code == 0
        assert "4 files checked, no issues found." in result.output

    def test_error_exits_one(self, cli_runner: CliRunner, site_root: Path) -> None:
        write_content(site_root, "posts/broken.md", '+++\ntitle = "x"\n')
        result = cli_runner.invoke(cli, ["check"])
        assert result.exit_code == 1
        assert "posts/broken.md" in result.stderr
        assert "unterminated_front_matter" in result.stderr

    def test_warnings_exit_zero(self, cli_runner: CliRunner, site_root: Path) -> None:
        write_content(site_root, "untitled.md", "No front matter.\n")
        result = cli_runner.invoke(cli, ["--json", "check"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["issues"][0]["code"] == "missing_title"

    def test_errors_only(self, cli_runner: CliRunner, site_root: Path) -> None:
        write_content(site_root, "untitled.md", "No front matter.\n")
        result = cli_runner.invoke(cli, ["--json", "check", "--errors-only"])
        assert json.loads(result.stdout)["data"]["issues"] == []

    def test_paths_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "content/posts"])
        assert json.loads(result.stdout)["data"]["files"] == 3
