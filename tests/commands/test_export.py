"""Tests for the export command group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from blogctl.cli import cli


@pytest.mark.usefixtures("_isolated_site")
class TestExportCommands:
    def test_export_html(self, cli_runner: CliRunner, site_root: Path) -> None:
        result = cli_runner.invoke(cli, ["export", "html", "--output", "build"])
        assert result.exit_code == 0
        assert (site_root / "build" / "posts" / "hello-world.html").is_file()
        assert not (site_root / "build" / "posts" / "wip.html").exists()

    def test_export_html_include_drafts(self, cli_runner: CliRunner, site_root: Path) -> None:
        result = cli_runner.invoke(
            cli, ["export", "html", "--output", "build", "--include-drafts"]
        )
        assert result.exit_code == 0
        assert (site_root / "build" / "posts" / "wip.html").is_file()

    def test_export_index(self, cli_runner: CliRunner, site_root: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "export", "index", "--output", "build"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["records"] == 3
        index = json.loads((site_root / "build" / "index.json").read_text(encoding="utf-8"))
        assert index["site"] == "test-blog"

    def test_output_required(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["export", "html"])
        assert result.exit_code == 2
        assert "--output" in result.output
