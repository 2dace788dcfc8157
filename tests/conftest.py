"""Shared pytest fixtures and test helpers for blogctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from blogctl.config.settings import BlogSettings
from blogctl.infrastructure.site import Site
from blogctl.services.telemetry import disable_telemetry

SAMPLE_CONTENT: dict[str, str] = {
    "posts/hello-world.md": (
        "+++\n"
        'title = "Hello World"\n'
        'description = "First post"\n'
        "date = 2024-03-01\n"
        "\n"
        "[taxonomies]\n"
        'categories = ["meta", "writing"]\n'
        "+++\n"
        "Hello **world**.\n"
    ),
    "posts/rust-tips.md": (
        "+++\n"
        'title = "Rust tips"\n'
        "date = 2024-05-10\n"
        'template_page = "post.html"\n'
        "\n"
        "[taxonomies]\n"
        'categories = ["rust", "programming"]\n'
        "+++\n"
        "```rust\n"
        'fn main() { println!("<hi> & bye"); }\n'
        "```\n"
    ),
    "posts/wip.md": (
        "+++\n"
        'title = "Work in progress"\n'
        "date = 2024-06-01\n"
        "draft = true\n"
        "\n"
        "[taxonomies]\n"
        'categories = ["writing"]\n'
        "+++\n"
        "Not yet.\n"
    ),
    "about.md": (
        "+++\n"
        'title = "About"\n'
        'template_page = "page.html"\n'
        "+++\n"
        "# About\n"
        "\n"
        "This is me.\n"
    ),
}


@pytest.fixture(autouse=True)
def _reset_ambient_state() -> Generator[None]:
    """Undo telemetry and logging changes made by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    disable_telemetry()
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("blogctl").setLevel(logging.NOTSET)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


def write_content(site_root: Path, relative: str, text: str) -> Path:
    """Write a content file under ``<site_root>/content``."""
    path = site_root / "content" / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Temporary blog checkout with a config file and sample content.

    This is the single source of truth for the site layout. All
    site-related fixtures build on it.
    """
    (tmp_path / "blogctl.toml").write_text('[site]\nname = "test-blog"\n', encoding="utf-8")
    for relative, text in SAMPLE_CONTENT.items():
        write_content(tmp_path, relative, text)
    return tmp_path


@pytest.fixture
def site(site_root: Path) -> Site:
    """Site handle over the sample content."""
    return Site(BlogSettings.from_cli(site_root=site_root))


@pytest.fixture
def _isolated_site(site_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp site root so the CLI discovers it.

    Use via ``@pytest.mark.usefixtures("_isolated_site")`` on command test
    classes.
    """
    monkeypatch.delenv("BLOGCTL_CONFIG", raising=False)
    monkeypatch.chdir(site_root)
