"""Command: validate content files."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from blogctl.commands._base import BlogCommand

if TYPE_CHECKING:
    from blogctl.commands._context import AppContext


@click.command(
    cls=BlogCommand,
    examples="""\
  blogctl check
  blogctl check content/posts
  blogctl check --errors-only
  blogctl --json check posts/draft.md""",
)
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@click.option(
    "--min-severity",
    type=click.Choice(["warning", "error"]),
    default="warning",
    help="Hide issues below this severity.",
)
@click.option("--errors-only", is_flag=True, help="Shortcut for --min-severity error.")
@click.pass_obj
def check(app: AppContext, paths: tuple[Path, ...], min_severity: str, errors_only: bool) -> None:
    """Check PATHS (default: the whole content tree) for front-matter problems.

    Exits 1 if any file cannot be parsed.
    """
    from blogctl.services.check import CheckService

    threshold = "error" if errors_only else min_severity
    app.emit(CheckService(app.site).check(list(paths) or None, min_severity=threshold))
