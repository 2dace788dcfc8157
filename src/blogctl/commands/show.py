"""Command: show one record's front matter."""

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
  blogctl show posts/hello-world.md
  blogctl --json show content/about.md""",
)
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_obj
def show(app: AppContext, path: Path) -> None:
    """Show front matter and body stats for PATH."""
    from blogctl.services.content import ContentService

    app.emit(ContentService(app.site).show(path))
