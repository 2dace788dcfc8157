"""Command: normalize front-matter key order."""

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
  blogctl fmt
  blogctl fmt content/posts/hello-world.md
  blogctl fmt --check""",
)
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@click.option("--check", "check_only", is_flag=True, help="Report only; exit 1 if changes needed.")
@click.pass_obj
def fmt(app: AppContext, paths: tuple[Path, ...], check_only: bool) -> None:
    """Rewrite front matter in canonical key order.

    Blocks are re-serialized, so TOML layout (quoting, array spacing) is
    normalized too. A file that differs only in layout counts as changed.
    """
    from blogctl.services.format import FormatService

    app.emit(FormatService(app.site).fmt(list(paths) or None, check_only=check_only))
