"""Command group: export rendered HTML and the front-matter index."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from blogctl.commands._base import BlogGroup

if TYPE_CHECKING:
    from blogctl.commands._context import AppContext

_EXPORT_EXAMPLES = """\
  blogctl export html --output build/fragments
  blogctl export index --output build
  blogctl export html --output /tmp/preview --include-drafts"""

_include_drafts = click.option(
    "--include-drafts/--exclude-drafts",
    default=None,
    help="Override [export] include_drafts.",
)
_output = click.option(
    "--output",
    required=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Output directory.",
)


@click.group(cls=BlogGroup, examples=_EXPORT_EXAMPLES)
def export() -> None:
    """Export derived artifacts for a site generator."""


@export.command(
    examples="""\
  blogctl export html --output build/fragments
  blogctl export html --output /tmp/preview --include-drafts"""
)
@_output
@_include_drafts
@click.pass_obj
def html(app: AppContext, output: Path, include_drafts: bool | None) -> None:
    """Render every record to an HTML fragment."""
    from blogctl.services.export import ExportService

    app.emit(ExportService(app.site).export_html(output, include_drafts=include_drafts))


@export.command(
    examples="""\
  blogctl export index --output build
  blogctl --json export index --output build --include-drafts"""
)
@_output
@_include_drafts
@click.pass_obj
def index(app: AppContext, output: Path, include_drafts: bool | None) -> None:
    """Write index.json with every record's front matter."""
    from blogctl.services.export import ExportService

    app.emit(ExportService(app.site).export_index(output, include_drafts=include_drafts))
