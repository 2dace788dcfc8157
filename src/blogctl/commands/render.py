"""Command: render one record's Markdown body to HTML."""

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
  blogctl render posts/hello-world.md
  blogctl render posts/hello-world.md --output /tmp/hello.html
  blogctl --json render content/about.md""",
)
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the HTML fragment here instead of stdout.",
)
@click.pass_obj
def render(app: AppContext, path: Path, output: Path | None) -> None:
    """Render the body of PATH to HTML."""
    from blogctl.services.render import RenderService

    result = RenderService(app.site).render(path, output=output)
    settings = app.output_settings
    if result.ok and output is None and not settings.json_output:
        # Raw HTML on stdout so it can be piped.
        click.echo(result.data["html"], nl=False)
        app.emit_warnings(result)
        return
    app.emit(result)
