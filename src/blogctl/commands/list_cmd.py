"""Command: list content records."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from blogctl.commands._base import BlogCommand

if TYPE_CHECKING:
    from blogctl.commands._context import AppContext
    from blogctl.services.content import DraftMode


@click.command(
    "list",
    cls=BlogCommand,
    examples="""\
  blogctl list
  blogctl list --category rust
  blogctl list --drafts only
  blogctl -q list --drafts exclude""",
)
@click.option("--category", default=None, help="Only records in this category.")
@click.option(
    "--drafts",
    type=click.Choice(["include", "exclude", "only"], case_sensitive=False),
    default="include",
    show_default=True,
    help="Draft handling.",
)
@click.pass_obj
def list_cmd(app: AppContext, category: str | None, drafts: DraftMode) -> None:
    """List records, newest first."""
    from blogctl.services.content import ContentService, ListFilters

    filters = ListFilters(category=category, drafts=drafts)
    app.emit(ContentService(app.site).list_records(filters))
