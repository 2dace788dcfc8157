"""Subcommand modules for blogctl.

Provides register_commands() which uses deferred imports to keep
``blogctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the export group and the standalone commands on the root group."""
    from blogctl.commands.export import export

    cli.add_command(export)

    from blogctl.commands.check import check
    from blogctl.commands.fmt import fmt
    from blogctl.commands.list_cmd import list_cmd
    from blogctl.commands.render import render
    from blogctl.commands.show import show

    cli.add_command(show)
    cli.add_command(list_cmd)
    cli.add_command(render)
    cli.add_command(check)
    cli.add_command(fmt)
